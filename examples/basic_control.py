"""Example showing attribute writes and error handling."""

import asyncio
import logging

from pyblueair import BlueairClient, BlueairError, ValidationError


async def main() -> None:
    """Change fan speed, brightness and child lock of the first device."""
    logging.basicConfig(level=logging.DEBUG)

    async with BlueairClient(
        username="your@email.com",
        password="your_password",
        retries=3,
        retry_delay=1.0,
    ) as client:
        if not await client.initialize():
            print("Login failed")
            return

        devices = await client.get_devices()
        if not devices:
            print("No devices found")
            return

        uuid = devices[0].uuid

        print("Setting fan speed to 2...")
        await client.set_fan_speed(uuid, "2", "2")

        print("Switching fan to auto...")
        await client.set_fan_auto(uuid, "auto", "auto")

        print("Dimming display...")
        await client.set_brightness(uuid, "1", "1")

        print("Locking child lock...")
        await client.set_child_lock(uuid, "1", "0")

        # Rejected locally, nothing is sent
        try:
            await client.set_fan_speed(uuid, "7", "2")
        except ValidationError as err:
            print(f"Rejected: {err} ({err.kind.value})")

        try:
            await client.set_brightness(uuid, "4", "4")
        except BlueairError as err:
            print(f"Request failed: {err}")


if __name__ == "__main__":
    asyncio.run(main())
