"""Basic usage example for pyblueair library."""

import asyncio

from pyblueair import BlueairClient


async def main() -> None:
    """List devices with their info and attributes."""
    async with BlueairClient(
        username="your@email.com",
        password="your_password",
    ) as client:
        if not await client.initialize():
            print("Login failed")
            return

        print(f"Logged in, regional host: {client.endpoint}")

        devices = await client.get_devices()
        print(f"Found {len(devices)} device(s)")

        for device in devices:
            print(f"\nDevice: {device.name}")
            print(f"  UUID: {device.uuid}")
            print(f"  MAC: {device.mac}")

            info = await client.get_device_info(device.uuid)
            print(f"  Info: {info}")

            for attribute in await client.get_device_attributes(device.uuid):
                print(f"  {attribute.get('name')}: {attribute.get('currentValue')}")


if __name__ == "__main__":
    asyncio.run(main())
