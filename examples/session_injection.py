"""Example showing session injection for Home Assistant integration."""

import asyncio

from aiohttp import ClientSession

from pyblueair import BlueairClient


async def main() -> None:
    """Demonstrate an application-managed aiohttp session."""
    async with ClientSession() as session:
        print("Using application-managed aiohttp session")

        client = BlueairClient(
            username="your@email.com",
            password="your_password",
            session=session,
        )

        async with client:
            if await client.initialize():
                devices = await client.get_devices()
                print(f"Found {len(devices)} device(s) using injected session")

                for device in devices:
                    print(f"  - {device.name} ({device.uuid})")

        # Session remains open after client exits
        print(f"\nClient closed, session closed: {session.closed}")


if __name__ == "__main__":
    asyncio.run(main())
