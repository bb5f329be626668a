"""Basic usage example for pywarmup library."""

import asyncio

from pywarmup import WarmupClient


async def main() -> None:
    """Demonstrate reading thermostat status."""
    async with WarmupClient(
        username="your@email.com",
        password="your_password",
    ) as client:
        status = await client.get_status()

        # None means the session is not ready yet; try again on the next poll
        if status is None:
            print("Status not available yet, try again later")
            return

        for location in status.locations:
            print(f"\nLocation: {location.name} ({location.id})")

            for room in location.rooms:
                print(f"  Room: {room.name} ({room.id})")
                print(f"    Run mode: {room.run_mode}")
                print(f"    Current: {room.current_temperature} °C")
                print(f"    Target: {room.target_temperature} °C")
                print(f"    Thermostats: {', '.join(room.serial_numbers)}")


if __name__ == "__main__":
    asyncio.run(main())
