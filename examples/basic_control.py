"""Example showing overrides and frost protection."""

import asyncio

from pywarmup import ApiCallError, AuthenticationError, WarmupClient


async def main() -> None:
    """Demonstrate room control with the client's failure semantics."""
    async with WarmupClient(
        username="your@email.com",
        password="your_password",
    ) as client:
        try:
            status = await client.get_status()
            if status is None:
                print("Session not ready, try again later")
                return

            location = status.locations[0]
            room = location.rooms[0]

            print(f"Setting {room.name} to 21.5 °C for one hour...")
            if await client.set_override(location.id, room.id, 21.5, duration=60):
                print("Override accepted")

            frost_on = room.run_mode == "frost"
            print(f"Toggling frost protection (currently {'on' if frost_on else 'off'})...")
            await client.toggle_frost_protection(location.id, room.id, command=frost_on)

        except AuthenticationError as err:
            # Terminal until credentials change
            print(f"Authentication failed: {err.reason}")

        except ApiCallError as err:
            # Recoverable: retry on the next poll
            print(f"Call failed (status {err.status}): {err}")


if __name__ == "__main__":
    asyncio.run(main())
