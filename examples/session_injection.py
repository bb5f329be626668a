"""Example showing session injection for Home Assistant integration."""

import asyncio

from aiohttp import ClientSession

from pywarmup import Credentials, WarmupClient


async def main() -> None:
    """Demonstrate session injection and credential replacement."""
    async with ClientSession() as session:
        print("Using application-managed aiohttp session")

        # Client will use the provided session instead of creating its own
        client = WarmupClient(
            username="your@email.com",
            password="your_password",
            session=session,
        )

        async with client:
            rooms = await client.get_rooms()
            print(f"Found {len(rooms or [])} room(s) using injected session")

            # New credentials from a reconfiguration flow; the next call re-authenticates
            client.set_configuration(Credentials("other@email.com", "other_password"))
            rooms = await client.get_rooms()
            print(f"Found {len(rooms or [])} room(s) after reconfiguration")

        # Session remains open after client exits
        print("\nClient closed, but session still available for other requests")


if __name__ == "__main__":
    asyncio.run(main())
