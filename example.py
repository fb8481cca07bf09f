#!/usr/bin/env python3
"""Example usage of the server list cache.

This script loads the cached server list from a local directory, seeds it
with a couple of servers on first run, and walks the reconnect rotation the
way a client would after losing its connection.
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from serverlist_cache import (
    ServerEndpoint,
    ServerListCacheOptions,
    ServerListManager,
)

logger = logging.getLogger(__name__)

SEED_SERVERS = [
    "10.0.0.1:27015",
    "10.0.0.2:27016",
    "[2001:db8::10]:27017",
]


async def main() -> None:
    """Run the server list cache example."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    options = ServerListCacheOptions(
        storage_root="serverlist_data",
        shuffle_on_load=True,
    )
    manager = ServerListManager.from_options(options)

    await manager.load()
    if len(manager) == 0:
        print("No cached servers, seeding the list")
        await manager.update_server_list(ServerEndpoint.parse(s) for s in SEED_SERVERS)
    else:
        print(f"Loaded {len(manager)} cached servers")

    print("Reconnect order:")
    for attempt in range(len(manager) + 1):
        print(f"  attempt {attempt + 1}: {manager.get_next_server()}")

    print(manager)


def run_example() -> None:
    """Run the example using asyncio."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nExiting...")
    except Exception as e:  # noqa: BLE001
        print(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run_example()
