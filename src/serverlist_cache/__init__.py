"""serverlist-cache - persistent server list cache for reconnecting clients.

This package stores the servers a network client last knew about in a small
protobuf file in application-private storage, so the next session can
reconnect without discovering servers from scratch.

Example usage:
    ```python
    import asyncio

    from serverlist_cache import (
        ServerEndpoint,
        ServerListCacheOptions,
        ServerListManager,
    )

    async def main() -> None:
        manager = ServerListManager.from_options(ServerListCacheOptions(app_name="my-client"))
        await manager.load()

        if not manager.get_current_server_list():
            await manager.update_server_list(
                [ServerEndpoint.parse("10.0.0.1:27015"), ServerEndpoint.parse("10.0.0.2:27016")]
            )

        server = manager.get_next_server()
        print(f"Connecting to {server}")

    if __name__ == "__main__":
        asyncio.run(main())
    ```
"""

from serverlist_cache.manager import ServerListManager
from serverlist_cache.models import ServerEndpoint
from serverlist_cache.options import ServerListCacheOptions
from serverlist_cache.provider import (
    EndpointListStore,
    MemoryServerListProvider,
    ServerListProvider,
)
from serverlist_cache.storage import ApplicationStorage

__version__ = "1.0.0"

__all__ = [
    "ApplicationStorage",
    "EndpointListStore",
    "MemoryServerListProvider",
    "ServerEndpoint",
    "ServerListCacheOptions",
    "ServerListManager",
    "ServerListProvider",
]
