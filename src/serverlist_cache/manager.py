"""Server list management for reconnecting clients.

ServerListManager hands out servers in round-robin order for connection
attempts and keeps the backing provider up to date when a newer list is
received.
"""

import logging
import random
from collections.abc import Iterable

from serverlist_cache.models import ServerEndpoint
from serverlist_cache.options import ServerListCacheOptions
from serverlist_cache.provider import (
    EndpointListStore,
    MemoryServerListProvider,
    ServerListProvider,
)
from serverlist_cache.storage import ApplicationStorage

logger = logging.getLogger(__name__)


class ServerListManager:
    """Round-robin server selection over a cached server list."""

    def __init__(
        self,
        provider: ServerListProvider,
        *,
        shuffle_on_load: bool = False,
        enable_persistence: bool = True,
    ) -> None:
        """Initialize the manager.

        Args:
            provider: Where the server list is fetched from and saved to
            shuffle_on_load: Shuffle servers after each load
            enable_persistence: Forward list updates to the provider

        """
        self._provider = provider
        self._shuffle_on_load = shuffle_on_load
        self._enable_persistence = enable_persistence
        self._servers: list[ServerEndpoint] = []
        self._current_index = 0

    @classmethod
    def from_options(cls, options: ServerListCacheOptions) -> "ServerListManager":
        """Create a manager over the provider described by options."""
        provider: ServerListProvider
        if not options.enable_persistence:
            provider = MemoryServerListProvider()
        elif options.storage_root is not None:
            provider = EndpointListStore(ApplicationStorage(options.storage_root))
        else:
            provider = EndpointListStore.for_user(options.app_name)

        return cls(
            provider,
            shuffle_on_load=options.shuffle_on_load,
            enable_persistence=options.enable_persistence,
        )

    @property
    def provider(self) -> ServerListProvider:
        """Get the backing server list provider."""
        return self._provider

    async def load(self) -> None:
        """Load servers from the provider and restart the rotation."""
        self._servers = await self._provider.fetch_server_list()
        if self._shuffle_on_load:
            random.shuffle(self._servers)
        self._current_index = 0
        logger.info("Loaded %d cached servers", len(self._servers))

    def get_next_server(self) -> ServerEndpoint | None:
        """Get the next server to try, cycling through the list."""
        if not self._servers:
            return None

        server = self._servers[self._current_index % len(self._servers)]
        self._current_index = (self._current_index + 1) % len(self._servers)
        return server

    def reset_index(self) -> None:
        """Restart the rotation from the first server."""
        self._current_index = 0

    def get_current_server_list(self) -> list[ServerEndpoint]:
        """Get a copy of the current server list."""
        return list(self._servers)

    async def update_server_list(self, endpoints: Iterable[ServerEndpoint]) -> None:
        """Replace the current server list.

        An empty update keeps the current list, since a client with no
        servers cannot reconnect.

        Args:
            endpoints: New servers, in preference order

        """
        servers = list(endpoints)
        if not servers:
            logger.warning("Ignoring empty server list update")
            return

        self._servers = servers
        self._current_index = 0
        logger.info("Server list updated with %d servers", len(servers))

        if self._enable_persistence:
            await self._provider.update_server_list(servers)

    def __len__(self) -> int:
        """Return number of known servers."""
        return len(self._servers)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"ServerListManager("
            f"servers={len(self._servers)}, "
            f"current_index={self._current_index}, "
            f"provider={self._provider!r})"
        )
