"""Server list providers.

A provider is where a client keeps the servers it last knew about, so it can
reconnect without rediscovering them. EndpointListStore persists the list to
application storage; MemoryServerListProvider keeps it for the life of the
process only.

Providers are best-effort caches: storage failures are logged and turned
into an empty list (on fetch) or a no-op (on update), never raised.
"""

import asyncio
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import ClassVar, Protocol, runtime_checkable

from serverlist_cache.models import ServerEndpoint
from serverlist_cache.protocol import (
    ServerListDecodeError,
    decode_records,
    encode_records,
    make_record,
)
from serverlist_cache.storage import ApplicationStorage

logger = logging.getLogger(__name__)


@runtime_checkable
class ServerListProvider(Protocol):
    """Source and sink for a client's known server list."""

    async def fetch_server_list(self) -> list[ServerEndpoint]:
        """Return the stored servers, or an empty list if none are known."""
        ...

    async def update_server_list(self, endpoints: Iterable[ServerEndpoint]) -> None:
        """Replace the stored servers with endpoints."""
        ...


class EndpointListStore:
    """Server list provider backed by a file in application storage.

    The list is stored under FILE_NAME as a stream of length-prefixed
    protobuf records, one per endpoint, in list order.
    """

    FILE_NAME: ClassVar[str] = "serverlist.protobuf"

    def __init__(self, storage: ApplicationStorage) -> None:
        """Initialize the store.

        Args:
            storage: Application storage holding the server list file

        """
        self._storage = storage

    @classmethod
    def for_user(cls, app_name: str) -> "EndpointListStore":
        """Create a store in the current user's data directory for app_name."""
        return cls(ApplicationStorage.for_user(app_name))

    @property
    def path(self) -> Path:
        """Get the path of the backing file."""
        return self._storage.path_for(self.FILE_NAME)

    def load(self) -> list[ServerEndpoint]:
        """Read the stored list of servers.

        Returns:
            Stored servers in saved order, or an empty list if the file is
            missing, unreadable or cannot be decoded

        """
        try:
            with self._storage.open_read(self.FILE_NAME) as stream:
                data = stream.read()
        except OSError as e:
            logger.warning("Failed to read file %s: %s", self.FILE_NAME, e)
            return []

        try:
            records = decode_records(data)
        except ServerListDecodeError as e:
            logger.warning("Failed to decode file %s: %s", self.FILE_NAME, e)
            return []

        endpoints: list[ServerEndpoint] = []
        for index, record in enumerate(records):
            try:
                endpoints.append(ServerEndpoint(record.address, record.port))
            except ValueError as e:
                logger.warning("Skipping record %d in %s: %s", index, self.FILE_NAME, e)

        logger.debug("Loaded %d servers from %s", len(endpoints), self.FILE_NAME)
        return endpoints

    def save(self, endpoints: Iterable[ServerEndpoint]) -> None:
        """Write the supplied list of servers, replacing any stored list.

        Args:
            endpoints: Servers to store, in order

        """
        endpoints = list(endpoints)
        data = encode_records(make_record(str(ep.address), ep.port) for ep in endpoints)

        try:
            with self._storage.open_write(self.FILE_NAME) as stream:
                stream.write(data)
                stream.truncate(stream.tell())
        except OSError as e:
            logger.warning("Failed to write file %s: %s", self.FILE_NAME, e)
            return

        logger.debug("Saved %d servers to %s", len(endpoints), self.FILE_NAME)

    def clear(self) -> None:
        """Remove the stored server list."""
        try:
            self._storage.delete_file(self.FILE_NAME)
        except OSError as e:
            logger.warning("Failed to delete file %s: %s", self.FILE_NAME, e)

    async def fetch_server_list(self) -> list[ServerEndpoint]:
        """Read the stored list of servers without blocking the event loop."""
        return await asyncio.to_thread(self.load)

    async def update_server_list(self, endpoints: Iterable[ServerEndpoint]) -> None:
        """Write the supplied list of servers without blocking the event loop."""
        await asyncio.to_thread(self.save, list(endpoints))

    def __repr__(self) -> str:
        """Return string representation."""
        return f"EndpointListStore(path='{self.path}')"


class MemoryServerListProvider:
    """Server list provider that keeps the list in memory only."""

    def __init__(self) -> None:
        """Initialize with an empty list."""
        self._endpoints: list[ServerEndpoint] = []

    async def fetch_server_list(self) -> list[ServerEndpoint]:
        """Return a copy of the last stored list."""
        return list(self._endpoints)

    async def update_server_list(self, endpoints: Iterable[ServerEndpoint]) -> None:
        """Replace the stored list."""
        self._endpoints = list(endpoints)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"MemoryServerListProvider(servers={len(self._endpoints)})"
