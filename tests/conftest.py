"""Global fixtures for serverlist_cache tests."""

from pathlib import Path

import pytest

from serverlist_cache.models import ServerEndpoint
from serverlist_cache.provider import EndpointListStore
from serverlist_cache.storage import ApplicationStorage


@pytest.fixture
def storage(tmp_path: Path) -> ApplicationStorage:
    """Fixture for ApplicationStorage rooted in a temporary directory."""
    return ApplicationStorage(tmp_path / "appdata")


@pytest.fixture
def store(storage: ApplicationStorage) -> EndpointListStore:
    """Fixture for an EndpointListStore over temporary storage."""
    return EndpointListStore(storage)


@pytest.fixture
def endpoints() -> list[ServerEndpoint]:
    """Fixture for a small ordered server list."""
    return [
        ServerEndpoint.parse("10.0.0.1:27015"),
        ServerEndpoint.parse("10.0.0.2:27016"),
        ServerEndpoint.parse("[2001:db8::1]:27017"),
    ]
