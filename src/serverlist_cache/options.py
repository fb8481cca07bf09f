"""Configuration options for the server list cache."""

from dataclasses import dataclass

DEFAULT_APP_NAME = "serverlist-cache"


@dataclass
class ServerListCacheOptions:
    """Configuration options for ServerListManager."""

    app_name: str = DEFAULT_APP_NAME
    """Application name used for the per-user storage directory."""
    storage_root: str | None = None
    """Directory holding the server list file; None uses the per-user default."""
    shuffle_on_load: bool = False
    """Shuffle servers after loading to spread reconnects across them."""
    enable_persistence: bool = True
    """Persist server list updates to disk."""
