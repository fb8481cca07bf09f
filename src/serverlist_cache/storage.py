"""Application-private file storage.

ApplicationStorage scopes all file access to a single root directory, the
way a per-user application data directory is private to one program.
"""

import logging
import os
import platform
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)


def default_data_dir(app_name: str) -> Path:
    """Return the per-user data directory for an application."""
    system = platform.system()
    if system == "Darwin":
        base = Path.home() / "Library" / "Application Support"
    elif system == "Windows":
        base = Path(os.environ.get("APPDATA", str(Path.home() / "AppData" / "Roaming")))
    else:
        base = Path(os.environ.get("XDG_DATA_HOME", str(Path.home() / ".local" / "share")))
    return base / app_name


class ApplicationStorage:
    """File storage rooted at a private directory.

    Only plain file names are accepted; the root directory is created on
    the first write.
    """

    def __init__(self, root: str | Path) -> None:
        """Initialize storage.

        Args:
            root: Directory holding this application's files

        """
        self._root = Path(root)

    @classmethod
    def for_user(cls, app_name: str) -> "ApplicationStorage":
        """Create storage in the current user's data directory for app_name."""
        return cls(default_data_dir(app_name))

    @property
    def root(self) -> Path:
        """Get the storage root directory."""
        return self._root

    def path_for(self, name: str) -> Path:
        """Resolve a file name inside the storage root.

        Raises:
            ValueError: If name is empty or would escape the root

        """
        if not name or name in {".", ".."} or "/" in name or "\\" in name:
            msg = f"Invalid storage file name: {name!r}"
            raise ValueError(msg)
        return self._root / name

    def open_read(self, name: str) -> BinaryIO:
        """Open an existing file for binary reading.

        Raises:
            FileNotFoundError: If the file does not exist

        """
        return self.path_for(name).open("rb")

    def open_write(self, name: str) -> BinaryIO:
        """Open a file for binary writing, creating or truncating it."""
        path = self.path_for(name)
        self._root.mkdir(parents=True, exist_ok=True)
        return path.open("wb")

    def file_exists(self, name: str) -> bool:
        """Check whether a file exists in storage."""
        return self.path_for(name).is_file()

    def delete_file(self, name: str) -> None:
        """Delete a file from storage if present."""
        self.path_for(name).unlink(missing_ok=True)
        logger.debug("Deleted %s from %s", name, self._root)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"ApplicationStorage(root='{self._root}')"
