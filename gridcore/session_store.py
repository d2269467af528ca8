"""
Session-scoped key/value storage for fetched catalog payloads.

Values are stored as JSON text, the same shape a browser's session storage
would hold. The store outlives any single RemoteDataCache so a cache rebuilt
later in the same session still sees earlier responses.
"""
import logging
import re
from pathlib import Path
from typing import Dict, Iterator, Optional

logger = logging.getLogger(__name__)

_UNSAFE_KEY = re.compile(r"[^A-Za-z0-9_]")


class SessionStoreError(OSError):
    """Raised when the on-disk session store cannot be used."""


class SessionStore:
    """In-memory session store. Lives as long as the process."""

    def __init__(self) -> None:
        self._items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def keys(self) -> Iterator[str]:
        return iter(list(self._items))


class FileSessionStore(SessionStore):
    """
    Session store backed by one JSON file per key in a session directory.

    Only normalized keys (letters, digits, underscores) reach the disk; any
    other key is held in memory for this process. Entries written by an
    earlier store over the same directory are visible.
    """

    def __init__(self, session_dir: Path) -> None:
        super().__init__()
        self.session_dir = Path(session_dir)
        try:
            self.session_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SessionStoreError(f"Cannot create session directory {self.session_dir}: {e}") from e

    def _path_for(self, key: str) -> Optional[Path]:
        if not key or _UNSAFE_KEY.search(key):
            logger.warning("Session key %r is not file-safe; keeping it in memory only", key)
            return None
        return self.session_dir / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        cached = self._items.get(key)
        if cached is not None:
            return cached
        path = self._path_for(key)
        if path is None or not path.exists():
            return None
        try:
            value = path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error("Failed to read session entry %s: %s", path, e)
            return None
        self._items[key] = value
        return value

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
        path = self._path_for(key)
        if path is None:
            return
        try:
            path.write_text(value, encoding="utf-8")
        except OSError as e:
            # In-memory copy still serves this process
            logger.error("Failed to persist session entry %s: %s", path, e)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self.get_item(key) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self.keys())

    def keys(self) -> Iterator[str]:
        on_disk = {path.stem for path in self.session_dir.glob("*.json")}
        return iter(sorted(on_disk | set(self._items)))
