"""Key/value stores standing in for the browser's localStorage.

Values are always strings; callers JSON-encode structured data themselves.
"""

import json
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from finance_tracker.logging_config import get_logger

logger = get_logger(__name__)


class StorageError(ValueError):
    """The backing file is not a JSON object."""


class KeyValueStorage(Protocol):
    """The subset of the localStorage API the demo seeder needs."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """In-process store, lost when the process exits."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)

    def keys(self) -> list[str]:
        return list(self._items)


class JsonFileStorage:
    """Store persisted as one JSON object on disk.

    The file is re-read on every access so separate runs see each other's
    writes, the way reloading a page sees localStorage.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                items = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("Storage file is not valid JSON", path=str(self.path), error=str(e))
            raise StorageError(f"{self.path} is not valid JSON: {e}") from e
        if not isinstance(items, dict):
            logger.error(
                "Storage file does not hold a JSON object",
                path=str(self.path),
                found=type(items).__name__,
            )
            raise StorageError(f"{self.path} must contain a JSON object")
        return items

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = str(value)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(items, f, indent=2)

    def keys(self) -> list[str]:
        return list(self._load())
