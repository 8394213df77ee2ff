"""Key-value store abstraction for in-memory and JSON file persistence."""

import json
import logging
import os
import tempfile
from abc import ABC
from abc import abstractmethod
from pathlib import Path

from gamedirs.utils.errors import StoreError

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Abstract string-keyed store of string values."""

    @abstractmethod
    def get(self, key: str, default: str = "") -> str:
        """Return the value stored under key, or default if unset."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass


class MemoryStore(KeyValueStore):
    """Dict-backed store, lost when the process exits."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str, default: str = "") -> str:
        return self._data.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore(KeyValueStore):
    """Store persisted as a flat JSON object of strings.

    The file is re-read on every get and rewritten whole on every set, so
    several stores over the same path always see the latest write.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StoreError(f"Cannot read store {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StoreError(f"Store {self.path} does not contain a JSON object")

        return data

    def _save(self, data: dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)

            # Write next to the target so os.replace stays on one filesystem
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, sort_keys=True)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StoreError(f"Cannot write store {self.path}: {e}") from e

    def get(self, key: str, default: str = "") -> str:
        value = self._load().get(key, default)
        if not isinstance(value, str):
            raise StoreError(f"Value for {key!r} in {self.path} is not a string")
        return value

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)
        logger.debug("Saved %r to %s", key, self.path)


def create_store(path: str | Path | None = None) -> KeyValueStore:
    """Create a JSON file store for path, or an in-memory store if None."""
    if path is None:
        return MemoryStore()
    else:
        return JsonFileStore(path)
