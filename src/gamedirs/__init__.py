"""Game Dirs - Search location registry for emulator front-ends."""

__version__ = "0.1.0"
__license__ = "GPL-3.0-or-later"

from gamedirs.registry import LocationRegistry
from gamedirs.registry import SearchLocationResult
from gamedirs.store import JsonFileStore
from gamedirs.store import KeyValueStore
from gamedirs.store import MemoryStore


__all__ = [
    "LocationRegistry",
    "SearchLocationResult",
    "KeyValueStore",
    "MemoryStore",
    "JsonFileStore",
    "__version__",
]
