"""Key-value stores the registry persists through."""

from .provider import JsonFileStore
from .provider import KeyValueStore
from .provider import MemoryStore
from .provider import create_store


__all__ = [
    "KeyValueStore",
    "MemoryStore",
    "JsonFileStore",
    "create_store",
]
