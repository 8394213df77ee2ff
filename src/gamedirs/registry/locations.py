"""Persistent registry of the directories scanned for game content."""

import logging
import threading
from collections.abc import Iterator
from enum import Enum

from gamedirs.registry.codec import decode_locations
from gamedirs.registry.codec import encode_locations
from gamedirs.store import KeyValueStore

logger = logging.getLogger(__name__)

KEY_SEARCH_LOCATIONS = "search_locations"


class SearchLocationResult(Enum):
    """Outcome of a registry mutation, with the message shown to the user."""

    SUCCESS = "Search location added"
    ALREADY_ADDED = "Search location already added"
    DELETED = "Search location deleted"

    @property
    def message(self) -> str:
        return self.value


class LocationRegistry:
    """
    Ordered, deduplicated set of search locations kept in a key-value store.

    Every call reads the current value from the store and every mutation
    writes the full set back; nothing is cached between calls. Locations
    are compared by exact string equality, so callers must normalize them
    before handing them in.

    The lock serializes read-modify-write cycles within one instance only.
    Two registries (or processes) writing the same store key can still
    lose each other's updates, so share a single instance per store.
    """

    def __init__(self, store: KeyValueStore, key: str = KEY_SEARCH_LOCATIONS):
        self.store = store
        self.key = key
        self._lock = threading.Lock()

    def _read(self) -> list[str]:
        return decode_locations(self.store.get(self.key, ""))

    def _write(self, locations: list[str]) -> None:
        value = encode_locations(locations)
        logger.debug("Writing %d location(s) to %r", len(locations), self.key)
        self.store.set(self.key, value)

    def list(self) -> list[str]:
        """Return the registered locations in insertion order."""
        with self._lock:
            return self._read()

    def add(self, location: str) -> SearchLocationResult:
        """
        Append a location to the set.

        Returns ALREADY_ADDED without touching the store if the location is
        already registered, SUCCESS otherwise. An empty location is never
        stored, so adding one returns SUCCESS without writing.
        """
        if not location:
            logger.debug("Ignoring empty location")
            return SearchLocationResult.SUCCESS

        with self._lock:
            locations = self._read()
            if location in locations:
                logger.debug("Location already registered: %s", location)
                return SearchLocationResult.ALREADY_ADDED

            locations.append(location)
            self._write(locations)

        logger.info("Added search location %s", location)
        return SearchLocationResult.SUCCESS

    def delete(self, location: str) -> SearchLocationResult:
        """
        Remove every occurrence of a location from the set.

        The remaining set is always written back, and DELETED is returned
        even when the location was not registered.
        """
        with self._lock:
            remaining = [entry for entry in self._read() if entry != location]
            self._write(remaining)

        logger.info("Deleted search location %s", location)
        return SearchLocationResult.DELETED

    def __contains__(self, location: object) -> bool:
        return location in self.list()

    def __iter__(self) -> Iterator[str]:
        return iter(self.list())

    def __len__(self) -> int:
        return len(self.list())
