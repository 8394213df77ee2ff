"""Game scanner that walks registered search locations."""

import logging
from collections.abc import AsyncIterator
from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import urlparse
from urllib.request import url2pathname

from gamedirs.utils.fs import FilesystemProvider
from gamedirs.utils.validation import is_uri

logger = logging.getLogger(__name__)


@dataclass
class GameFile:
    """Represents a game file found under a search location."""

    path: str
    name: str
    extension: str
    size: int
    location: str


GAME_EXTENSIONS = {
    ".3ds",
    ".3dsx",
    ".cci",
    ".cxi",
    ".cia",
    ".app",
    ".elf",
    ".axf",
}


def location_to_path(location: str) -> str | None:
    """
    Resolve a search location to a local directory path.

    Examples:
        "file:///sdcard/Games" → "/sdcard/Games"
        "file:///sdcard/My%20Games" → "/sdcard/My Games"
        "/sdcard/Games" → "/sdcard/Games"
        "content://com.android.externalstorage/tree/primary" → None
    """
    if not is_uri(location):
        return location

    parsed = urlparse(location)
    if parsed.scheme != "file":
        return None

    return url2pathname(parsed.path)


class GameScanner:
    """Scan search locations for game files."""

    def __init__(self, fs: FilesystemProvider, extensions: Iterable[str] = GAME_EXTENSIONS):
        self.fs = fs
        self.extensions = {ext.lower() for ext in extensions}

    async def scan(self, locations: Iterable[str]) -> AsyncIterator[GameFile]:
        """
        Scan locations in order, yielding each game file once.

        Overlapping locations (one nested inside another, or reached through
        a symlink) would otherwise report the same file twice.
        """
        seen: set[str] = set()

        for location in locations:
            async for game in self.scan_location(location):
                real = self.fs.real_path(game.path)
                if real in seen:
                    continue
                seen.add(real)
                yield game

    async def scan_location(self, location: str) -> AsyncIterator[GameFile]:
        """Recursively scan one search location.

        Each directory is walked once, so symlinks pointing back up the tree
        do not loop. Directories that cannot be listed are skipped.
        """
        root = location_to_path(location)

        if root is None:
            logger.warning("Skipping %s: only local directories can be scanned", location)
            return

        if not await self.fs.is_dir(root):
            logger.warning("Skipping %s: directory not found", location)
            return

        logger.debug("Scanning %s", root)
        async for game in self._scan_dir(root, location, set()):
            yield game

    async def _scan_dir(self, path: str, location: str, visited: set[str]) -> AsyncIterator[GameFile]:
        real = self.fs.real_path(path)
        if real in visited:
            logger.debug("Skipping %s: already scanned as %s", path, real)
            return
        visited.add(real)

        try:
            entries = [item async for item in self.fs.list_dir(path)]
        except OSError as e:
            logger.warning("Skipping %s: %s", path, e)
            return

        for item in entries:
            if item.is_dir:
                async for game in self._scan_dir(item.path, location, visited):
                    yield game
                continue

            extension = self.fs.suffix(item.path)
            if extension not in self.extensions:
                continue

            yield GameFile(
                path=item.path,
                name=self.fs.stem(item.path),
                extension=extension,
                size=item.size,
                location=location,
            )
