"""Filesystem abstraction used when scanning search locations."""

import asyncio
import logging
import os
from abc import ABC
from abc import abstractmethod
from collections.abc import AsyncIterator
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class FileInfo:
    """Directory entry returned by list_dir."""

    path: str
    name: str
    size: int
    is_dir: bool


class FilesystemProvider(ABC):
    """Abstract read-only filesystem provider."""

    @abstractmethod
    async def is_dir(self, path: str) -> bool:
        """Check if path is directory."""
        pass

    @abstractmethod
    def list_dir(self, path: str) -> AsyncIterator[FileInfo]:
        """List directory contents."""
        pass

    @abstractmethod
    def real_path(self, path: str) -> str:
        """Get canonical path with symlinks resolved."""
        pass

    @abstractmethod
    def stem(self, path: str) -> str:
        """Get filename without extension."""
        pass

    @abstractmethod
    def suffix(self, path: str) -> str:
        """Get lowercased file extension including the dot."""
        pass


def _read_entries(path: Path) -> list[FileInfo]:
    entries = []

    for item in sorted(path.iterdir()):
        try:
            if item.is_dir():
                entries.append(FileInfo(path=str(item), name=item.name, size=0, is_dir=True))
            elif item.is_file():
                entries.append(
                    FileInfo(path=str(item), name=item.name, size=item.stat().st_size, is_dir=False)
                )
            else:
                # Dangling symlink, socket, fifo
                logger.debug("Skipping %s: not a regular file or directory", item)
        except OSError as e:
            logger.debug("Skipping %s: %s", item, e)

    return entries


class LocalFilesystem(FilesystemProvider):
    """Local filesystem provider."""

    async def is_dir(self, path: str) -> bool:
        return Path(path).is_dir()

    async def list_dir(self, path: str) -> AsyncIterator[FileInfo]:
        p = Path(path)
        if not p.is_dir():
            return

        for item in await asyncio.to_thread(_read_entries, p):
            yield item

    def real_path(self, path: str) -> str:
        return os.path.realpath(path)

    def stem(self, path: str) -> str:
        return Path(path).stem

    def suffix(self, path: str) -> str:
        return Path(path).suffix.lower()
