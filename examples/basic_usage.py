"""Basic usage examples for Game Dirs."""

import asyncio
from pathlib import Path

from gamedirs import JsonFileStore, LocationRegistry, MemoryStore, SearchLocationResult
from gamedirs.games import GameScanner
from gamedirs.utils.fs import LocalFilesystem


def example_in_memory():
    """Example: Register locations in a throwaway store."""
    registry = LocationRegistry(MemoryStore())

    registry.add("file:///sdcard/3DS")
    registry.add("file:///sdcard/CIA")

    result = registry.add("file:///sdcard/3DS")
    if result == SearchLocationResult.ALREADY_ADDED:
        print(result.message)

    print(registry.list())


def example_persistent():
    """Example: Keep locations in a settings file."""
    registry = LocationRegistry(JsonFileStore(Path('settings.json')))

    registry.add(Path('games').resolve().as_uri())
    print(f"{len(registry)} location(s) registered")

    registry.delete(Path('games').resolve().as_uri())


def example_scan():
    """Example: List game files under every registered location."""
    registry = LocationRegistry(JsonFileStore(Path('settings.json')))
    scanner = GameScanner(LocalFilesystem())

    async def _scan():
        async for game in scanner.scan(registry.list()):
            print(f"{game.name}{game.extension}: {game.size:,} bytes")

    asyncio.run(_scan())


if __name__ == '__main__':
    print("Game Dirs Examples")
    print("=" * 50)
    print("\nSee function definitions for usage examples.")
