"""Custom exceptions for Game Dirs."""


class GameDirsError(Exception):
    """Base exception for Game Dirs errors."""
    pass


class StoreError(GameDirsError):
    """Key-value store could not be read or written."""
    pass


class InvalidLocationError(GameDirsError, ValueError):
    """Value cannot be used as a search location."""
    pass
