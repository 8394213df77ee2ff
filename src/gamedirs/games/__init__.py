"""Game discovery under registered search locations."""

from .scanner import GAME_EXTENSIONS
from .scanner import GameFile
from .scanner import GameScanner
from .scanner import location_to_path


__all__ = [
    "GAME_EXTENSIONS",
    "GameFile",
    "GameScanner",
    "location_to_path",
]
