"""Search location registry and its string encoding."""

from .codec import DELIMITER
from .codec import decode_locations
from .codec import encode_locations
from .locations import KEY_SEARCH_LOCATIONS
from .locations import LocationRegistry
from .locations import SearchLocationResult


__all__ = [
    "DELIMITER",
    "decode_locations",
    "encode_locations",
    "KEY_SEARCH_LOCATIONS",
    "LocationRegistry",
    "SearchLocationResult",
]
