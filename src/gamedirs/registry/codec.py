"""Encoding of a search location set into a single stored string."""

import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)

# Must never appear inside a location. Not validated here.
DELIMITER = "|"


def decode_locations(value: str | None) -> list[str]:
    """
    Decode a stored value into an ordered list of locations.

    A missing value and an empty string both mean "no locations". Empty
    segments, such as those left by a leading, trailing or doubled
    delimiter, are discarded rather than returned as locations.

    Examples:
        "" → []
        "file:///sdA|file:///sdB" → ["file:///sdA", "file:///sdB"]
        "|file:///sdA||" → ["file:///sdA"]
    """
    if not value:
        return []

    segments = value.split(DELIMITER)
    locations = [segment for segment in segments if segment != ""]

    if len(locations) != len(segments):
        logger.debug("Dropped %d empty segment(s) from stored value", len(segments) - len(locations))

    return locations


def encode_locations(locations: Iterable[str]) -> str:
    """Encode locations in order, skipping empty entries."""
    return DELIMITER.join(location for location in locations if location)
