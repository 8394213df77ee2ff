"""Normalization of user input into search locations."""

import re
from pathlib import Path

from gamedirs.registry.codec import DELIMITER
from gamedirs.utils.errors import InvalidLocationError

URI_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


def is_uri(value: str) -> bool:
    """Check if value starts with a URI scheme such as file:// or content://."""
    return URI_SCHEME.match(value) is not None


def normalize_location(raw: str, must_exist: bool = True) -> str:
    """
    Turn user input into the exact string stored in the registry.

    URIs are kept verbatim. Anything else is treated as a local path and
    converted to an absolute file:// URI, so the same directory typed two
    different ways is stored once.

    Examples:
        "content://com.android.externalstorage/tree/primary%3AGames" → unchanged
        "~/Games/3DS" → "file:///home/user/Games/3DS"

    Raises:
        InvalidLocationError: Empty input or input containing the delimiter
        FileNotFoundError: Local directory does not exist (must_exist only)
        NotADirectoryError: Local path is a file (must_exist only)
    """
    value = raw.strip()

    if not value:
        raise InvalidLocationError("Location must not be empty")

    if DELIMITER in value:
        raise InvalidLocationError(f"Location must not contain {DELIMITER!r}: {value}")

    if is_uri(value):
        return value

    path = Path(value).expanduser().resolve()

    if must_exist:
        if not path.exists():
            raise FileNotFoundError(f"Directory not found: {path}")

        if not path.is_dir():
            raise NotADirectoryError(f"Path is not a directory: {path}")

    return path.as_uri()
