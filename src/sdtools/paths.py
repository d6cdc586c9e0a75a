"""Filename helpers for values coming from the property inspector.

Browser file inputs never expose the real location of a picked file. They
report ``C:\\fakepath\\<name>`` instead, with the name percent-encoded.
"""

from typing import Any
from urllib.parse import unquote

from .constants import FAKEPATH_PREFIX


def filename_from_string(value: str) -> str:
    """Strip the fake-path prefix and percent-decode the remainder.

    Args:
        value: Raw filename string, e.g. ``"C:\\fakepath\\My%20Song.mp3"``

    Returns:
        The decoded filename, e.g. ``"My Song.mp3"``
    """
    return unquote(value.replace(FAKEPATH_PREFIX, ""))


def filename_from_payload(value: Any) -> str:
    """Extract the filename from a raw JSON payload value.

    Args:
        value: JSON value for a file field (string, or a number)

    Returns:
        The decoded filename

    Raises:
        TypeError: If the value cannot be read as a string
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise TypeError(f"Expected a filename string, got {type(value).__name__}")
    return filename_from_string(str(value))
