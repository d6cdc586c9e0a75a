"""
Helpers for key-based plugins driven by a JSON control protocol.

Modules:
    imaging: Base64 key image encoding/decoding and blank key canvases
    settings: Populating typed settings objects from JSON payloads
    paths: Filename normalization for file picker values
    actions: Explicit plugin action registration
"""

from importlib import metadata

from .constants import HEADER_PREFIX, KEY_DEFAULT_HEIGHT, KEY_DEFAULT_WIDTH
from .paths import filename_from_payload, filename_from_string

__all__ = [
    "imaging",
    "settings",
    "paths",
    "actions",
    "HEADER_PREFIX",
    "KEY_DEFAULT_WIDTH",
    "KEY_DEFAULT_HEIGHT",
    "filename_from_payload",
    "filename_from_string",
]

try:
    __version__ = metadata.version("sdtools")  # type: ignore[arg-type]
except metadata.PackageNotFoundError:  # pragma: no cover - local dev
    __version__ = "0.0.0"
