# sdtools/imaging/__init__.py
"""Image helpers for key rendering.

Provides base64 encoding/decoding of key images (optionally as data URIs)
and blank 72x72 key canvases with a preconfigured drawing context.

Usage:
    from sdtools.imaging import image_to_base64, base64_to_image
    from sdtools.imaging import generate_key_image
"""

from .encoding import (
    image_to_base64,
    file_to_base64,
    base64_to_image,
    strip_header_prefix,
    get_image_info,
)
from .canvas import (
    RenderHints,
    DEFAULT_RENDER_HINTS,
    KeyGraphics,
    generate_key_image,
)

__all__ = [
    # Encoding
    "image_to_base64",
    "file_to_base64",
    "base64_to_image",
    "strip_header_prefix",
    "get_image_info",
    # Canvas
    "RenderHints",
    "DEFAULT_RENDER_HINTS",
    "KeyGraphics",
    "generate_key_image",
]
