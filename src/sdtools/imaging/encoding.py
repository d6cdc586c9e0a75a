"""Image encoding/decoding for the key image wire format.

Images travel to the host as base64 PNG strings. Strings sent straight to a
key must carry the ``data:image/png;base64,`` header; stored or relayed
strings may omit it. Decoding accepts both.

Decoding is fail-soft: a corrupt or malformed string is logged and yields
``None`` so a bad image never takes down a long-running plugin.
"""

import base64
import io
import logging
import os
from typing import Any, Dict, Optional, Tuple

try:
    from PIL import Image
except ImportError:
    raise ImportError("Pillow is required for image encoding. Install with: pip install Pillow")

import numpy as np

from ..constants import HEADER_PREFIX

_logger = logging.getLogger(__name__)


def _to_pil(image: Any) -> Image.Image:
    """Convert a numpy array or PIL Image to a PIL Image."""
    if isinstance(image, np.ndarray):
        arr = image

        # Ensure uint8
        if arr.dtype != np.uint8:
            if arr.size and arr.max() <= 1.0:
                arr = (arr * 255).astype(np.uint8)
            else:
                arr = arr.astype(np.uint8)

        if arr.ndim == 2:
            return Image.fromarray(arr)
        if arr.ndim == 3:
            if arr.shape[2] == 1:
                return Image.fromarray(arr.squeeze(axis=2))
            if arr.shape[2] in (3, 4):
                # RGB or RGBA
                return Image.fromarray(arr)
            raise ValueError(f"Unsupported channel count: {arr.shape[2]}")
        raise ValueError(f"Unsupported array shape: {arr.shape}")

    if isinstance(image, Image.Image):
        return image

    raise ValueError(f"Unsupported image type: {type(image)}")


def strip_header_prefix(encoded: str) -> str:
    """Remove the data URI header if present.

    Only one leading header is removed, so the call is a no-op on a string
    that is already raw base64.
    """
    if encoded.startswith(HEADER_PREFIX):
        return encoded[len(HEADER_PREFIX):]
    return encoded


def image_to_base64(image: Any, add_header_prefix: bool) -> str:
    """Encode an in-memory image as a base64 PNG string.

    Set ``add_header_prefix`` when the result goes straight to a key image.

    Args:
        image: PIL Image, or numpy array (HxW, HxWx1, HxWx3, HxWx4)
        add_header_prefix: Prepend ``data:image/png;base64,``

    Returns:
        Base64 encoded PNG, optionally with the header

    Raises:
        ValueError: If the image type or array shape is not supported
    """
    img = _to_pil(image)

    buffer = io.BytesIO()
    img.save(buffer, format="PNG")

    encoded = base64.b64encode(buffer.getvalue()).decode("utf-8")
    return HEADER_PREFIX + encoded if add_header_prefix else encoded


def file_to_base64(path: str, add_header_prefix: bool) -> Optional[str]:
    """Encode an image file as a base64 PNG string.

    Args:
        path: Path to an image file in any format Pillow can read
        add_header_prefix: Prepend ``data:image/png;base64,``

    Returns:
        Base64 encoded PNG, or None if ``path`` is not an existing file
    """
    if not path or not os.path.isfile(path):
        _logger.debug("Image file not found: %s", path)
        return None

    with Image.open(path) as img:
        return image_to_base64(img, add_header_prefix)


def _open_encoded(encoded: str) -> Tuple[Image.Image, int]:
    """Decode a (possibly prefixed) base64 string into a loaded PIL Image."""
    # Line breaks and surrounding whitespace are not part of the payload
    data = "".join(strip_header_prefix(encoded).split())
    image_bytes = base64.b64decode(data, validate=True)
    img = Image.open(io.BytesIO(image_bytes))
    # Force a full decode so truncated data fails here
    img.load()
    return img, len(image_bytes)


def base64_to_image(encoded: str, return_numpy: bool = False) -> Optional[Any]:
    """Decode a base64 image string.

    The header is stripped when present; otherwise the string is treated as
    raw base64.

    Args:
        encoded: Base64 encoded image, with or without the data URI header
        return_numpy: If True, return a numpy array; else return a PIL Image

    Returns:
        Decoded image, or None if the string could not be decoded
    """
    try:
        img, _ = _open_encoded(encoded)
    except Exception as e:
        _logger.error("base64_to_image failed: %s", e, exc_info=True)
        return None

    if return_numpy:
        return np.array(img)
    return img


def get_image_info(encoded: str) -> Optional[Dict[str, Any]]:
    """Get information about an encoded image without returning its pixels.

    Args:
        encoded: Base64 encoded image, with or without the data URI header

    Returns:
        Dictionary with width, height, format, mode and size_bytes, or None
        if the string could not be decoded
    """
    try:
        img, size_bytes = _open_encoded(encoded)
    except Exception as e:
        _logger.error("get_image_info failed: %s", e, exc_info=True)
        return None

    return {
        "width": img.width,
        "height": img.height,
        "format": img.format,
        "mode": img.mode,
        "size_bytes": size_bytes,
    }
