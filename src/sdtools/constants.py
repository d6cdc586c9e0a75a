"""Shared constants for key rendering and the image wire format."""

# Marker prepended to base64 PNG data when the host expects a data URI
HEADER_PREFIX = "data:image/png;base64,"

# Default key size, in pixels
KEY_DEFAULT_WIDTH = 72
KEY_DEFAULT_HEIGHT = 72

# Placeholder directory inserted by browser file inputs
FAKEPATH_PREFIX = "C:\\fakepath\\"
