"""Blank key canvases for drawing with Pillow."""

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Tuple

try:
    from PIL import Image, ImageDraw
except ImportError:
    raise ImportError("Pillow is required for rendering. Install with: pip install Pillow")

from ..constants import KEY_DEFAULT_HEIGHT, KEY_DEFAULT_WIDTH

# Colors (RGBA)
COLOR_BACKGROUND = (0, 0, 0, 255)  # Opaque black


@dataclass(frozen=True)
class RenderHints:
    """Quality settings applied to a key drawing context.

    Pillow has no shape smoothing or pixel offset switches, so ``smoothing``
    and ``pixel_offset`` are informational. ``interpolation`` is used by
    ``KeyGraphics.draw_image`` and ``text_rendering`` sets the font mode.

    Attributes:
        smoothing: Edge smoothing for shapes (informational)
        interpolation: Resampling filter used when scaling images onto the key
        pixel_offset: Pixel offset mode for scaled images (informational)
        text_rendering: Text rasterization mode
    """
    smoothing: str = "antialias"
    interpolation: Image.Resampling = Image.Resampling.BICUBIC
    pixel_offset: str = "high_quality"
    text_rendering: str = "antialias_grid_fit"

    @property
    def font_mode(self) -> str:
        """ImageDraw font mode matching ``text_rendering``."""
        return "1" if self.text_rendering == "aliased" else "L"


DEFAULT_RENDER_HINTS = RenderHints()


@dataclass
class KeyGraphics:
    """Drawing context bound to a key image.

    Wraps ``ImageDraw.ImageDraw``; use ``draw`` directly for shapes not
    covered here.
    """
    image: Image.Image
    hints: RenderHints = DEFAULT_RENDER_HINTS
    draw: ImageDraw.ImageDraw = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.draw = ImageDraw.Draw(self.image)
        self.draw.fontmode = self.hints.font_mode

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    def fill(self, color: Any) -> None:
        """Fill the whole key with ``color``."""
        width, height = self.image.size
        self.draw.rectangle([0, 0, width - 1, height - 1], fill=color)

    def text(
        self,
        xy: Tuple[float, float],
        text: str,
        fill: Any = (255, 255, 255, 255),
        font: Optional[Any] = None,
        **kwargs: Any,
    ) -> None:
        """Draw text using the context's text rendering mode."""
        self.draw.text(xy, text, fill=fill, font=font, **kwargs)

    def draw_image(self, image: Image.Image, box: Optional[Sequence[int]] = None) -> None:
        """Scale ``image`` into ``box`` and paste it onto the key.

        Args:
            image: Source image
            box: (left, top, right, bottom) target area; defaults to the whole key
        """
        if box is None:
            box = (0, 0) + self.image.size
        left, top, right, bottom = box
        target = (right - left, bottom - top)

        src = image if image.mode == "RGBA" else image.convert("RGBA")
        if src.size != target:
            src = src.resize(target, self.hints.interpolation)

        if self.image.mode == "RGBA":
            self.image.alpha_composite(src, dest=(left, top))
        else:
            self.image.paste(src, (left, top), src)


def generate_key_image(
    width: int = KEY_DEFAULT_WIDTH,
    height: int = KEY_DEFAULT_HEIGHT,
    hints: RenderHints = DEFAULT_RENDER_HINTS,
) -> Tuple[Image.Image, KeyGraphics]:
    """Create an empty key image with a black background.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        hints: Rendering quality settings for the returned context

    Returns:
        Tuple of (RGBA image, drawing context bound to it)
    """
    image = Image.new("RGBA", (width, height), COLOR_BACKGROUND)
    return image, KeyGraphics(image, hints)
