"""Placeholder canvas rendering.

Every placeholder looks the same apart from size and label: an opaque
mid-gray rectangle with the label drawn in black, centred on both axes, at the
size computed by :func:`placekit.core.fitter.fit`.  The ink box of the
label, as measured by the fitter, is what gets centred.
"""

from __future__ import annotations

import logging

from PIL import Image, ImageDraw

from placekit.core.errors import RenderError
from placekit.core.fitter import TEXT_ANCHOR, fit, text_box
from placekit.core.fonts import FontSource

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = (127, 127, 127, 255)
TEXT_COLOR = (0, 0, 0, 255)
CANVAS_MODE = "RGBA"


def render(width: int, height: int, text: str, font_source: FontSource) -> Image.Image:
    """Draw a placeholder canvas.

    Args:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        text: Label to draw (non-empty).
        font_source: Font used for the label.

    Returns:
        An RGBA image of exactly ``width × height`` pixels.

    Raises:
        RenderError: If the label cannot be fitted or drawn.
        FontLoadFailure: If the font cannot be parsed.
    """
    try:
        canvas = Image.new(CANVAS_MODE, (width, height), BACKGROUND_COLOR)
    except (ValueError, MemoryError) as e:
        raise RenderError(f"cannot allocate {width}x{height} canvas: {e}") from e

    point_size = fit(width, height, text, font_source)
    font = font_source.face(point_size)

    # Centre the ink box, not the line box.
    left, top, right, bottom = text_box(font, text)
    origin = (width / 2 - (left + right) / 2, height / 2 - (top + bottom) / 2)

    try:
        draw = ImageDraw.Draw(canvas)
        draw.text(origin, text, fill=TEXT_COLOR, font=font, anchor=TEXT_ANCHOR)
    except (OSError, ValueError) as e:
        raise RenderError(f"cannot draw text {text!r}: {e}") from e

    return canvas
