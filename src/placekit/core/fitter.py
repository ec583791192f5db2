"""Font size fitting for placeholder labels.

The label is measured once at a reference size and the result is scaled
linearly to the canvas.  Both axes are limited to 80% of the canvas so the
text never touches the edges, and the smaller of the two candidate sizes wins
so the label fits in both directions::

    candidate_w = 0.8 * base_size * width  / text_width
    candidate_h = 0.8 * base_size * height / text_height
    point_size  = floor(min(candidate_w, candidate_h))

"Text size" here is the ink box of the label, the same box the renderer
centres on the canvas.  FreeType hints glyphs to whole pixels, so the ink box
does not scale exactly linearly.  After the closed-form estimate the size is
stepped down until the box measured at that size is inside the 80% limit.
The estimate is usually exact or off by a few points.
"""

from __future__ import annotations

import logging
import math

from PIL import Image, ImageDraw, ImageFont

from placekit.core.errors import RenderError
from placekit.core.fonts import FontSource

logger = logging.getLogger(__name__)

BASE_SIZE = 72
FILL_RATIO = 0.8

# Boxes are reported relative to the left/ascender origin of the first line.
TEXT_ANCHOR = "la"


def text_box(font: ImageFont.FreeTypeFont, text: str) -> tuple[int, int, int, int]:
    """Return the ink box ``(left, top, right, bottom)`` of *text* drawn at ``(0, 0)``.

    Raises:
        RenderError: If Pillow cannot lay out the text.
    """
    scratch = ImageDraw.Draw(Image.new("L", (1, 1)))
    try:
        return scratch.textbbox((0, 0), text, font=font, anchor=TEXT_ANCHOR)
    except (OSError, ValueError) as e:
        raise RenderError(f"cannot measure text {text!r}: {e}") from e


def measure(font: ImageFont.FreeTypeFont, text: str) -> tuple[int, int]:
    """Return the ``(width, height)`` of the ink box of *text*."""
    left, top, right, bottom = text_box(font, text)
    return right - left, bottom - top


def _scale_to_fit(text_width: int, text_height: int, width: int, height: int) -> float:
    """Factor by which a box must scale to fit the 80% limit (>= 1 means it fits)."""
    return min(
        FILL_RATIO * width / text_width if text_width else math.inf,
        FILL_RATIO * height / text_height if text_height else math.inf,
    )


def fit(
    width: int,
    height: int,
    text: str,
    font_source: FontSource,
    base_size: float = BASE_SIZE,
) -> int:
    """Compute the largest point size at which *text* fits the canvas.

    Args:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        text: Label to fit.
        font_source: Font used for measuring.
        base_size: Reference size the text is measured at.

    Returns:
        Integral point size, always ``>= 1``.  The ink box at that size is
        within ``0.8 * width`` by ``0.8 * height``.

    Raises:
        RenderError: If the text has no measurable extent, or the canvas is too
            small for any legible size.
        FontLoadFailure: If the font cannot be parsed.
    """
    text_width, text_height = measure(font_source.face(base_size), text)
    if text_width <= 0 or text_height <= 0:
        raise RenderError(f"text {text!r} has no measurable extent")

    candidate_width = FILL_RATIO * base_size * width / text_width
    candidate_height = FILL_RATIO * base_size * height / text_height
    point_size = math.floor(min(candidate_width, candidate_height))

    while point_size > 0:
        scale = _scale_to_fit(*measure(font_source.face(point_size), text), width, height)
        if scale >= 1:
            break
        point_size = min(point_size - 1, math.floor(point_size * scale))

    if point_size <= 0:
        raise RenderError(f"canvas {width}x{height} is too small to fit text {text!r}")

    logger.debug(f"Fitted {text!r} into {width}x{height} at {point_size}pt")
    return point_size
