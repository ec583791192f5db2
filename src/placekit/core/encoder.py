"""Raster encoding for rendered canvases.

Each :class:`~placekit.core.descriptor.ImageFormat` maps to exactly one
serializer.  The set is closed, so dispatch is a plain dictionary lookup.

========  ==========================================================
Format    Serializer
========  ==========================================================
PNG       lossless, Pillow default compression
JPEG      flattened to RGB, fixed quality 90
GIF       indexed colour with an adaptive 256-colour palette
========  ==========================================================

Encoding writes into an in-memory buffer and only returns once the whole
image has been serialized, so a failure never yields truncated bytes.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Callable

from PIL import Image

from placekit.core.descriptor import ImageFormat
from placekit.core.errors import EncodeError

logger = logging.getLogger(__name__)

JPEG_QUALITY = 90


def _encode_png(canvas: Image.Image, buffer: io.BytesIO) -> None:
    canvas.save(buffer, format="PNG")


def _encode_jpeg(canvas: Image.Image, buffer: io.BytesIO) -> None:
    # JPEG has no alpha channel.
    canvas.convert("RGB").save(buffer, format="JPEG", quality=JPEG_QUALITY)


def _encode_gif(canvas: Image.Image, buffer: io.BytesIO) -> None:
    indexed = canvas.convert("RGB").convert("P", palette=Image.Palette.ADAPTIVE, colors=256)
    indexed.save(buffer, format="GIF")


_SERIALIZERS: dict[ImageFormat, Callable[[Image.Image, io.BytesIO], None]] = {
    ImageFormat.PNG: _encode_png,
    ImageFormat.JPEG: _encode_jpeg,
    ImageFormat.GIF: _encode_gif,
}


def encode(canvas: Image.Image, image_format: ImageFormat) -> bytes:
    """Serialize *canvas* to *image_format*.

    Args:
        canvas: Rendered image.
        image_format: Target raster format.

    Returns:
        The complete encoded image.

    Raises:
        EncodeError: If the format is unknown or Pillow fails to encode.
    """
    try:
        image_format = ImageFormat(image_format)
    except ValueError as e:
        raise EncodeError(f"unsupported image format: {image_format!r}") from e
    serializer = _SERIALIZERS[image_format]

    buffer = io.BytesIO()
    try:
        serializer(canvas, buffer)
    except (OSError, ValueError, KeyError) as e:
        raise EncodeError(f"failed to encode {image_format.value}: {e}") from e

    data = buffer.getvalue()
    logger.debug(f"Encoded {canvas.width}x{canvas.height} {image_format.value} ({len(data)} bytes)")
    return data
