"""Request descriptor parsing for placeholder paths.

A placeholder request is encoded entirely in the URL path::

    [/<label>]/<width>x<height>.<ext>

``<width>`` and ``<height>`` are ASCII digit runs and ``<ext>`` is one of
``png``, ``jpg``, ``jpeg`` or ``gif`` (case-sensitive).  Everything before the
final ``/<width>x<height>.<ext>`` token, minus its leading ``/``, is the
label, and the label may itself contain slashes.

Examples
--------
========================  =========================================
Path                      Result
========================  =========================================
``/300x150.png``          300×150 PNG labelled ``300x150``
``/hello/100x50.jpg``     100×50 JPEG labelled ``hello``
``/a/b/64x64.gif``        64×64 GIF labelled ``a/b``
``/timestamp/80x40.png``  label is the current Unix time in ms
``/datetime/80x40.png``   label is ``YYYY-MM-DD HH:MM:SS.mmm ±HHMM``
========================  =========================================

The path is scanned by hand rather than with a regular expression so that
arbitrarily long or hostile paths are handled in linear time.

Label substitution happens here, at parse time, so a descriptor is a fixed
snapshot: rendering the same descriptor twice yields identical bytes.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from placekit.core.errors import InvalidDimension, MalformedRequest

logger = logging.getLogger(__name__)

TIMESTAMP_LABEL = "timestamp"
DATETIME_LABEL = "datetime"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ImageFormat(str, Enum):
    """Closed set of output formats."""

    PNG = "png"
    JPEG = "jpeg"
    GIF = "gif"

    @property
    def mime_type(self) -> str:
        """MIME type sent as ``Content-Type``."""
        return f"image/{self.value}"


# Path extension → output format.  ``jpg`` and ``jpeg`` are aliases.
EXTENSIONS: dict[str, ImageFormat] = {
    "png": ImageFormat.PNG,
    "jpg": ImageFormat.JPEG,
    "jpeg": ImageFormat.JPEG,
    "gif": ImageFormat.GIF,
}


class RequestDescriptor(BaseModel):
    """A fully resolved, immutable placeholder request.

    Attributes:
        width: Canvas width in pixels (always positive).
        height: Canvas height in pixels (always positive).
        text: Label to draw (never empty; substitutions already applied).
        format: Output raster format.
    """

    model_config = ConfigDict(frozen=True)

    width: int = Field(..., gt=0, description="Canvas width in pixels.")
    height: int = Field(..., gt=0, description="Canvas height in pixels.")
    text: str = Field(..., min_length=1, description="Label drawn on the canvas.")
    format: ImageFormat = Field(..., description="Output raster format.")


def _is_digits(value: str) -> bool:
    # str.isdigit() alone accepts non-ASCII digits such as "٣".
    return bool(value) and value.isascii() and value.isdigit()


def _split_size_token(token: str) -> tuple[str, str, str] | None:
    """Split ``<width>x<height>.<ext>`` into its three parts.

    Returns:
        ``(width, height, ext)`` as raw strings, or ``None`` if the token
        does not have that shape.
    """
    dims, dot, ext = token.partition(".")
    if not dot or ext not in EXTENSIONS:
        return None

    width, sep, height = dims.partition("x")
    if not sep or not _is_digits(width) or not _is_digits(height):
        return None

    return width, height, ext


def _to_dimension(raw: str, name: str, max_dimension: int | None) -> int:
    try:
        value = int(raw)
    except ValueError as e:
        # Digit runs beyond the interpreter's int conversion limit.
        raise InvalidDimension(f"{name} is out of range") from e
    if value <= 0:
        raise InvalidDimension(f"{name} must be positive, got {value}")
    if max_dimension is not None and value > max_dimension:
        raise InvalidDimension(f"{name} must be at most {max_dimension}, got {value}")
    return value


def format_timestamp(now: datetime) -> str:
    """Render *now* as Unix time in milliseconds."""
    return str((now - _EPOCH) // timedelta(milliseconds=1))


def format_datetime(now: datetime) -> str:
    """Render *now* as ``YYYY-MM-DD HH:MM:SS.mmm ±HHMM``."""
    return f"{now:%Y-%m-%d %H:%M:%S}.{now.microsecond // 1000:03d} {now:%z}"


def resolve_label(label: str, width: int, height: int, now: datetime | None = None) -> str:
    """Apply label substitution rules.

    Args:
        label: Raw label segment from the path (may be empty).
        width: Parsed width, used for the default label.
        height: Parsed height, used for the default label.
        now: Wall-clock time for ``timestamp``/``datetime``.  Defaults to the
            current local time.

    Returns:
        The text to draw.
    """
    if not label:
        return f"{width}x{height}"

    if label in (TIMESTAMP_LABEL, DATETIME_LABEL):
        if now is None:
            now = datetime.now().astimezone()
        elif now.tzinfo is None:
            now = now.astimezone()
        if label == TIMESTAMP_LABEL:
            return format_timestamp(now)
        return format_datetime(now)

    return label


def parse(
    path: str,
    *,
    now: datetime | None = None,
    max_dimension: int | None = None,
) -> RequestDescriptor:
    """Decode a request path into a :class:`RequestDescriptor`.

    Args:
        path: Decoded URL path, e.g. ``"/hello/300x150.png"``.
        now: Clock override for the ``timestamp`` and ``datetime`` labels.
        max_dimension: Largest accepted width/height.  ``None`` disables the
            upper bound.

    Returns:
        The resolved descriptor.

    Raises:
        MalformedRequest: If the path does not match the grammar.
        InvalidDimension: If width or height is zero or above
            ``max_dimension``.
    """
    prefix, slash, token = path.rpartition("/")
    if not slash:
        raise MalformedRequest(f"invalid path {path!r}, expected [/<label>]/<width>x<height>.<ext>")

    parts = _split_size_token(token)
    if parts is None:
        raise MalformedRequest(f"invalid path {path!r}, expected [/<label>]/<width>x<height>.<ext>")

    # A label must be introduced by its own slash: "/label/1x1.png", not "label/1x1.png".
    if prefix and not prefix.startswith("/"):
        raise MalformedRequest(f"invalid path {path!r}, label must start with '/'")

    raw_width, raw_height, ext = parts
    width = _to_dimension(raw_width, "width", max_dimension)
    height = _to_dimension(raw_height, "height", max_dimension)

    text = resolve_label(prefix[1:], width, height, now=now)

    descriptor = RequestDescriptor(
        width=width,
        height=height,
        text=text,
        format=EXTENSIONS[ext],
    )
    logger.debug(f"Parsed {path!r} -> {descriptor!r}")
    return descriptor
