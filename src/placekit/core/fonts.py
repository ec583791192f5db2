"""Embedded font handling.

The font file is read once when the application starts and the raw bytes are
kept on a :class:`FontSource`.  Pillow's ``FreeTypeFont`` objects are not
shared between requests: :meth:`FontSource.face` builds a new face from a
fresh ``BytesIO`` over the cached bytes every time it is called.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import ImageFont

from placekit.core.errors import FontLoadFailure

logger = logging.getLogger(__name__)


class FontSource:
    """Immutable holder for TrueType font bytes.

    Args:
        data: Raw TTF/OTF bytes.
        name: Label used in log and error messages.
    """

    def __init__(self, data: bytes, name: str = "<memory>"):
        if not data:
            raise FontLoadFailure(f"font {name} is empty")
        self._data = bytes(data)
        self.name = name

    @classmethod
    def from_path(cls, path: Path) -> FontSource:
        """Read font bytes from disk.

        Raises:
            FontLoadFailure: If the file cannot be read.
        """
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            raise FontLoadFailure(f"cannot read font {path}: {e}") from e
        logger.info(f"Loaded font {path} ({len(data)} bytes)")
        return cls(data, name=str(path))

    @property
    def data(self) -> bytes:
        return self._data

    def face(self, size: float) -> ImageFont.FreeTypeFont:
        """Create a new font face at *size* points.

        Raises:
            FontLoadFailure: If FreeType rejects the font bytes.
        """
        try:
            return ImageFont.truetype(io.BytesIO(self._data), size)
        except (OSError, ValueError) as e:
            raise FontLoadFailure(f"cannot parse font {self.name}: {e}") from e

    def __repr__(self) -> str:
        return f"FontSource(name={self.name!r}, size={len(self._data)})"
