"""Favicon built at startup.

Browsers request ``/favicon.ico`` alongside every placeholder they display.
Rather than shipping a separate icon asset, the icon is rendered once with the
regular placeholder renderer and encoded as a multi-size ICO.  Its
modification time is the moment it was built, which gives clients a stable
``Last-Modified`` value for conditional requests.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime

from placekit.core.errors import EncodeError
from placekit.core.fonts import FontSource
from placekit.core.renderer import render

FAVICON_SIZE = 64
FAVICON_LABEL = "P"
ICON_SIZES = [(16, 16), (32, 32), (48, 48), (64, 64)]


@dataclass(frozen=True)
class Favicon:
    """Encoded icon plus its modification time."""

    content: bytes
    modified: datetime

    @property
    def last_modified(self) -> str:
        """``Last-Modified`` header value."""
        return format_datetime(self.modified, usegmt=True)

    def is_fresh(self, if_modified_since: str | None) -> bool:
        """Whether a client copy dated *if_modified_since* is still current.

        Unparseable header values are treated as absent.
        """
        if not if_modified_since:
            return False
        try:
            since = parsedate_to_datetime(if_modified_since)
        except (TypeError, ValueError):
            return False
        if since.tzinfo is None:
            since = since.replace(tzinfo=timezone.utc)
        return self.modified <= since


def build_favicon(font_source: FontSource) -> Favicon:
    """Render and encode the favicon.

    Raises:
        GenerateError: If rendering or ICO encoding fails.
    """
    canvas = render(FAVICON_SIZE, FAVICON_SIZE, FAVICON_LABEL, font_source)
    buffer = io.BytesIO()
    try:
        canvas.save(buffer, format="ICO", sizes=ICON_SIZES)
    except (OSError, ValueError) as e:
        raise EncodeError(f"failed to encode favicon: {e}") from e

    # HTTP dates have one-second resolution.
    modified = datetime.now(timezone.utc).replace(microsecond=0)
    return Favicon(content=buffer.getvalue(), modified=modified)
