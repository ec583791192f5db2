"""Placeholder generation entry point.

Ties the renderer and encoder together behind a single call used by the HTTP
layer::

    from placekit.core.descriptor import parse
    from placekit.core.fonts import FontSource
    from placekit.core.generator import generate

    font_source = FontSource.from_path(config.font_path)
    image = generate(parse("/hello/300x150.png"), font_source)
    image.media_type  # "image/png"
"""

from __future__ import annotations

from typing import NamedTuple

from placekit.core.descriptor import RequestDescriptor
from placekit.core.encoder import encode
from placekit.core.fonts import FontSource
from placekit.core.renderer import render


class GeneratedImage(NamedTuple):
    """Encoded placeholder ready to be sent to a client."""

    content: bytes
    media_type: str


def generate(descriptor: RequestDescriptor, font_source: FontSource) -> GeneratedImage:
    """Render and encode the placeholder described by *descriptor*.

    Raises:
        GenerateError: One of :class:`FontLoadFailure`, :class:`RenderError`
            or :class:`EncodeError`.
    """
    canvas = render(descriptor.width, descriptor.height, descriptor.text, font_source)
    content = encode(canvas, descriptor.format)
    return GeneratedImage(content=content, media_type=descriptor.format.mime_type)
