"""Placekit - on-demand placeholder images."""

__version__ = "0.1.0"

from placekit.core.config import PlacekitConfig, config
from placekit.core.descriptor import ImageFormat, RequestDescriptor, parse
from placekit.core.generator import GeneratedImage, generate

__all__ = [
    "GeneratedImage",
    "ImageFormat",
    "PlacekitConfig",
    "RequestDescriptor",
    "config",
    "generate",
    "parse",
]
