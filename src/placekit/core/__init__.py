"""Core placeholder generation pipeline.

Architecture Overview
---------------------
The pipeline runs leaf-first, once per request:

1. **Parsing** (descriptor.py):
   - Decodes ``[/<label>]/<width>x<height>.<ext>`` into an immutable
     ``RequestDescriptor``
   - Resolves the ``timestamp`` / ``datetime`` labels

2. **Fitting** (fitter.py):
   - Computes the largest point size that keeps the label inside 80% of the
     canvas on both axes

3. **Rendering** (renderer.py):
   - Mid-gray canvas, black label centred on both axes

4. **Encoding** (encoder.py):
   - PNG, JPEG (quality 90) or GIF

5. **Support**:
   - config.py: Pydantic Settings configuration (``PLACEKIT_`` prefix)
   - fonts.py: embedded font bytes shared read-only across requests
   - errors.py: ``ParseError`` / ``GenerateError`` hierarchy
   - generator.py: render + encode in one call

Usage Example
-------------
    from placekit.core import FontSource, config, generate, parse

    font_source = FontSource.from_path(config.font_path)
    image = generate(parse("/300x150.png"), font_source)
"""

from placekit.core.config import PlacekitConfig, config
from placekit.core.descriptor import ImageFormat, RequestDescriptor, parse
from placekit.core.errors import GenerateError, ParseError, PlacekitError
from placekit.core.fonts import FontSource
from placekit.core.generator import GeneratedImage, generate

__all__ = [
    "FontSource",
    "GenerateError",
    "GeneratedImage",
    "ImageFormat",
    "ParseError",
    "PlacekitConfig",
    "PlacekitError",
    "RequestDescriptor",
    "config",
    "generate",
    "parse",
]
