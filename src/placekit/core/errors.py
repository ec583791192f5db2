"""Exception hierarchy for the placeholder generation pipeline.

Errors fall into two families that the HTTP layer maps to different status
codes:

- :class:`ParseError` — the client asked for a path that is not a valid
  placeholder request.  Mapped to ``404``.
- :class:`GenerateError` — rendering or encoding failed for a request that
  parsed correctly.  This points at a server-side defect (for example a
  corrupted font asset) and is mapped to ``500``.

Underlying library exceptions are always chained with ``raise ... from``.
"""


class PlacekitError(Exception):
    """Base class for all placekit errors."""

    pass


class ParseError(PlacekitError):
    """The request path could not be decoded into a descriptor."""

    pass


class MalformedRequest(ParseError):
    """The path does not match ``[/<label>]/<width>x<height>.<ext>``."""

    pass


class InvalidDimension(ParseError):
    """Width or height is zero, or larger than the configured maximum."""

    pass


class GenerateError(PlacekitError):
    """An image could not be produced for a valid descriptor."""

    pass


class FontLoadFailure(GenerateError):
    """The embedded font bytes could not be read or parsed."""

    pass


class RenderError(GenerateError):
    """Font fitting or drawing failed."""

    pass


class EncodeError(GenerateError):
    """The canvas could not be serialised to the requested format."""

    pass
