"""Placekit — FastAPI Application.

This module is the single entry point for the web application.  It defines
the FastAPI ``app`` instance, the placeholder and favicon routes, and the
``main()`` CLI function that launches the uvicorn server.

Architecture
------------
- **Configuration** comes from :data:`~placekit.core.config.config`
  (``PLACEKIT_*`` environment variables).
- **The embedded font** is read once during application startup and stored on
  ``app.state.font_source``.  Requests only ever derive new font faces from
  it.
- **Image generation** is synchronous and CPU-bound.  The placeholder route
  is a plain ``def`` so FastAPI runs each request on its worker thread pool.

Endpoints
---------
========  ============================  ====================================
Method    Path                          Purpose
========  ============================  ====================================
GET       ``/favicon.ico``              Application icon
GET       ``/[label/]WxH.ext``          Placeholder image (png/jpg/jpeg/gif)
========  ============================  ====================================

Any other path answers ``404``.  The interactive API docs are disabled
because every path belongs to the placeholder namespace.

Usage
-----
CLI (installed entry point)::

    placekit --port 8080

Direct invocation::

    python -m placekit.api.main
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, HTTPException, Request, Response

from placekit import __version__
from placekit.api.favicon import Favicon, build_favicon
from placekit.core.config import PlacekitConfig, config
from placekit.core.descriptor import parse
from placekit.core.errors import GenerateError, ParseError
from placekit.core.fonts import FontSource
from placekit.core.generator import generate

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

router = APIRouter()


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@router.get("/favicon.ico")
async def favicon(request: Request) -> Response:
    """Serve the application icon.

    Honours ``If-Modified-Since`` with a bodiless ``304``.
    """
    icon: Favicon = request.app.state.favicon
    headers = {"Last-Modified": icon.last_modified}

    if icon.is_fresh(request.headers.get("if-modified-since")):
        return Response(status_code=304, headers=headers)

    return Response(content=icon.content, media_type="image/x-icon", headers=headers)


@router.get("/{path:path}")
def placeholder(path: str, request: Request) -> Response:
    """Parse the request path and return the generated placeholder.

    Args:
        path: Decoded request path without its leading slash.
        request: Incoming request, used to reach application state.

    Returns:
        The encoded image with a matching ``Content-Type``.

    Raises:
        HTTPException: 404 when the path is not a placeholder request, 500
            when generation fails.
    """
    full_path = f"/{path}"
    settings: PlacekitConfig = request.app.state.config

    try:
        descriptor = parse(full_path, max_dimension=settings.max_dimension)
    except ParseError as e:
        logger.warning(f"404 - {full_path} - {e}")
        raise HTTPException(status_code=404, detail=str(e)) from e

    try:
        image = generate(descriptor, request.app.state.font_source)
    except GenerateError as e:
        logger.error(f"500 - {full_path} - {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e

    logger.info(f"200 - {full_path} (size {len(image.content)})")
    return Response(content=image.content, media_type=image.media_type)


# ---------------------------------------------------------------------------
# Application factory.
# ---------------------------------------------------------------------------


def create_app(settings: PlacekitConfig | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Configuration to use.  Defaults to the global ``config``.

    Returns:
        A configured application.  The font and favicon are loaded when the
        application starts, not here.
    """
    if settings is None:
        settings = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Load the embedded font and build the favicon on startup."""
        font_source = FontSource.from_path(settings.font_path)
        app.state.font_source = font_source
        app.state.favicon = build_favicon(font_source)
        logger.info(f"Placekit {__version__} ready (font {font_source.name}).")

        yield

        logger.info("Placekit shutting down.")

    app = FastAPI(
        title="Placekit",
        description="On-demand placeholder images.",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config = settings
    app.include_router(router)
    return app


app = create_app()


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line options.

    Host and port default to the values from :data:`config`.
    """
    parser = argparse.ArgumentParser(prog="placekit", description="Placeholder image server.")
    parser.add_argument("--host", default=config.server_host, help="bind address")
    parser.add_argument("--port", type=int, default=config.server_port, help="HTTP port")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    """Launch the uvicorn ASGI server.

    This function is registered as the ``placekit`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    args = parse_args(argv)

    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)

    uvicorn.run(
        "placekit.api.main:app",
        host=args.host,
        port=args.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
