"""Placekit — FastAPI HTTP layer.

Modules
-------
main
    FastAPI application, the placeholder and favicon routes, and the
    ``main()`` CLI entry point.
favicon
    Startup-rendered ICO favicon with ``Last-Modified`` handling.
"""
