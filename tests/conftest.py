"""Shared pytest fixtures for Placekit tests."""

from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from placekit.api.main import create_app
from placekit.core.config import DEFAULT_FONT_PATH, PlacekitConfig
from placekit.core.fonts import FontSource


@pytest.fixture(scope="session")
def font_source() -> FontSource:
    """Load the bundled font once for the whole test session.

    Returns:
        FontSource over the bundled Lato Regular font
    """
    return FontSource.from_path(DEFAULT_FONT_PATH)


@pytest.fixture
def test_config(monkeypatch) -> PlacekitConfig:
    """Create a configuration isolated from the environment and .env files.

    Returns:
        PlacekitConfig with a small maximum dimension for limit tests
    """
    for name in ("SERVER_HOST", "SERVER_PORT", "FONT_PATH", "MAX_DIMENSION", "LOG_LEVEL"):
        monkeypatch.delenv(f"PLACEKIT_{name}", raising=False)

    return PlacekitConfig(_env_file=None, max_dimension=2000)


@pytest.fixture
def test_client(test_config: PlacekitConfig) -> Generator[TestClient, None, None]:
    """Create a TestClient with the application lifespan running.

    Yields:
        TestClient bound to a freshly built application
    """
    with TestClient(create_app(test_config)) as client:
        yield client


@pytest.fixture
def missing_font_path(tmp_path: Path) -> Path:
    """Path to a font file that does not exist."""
    return tmp_path / "missing.ttf"
