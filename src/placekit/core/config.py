"""Configuration management for Placekit.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the PLACEKIT_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (PLACEKIT_* prefix)
2. .env file in the project root
3. Default values defined in PlacekitConfig

Example .env file:
    PLACEKIT_SERVER_PORT=8080
    PLACEKIT_MAX_DIMENSION=4096
    PLACEKIT_LOG_LEVEL=DEBUG

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
This ensures a single source of truth for all configuration values across
the application.

Usage Example
-------------
    from placekit.core.config import config

    print(config.server_port)
    print(config.font_path)

What Is Not Configurable
------------------------
The look of a placeholder is fixed: mid-gray background, black text, a 72pt
reference size for fitting and JPEG quality 90.  Those live as constants in
the renderer, fitter and encoder modules.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_FONT_PATH = PACKAGE_DIR / "static" / "fonts" / "Lato-Regular.ttf"


class PlacekitConfig(BaseSettings):
    """Main configuration for the Placekit server.

    Attributes
    ----------
    Server Settings:
        server_host : str
            Bind address for the uvicorn server
        server_port : int
            TCP port for the uvicorn server (1-65535)

    Rendering Settings:
        font_path : Path
            TrueType font embedded into every placeholder
        max_dimension : int
            Largest accepted width or height in pixels

    Logging:
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
            Root log level applied by the CLI entry point

    Examples
    --------
        >>> custom_config = PlacekitConfig(server_port=9000, max_dimension=2048)
        >>> custom_config.server_port
        9000
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PLACEKIT_",
        case_sensitive=False,
        extra="ignore",
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for all interfaces)",
    )
    server_port: int = Field(
        default=8080,
        description="HTTP port",
        ge=1,
        le=65535,
    )

    # Rendering settings
    font_path: Path = Field(
        default=DEFAULT_FONT_PATH,
        description="TrueType font used for placeholder labels",
    )
    max_dimension: int = Field(
        default=10000,
        description="Maximum width or height accepted in a request path",
        ge=1,
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level for the server process",
    )


# Global configuration instance
# Loads values from environment variables (PLACEKIT_* prefix) and .env file.
config = PlacekitConfig()
