"""
Configuration loader for the user service.

Loads configuration from config.yaml and environment variables using pydantic-settings.
Supports server/docs sections; every default reproduces the service's fixed behaviour.
"""

from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SCALAR_CDN_URL = "https://cdn.jsdelivr.net/npm/@scalar/api-reference"

LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")


class ServerConfig(BaseModel):
    """HTTP server binding configuration."""

    host: str = Field(
        default="127.0.0.1",
        description="Interface address to bind",
    )
    port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="TCP port to bind",
    )
    log_level: str = Field(
        default="info",
        description="uvicorn log level",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.lower()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Unsupported log level '{v}'. Choose one of: {', '.join(LOG_LEVELS)}"
            )
        return level


class DocsConfig(BaseModel):
    """
    API reference configuration.

    Example config.yaml:
        docs:
          path: /api
          theme: laserwave
    """

    title: str = Field(
        default="API",
        description="Title of the API description and the reference page",
    )
    path: str = Field(
        default="/api",
        description="Path serving the HTML API reference",
    )
    openapi_path: str = Field(
        default="/api/openapi.json",
        description="Path serving the raw OpenAPI document",
    )
    theme: str = Field(
        default="laserwave",
        description="Scalar API reference theme",
    )
    cdn_url: str = Field(
        default=SCALAR_CDN_URL,
        description="Script URL of the Scalar API reference viewer",
    )

    @field_validator("path", "openapi_path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Paths are mounted on the app root and must be absolute."""
        if not v.startswith("/"):
            raise ValueError(f"Path must start with '/': {v!r}")
        return v


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables and config.yaml.

    Priority (highest to lowest):
    1. config.yaml file (passed as init arguments by from_yaml)
    2. Environment variables (from .env file or system)
    3. Default values

    Nested values use a double underscore, e.g. SERVER__PORT=9000. Debug mode
    is read from APP_DEBUG in the environment or `debug` in config.yaml.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = Field(
        default="User Service",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Debug mode",
        alias="APP_DEBUG",
    )

    @field_validator("debug", mode="before")
    @classmethod
    def parse_debug_bool(cls, v):
        """Handle empty string as False for boolean debug field."""
        if v == "" or v is None:
            return False
        if isinstance(v, str):
            return v.lower() in ("true", "1", "yes", "on")
        return v

    server: ServerConfig = Field(
        default_factory=ServerConfig,
        description="HTTP server configuration",
    )
    docs: DocsConfig = Field(
        default_factory=DocsConfig,
        description="API reference configuration",
    )

    @classmethod
    def from_yaml(cls, config_path: Path | str | None = None) -> "Settings":
        """
        Load settings from a YAML configuration file.

        Args:
            config_path: Path to config.yaml file. If None, looks for config.yaml
                        in the current directory and project root.

        Returns:
            Settings instance with values from YAML merged with env vars.
        """
        config_data: dict = {}

        if config_path is None:
            search_paths = [
                Path.cwd() / "config.yaml",
                Path(__file__).parent.parent.parent / "config.yaml",
            ]
            for path in search_paths:
                if path.exists():
                    config_path = path
                    break

        if config_path is not None:
            config_path = Path(config_path)
            if config_path.exists():
                with open(config_path, encoding="utf-8") as f:
                    config_data = yaml.safe_load(f) or {}

        return cls(**config_data)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings.

    Returns:
        Cached Settings instance.
    """
    return Settings.from_yaml()
