"""
Configuration Management.

Loads settings from the YAML files shipped in reqline/config/settings/.
No hardcoded values in code and no environment variables: all configuration
comes from these files.

Settings (YAML):
    application.yaml - App identity (name, version, description)
    http.yaml        - Outgoing request settings (User-Agent)
    rendering.yaml   - Response body formatting
    logging.yaml     - Logging configuration
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from reqline.core.config_schema import (
    ApplicationSchema,
    HttpSchema,
    LoggingSchema,
    RenderingSchema,
)

SETTINGS_DIR = Path(__file__).resolve().parent.parent / "config" / "settings"


def load_yaml_config(filename: str, settings_dir: Path | None = None) -> dict[str, Any]:
    """Load a YAML configuration file from the settings directory."""
    config_path = (settings_dir or SETTINGS_DIR) / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _load_validated(schema_cls: type, filename: str, settings_dir: Path | None = None) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename, settings_dir)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self, settings_dir: Path | None = None) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml", settings_dir)
        self._http = _load_validated(HttpSchema, "http.yaml", settings_dir)
        self._rendering = _load_validated(RenderingSchema, "rendering.yaml", settings_dir)
        self._logging = _load_validated(LoggingSchema, "logging.yaml", settings_dir)

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def http(self) -> HttpSchema:
        """Outgoing request settings."""
        return self._http

    @property
    def rendering(self) -> RenderingSchema:
        """Response rendering settings."""
        return self._rendering

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()
