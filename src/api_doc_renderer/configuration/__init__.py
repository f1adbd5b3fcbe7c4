"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, default_settings, load_configuration
from .render_settings import RenderSettings, SwaggerScheme, SwaggerSettings

__all__ = [
    "RenderSettings",
    "SwaggerScheme",
    "SwaggerSettings",
    "ConfigurationError",
    "default_settings",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
