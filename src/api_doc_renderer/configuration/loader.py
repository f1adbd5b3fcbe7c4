"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .render_settings import RenderSettings, SwaggerScheme, SwaggerSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def default_settings() -> RenderSettings:
    """Settings used when no configuration file is given."""
    return RenderSettings(path=None, swagger=SwaggerSettings())


def load_configuration(config_path: Path | str) -> RenderSettings:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return RenderSettings(path=path, swagger=_parse_swagger_section(parsed.get("swagger")))


def _parse_swagger_section(value: Any) -> SwaggerSettings:
    if value is None:
        return SwaggerSettings()
    if not isinstance(value, Mapping):
        raise ConfigurationError("Configuration section 'swagger' must be a mapping.")
    defaults = SwaggerSettings()
    domain = _optional_string(value.get("domain"), "swagger.domain")
    render_tags = value.get("render_tags", defaults.render_tags)
    if not isinstance(render_tags, bool):
        raise ConfigurationError("swagger.render_tags must be a boolean.")
    return SwaggerSettings(
        domain=domain or defaults.domain,
        schemes=_parse_schemes(value.get("schemes"), defaults.schemes),
        render_tags=render_tags,
        tags_path_offset=_require_non_negative_int(
            value.get("tags_path_offset", defaults.tags_path_offset), "swagger.tags_path_offset"
        ),
    )


def _parse_schemes(
    value: Any, default: tuple[SwaggerScheme, ...]
) -> tuple[SwaggerScheme, ...]:
    if value is None:
        return default
    if isinstance(value, str):
        raw_schemes = [item.strip() for item in value.split(",") if item.strip()]
    elif isinstance(value, Sequence):
        raw_schemes = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError("swagger.schemes entries must be strings.")
            if item.strip():
                raw_schemes.append(item.strip())
    else:
        raise ConfigurationError("swagger.schemes must be a string or list of strings.")
    if not raw_schemes:
        raise ConfigurationError("swagger.schemes must contain at least one scheme.")

    schemes: list[SwaggerScheme] = []
    for raw_scheme in raw_schemes:
        try:
            scheme = SwaggerScheme(raw_scheme.lower())
        except ValueError as exc:
            raise ConfigurationError(f"Unknown swagger scheme {raw_scheme}") from exc
        if scheme not in schemes:
            schemes.append(scheme)
    return tuple(schemes)


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
