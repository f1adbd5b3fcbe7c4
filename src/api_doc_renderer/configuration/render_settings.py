"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class SwaggerScheme(str, Enum):
    """Transfer protocols advertised in the rendered document."""

    HTTP = "http"
    HTTPS = "https"
    WS = "ws"
    WSS = "wss"


@dataclass(frozen=True)
class SwaggerSettings:
    """Swagger rendering options."""

    domain: str = ""
    schemes: tuple[SwaggerScheme, ...] = (SwaggerScheme.HTTP,)
    render_tags: bool = False
    tags_path_offset: int = 0


@dataclass(frozen=True)
class RenderSettings:
    """Top-level configuration aggregate."""

    path: Path | None
    swagger: SwaggerSettings
