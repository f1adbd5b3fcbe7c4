"""Render execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RenderRequest:
    """Input contract for rendering one API model."""

    model_path: str
    config_path: str | None = None
    output_path: str | None = None


@dataclass(frozen=True)
class RenderOutcome:
    """Output contract for one completed render pass."""

    content: bytes
    output_path: Path | None
    path_count: int
    definition_count: int
