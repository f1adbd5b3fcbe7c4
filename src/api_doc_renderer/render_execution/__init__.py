"""Render execution domain exports."""

from .render_contracts import RenderOutcome, RenderRequest
from .render_use_case import RenderExecutionError, execute_render

__all__ = [
    "RenderRequest",
    "RenderOutcome",
    "RenderExecutionError",
    "execute_render",
]
