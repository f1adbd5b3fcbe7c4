"""Render execution use-case service."""

from __future__ import annotations

import logging
import sys

from api_doc_renderer.api_model import ApiModelError, load_api_project
from api_doc_renderer.configuration import (
    ConfigurationError,
    RenderSettings,
    default_settings,
    load_configuration,
)
from api_doc_renderer.document_assembly import (
    build_swagger_document,
    serialize_document,
    write_document,
)
from api_doc_renderer.schema_definitions import SchemaDefinitionEngine
from api_doc_renderer.type_model import MalformedTypeIdentifierError

from .render_contracts import RenderOutcome, RenderRequest

logger = logging.getLogger(__name__)


class RenderExecutionError(Exception):
    """Raised when a render use case cannot be completed."""


def execute_render(request: RenderRequest) -> RenderOutcome:
    """Load the API model, render one Swagger document and optionally write it."""
    try:
        project = load_api_project(request.model_path)
        settings = _load_settings(request.config_path)
        engine = SchemaDefinitionEngine(project.resources.type_graph)
        document = build_swagger_document(project, settings.swagger, engine)
    except (ApiModelError, ConfigurationError, MalformedTypeIdentifierError, OSError) as exc:
        raise RenderExecutionError(str(exc)) from exc
    except RecursionError as exc:
        raise RenderExecutionError(
            "Type graph nesting is too deep to render; "
            f"exceeded the interpreter recursion limit of {sys.getrecursionlimit()} frames."
        ) from exc

    content = serialize_document(document)
    output_path = None
    if request.output_path:
        try:
            output_path = write_document(document, request.output_path)
        except OSError as exc:
            raise RenderExecutionError(f"Could not write Swagger output: {exc}") from exc

    outcome = RenderOutcome(
        content=content,
        output_path=output_path,
        path_count=len(document["paths"]),
        definition_count=len(document["definitions"]),
    )
    logger.info(
        "Rendered %s %s: %d paths, %d definitions",
        project.name,
        project.version,
        outcome.path_count,
        outcome.definition_count,
    )
    return outcome


def _load_settings(config_path: str | None) -> RenderSettings:
    if config_path is None:
        return default_settings()
    return load_configuration(config_path)
