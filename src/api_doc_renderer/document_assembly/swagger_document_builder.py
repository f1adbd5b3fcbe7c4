"""Swagger 2.0 document assembly service."""

from __future__ import annotations

from collections.abc import Iterable
from http import HTTPStatus
from typing import Any

from api_doc_renderer.api_model import (
    ApiProject,
    ApiResponse,
    MethodParameter,
    ParameterKind,
    ResourceMethod,
)
from api_doc_renderer.configuration import SwaggerSettings
from api_doc_renderer.schema_definitions import SchemaDefinitionEngine

SWAGGER_VERSION = "2.0"
EXTENSION_KEY = "x-restlet"

_SWAGGER_PARAMETER_LOCATIONS = {
    ParameterKind.PATH: "path",
    ParameterKind.HEADER: "header",
    ParameterKind.QUERY: "query",
    ParameterKind.FORM: "formData",
}

Document = dict[str, Any]


def build_swagger_document(
    project: ApiProject,
    settings: SwaggerSettings,
    engine: SchemaDefinitionEngine | None = None,
) -> Document:
    """Render the project as a Swagger 2.0 document.

    A fresh schema engine is created when none is given; an engine must not be reused across
    documents since its definitions table accumulates for the whole pass.
    """
    assembler = _SwaggerAssembler(
        project,
        settings,
        engine or SchemaDefinitionEngine(project.resources.type_graph),
    )
    return assembler.assemble()


def extract_tag(path: str, offset: int) -> str | None:
    """Path segment at ``offset`` unless it is a path template."""
    parts = path.split("/")
    if len(parts) > offset and parts[offset] and "{" not in parts[offset]:
        return parts[offset]
    return None


def section_name(path: str) -> str:
    """Restlet section label derived from the first path segment."""
    first_segment = path.split("/", 1)[0]
    return (first_segment[:1].upper() + first_segment[1:]).replace("type", " Type", 1)


class _SwaggerAssembler:
    def __init__(
        self, project: ApiProject, settings: SwaggerSettings, engine: SchemaDefinitionEngine
    ) -> None:
        self._project = project
        self._settings = settings
        self._engine = engine
        self._sections: set[str] = set()

    def assemble(self) -> Document:
        document = self._header()
        document["paths"] = self._paths()
        document["definitions"] = self._engine.get_definitions()
        if self._sections:
            document[EXTENSION_KEY] = {"sections": sorted(self._sections)}
        return document

    def _header(self) -> Document:
        resources = self._project.resources
        domain = self._settings.domain
        base_prefix = "/" if domain.strip() else f"/{self._project.name}/"
        document: Document = {
            "swagger": SWAGGER_VERSION,
            "info": {"version": self._project.version, "title": self._project.name},
            "host": domain,
            "basePath": base_prefix + resources.base_path,
            "schemes": sorted(scheme.value for scheme in self._settings.schemes),
        }
        if self._settings.render_tags:
            tags = {
                tag
                for tag in (
                    extract_tag(path, self._settings.tags_path_offset)
                    for path in resources.methods_by_path
                )
                if tag is not None
            }
            document["tags"] = [{"name": tag} for tag in sorted(tags)]
        return document

    def _paths(self) -> Document:
        paths: Document = {}
        for path in sorted(self._project.resources.methods_by_path):
            methods = sorted(
                self._project.resources.methods_by_path[path], key=lambda m: m.method.order
            )
            endpoint: Document = {
                method.method.value.lower(): self._operation(method, path) for method in methods
            }
            section = section_name(path)
            endpoint[EXTENSION_KEY] = {"section": section}
            self._sections.add(section)
            paths[f"/{path}"] = endpoint
        return paths

    def _operation(self, method: ResourceMethod, path: str) -> Document:
        operation: Document = {}
        if method.description is not None:
            operation["description"] = method.description
        operation["consumes"] = sorted(method.request_media_types)
        operation["produces"] = sorted(method.response_media_types)
        operation["parameters"] = self._parameters(method)
        operation["responses"] = self._responses(method)
        if method.deprecated:
            operation["deprecated"] = True
        if self._settings.render_tags:
            tag = extract_tag(path, self._settings.tags_path_offset)
            if tag is not None:
                operation["tags"] = [tag]
        return operation

    def _parameters(self, method: ResourceMethod) -> list[Document]:
        parameters: list[Document] = []
        for kind, location in _SWAGGER_PARAMETER_LOCATIONS.items():
            parameters.extend(
                self._parameter(parameter, location)
                for parameter in _sorted_parameters(method.parameters, kind)
            )

        if method.request_body is not None:
            body: Document = {
                "name": "body",
                "in": "body",
                "required": True,
                "schema": self._engine.build(method.request_body),
            }
            if _is_not_blank(method.request_body_description):
                body["description"] = method.request_body_description
            parameters.append(body)
        return parameters

    def _parameter(self, parameter: MethodParameter, location: str) -> Document:
        rendered = self._engine.build(parameter.type)
        rendered["name"] = parameter.name
        rendered["in"] = location
        rendered["required"] = parameter.default_value is None
        if _is_not_blank(parameter.description):
            rendered["description"] = parameter.description
        if _is_not_blank(parameter.default_value):
            rendered["default"] = parameter.default_value
        return rendered

    def _responses(self, method: ResourceMethod) -> Document:
        return {
            str(status): self._response(status, method.responses[status])
            for status in sorted(method.responses)
        }

    def _response(self, status: int, response: ApiResponse) -> Document:
        rendered: Document = {
            "description": _reason_phrase(status),
            "headers": {header: {"type": "string"} for header in sorted(response.headers)},
        }
        if response.body is not None:
            schema = self._engine.build(response.body)
            if schema:
                rendered["schema"] = schema
        return rendered


def _sorted_parameters(
    parameters: Iterable[MethodParameter], kind: ParameterKind
) -> list[MethodParameter]:
    return sorted(
        (parameter for parameter in parameters if parameter.kind is kind),
        key=lambda parameter: (parameter.name, parameter.type.raw_name),
    )


def _reason_phrase(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""


def _is_not_blank(value: str | None) -> bool:
    return value is not None and bool(value.strip())
