"""API model file loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from api_doc_renderer.type_model import (
    CollectionType,
    ConcreteType,
    EnumType,
    TypeIdentifier,
    TypeRepresentation,
)

from .api_models import (
    ApiProject,
    ApiResources,
    ApiResponse,
    HttpMethod,
    MethodParameter,
    ParameterKind,
    ResourceMethod,
)


class ApiModelError(Exception):
    """Raised when the API model file is invalid."""


def load_api_project(model_path: Path | str) -> ApiProject:
    """Load and validate an API model file (YAML or JSON)."""
    path = Path(model_path)
    if not path.exists():
        raise ApiModelError(f"API model file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ApiModelError(f"Failed to parse API model file: {exc}") from exc

    return parse_api_project(parsed)


def parse_api_project(parsed: Any) -> ApiProject:
    """Validate an already-decoded API model document."""
    if not isinstance(parsed, Mapping):
        raise ApiModelError("API model root must be a mapping.")

    name = _require_non_empty_string(parsed.get("name"), "name")
    version = _require_non_empty_string(parsed.get("version"), "version")
    base_path = _optional_string(parsed.get("base_path"), "base_path") or ""
    type_graph = _parse_types_section(parsed.get("types"))
    methods_by_path = _parse_resources_section(parsed.get("resources"))

    return ApiProject(
        name=name,
        version=version,
        resources=ApiResources(
            base_path=base_path,
            methods_by_path=methods_by_path,
            type_graph=type_graph,
        ),
    )


def _parse_types_section(value: Any) -> dict[TypeIdentifier, TypeRepresentation]:
    if value is None:
        return {}
    section = _require_mapping(value, "types")
    type_graph: dict[TypeIdentifier, TypeRepresentation] = {}
    for raw_name, definition in section.items():
        identifier = _require_identifier(raw_name, "types key")
        type_graph[identifier] = _parse_type_representation(identifier, definition)
    return type_graph


def _parse_type_representation(identifier: TypeIdentifier, value: Any) -> TypeRepresentation:
    label = f"types.{identifier.raw_name}"
    section = _require_mapping(value, label)
    kind = _require_non_empty_string(section.get("kind"), f"{label}.kind").lower()
    if kind == "concrete":
        properties = section.get("properties") or {}
        if not isinstance(properties, Mapping):
            raise ApiModelError(f"{label}.properties must be a mapping.")
        return ConcreteType(
            identifier=identifier,
            properties={
                _require_non_empty_string(property_name, f"{label}.properties key"): (
                    _require_identifier(property_type, f"{label}.properties.{property_name}")
                )
                for property_name, property_type in properties.items()
            },
        )
    if kind == "collection":
        return CollectionType(
            identifier=identifier,
            element=_require_identifier(section.get("element"), f"{label}.element"),
        )
    if kind == "enum":
        values = _normalize_string_sequence(section.get("values"), f"{label}.values")
        return EnumType(identifier=identifier, values=frozenset(values))
    raise ApiModelError(f"{label}.kind must be one of concrete, collection or enum.")


def _parse_resources_section(value: Any) -> dict[str, tuple[ResourceMethod, ...]]:
    section = _require_mapping(value, "resources")
    methods_by_path: dict[str, tuple[ResourceMethod, ...]] = {}
    for raw_path, methods in section.items():
        path = _require_non_empty_string(raw_path, "resources key")
        label = f"resources.{path}"
        if not isinstance(methods, Sequence) or isinstance(methods, str):
            raise ApiModelError(f"{label} must be a list of methods.")
        methods_by_path[path] = tuple(
            _parse_resource_method(method, f"{label}[{index}]")
            for index, method in enumerate(methods)
        )
    return methods_by_path


def _parse_resource_method(value: Any, label: str) -> ResourceMethod:
    section = _require_mapping(value, label)
    method_name = _require_non_empty_string(section.get("method"), f"{label}.method").upper()
    try:
        method = HttpMethod(method_name)
    except ValueError as exc:
        raise ApiModelError(f"{label}.method '{method_name}' is not a supported method.") from exc

    parameters = section.get("parameters") or []
    if not isinstance(parameters, Sequence) or isinstance(parameters, str):
        raise ApiModelError(f"{label}.parameters must be a list.")

    request_body = section.get("request_body")
    return ResourceMethod(
        method=method,
        description=_optional_string(section.get("description"), f"{label}.description"),
        deprecated=_require_bool(section.get("deprecated", False), f"{label}.deprecated"),
        request_media_types=_normalize_string_sequence(
            section.get("request_media_types"), f"{label}.request_media_types"
        ),
        response_media_types=_normalize_string_sequence(
            section.get("response_media_types"), f"{label}.response_media_types"
        ),
        parameters=tuple(
            _parse_parameter(parameter, f"{label}.parameters[{index}]")
            for index, parameter in enumerate(parameters)
        ),
        request_body=(
            None
            if request_body is None
            else _require_identifier(request_body, f"{label}.request_body")
        ),
        request_body_description=_optional_string(
            section.get("request_body_description"), f"{label}.request_body_description"
        ),
        responses=_parse_responses(section.get("responses"), f"{label}.responses"),
    )


def _parse_parameter(value: Any, label: str) -> MethodParameter:
    section = _require_mapping(value, label)
    kind_name = _require_non_empty_string(section.get("kind"), f"{label}.kind").lower()
    try:
        kind = ParameterKind(kind_name)
    except ValueError as exc:
        raise ApiModelError(f"{label}.kind '{kind_name}' is not a supported kind.") from exc
    default_value = section.get("default")
    if default_value is not None and not isinstance(default_value, str):
        default_value = str(default_value)
    return MethodParameter(
        name=_require_non_empty_string(section.get("name"), f"{label}.name"),
        kind=kind,
        type=_require_identifier(section.get("type"), f"{label}.type"),
        default_value=default_value,
        description=_optional_string(section.get("description"), f"{label}.description"),
    )


def _parse_responses(value: Any, label: str) -> dict[int, ApiResponse]:
    if value is None:
        return {}
    section = _require_mapping(value, label)
    responses: dict[int, ApiResponse] = {}
    for raw_status, response in section.items():
        status = _require_status_code(raw_status, f"{label} key")
        response_label = f"{label}.{status}"
        response_section = _require_mapping(response or {}, response_label)
        body = response_section.get("body")
        responses[status] = ApiResponse(
            headers=_normalize_string_sequence(
                response_section.get("headers"), f"{response_label}.headers"
            ),
            body=None if body is None else _require_identifier(body, f"{response_label}.body"),
        )
    return responses


def _require_status_code(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ApiModelError(f"{field_name} must be an HTTP status code.")
    try:
        status = int(value)
    except (TypeError, ValueError) as exc:
        raise ApiModelError(f"{field_name} must be an HTTP status code.") from exc
    if not 100 <= status <= 599:
        raise ApiModelError(f"{field_name} {status} is outside the HTTP status range.")
    return status


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ApiModelError(f"{field_name} must be a boolean.")
    return value


def _require_identifier(value: Any, field_name: str) -> TypeIdentifier:
    return TypeIdentifier(_require_non_empty_string(value, field_name))


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ApiModelError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ApiModelError(f"{field_name} must be a string or list of strings.")


def _require_mapping(value: Any, section_name: str) -> Mapping[Any, Any]:
    if not isinstance(value, Mapping):
        raise ApiModelError(f"API model section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ApiModelError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ApiModelError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ApiModelError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
