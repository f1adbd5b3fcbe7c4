"""Discovered web-API model entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from api_doc_renderer.type_model import TypeGraph, TypeIdentifier


class HttpMethod(str, Enum):
    """HTTP methods in rendering order."""

    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    PATCH = "PATCH"

    @property
    def order(self) -> int:
        return list(HttpMethod).index(self)


class ParameterKind(str, Enum):
    """Where a method parameter is bound from."""

    PATH = "path"
    HEADER = "header"
    QUERY = "query"
    FORM = "form"
    MATRIX = "matrix"
    COOKIE = "cookie"
    BEAN = "bean"


@dataclass(frozen=True)
class MethodParameter:
    """One bound parameter of a resource method."""

    name: str
    kind: ParameterKind
    type: TypeIdentifier
    default_value: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class ApiResponse:
    """Response headers and optional body type for one status code."""

    headers: tuple[str, ...] = ()
    body: TypeIdentifier | None = None


@dataclass(frozen=True)
class ResourceMethod:  # pylint: disable=too-many-instance-attributes
    """One HTTP method exposed on a resource path."""

    method: HttpMethod
    description: str | None = None
    deprecated: bool = False
    request_media_types: tuple[str, ...] = ()
    response_media_types: tuple[str, ...] = ()
    parameters: tuple[MethodParameter, ...] = ()
    request_body: TypeIdentifier | None = None
    request_body_description: str | None = None
    responses: Mapping[int, ApiResponse] = field(default_factory=dict)


@dataclass(frozen=True)
class ApiResources:
    """Resource paths, their methods and the type graph they reference."""

    base_path: str
    methods_by_path: Mapping[str, tuple[ResourceMethod, ...]]
    type_graph: TypeGraph


@dataclass(frozen=True)
class ApiProject:
    """Top-level API model aggregate."""

    name: str
    version: str
    resources: ApiResources
