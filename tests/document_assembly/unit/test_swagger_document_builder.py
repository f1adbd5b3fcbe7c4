"""Swagger document assembly tests."""

from __future__ import annotations

import pytest
from api_doc_renderer.api_model import (
    ApiProject,
    ApiResources,
    ApiResponse,
    HttpMethod,
    MethodParameter,
    ParameterKind,
    ResourceMethod,
)
from api_doc_renderer.configuration import SwaggerScheme, SwaggerSettings
from api_doc_renderer.document_assembly import build_swagger_document, extract_tag, section_name
from api_doc_renderer.type_model import ConcreteType, TypeIdentifier

STRING = TypeIdentifier("Ljava/lang/String;")
LONG = TypeIdentifier("J")
ITEM = TypeIdentifier("Lcom/example/Item;")
TYPE_GRAPH = {ITEM: ConcreteType(identifier=ITEM, properties={"name": STRING, "id": LONG})}


def _project(methods_by_path: dict[str, tuple[ResourceMethod, ...]]) -> ApiProject:
    return ApiProject(
        name="catalog",
        version="2.0.1",
        resources=ApiResources(
            base_path="rest", methods_by_path=methods_by_path, type_graph=TYPE_GRAPH
        ),
    )


def test_header_without_domain_prefixes_project_name() -> None:
    document = build_swagger_document(_project({}), SwaggerSettings())

    assert list(document)[:5] == ["swagger", "info", "host", "basePath", "schemes"]
    assert document["swagger"] == "2.0"
    assert document["info"] == {"version": "2.0.1", "title": "catalog"}
    assert document["host"] == ""
    assert document["basePath"] == "/catalog/rest"
    assert document["schemes"] == ["http"]
    assert document["paths"] == {}
    assert document["definitions"] == {}
    assert "tags" not in document
    assert "x-restlet" not in document


def test_header_with_domain_and_sorted_schemes() -> None:
    settings = SwaggerSettings(
        domain="api.example.com", schemes=(SwaggerScheme.WSS, SwaggerScheme.HTTPS)
    )

    document = build_swagger_document(_project({}), settings)

    assert document["host"] == "api.example.com"
    assert document["basePath"] == "/rest"
    assert document["schemes"] == ["https", "wss"]


def test_paths_are_sorted_and_methods_follow_http_method_order() -> None:
    project = _project(
        {
            "items/{id}": (
                ResourceMethod(method=HttpMethod.DELETE),
                ResourceMethod(method=HttpMethod.GET),
            ),
            "items": (ResourceMethod(method=HttpMethod.POST), ResourceMethod(method=HttpMethod.GET)),
        }
    )

    document = build_swagger_document(project, SwaggerSettings())

    assert list(document["paths"]) == ["/items", "/items/{id}"]
    assert list(document["paths"]["/items"]) == ["get", "post", "x-restlet"]
    assert list(document["paths"]["/items/{id}"]) == ["get", "delete", "x-restlet"]
    assert document["paths"]["/items"]["x-restlet"] == {"section": "Items"}
    assert document["x-restlet"] == {"sections": ["Items"]}


def test_operation_renders_parameters_in_location_order() -> None:
    method = ResourceMethod(
        method=HttpMethod.PUT,
        description="Replaces an item.",
        deprecated=True,
        request_media_types=("application/xml", "application/json"),
        response_media_types=("application/json",),
        parameters=(
            MethodParameter(name="verbose", kind=ParameterKind.QUERY, type=TypeIdentifier("Z")),
            MethodParameter(name="page", kind=ParameterKind.QUERY, type=LONG, default_value="1"),
            MethodParameter(name="form", kind=ParameterKind.FORM, type=STRING, description=" "),
            MethodParameter(name="session", kind=ParameterKind.COOKIE, type=STRING),
            MethodParameter(
                name="X-Trace", kind=ParameterKind.HEADER, type=STRING, description="Trace id."
            ),
            MethodParameter(name="id", kind=ParameterKind.PATH, type=LONG),
        ),
        request_body=ITEM,
        request_body_description="New state.",
    )

    operation = build_swagger_document(_project({"items/{id}": (method,)}), SwaggerSettings())[
        "paths"
    ]["/items/{id}"]["put"]

    assert operation["description"] == "Replaces an item."
    assert operation["consumes"] == ["application/json", "application/xml"]
    assert operation["produces"] == ["application/json"]
    assert operation["deprecated"] is True
    assert operation["parameters"] == [
        {"type": "integer", "name": "id", "in": "path", "required": True},
        {
            "type": "string",
            "name": "X-Trace",
            "in": "header",
            "required": True,
            "description": "Trace id.",
        },
        {"type": "integer", "name": "page", "in": "query", "required": False, "default": "1"},
        {"type": "boolean", "name": "verbose", "in": "query", "required": True},
        {"type": "string", "name": "form", "in": "formData", "required": True},
        {
            "name": "body",
            "in": "body",
            "required": True,
            "schema": {"$ref": "#/definitions/Item"},
            "description": "New state.",
        },
    ]


def test_responses_are_sorted_with_reason_phrases_and_schemas() -> None:
    method = ResourceMethod(
        method=HttpMethod.GET,
        responses={
            404: ApiResponse(),
            200: ApiResponse(headers=("X-Total", "ETag"), body=ITEM),
            299: ApiResponse(),
        },
    )

    document = build_swagger_document(_project({"items": (method,)}), SwaggerSettings())
    responses = document["paths"]["/items"]["get"]["responses"]

    assert list(responses) == ["200", "299", "404"]
    assert responses["200"] == {
        "description": "OK",
        "headers": {"ETag": {"type": "string"}, "X-Total": {"type": "string"}},
        "schema": {"$ref": "#/definitions/Item"},
    }
    assert responses["404"] == {"description": "Not Found", "headers": {}}
    assert responses["299"]["description"] == ""
    assert document["definitions"] == {
        "Item": {"properties": {"id": {"type": "integer"}, "name": {"type": "string"}}}
    }


def test_tags_are_rendered_when_enabled() -> None:
    project = _project(
        {
            "items/{id}": (ResourceMethod(method=HttpMethod.GET),),
            "items": (ResourceMethod(method=HttpMethod.GET),),
            "{tenant}/users": (ResourceMethod(method=HttpMethod.GET),),
        }
    )

    document = build_swagger_document(project, SwaggerSettings(render_tags=True))

    assert document["tags"] == [{"name": "items"}]
    assert document["paths"]["/items/{id}"]["get"]["tags"] == ["items"]
    assert "tags" not in document["paths"]["/{tenant}/users"]["get"]


@pytest.mark.parametrize(
    ("path", "offset", "expected"),
    [
        ("items/{id}", 0, "items"),
        ("items/{id}", 1, None),
        ("v1/items", 1, "items"),
        ("items", 3, None),
    ],
)
def test_extract_tag(path: str, offset: int, expected: str | None) -> None:
    assert extract_tag(path, offset) == expected


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("orders/{id}", "Orders"),
        ("ordertypes", "Order Types"),
        ("typed", "Typed"),
        ("items", "Items"),
    ],
)
def test_section_name(path: str, expected: str) -> None:
    assert section_name(path) == expected
