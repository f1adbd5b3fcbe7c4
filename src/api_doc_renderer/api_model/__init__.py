"""API model exports."""

from .api_models import (
    ApiProject,
    ApiResources,
    ApiResponse,
    HttpMethod,
    MethodParameter,
    ParameterKind,
    ResourceMethod,
)
from .model_loader import ApiModelError, load_api_project, parse_api_project

__all__ = [
    "ApiProject",
    "ApiResources",
    "ApiResponse",
    "HttpMethod",
    "MethodParameter",
    "ParameterKind",
    "ResourceMethod",
    "ApiModelError",
    "load_api_project",
    "parse_api_project",
]
