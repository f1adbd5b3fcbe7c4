"""Type graph exports."""

from .type_models import (
    DYNAMIC_TYPE_PREFIX,
    CollectionType,
    ConcreteType,
    EnumType,
    MalformedTypeIdentifierError,
    TypeGraph,
    TypeIdentifier,
    TypeRepresentation,
)

__all__ = [
    "DYNAMIC_TYPE_PREFIX",
    "CollectionType",
    "ConcreteType",
    "EnumType",
    "MalformedTypeIdentifierError",
    "TypeGraph",
    "TypeIdentifier",
    "TypeRepresentation",
]
