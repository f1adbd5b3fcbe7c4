"""Type graph entities produced by the API analysis stage."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

DYNAMIC_TYPE_PREFIX = "$"
_PATH_SEPARATOR = "/"
_TYPE_SUFFIX = ";"


class MalformedTypeIdentifierError(Exception):
    """Raised when a raw type name cannot be reduced to a short display name."""


@dataclass(frozen=True)
class TypeIdentifier:
    """Opaque key naming a type in the analyzed API's structural model.

    Raw names use the JVM descriptor form emitted by the analyzer, e.g.
    ``Lcom/example/Order;``. Dynamic (JSON-P style) types start with ``$``.
    """

    raw_name: str

    @property
    def is_dynamic(self) -> bool:
        return self.raw_name.startswith(DYNAMIC_TYPE_PREFIX)

    @property
    def short_name(self) -> str:
        """Terminal path segment of the raw name without the type suffix."""
        terminal = self.raw_name.rsplit(_PATH_SEPARATOR, 1)[-1]
        if terminal.endswith(_TYPE_SUFFIX):
            terminal = terminal[: -len(_TYPE_SUFFIX)]
        if not terminal:
            raise MalformedTypeIdentifierError(
                f"Cannot derive a short name from type identifier: {self.raw_name!r}"
            )
        return terminal


@dataclass(frozen=True)
class ConcreteType:
    """Object shape: ordered property names mapped to nested type identifiers."""

    identifier: TypeIdentifier
    properties: Mapping[str, TypeIdentifier] = field(default_factory=dict)


@dataclass(frozen=True)
class CollectionType:
    """Array of a single element type."""

    identifier: TypeIdentifier
    element: TypeIdentifier


@dataclass(frozen=True)
class EnumType:
    """String enumeration with a possibly empty set of literal values."""

    identifier: TypeIdentifier
    values: frozenset[str] = frozenset()


TypeRepresentation = ConcreteType | CollectionType | EnumType
TypeGraph = Mapping[TypeIdentifier, TypeRepresentation]
