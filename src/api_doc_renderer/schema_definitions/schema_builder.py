"""Schema definition engine turning a type graph into Swagger schema fragments."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from api_doc_renderer.type_model import (
    CollectionType,
    ConcreteType,
    EnumType,
    TypeGraph,
    TypeIdentifier,
)

from .definition_table import DefinitionTable, SchemaFragment, reference_to
from .primitive_classifier import SchemaKind, classify_type_name

logger = logging.getLogger(__name__)


class SchemaDefinitionEngine:
    """Builds schema fragments and a shared definitions table for one render pass.

    The engine mutates its table while traversing the graph, so each render pass must use
    its own instance.
    """

    def __init__(self, type_graph: TypeGraph) -> None:
        self._type_graph = type_graph
        self._definitions = DefinitionTable()

    def build(self, identifier: TypeIdentifier) -> SchemaFragment:
        """Return an inline or ``$ref`` fragment describing the identified type."""
        kind = classify_type_name(identifier.raw_name)
        if kind.is_primitive:
            return {"type": kind.value}

        representation = self._type_graph.get(identifier)
        if representation is None:
            return {"type": SchemaKind.OBJECT.value}
        if isinstance(representation, ConcreteType):
            return self._register_object(representation.identifier, representation.properties)
        if isinstance(representation, CollectionType):
            return {"type": SchemaKind.ARRAY.value, "items": self.build(representation.element)}
        if isinstance(representation, EnumType):
            return _enum_fragment(representation)
        raise TypeError(f"Unsupported type representation: {type(representation).__name__}")

    def get_definitions(self) -> dict[str, SchemaFragment]:
        return self._definitions.snapshot()

    def _register_object(
        self, identifier: TypeIdentifier, properties: Mapping[str, TypeIdentifier]
    ) -> SchemaFragment:
        name = self._definitions.resolve_name(identifier)
        if name in self._definitions:
            return reference_to(name)

        # The placeholder must exist before recursing, or self-references never terminate.
        self._definitions.reserve(name, identifier.raw_name)
        logger.debug("Registering definition %s for %s", name, identifier.raw_name)
        built_properties: SchemaFragment = {}
        for property_name in sorted(properties):
            built_properties[property_name] = self.build(properties[property_name])
        self._definitions.finalize(name, {"properties": built_properties})
        return reference_to(name)


def _enum_fragment(representation: EnumType) -> SchemaFragment:
    fragment: SchemaFragment = {"type": SchemaKind.STRING.value}
    if representation.values:
        fragment["enum"] = sorted(representation.values)
    return fragment
