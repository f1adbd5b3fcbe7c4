"""Schema definition exports."""

from .definition_table import (
    DEFINITIONS_POINTER_PREFIX,
    DYNAMIC_DEFINITION_NAME,
    DefinitionTable,
    SchemaFragment,
    reference_to,
)
from .primitive_classifier import SchemaKind, classify_type_name
from .schema_builder import SchemaDefinitionEngine

__all__ = [
    "DEFINITIONS_POINTER_PREFIX",
    "DYNAMIC_DEFINITION_NAME",
    "DefinitionTable",
    "SchemaDefinitionEngine",
    "SchemaFragment",
    "SchemaKind",
    "classify_type_name",
    "reference_to",
]
