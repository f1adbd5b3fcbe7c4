"""Classification of raw type names into Swagger primitive kinds."""

from __future__ import annotations

from enum import Enum


class SchemaKind(str, Enum):
    """Swagger schema ``type`` values."""

    ARRAY = "array"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NULL = "null"
    NUMBER = "number"
    OBJECT = "object"
    STRING = "string"

    @property
    def is_primitive(self) -> bool:
        return self not in (SchemaKind.ARRAY, SchemaKind.OBJECT)


INTEGER_TYPE_NAMES = frozenset(
    {
        "B",
        "I",
        "J",
        "S",
        "Ljava/lang/Byte;",
        "Ljava/lang/Integer;",
        "Ljava/lang/Long;",
        "Ljava/lang/Short;",
        "Ljava/math/BigInteger;",
    }
)
NUMBER_TYPE_NAMES = frozenset(
    {
        "D",
        "F",
        "Ljava/lang/Double;",
        "Ljava/lang/Float;",
        "Ljava/math/BigDecimal;",
    }
)
BOOLEAN_TYPE_NAMES = frozenset({"Z", "Ljava/lang/Boolean;"})
STRING_TYPE_NAME = "Ljava/lang/String;"
NULL_TYPE_NAMES = frozenset({"V", "Ljava/lang/Void;"})


def classify_type_name(raw_name: str) -> SchemaKind:
    """Map a raw type name to its primitive kind, or OBJECT for structural types."""
    if raw_name in INTEGER_TYPE_NAMES:
        return SchemaKind.INTEGER
    if raw_name in NUMBER_TYPE_NAMES:
        return SchemaKind.NUMBER
    if raw_name in BOOLEAN_TYPE_NAMES:
        return SchemaKind.BOOLEAN
    if raw_name == STRING_TYPE_NAME:
        return SchemaKind.STRING
    if raw_name in NULL_TYPE_NAMES:
        return SchemaKind.NULL
    return SchemaKind.OBJECT
