"""Document assembly exports."""

from .document_writer import serialize_document, write_document
from .swagger_document_builder import (
    SWAGGER_VERSION,
    build_swagger_document,
    extract_tag,
    section_name,
)

__all__ = [
    "SWAGGER_VERSION",
    "build_swagger_document",
    "extract_tag",
    "section_name",
    "serialize_document",
    "write_document",
]
