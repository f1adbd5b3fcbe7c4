"""Rendered document serialization."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any


def serialize_document(document: Mapping[str, Any]) -> bytes:
    """Pretty-printed UTF-8 JSON, preserving key order."""
    text = json.dumps(document, indent=2, ensure_ascii=False)
    return f"{text}\n".encode("utf-8")


def write_document(document: Mapping[str, Any], output_path: Path | str) -> Path:
    """Write the serialized document, creating parent directories as needed.

    Raises:
      OSError: If the destination cannot be written.
    """
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_bytes(serialize_document(document))
    return destination.resolve()
