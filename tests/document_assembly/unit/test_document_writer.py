"""Document writer tests."""

from __future__ import annotations

import json
from pathlib import Path

from api_doc_renderer.document_assembly import serialize_document, write_document


def test_serialize_document_preserves_key_order_and_unicode() -> None:
    document = {"swagger": "2.0", "info": {"title": "Bücher", "version": "1"}, "a": 1}

    content = serialize_document(document)

    assert content.endswith(b"\n")
    text = content.decode("utf-8")
    assert "Bücher" in text
    assert list(json.loads(text)) == ["swagger", "info", "a"]
    assert text.startswith('{\n  "swagger": "2.0",')


def test_write_document_creates_parent_directories(tmp_path: Path) -> None:
    output_path = tmp_path / "nested" / "swagger.json"

    written_path = write_document({"swagger": "2.0"}, output_path)

    assert written_path == output_path.resolve()
    assert json.loads(output_path.read_text(encoding="utf-8")) == {"swagger": "2.0"}
