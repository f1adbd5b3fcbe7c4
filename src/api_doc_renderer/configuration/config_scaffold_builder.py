"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "api-doc-renderer.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Render configuration template for api-doc-renderer.
# Every setting is optional; remove the ones you do not need.

swagger:
  # Host advertised in the document. When set, basePath omits the project name.
  domain: ""
  # Any of http, https, ws, wss.
  schemes:
    - http
  # Emit a tags list derived from resource paths.
  render_tags: false
  # Index of the path segment used as tag when render_tags is enabled.
  tags_path_offset: 0
"""


def build_placeholder_configuration() -> str:
    """Build a YAML render configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the render configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
