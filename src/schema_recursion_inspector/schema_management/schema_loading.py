"""Schema loading service."""

from __future__ import annotations

import json
from pathlib import Path

from .schema_models import SchemaDocument


class SchemaError(Exception):
    """Raised for schema reading or parsing failures."""


def load_schema_document(
    text: str, *, name: str = "<inline>", source_path: Path | None = None
) -> SchemaDocument:
    """Parse schema text into a structured document."""
    if not text.strip():
        raise SchemaError(f"Schema text cannot be empty: {name}")
    try:
        root = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Invalid JSON in {name}: {exc}") from exc
    return SchemaDocument(name=name, text=text, root=root, source_path=source_path)


def load_schema_file(schema_path: Path | str) -> SchemaDocument:
    """Read and parse one schema file."""
    path = Path(schema_path)
    if not path.exists():
        raise SchemaError(f"Schema file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SchemaError(f"Failed to read schema file {path}: {exc}") from exc
    return load_schema_document(text, name=path.name, source_path=path.resolve())
