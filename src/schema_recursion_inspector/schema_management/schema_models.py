"""Schema management entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class SchemaDocument:
    """Parsed schema together with the text it was parsed from."""

    name: str
    text: str
    root: Any
    source_path: Path | None = None


@dataclass(frozen=True)
class ConformanceResult:
    """Outcome of delegating a schema to a JSON Schema meta-validator."""

    is_valid: bool
    message: str
