"""JSON Schema meta-validation adapter."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jsonschema.exceptions import SchemaError as JSONSchemaMetaError
from jsonschema.validators import validator_for

from .schema_models import ConformanceResult


def check_schema_conformance(root: Any) -> ConformanceResult:
    """Validate `root` against the meta-schema of its declared draft."""
    if not isinstance(root, (Mapping, bool)):
        return ConformanceResult(is_valid=False, message="Invalid: schema root must be an object")
    validator_cls = validator_for(root)
    try:
        validator_cls.check_schema(root)
    except JSONSchemaMetaError as exc:
        return ConformanceResult(is_valid=False, message=f"Invalid: {exc.message}")
    return ConformanceResult(is_valid=True, message="Valid JSON Schema")
