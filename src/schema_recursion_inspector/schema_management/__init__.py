"""Schema management exports."""

from .schema_conformance import check_schema_conformance
from .schema_loading import SchemaError, load_schema_document, load_schema_file
from .schema_models import ConformanceResult, SchemaDocument

__all__ = [
    "ConformanceResult",
    "SchemaDocument",
    "SchemaError",
    "check_schema_conformance",
    "load_schema_document",
    "load_schema_file",
]
