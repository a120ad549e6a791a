"""Definition cycle detection exports."""

from .cycle_errors import (
    DEFINITION_SCAN_ERRORS,
    CircularReferenceAnalysisError,
    CircularReferenceError,
    MaxDepthExceededError,
    RootSelfReferenceError,
)
from .definition_cycle_detector import (
    DEFAULT_DEFINITIONS_KEY,
    MAX_REF_RESOLUTION_DEPTH,
    SUPPORTED_DEFINITIONS_KEYS,
    build_definitions_graph,
    collect_references,
    definition_pointer,
    find_circular_references,
)

__all__ = [
    "DEFINITION_SCAN_ERRORS",
    "CircularReferenceAnalysisError",
    "CircularReferenceError",
    "MaxDepthExceededError",
    "RootSelfReferenceError",
    "DEFAULT_DEFINITIONS_KEY",
    "MAX_REF_RESOLUTION_DEPTH",
    "SUPPORTED_DEFINITIONS_KEYS",
    "build_definitions_graph",
    "collect_references",
    "definition_pointer",
    "find_circular_references",
]
