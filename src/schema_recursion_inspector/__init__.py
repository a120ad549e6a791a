"""Recursion and circular reference analysis for JSON Schema documents."""

import logging

from .definition_cycles import (
    CircularReferenceAnalysisError,
    CircularReferenceError,
    MaxDepthExceededError,
    RootSelfReferenceError,
    find_circular_references,
)
from .line_location import locate_all_lines, locate_line
from .recursion_detection import RecursionReport, VisitPolicy, detect_recursion, has_recursion
from .reference_resolution import DanglingReferenceError, resolve_reference
from .schema_traversal import TraversalDepthExceededError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CircularReferenceAnalysisError",
    "CircularReferenceError",
    "DanglingReferenceError",
    "MaxDepthExceededError",
    "RecursionReport",
    "RootSelfReferenceError",
    "TraversalDepthExceededError",
    "VisitPolicy",
    "detect_recursion",
    "find_circular_references",
    "has_recursion",
    "locate_all_lines",
    "locate_line",
    "resolve_reference",
]
