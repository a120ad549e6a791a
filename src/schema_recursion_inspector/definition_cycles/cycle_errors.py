"""Definition cycle errors."""

from __future__ import annotations

from collections.abc import Sequence

from schema_recursion_inspector.reference_resolution import DanglingReferenceError

_SEPARATOR = " -> "


class CircularReferenceAnalysisError(Exception):
    """Base class for definitions-graph failures."""


class RootSelfReferenceError(CircularReferenceAnalysisError):
    """Raised when a scanned subtree references the schema root (`#`)."""

    def __init__(self, steps: Sequence[str]) -> None:
        self.steps = tuple(steps)
        location = _SEPARATOR.join(self.steps) or "<root>"
        super().__init__(f"Reference to the schema root detected: {location} -> #")


class CircularReferenceError(CircularReferenceAnalysisError):
    """Raised when a reference walk revisits a pointer on its current path."""

    def __init__(self, path: Sequence[str]) -> None:
        self.path = tuple(path)
        super().__init__(f"Circular reference detected: {_SEPARATOR.join(self.path)}")


class MaxDepthExceededError(CircularReferenceAnalysisError):
    """Raised when a reference walk takes more hops than allowed."""

    def __init__(self, path: Sequence[str], max_depth: int) -> None:
        self.path = tuple(path)
        self.max_depth = max_depth
        super().__init__(
            f"Maximum reference resolution depth {max_depth} exceeded: "
            f"{_SEPARATOR.join(self.path)}"
        )


DEFINITION_SCAN_ERRORS = (CircularReferenceAnalysisError, DanglingReferenceError)
