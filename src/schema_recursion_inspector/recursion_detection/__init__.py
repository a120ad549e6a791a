"""Recursion detection exports."""

from .recursion_detector import detect_recursion, has_recursion
from .recursion_outcomes import RecursionReport, VisitPolicy

__all__ = [
    "RecursionReport",
    "VisitPolicy",
    "detect_recursion",
    "has_recursion",
]
