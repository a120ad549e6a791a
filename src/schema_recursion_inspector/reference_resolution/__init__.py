"""Reference resolution exports."""

from .pointer_resolver import (
    REF_KEY,
    ROOT_POINTER,
    DanglingReferenceError,
    reference_pointer,
    resolve_pointer,
    resolve_reference,
)

__all__ = [
    "REF_KEY",
    "ROOT_POINTER",
    "DanglingReferenceError",
    "reference_pointer",
    "resolve_pointer",
    "resolve_reference",
]
