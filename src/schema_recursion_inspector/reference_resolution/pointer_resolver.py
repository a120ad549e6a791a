"""Local `$ref` pointer resolution service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

REF_KEY = "$ref"
ROOT_POINTER = "#"

_LOGGER = logging.getLogger(__name__)


class DanglingReferenceError(Exception):
    """Raised when a reference pointer does not resolve inside the root schema."""

    def __init__(self, pointer: str, segment: str | None = None) -> None:
        self.pointer = pointer
        self.segment = segment
        if segment is None:
            message = f"Unresolvable reference: {pointer}"
        else:
            message = f"Unresolvable reference: {pointer} (missing segment '{segment}')"
        super().__init__(message)


def reference_pointer(node: Any) -> str | None:
    """Return the `$ref` pointer carried by a mapping node, if any."""
    if not isinstance(node, Mapping):
        return None
    pointer = node.get(REF_KEY)
    if isinstance(pointer, str) and pointer:
        return pointer
    return None


def resolve_reference(node: Any, root: Any) -> Any:
    """Resolve `node` through its `$ref` pointer, or return it unchanged."""
    pointer = reference_pointer(node)
    if pointer is None:
        return node
    return resolve_pointer(pointer, root)


def resolve_pointer(pointer: str, root: Any) -> Any:
    """Walk a local `#/...` pointer from `root` and return the target node.

    Raises:
      DanglingReferenceError: If the pointer is external or a segment is missing.
    """
    if not pointer.startswith(ROOT_POINTER):
        raise DanglingReferenceError(pointer)

    current = root
    for raw_segment in pointer[len(ROOT_POINTER) :].split("/"):
        if raw_segment == "":
            continue
        segment = _unescape_segment(raw_segment)
        if not isinstance(current, Mapping) or segment not in current:
            _LOGGER.debug("Reference %s stops at segment %r", pointer, segment)
            raise DanglingReferenceError(pointer, segment)
        current = current[segment]
    return current


def _unescape_segment(segment: str) -> str:
    return segment.replace("~1", "/").replace("~0", "~")
