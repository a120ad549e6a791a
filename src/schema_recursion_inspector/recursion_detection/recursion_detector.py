"""Structural recursion scan over a schema tree."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from schema_recursion_inspector.reference_resolution import reference_pointer, resolve_pointer
from schema_recursion_inspector.schema_traversal import (
    DEFAULT_MAX_TRAVERSAL_DEPTH,
    Expansion,
    WalkHit,
    format_path,
    walk_object_schema,
)

from .recursion_outcomes import RecursionReport, VisitPolicy

_LOGGER = logging.getLogger(__name__)

_NO_RECURSION = RecursionReport(has_recursion=False, path=None)


def detect_recursion(
    node: Any,
    root: Any = None,
    *,
    policy: VisitPolicy = VisitPolicy.GLOBAL,
    max_depth: int = DEFAULT_MAX_TRAVERSAL_DEPTH,
) -> RecursionReport:
    """Scan `node` for recursion and report the path to the first hit.

    References are resolved against `root` (defaults to `node`). Under the
    GLOBAL policy a node counts as visited once it was seen anywhere in this
    call, so two references converging on one definition are reported as
    recursion too. The PATH policy forgets nodes when their branch is left.

    Raises:
      DanglingReferenceError: If a `$ref` does not resolve.
      TraversalDepthExceededError: If nesting exceeds `max_depth`.
    """
    scan = _RecursionScan(node if root is None else root, VisitPolicy(policy))
    hit = walk_object_schema(
        node,
        scan.enter,
        leave=scan.leave if scan.policy is VisitPolicy.PATH else None,
        max_depth=max_depth,
    )
    if hit is None:
        return _NO_RECURSION
    path = format_path(hit.steps)
    _LOGGER.debug("Recursion detected at %s", path)
    return RecursionReport(has_recursion=True, path=path)


def has_recursion(schema: Any) -> bool:
    """Return True when the schema contains recursion under the default policy."""
    return detect_recursion(schema).has_recursion


class _RecursionScan:
    """Visited-set bookkeeping for one `detect_recursion` call."""

    def __init__(self, root: Any, policy: VisitPolicy) -> None:
        self.root = root
        self.policy = policy
        self.visited: set[int] = set()

    def enter(self, node: Any, steps: tuple[str, ...]) -> Expansion | WalkHit:
        marked: list[int] = []
        current = node
        while True:
            if not isinstance(current, Mapping):
                return Expansion(current, steps, token=tuple(marked))
            if id(current) in self.visited:
                self._forget(marked)
                return WalkHit(steps)
            self.visited.add(id(current))
            marked.append(id(current))
            pointer = reference_pointer(current)
            if pointer is None:
                return Expansion(current, steps, token=tuple(marked))
            current = resolve_pointer(pointer, self.root)
            steps = steps + (f"$ref:{pointer}",)

    def leave(self, expansion: Expansion) -> None:
        self._forget(expansion.token)

    def _forget(self, marked) -> None:
        if self.policy is VisitPolicy.PATH:
            self.visited.difference_update(marked)
