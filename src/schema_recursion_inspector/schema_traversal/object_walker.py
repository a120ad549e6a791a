"""Depth-first walker over object-typed schema subtrees."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

COMPOSITION_KEYS = ("allOf", "anyOf", "oneOf", "not", "properties")
DEFAULT_MAX_TRAVERSAL_DEPTH = 256
PATH_SEPARATOR = " -> "


class TraversalDepthExceededError(Exception):
    """Raised when a schema walk nests deeper than the configured guard."""

    def __init__(self, steps: Sequence[str], max_depth: int) -> None:
        self.steps = tuple(steps)
        self.max_depth = max_depth
        super().__init__(
            f"Schema traversal exceeded maximum depth {max_depth}: {format_path(steps)}"
        )


@dataclass(frozen=True)
class Expansion:
    """Node whose composition children should be walked next."""

    node: Any
    steps: tuple[str, ...]
    token: Any = None


@dataclass(frozen=True)
class WalkHit:
    """Result that aborts the whole walk."""

    steps: tuple[str, ...]


EnterCallback = Callable[[Any, tuple[str, ...]], "Expansion | WalkHit | None"]
LeaveCallback = Callable[[Expansion], None]


def format_path(steps: Sequence[str]) -> str:
    """Join traversal steps into the diagnostic path string."""
    return PATH_SEPARATOR.join(steps)


def is_object_schema(node: Any) -> bool:
    """Return True when the node is a mapping typed explicitly as `object`."""
    return isinstance(node, Mapping) and node.get("type") == "object"


def iter_composition_children(node: Mapping[str, Any]) -> Iterator[tuple[str, Any]]:
    """Yield `(step, child)` pairs in composition key order.

    Sequences yield `key[index]`, name-keyed mappings yield `key.name`. The
    `not` keyword holds a single schema and yields the bare `not` step.
    """
    for key in COMPOSITION_KEYS:
        value = node.get(key)
        if not value:
            continue
        if key == "not" and isinstance(value, Mapping):
            yield key, value
        elif isinstance(value, Mapping):
            for name, child in value.items():
                yield f"{key}.{name}", child
        elif isinstance(value, Sequence) and not isinstance(value, str):
            for index, child in enumerate(value):
                yield f"{key}[{index}]", child


def walk_object_schema(
    node: Any,
    enter: EnterCallback,
    *,
    leave: LeaveCallback | None = None,
    steps: Sequence[str] = (),
    max_depth: int = DEFAULT_MAX_TRAVERSAL_DEPTH,
) -> WalkHit | None:
    """Walk `node` depth-first, delegating reference handling to `enter`.

    `enter` is called for every reached node with its traversal steps. It
    returns an `Expansion` to continue below a (possibly resolved) node, None
    to stop the current branch, or a `WalkHit` to abort the walk. Only
    expansions of object-typed nodes have their children visited. `leave` is
    called once an expansion has been fully walked.
    """

    def _walk(current: Any, current_steps: tuple[str, ...], depth: int) -> WalkHit | None:
        if depth > max_depth:
            raise TraversalDepthExceededError(current_steps, max_depth)
        decision = enter(current, current_steps)
        if decision is None or isinstance(decision, WalkHit):
            return decision
        try:
            if not is_object_schema(decision.node):
                return None
            for step, child in iter_composition_children(decision.node):
                hit = _walk(child, decision.steps + (step,), depth + 1)
                if hit is not None:
                    return hit
            return None
        finally:
            if leave is not None:
                leave(decision)

    return _walk(node, tuple(steps), 0)
