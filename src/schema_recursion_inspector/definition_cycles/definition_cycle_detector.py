"""Bounded cycle detection over a schema's named definitions."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from schema_recursion_inspector.reference_resolution import (
    ROOT_POINTER,
    reference_pointer,
    resolve_pointer,
)
from schema_recursion_inspector.schema_traversal import (
    DEFAULT_MAX_TRAVERSAL_DEPTH,
    Expansion,
    walk_object_schema,
)

from .cycle_errors import CircularReferenceError, MaxDepthExceededError, RootSelfReferenceError

DEFAULT_DEFINITIONS_KEY = "$defs"
SUPPORTED_DEFINITIONS_KEYS = ("$defs", "definitions")
MAX_REF_RESOLUTION_DEPTH = 10

ReferenceIndex = dict[str, tuple[str, ...]]
DefinitionsGraph = dict[str, ReferenceIndex]

_LOGGER = logging.getLogger(__name__)


def collect_references(
    schema: Any, *, max_traversal_depth: int = DEFAULT_MAX_TRAVERSAL_DEPTH
) -> ReferenceIndex:
    """Index every `$ref` pointer of an object-typed subtree by first location.

    References are recorded, not followed.

    Raises:
      RootSelfReferenceError: If the subtree contains `{"$ref": "#"}`.
    """
    references: ReferenceIndex = {}

    def _enter(node: Any, steps: tuple[str, ...]) -> Expansion | None:
        pointer = reference_pointer(node)
        if pointer is not None:
            if pointer == ROOT_POINTER:
                raise RootSelfReferenceError(steps)
            if pointer in references:
                return None
            references[pointer] = steps
        return Expansion(node, steps)

    walk_object_schema(schema, _enter, max_depth=max_traversal_depth)
    return references


def definition_pointer(definitions_key: str, name: str) -> str:
    """Return the local pointer addressing one named definition."""
    escaped = name.replace("~", "~0").replace("/", "~1")
    return f"#/{definitions_key}/{escaped}"


def build_definitions_graph(
    definitions: Mapping[str, Any],
    definitions_key: str,
    *,
    max_traversal_depth: int = DEFAULT_MAX_TRAVERSAL_DEPTH,
) -> DefinitionsGraph:
    """Index the outgoing references of every named definition."""
    return {
        definition_pointer(definitions_key, name): collect_references(
            body, max_traversal_depth=max_traversal_depth
        )
        for name, body in definitions.items()
    }


def find_circular_references(
    schema: Any,
    *,
    definitions_key: str = DEFAULT_DEFINITIONS_KEY,
    max_depth: int = MAX_REF_RESOLUTION_DEPTH,
    max_traversal_depth: int = DEFAULT_MAX_TRAVERSAL_DEPTH,
) -> None:
    """Raise if the references reachable from the schema root form a cycle.

    Completes silently when every reference chain terminates within
    `max_depth` hops.

    Raises:
      RootSelfReferenceError: If a scanned subtree references `#`.
      CircularReferenceError: If a walk revisits a pointer on its own path.
      MaxDepthExceededError: If a walk would exceed `max_depth` hops.
      DanglingReferenceError: If a reached pointer does not resolve.
    """
    if definitions_key not in SUPPORTED_DEFINITIONS_KEYS:
        raise ValueError(f"Unsupported definitions key: {definitions_key}")

    root_references = collect_references(schema, max_traversal_depth=max_traversal_depth)
    definitions = schema.get(definitions_key) if isinstance(schema, Mapping) else None
    if not isinstance(definitions, Mapping):
        for pointer in root_references:
            resolve_pointer(pointer, schema)
        return

    graph = build_definitions_graph(
        definitions, definitions_key, max_traversal_depth=max_traversal_depth
    )
    _LOGGER.debug("Definitions graph for %d definitions: %s", len(graph), graph)
    for pointer in root_references:
        _walk_references(pointer, graph, schema, (), max_depth)


def _walk_references(
    pointer: str,
    graph: DefinitionsGraph,
    root: Any,
    path: tuple[str, ...],
    max_depth: int,
) -> None:
    _LOGGER.debug("Resolving %s at depth %d via %s", pointer, len(path), path)
    if pointer in path:
        raise CircularReferenceError(path + (pointer,))
    if len(path) > max_depth:
        raise MaxDepthExceededError(path + (pointer,), max_depth)

    outgoing = graph.get(pointer)
    if outgoing is None:
        resolve_pointer(pointer, root)
        return
    for target in outgoing:
        _walk_references(target, graph, root, path + (pointer,), max_depth)
