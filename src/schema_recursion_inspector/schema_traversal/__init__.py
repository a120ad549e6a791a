"""Schema traversal exports."""

from .object_walker import (
    COMPOSITION_KEYS,
    DEFAULT_MAX_TRAVERSAL_DEPTH,
    PATH_SEPARATOR,
    Expansion,
    TraversalDepthExceededError,
    WalkHit,
    format_path,
    is_object_schema,
    iter_composition_children,
    walk_object_schema,
)

__all__ = [
    "COMPOSITION_KEYS",
    "DEFAULT_MAX_TRAVERSAL_DEPTH",
    "PATH_SEPARATOR",
    "Expansion",
    "TraversalDepthExceededError",
    "WalkHit",
    "format_path",
    "is_object_schema",
    "iter_composition_children",
    "walk_object_schema",
]
