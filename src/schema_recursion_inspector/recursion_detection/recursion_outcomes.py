"""Recursion detection entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VisitPolicy(str, Enum):
    """Scope of the visited set used while scanning for recursion."""

    GLOBAL = "global"
    PATH = "path"


@dataclass(frozen=True)
class RecursionReport:
    """Outcome of one recursion scan."""

    has_recursion: bool
    path: str | None = None

    @property
    def steps(self) -> tuple[str, ...]:
        """Diagnostic path split back into its traversal steps."""
        if not self.path:
            return ()
        return tuple(self.path.split(" -> "))
