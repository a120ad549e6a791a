"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from schema_recursion_inspector.definition_cycles import (
    DEFAULT_DEFINITIONS_KEY,
    MAX_REF_RESOLUTION_DEPTH,
)
from schema_recursion_inspector.recursion_detection import VisitPolicy
from schema_recursion_inspector.schema_traversal import DEFAULT_MAX_TRAVERSAL_DEPTH


@dataclass(frozen=True)
class AnalysisSettings:
    """Tuning for the recursion and definition cycle scans."""

    definitions_key: str = DEFAULT_DEFINITIONS_KEY
    max_reference_depth: int = MAX_REF_RESOLUTION_DEPTH
    max_traversal_depth: int = DEFAULT_MAX_TRAVERSAL_DEPTH
    visit_policy: VisitPolicy = VisitPolicy.GLOBAL


@dataclass(frozen=True)
class ConformanceSettings:
    """Meta-schema validation switch."""

    enabled: bool = True


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None = None
    analysis: AnalysisSettings = field(default_factory=AnalysisSettings)
    conformance: ConformanceSettings = field(default_factory=ConformanceSettings)
