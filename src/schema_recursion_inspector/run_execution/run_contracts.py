"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_recursion_inspector.schema_management import ConformanceResult


@dataclass(frozen=True)
class AnalysisRequest:
    """Input contract for analysing a batch of schema files."""

    schema_paths: tuple[str, ...]
    config_path: str | None = None
    output_path: str | None = None


@dataclass(frozen=True)
class SchemaAnalysis:  # pylint: disable=too-many-instance-attributes
    """Findings for one schema document."""

    name: str
    has_circular_refs: bool
    circular_ref_message: str | None
    has_recursion: bool | None
    recursion_path: str | None
    recursion_line: int | None
    highlight_lines: tuple[int, ...]
    conformance: ConformanceResult | None
    error: str | None = None

    @property
    def has_findings(self) -> bool:
        """True when the schema cannot be expanded into a finite form."""
        return self.has_circular_refs or bool(self.has_recursion) or self.error is not None


@dataclass(frozen=True)
class AnalysisOutcome:
    """Output contract for one completed analysis run."""

    analyses: tuple[SchemaAnalysis, ...]
    output_path: Path | None

    @property
    def has_findings(self) -> bool:
        """True when any analysed schema reported a finding."""
        return any(analysis.has_findings for analysis in self.analyses)
