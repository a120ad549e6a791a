"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

RESULTS_SHEET_NAME = "Results"
RUN_INFO_SHEET_NAME = "RunInfo"

RESULT_COLUMNS: tuple[str, ...] = (
    "Schema",
    "Status",
    "Circular References",
    "Recursion",
    "Recursion Path",
    "Recursion Line",
    "Highlight Lines",
    "Conformance",
)


class AnalysisStatus(str, Enum):
    """Rendered verdict in the results sheet status column."""

    OK = "OK"
    CIRCULAR_REFERENCES = "CIRCULAR_REFERENCES"
    RECURSION = "RECURSION"
    ERROR = "ERROR"


@dataclass(frozen=True)
class RunMetadata:
    """Metadata rendered into the RunInfo sheet."""

    run_start: datetime
    config_path: Path | None
    output_path: Path
    definitions_key: str
    visit_policy: str
