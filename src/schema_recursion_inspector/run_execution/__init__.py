"""Run execution domain exports."""

from .analysis_run_use_case import (
    RunExecutionError,
    analyze_schema_document,
    execute_schema_analysis_run,
)
from .run_contracts import AnalysisOutcome, AnalysisRequest, SchemaAnalysis

__all__ = [
    "AnalysisRequest",
    "AnalysisOutcome",
    "SchemaAnalysis",
    "RunExecutionError",
    "analyze_schema_document",
    "execute_schema_analysis_run",
]
