"""Results writing domain exports."""

from .report_models import RESULTS_SHEET_NAME, RUN_INFO_SHEET_NAME, AnalysisStatus, RunMetadata
from .run_report_writer import resolve_status, write_results_workbook

__all__ = [
    "RESULTS_SHEET_NAME",
    "RUN_INFO_SHEET_NAME",
    "AnalysisStatus",
    "RunMetadata",
    "resolve_status",
    "write_results_workbook",
]
