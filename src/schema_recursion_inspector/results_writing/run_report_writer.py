"""Results workbook writer service."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from .report_models import (
    RESULT_COLUMNS,
    RESULTS_SHEET_NAME,
    RUN_INFO_SHEET_NAME,
    AnalysisStatus,
    RunMetadata,
)

if TYPE_CHECKING:
    from schema_recursion_inspector.run_execution.run_contracts import SchemaAnalysis


def write_results_workbook(
    output_path: Path | str,
    analyses: Sequence[SchemaAnalysis],
    run_metadata: RunMetadata,
) -> None:
    """Write one results row per analysed schema plus a RunInfo sheet."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = RESULTS_SHEET_NAME

    _write_header(sheet)
    for row_index, analysis in enumerate(analyses, start=2):
        for column_index, value in enumerate(_result_row(analysis), start=1):
            sheet.cell(row=row_index, column=column_index, value=value)

    _write_run_info_sheet(workbook, run_metadata, analyses)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)


def resolve_status(analysis: SchemaAnalysis) -> AnalysisStatus:
    """Collapse one analysis into the verdict shown in the status column."""
    if analysis.error is not None:
        return AnalysisStatus.ERROR
    if analysis.has_circular_refs:
        return AnalysisStatus.CIRCULAR_REFERENCES
    if analysis.has_recursion:
        return AnalysisStatus.RECURSION
    return AnalysisStatus.OK


def _write_header(sheet: Worksheet) -> None:
    for column_index, name in enumerate(RESULT_COLUMNS, start=1):
        cell = sheet.cell(row=1, column=column_index, value=name)
        cell.style = "Headline 1"
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(len(name) + 6, 60)
        )


def _result_row(analysis: SchemaAnalysis) -> tuple[object, ...]:
    conformance = analysis.conformance.message if analysis.conformance else None
    return (
        analysis.name,
        resolve_status(analysis).value,
        analysis.circular_ref_message or "",
        _format_flag(analysis.has_recursion),
        analysis.recursion_path or analysis.error or "",
        analysis.recursion_line,
        ", ".join(str(line) for line in analysis.highlight_lines),
        conformance,
    )


def _format_flag(value: bool | None) -> str:
    if value is None:
        return "n/a"
    return "yes" if value else "no"


def _write_run_info_sheet(
    workbook: Workbook,
    run_metadata: RunMetadata,
    analyses: Sequence[SchemaAnalysis],
) -> None:
    sheet = workbook.create_sheet(RUN_INFO_SHEET_NAME)
    statuses = [resolve_status(analysis) for analysis in analyses]
    entries = (
        ("run_start", run_metadata.run_start.isoformat()),
        ("config_path", str(run_metadata.config_path) if run_metadata.config_path else ""),
        ("output_path", str(run_metadata.output_path)),
        ("definitions_key", run_metadata.definitions_key),
        ("visit_policy", run_metadata.visit_policy),
        ("total", len(analyses)),
        ("ok", statuses.count(AnalysisStatus.OK)),
        ("circular_references", statuses.count(AnalysisStatus.CIRCULAR_REFERENCES)),
        ("recursion", statuses.count(AnalysisStatus.RECURSION)),
        ("errors", statuses.count(AnalysisStatus.ERROR)),
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(row=row, column=2, value=value)
