"""Results workbook writer tests."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from openpyxl import load_workbook
from schema_recursion_inspector.results_writing.report_models import (
    RESULT_COLUMNS,
    RESULTS_SHEET_NAME,
    RUN_INFO_SHEET_NAME,
    AnalysisStatus,
    RunMetadata,
)
from schema_recursion_inspector.results_writing.run_report_writer import (
    resolve_status,
    write_results_workbook,
)
from schema_recursion_inspector.run_execution.run_contracts import SchemaAnalysis
from schema_recursion_inspector.schema_management import ConformanceResult


def _analysis(name: str, **overrides) -> SchemaAnalysis:
    values = {
        "name": name,
        "has_circular_refs": False,
        "circular_ref_message": None,
        "has_recursion": False,
        "recursion_path": None,
        "recursion_line": None,
        "highlight_lines": (),
        "conformance": ConformanceResult(is_valid=True, message="Valid JSON Schema"),
    }
    values.update(overrides)
    return SchemaAnalysis(**values)


def _run_metadata(output_path: Path) -> RunMetadata:
    return RunMetadata(
        run_start=datetime(2024, 5, 1, 12, 0, tzinfo=UTC),
        config_path=None,
        output_path=output_path,
        definitions_key="$defs",
        visit_policy="global",
    )


def test_status_precedence() -> None:
    assert resolve_status(_analysis("a")) is AnalysisStatus.OK
    assert resolve_status(_analysis("b", has_recursion=True)) is AnalysisStatus.RECURSION
    assert (
        resolve_status(_analysis("c", has_recursion=True, has_circular_refs=True))
        is AnalysisStatus.CIRCULAR_REFERENCES
    )
    assert (
        resolve_status(_analysis("d", has_circular_refs=True, error="Unresolvable reference"))
        is AnalysisStatus.ERROR
    )


def test_results_sheet_has_one_row_per_schema(tmp_path: Path) -> None:
    output_path = tmp_path / "out" / "results.xlsx"
    analyses = (
        _analysis("user.json"),
        _analysis(
            "list.json",
            has_circular_refs=True,
            circular_ref_message="Reference to the schema root detected: properties.next -> #",
            has_recursion=True,
            recursion_path="properties.next -> $ref:#",
            recursion_line=7,
            highlight_lines=(7, 7),
        ),
        _analysis("broken.json", has_recursion=None, error="Unresolvable reference: #/x"),
    )

    write_results_workbook(output_path, analyses, _run_metadata(output_path))

    workbook = load_workbook(output_path)
    sheet = workbook[RESULTS_SHEET_NAME]
    header = [sheet.cell(row=1, column=index).value for index in range(1, 9)]
    assert tuple(header) == RESULT_COLUMNS
    assert [sheet.cell(row=2, column=index).value for index in (1, 2, 4)] == [
        "user.json",
        "OK",
        "no",
    ]
    assert sheet.cell(row=3, column=2).value == "CIRCULAR_REFERENCES"
    assert sheet.cell(row=3, column=5).value == "properties.next -> $ref:#"
    assert sheet.cell(row=3, column=6).value == 7
    assert sheet.cell(row=3, column=7).value == "7, 7"
    assert sheet.cell(row=4, column=4).value == "n/a"
    assert sheet.cell(row=4, column=5).value == "Unresolvable reference: #/x"


def test_run_info_sheet_counts_statuses(tmp_path: Path) -> None:
    output_path = tmp_path / "results.xlsx"
    analyses = (
        _analysis("a.json"),
        _analysis("b.json"),
        _analysis("c.json", has_recursion=True, recursion_path="properties.x -> $ref:#"),
    )

    write_results_workbook(output_path, analyses, _run_metadata(output_path))

    sheet = load_workbook(output_path)[RUN_INFO_SHEET_NAME]
    entries = {
        sheet.cell(row=row, column=1).value: sheet.cell(row=row, column=2).value
        for row in range(1, sheet.max_row + 1)
    }
    assert entries["run_start"] == "2024-05-01T12:00:00+00:00"
    assert entries["total"] == 3
    assert entries["ok"] == 2
    assert entries["recursion"] == 1
    assert entries["circular_references"] == 0
    assert entries["errors"] == 0
    assert entries["visit_policy"] == "global"
