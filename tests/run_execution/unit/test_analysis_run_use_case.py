"""Tests for the schema analysis use-case service."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from openpyxl import load_workbook
from schema_recursion_inspector.configuration import (
    AnalysisSettings,
    Configuration,
    ConformanceSettings,
)
from schema_recursion_inspector.recursion_detection import VisitPolicy
from schema_recursion_inspector.results_writing import RESULTS_SHEET_NAME, RUN_INFO_SHEET_NAME
from schema_recursion_inspector.run_execution import (
    AnalysisRequest,
    RunExecutionError,
    analyze_schema_document,
    execute_schema_analysis_run,
)
from schema_recursion_inspector.schema_management import load_schema_document, load_schema_file


def _samples_dir() -> Path:
    return Path(__file__).resolve().parents[3] / "samples"


def _diamond_text() -> str:
    return json.dumps(
        {
            "type": "object",
            "properties": {
                "home": {"$ref": "#/$defs/Address"},
                "work": {"$ref": "#/$defs/Address"},
            },
            "$defs": {"Address": {"type": "object"}},
        },
        indent=2,
    )


def test_linked_list_reports_recursion_with_highlight_lines() -> None:
    document = load_schema_file(_samples_dir() / "linked-list-schema.json")

    analysis = analyze_schema_document(document)

    assert analysis.has_circular_refs is True
    assert analysis.circular_ref_message == (
        "Reference to the schema root detected: properties.next -> #"
    )
    assert analysis.has_recursion is True
    assert analysis.recursion_path == "properties.next -> $ref:#"
    assert analysis.recursion_line == 7
    assert analysis.highlight_lines == (7, 7)
    assert analysis.conformance is not None
    assert analysis.conformance.is_valid is True


def test_clean_schema_has_no_findings_and_no_line_lookup() -> None:
    document = load_schema_file(_samples_dir() / "user-profile-schema.json")

    analysis = analyze_schema_document(document)

    assert analysis.has_findings is False
    assert analysis.has_recursion is False
    assert analysis.recursion_line is None
    assert analysis.highlight_lines == ()


def test_dangling_reference_is_recorded_in_both_scans() -> None:
    document = load_schema_document(
        '{"type": "object", "properties": {"a": {"$ref": "#/$defs/Missing"}}}',
        name="dangling.json",
    )

    analysis = analyze_schema_document(document)

    assert analysis.has_circular_refs is True
    assert "Unresolvable reference: #/$defs/Missing" in (analysis.circular_ref_message or "")
    assert analysis.has_recursion is None
    assert analysis.error is not None
    assert analysis.has_findings is True


def test_visit_policy_setting_changes_diamond_verdict() -> None:
    document = load_schema_document(_diamond_text(), name="diamond.json")
    path_policy = Configuration(analysis=AnalysisSettings(visit_policy=VisitPolicy.PATH))

    default_analysis = analyze_schema_document(document)
    path_analysis = analyze_schema_document(document, path_policy)

    assert default_analysis.has_circular_refs is False
    assert default_analysis.has_recursion is True
    assert default_analysis.recursion_path == "properties.work -> $ref:#/$defs/Address"
    assert path_analysis.has_recursion is False


def test_conformance_check_can_be_disabled() -> None:
    document = load_schema_document('{"type": "banana"}')
    configuration = Configuration(conformance=ConformanceSettings(enabled=False))

    assert analyze_schema_document(document, configuration).conformance is None
    assert analyze_schema_document(document).conformance.is_valid is False  # type: ignore[union-attr]


def test_run_writes_results_workbook(tmp_path: Path) -> None:
    output_path = tmp_path / "reports" / "results.xlsx"
    request = AnalysisRequest(
        schema_paths=(
            str(_samples_dir() / "user-profile-schema.json"),
            str(_samples_dir() / "mutual-recursion-schema.json"),
        ),
        output_path=str(output_path),
    )

    outcome = execute_schema_analysis_run(request)

    assert outcome.output_path == output_path.resolve()
    assert [analysis.name for analysis in outcome.analyses] == [
        "user-profile-schema.json",
        "mutual-recursion-schema.json",
    ]
    assert outcome.has_findings is True
    workbook = load_workbook(output_path)
    assert workbook.sheetnames == [RESULTS_SHEET_NAME, RUN_INFO_SHEET_NAME]


def test_run_without_output_skips_workbook(tmp_path: Path) -> None:
    outcome = execute_schema_analysis_run(
        AnalysisRequest(schema_paths=(str(_samples_dir() / "user-profile-schema.json"),))
    )

    assert outcome.output_path is None
    assert outcome.has_findings is False
    assert list(tmp_path.iterdir()) == []


def test_run_uses_configuration_file(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("analysis:\n  visit_policy: path\n", encoding="utf-8")
    schema_path = tmp_path / "diamond.json"
    schema_path.write_text(_diamond_text(), encoding="utf-8")

    outcome = execute_schema_analysis_run(
        AnalysisRequest(schema_paths=(str(schema_path),), config_path=str(config_path))
    )

    assert outcome.analyses[0].has_recursion is False


def test_missing_schema_file_raises_run_execution_error(tmp_path: Path) -> None:
    with pytest.raises(RunExecutionError, match="Schema file not found"):
        execute_schema_analysis_run(AnalysisRequest(schema_paths=(str(tmp_path / "nope.json"),)))


def test_invalid_configuration_raises_run_execution_error(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("analysis:\n  visit_policy: sideways\n", encoding="utf-8")

    with pytest.raises(RunExecutionError, match="analysis.visit_policy"):
        execute_schema_analysis_run(
            AnalysisRequest(
                schema_paths=(str(_samples_dir() / "user-profile-schema.json"),),
                config_path=str(config_path),
            )
        )


def test_empty_schema_list_is_rejected() -> None:
    with pytest.raises(RunExecutionError, match="At least one schema file"):
        execute_schema_analysis_run(AnalysisRequest(schema_paths=()))
