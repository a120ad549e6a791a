"""Schema analysis use-case service."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from schema_recursion_inspector.configuration import (
    Configuration,
    ConfigurationError,
    load_configuration,
)
from schema_recursion_inspector.definition_cycles import (
    DEFINITION_SCAN_ERRORS,
    find_circular_references,
)
from schema_recursion_inspector.line_location import locate_all_lines, locate_line
from schema_recursion_inspector.recursion_detection import RecursionReport, detect_recursion
from schema_recursion_inspector.reference_resolution import DanglingReferenceError
from schema_recursion_inspector.results_writing import RunMetadata, write_results_workbook
from schema_recursion_inspector.schema_management import (
    SchemaDocument,
    SchemaError,
    check_schema_conformance,
    load_schema_file,
)
from schema_recursion_inspector.schema_traversal import TraversalDepthExceededError

from .run_contracts import AnalysisOutcome, AnalysisRequest, SchemaAnalysis

_LOGGER = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when an analysis run cannot be completed."""


def analyze_schema_document(
    document: SchemaDocument, configuration: Configuration | None = None
) -> SchemaAnalysis:
    """Run the definition cycle scan, the recursion scan and line location."""
    configuration = configuration or Configuration()
    settings = configuration.analysis

    circular_ref_message = _scan_definitions(document, configuration)

    error: str | None = None
    try:
        report = detect_recursion(
            document.root,
            policy=settings.visit_policy,
            max_depth=settings.max_traversal_depth,
        )
    except (DanglingReferenceError, TraversalDepthExceededError) as exc:
        error = str(exc)
        report = None

    recursion_line: int | None = None
    highlight_lines: tuple[int, ...] = ()
    if report is not None and report.has_recursion and report.path:
        recursion_line = locate_line(document.text, report.path)
        highlight_lines = tuple(locate_all_lines(document.text, report.path))

    conformance = (
        check_schema_conformance(document.root) if configuration.conformance.enabled else None
    )

    analysis = SchemaAnalysis(
        name=document.name,
        has_circular_refs=circular_ref_message is not None,
        circular_ref_message=circular_ref_message,
        has_recursion=_recursion_flag(report),
        recursion_path=report.path if report is not None else None,
        recursion_line=recursion_line,
        highlight_lines=highlight_lines,
        conformance=conformance,
        error=error,
    )
    _LOGGER.info(
        "Analysed %s: circular_refs=%s recursion=%s",
        document.name,
        analysis.has_circular_refs,
        analysis.has_recursion,
    )
    return analysis


def execute_schema_analysis_run(request: AnalysisRequest) -> AnalysisOutcome:
    """Analyse every requested schema file and optionally write a results workbook."""
    if not request.schema_paths:
        raise RunExecutionError("At least one schema file is required.")

    try:
        configuration = load_configuration(request.config_path)
        documents = [load_schema_file(schema_path) for schema_path in request.schema_paths]
    except (ConfigurationError, SchemaError) as exc:
        raise RunExecutionError(str(exc)) from exc

    run_start = datetime.now(UTC)
    analyses = tuple(analyze_schema_document(document, configuration) for document in documents)

    output_path: Path | None = None
    if request.output_path:
        output_path = Path(request.output_path).resolve()
        run_metadata = RunMetadata(
            run_start=run_start,
            config_path=configuration.path.resolve() if configuration.path else None,
            output_path=output_path,
            definitions_key=configuration.analysis.definitions_key,
            visit_policy=configuration.analysis.visit_policy.value,
        )
        try:
            write_results_workbook(output_path, analyses, run_metadata)
        except OSError as exc:
            raise RunExecutionError(f"Failed to write results workbook: {exc}") from exc

    return AnalysisOutcome(analyses=analyses, output_path=output_path)


def _scan_definitions(document: SchemaDocument, configuration: Configuration) -> str | None:
    settings = configuration.analysis
    try:
        find_circular_references(
            document.root,
            definitions_key=settings.definitions_key,
            max_depth=settings.max_reference_depth,
            max_traversal_depth=settings.max_traversal_depth,
        )
    except (*DEFINITION_SCAN_ERRORS, TraversalDepthExceededError) as exc:
        _LOGGER.debug("Definitions scan of %s failed: %s", document.name, exc)
        return str(exc)
    return None


def _recursion_flag(report: RecursionReport | None) -> bool | None:
    if report is None:
        return None
    return report.has_recursion
