"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from schema_recursion_inspector.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from schema_recursion_inspector.line_location import locate_all_lines, locate_line
from schema_recursion_inspector.results_writing import resolve_status
from schema_recursion_inspector.run_execution import (
    AnalysisRequest,
    RunExecutionError,
    SchemaAnalysis,
    analyze_schema_document,
    execute_schema_analysis_run,
)
from schema_recursion_inspector.schema_management import SchemaError, load_schema_file

FINDINGS_EXIT_CODE = 3

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-recursion-inspector")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Diagnostic log level written to stderr",
)
def cli(log_level: str) -> None:
    """Detect recursion and circular references in JSON Schema documents."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML analysis configuration to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML analysis configuration with the default values."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="check")
@click.argument("schema_path", type=click.Path(path_type=str))
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON analysis configuration file",
)
@click.pass_context
def check(ctx: click.Context, schema_path: str, config_path: str | None) -> None:
    """Analyse one schema file and print its findings."""
    try:
        configuration = load_configuration(config_path)
        document = load_schema_file(schema_path)
    except (ConfigurationError, SchemaError) as exc:
        raise CliError(str(exc)) from exc
    analysis = analyze_schema_document(document, configuration)
    for line in _describe_analysis(analysis):
        click.echo(line)
    if analysis.has_findings:
        ctx.exit(FINDINGS_EXIT_CODE)


@cli.command(name="locate")
@click.argument("schema_path", type=click.Path(path_type=str))
@click.option(
    "--path",
    "recursion_path",
    required=True,
    help="Recursion path as printed by `check`, steps joined by ' -> '",
)
@click.option(
    "--all",
    "all_lines",
    is_flag=True,
    default=False,
    help="Print every line matching any step instead of the best single line.",
)
def locate(schema_path: str, recursion_path: str, all_lines: bool) -> None:
    """Print the source line numbers for a recursion path."""
    try:
        document = load_schema_file(schema_path)
    except SchemaError as exc:
        raise CliError(str(exc)) from exc
    if all_lines:
        line_numbers = locate_all_lines(document.text, recursion_path)
        click.echo(" ".join(str(number) for number in line_numbers) or "-")
        return
    line_number = locate_line(document.text, recursion_path)
    click.echo(str(line_number) if line_number is not None else "-")


@cli.command(name="run")
@click.argument("schema_paths", nargs=-1, required=True, type=click.Path(path_type=str))
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON analysis configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path of the results workbook to write",
)
@click.pass_context
def run_analysis(
    ctx: click.Context,
    schema_paths: tuple[str, ...],
    config_path: str | None,
    output_path: str | None,
) -> None:
    """Analyse a batch of schema files."""
    try:
        outcome = execute_schema_analysis_run(
            AnalysisRequest(
                schema_paths=tuple(schema_paths),
                config_path=config_path,
                output_path=output_path,
            )
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    for analysis in outcome.analyses:
        click.echo(f"{analysis.name}: {resolve_status(analysis).value}")
    if outcome.output_path is not None:
        click.echo(str(outcome.output_path))
    if outcome.has_findings:
        ctx.exit(FINDINGS_EXIT_CODE)


def _describe_analysis(analysis: SchemaAnalysis) -> list[str]:
    lines = [f"schema: {analysis.name}", f"status: {resolve_status(analysis).value}"]
    if analysis.circular_ref_message:
        lines.append(f"circular references: {analysis.circular_ref_message}")
    else:
        lines.append("circular references: none")
    if analysis.error:
        lines.append(f"error: {analysis.error}")
    elif analysis.has_recursion:
        lines.append(f"recursion: {analysis.recursion_path}")
        if analysis.recursion_line is not None:
            lines.append(f"line: {analysis.recursion_line}")
        if analysis.highlight_lines:
            lines.append(
                "highlight lines: " + ", ".join(str(line) for line in analysis.highlight_lines)
            )
    else:
        lines.append("recursion: none")
    if analysis.conformance is not None:
        lines.append(f"conformance: {analysis.conformance.message}")
    return lines


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        exit_code = cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return exit_code if isinstance(exit_code, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
