"""End-to-end scenarios over the bundled sample schemas."""

from __future__ import annotations

from pathlib import Path

import pytest
from schema_recursion_inspector.run_execution import analyze_schema_document
from schema_recursion_inspector.schema_management import load_schema_file

_SAMPLES = Path(__file__).resolve().parents[3] / "samples"


@pytest.mark.parametrize(
    ("sample_name", "has_circular_refs", "has_recursion", "recursion_line"),
    [
        ("user-profile-schema.json", False, False, None),
        ("linked-list-schema.json", True, True, 7),
        ("mutual-recursion-schema.json", True, True, 6),
        ("product-category-schema.json", True, True, 7),
        ("deep-indirect-schema.json", True, True, 8),
        ("ui-layout-schema.json", False, False, None),
    ],
)
def test_sample_schema_verdicts(
    sample_name: str,
    has_circular_refs: bool,
    has_recursion: bool,
    recursion_line: int | None,
) -> None:
    analysis = analyze_schema_document(load_schema_file(_SAMPLES / sample_name))

    assert analysis.has_circular_refs is has_circular_refs
    assert analysis.has_recursion is has_recursion
    assert analysis.recursion_line == recursion_line
    assert analysis.error is None


def test_circular_reference_message_names_the_repeated_pointer() -> None:
    analysis = analyze_schema_document(load_schema_file(_SAMPLES / "mutual-recursion-schema.json"))

    assert analysis.circular_ref_message == (
        "Circular reference detected: #/$defs/B -> #/$defs/A -> #/$defs/B"
    )


def test_every_highlight_line_exists_in_source() -> None:
    for sample_path in sorted(_SAMPLES.glob("*.json")):
        document = load_schema_file(sample_path)
        analysis = analyze_schema_document(document)
        line_count = len(document.text.split("\n"))

        assert all(1 <= line <= line_count for line in analysis.highlight_lines)
