"""Heuristic mapping from recursion paths to source line numbers.

The locator works on raw text lines rather than on a position-tracking JSON
parser, so repeated key names in unrelated parts of a document can produce
false matches. Callers treat a missing result as "no highlight available".
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

_LOGGER = logging.getLogger(__name__)

_PATH_SEPARATOR = " -> "
_REF_STEP_PREFIX = "$ref:"
_REF_KEY = "$ref"


def locate_line(source_text: str, path: str) -> int | None:
    """Return the 1-based line that best represents the start of `path`."""
    steps = _split_path(path)
    if not steps:
        return None
    lines = source_text.split("\n")

    if steps[0].startswith(_REF_STEP_PREFIX):
        line_number = _locate_reference_line(lines, _closing_reference(steps))
    else:
        line_number = _locate_key_line(lines, search_key_for_step(steps[0]))

    if line_number is None:
        _LOGGER.debug("No source line found for path %r", path)
    return line_number


def locate_all_lines(source_text: str, path: str) -> list[int]:
    """Return every line matching any step of `path`, in path order."""
    steps = _split_path(path)
    lines = source_text.split("\n")
    line_numbers: list[int] = []
    for step in steps:
        pattern = _key_pattern(search_key_for_step(step))
        line_numbers.extend(
            index + 1 for index, line in enumerate(lines) if pattern.search(line)
        )
    return line_numbers


def search_key_for_step(step: str) -> str:
    """Derive the JSON key searched for a single traversal step."""
    if step.startswith(_REF_STEP_PREFIX):
        return _REF_KEY
    if "." in step:
        return step.split(".")[-1]
    if "[" in step:
        return step.split("[", 1)[0]
    return step


def _split_path(path: str) -> list[str]:
    if not path:
        return []
    return [step for step in path.split(_PATH_SEPARATOR) if step]


def _closing_reference(steps: Sequence[str]) -> str:
    for step in reversed(steps):
        if step.startswith(_REF_STEP_PREFIX):
            return step[len(_REF_STEP_PREFIX) :]
    return steps[0][len(_REF_STEP_PREFIX) :]


def _locate_reference_line(lines: Sequence[str], pointer: str) -> int | None:
    needle = f'"{_REF_KEY}": "{pointer}"'
    # The later occurrence is usually where the traversal came back around.
    for index in range(len(lines) - 1, -1, -1):
        if needle in lines[index]:
            return index + 1
    for index, line in enumerate(lines):
        if needle in line:
            return index + 1
    return None


def _locate_key_line(lines: Sequence[str], key: str) -> int | None:
    for pattern in (_key_pattern(key), _loose_key_pattern(key)):
        for index, line in enumerate(lines):
            if pattern.search(line):
                return index + 1
    return None


def _key_pattern(key: str) -> re.Pattern[str]:
    return re.compile(rf'"{re.escape(key)}"\s*:\s*')


def _loose_key_pattern(key: str) -> re.Pattern[str]:
    return re.compile(rf'"{re.escape(key)}"\s*:')
