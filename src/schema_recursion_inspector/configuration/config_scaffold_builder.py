"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-inspector.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Analysis configuration for schema-recursion-inspector.
# Every key is optional; the values below are the defaults.

analysis:
  # Named definitions block scanned for reference cycles ($defs or definitions).
  definitions_key: "$defs"
  # Hops a definitions reference walk may take before it is rejected.
  max_reference_depth: 10
  # Nesting guard for the structural recursion scan.
  max_traversal_depth: 256
  # global: a node seen anywhere counts as visited (converging references report recursion).
  # path: only nodes on the current branch count as visited.
  visit_policy: "global"

conformance:
  # Validate each schema against its JSON Schema meta-schema.
  enabled: true
"""


def build_placeholder_configuration() -> str:
    """Build the commented configuration scaffold."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration scaffold to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
