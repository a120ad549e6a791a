"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_recursion_inspector.definition_cycles import SUPPORTED_DEFINITIONS_KEYS
from schema_recursion_inspector.recursion_detection import VisitPolicy

from .runtime_settings import AnalysisSettings, Configuration, ConformanceSettings

_KNOWN_SECTIONS = ("analysis", "conformance")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str | None = None) -> Configuration:
    """Load and validate the configuration file, or return defaults."""
    if config_path is None:
        return Configuration()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in _KNOWN_SECTIONS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration sections: {', '.join(unknown)}")

    return Configuration(
        path=path,
        analysis=_parse_analysis_section(parsed.get("analysis")),
        conformance=_parse_conformance_section(parsed.get("conformance")),
    )


def _parse_analysis_section(value: Any) -> AnalysisSettings:
    section = _optional_mapping(value, "analysis")
    defaults = AnalysisSettings()
    definitions_key = section.get("definitions_key", defaults.definitions_key)
    if definitions_key not in SUPPORTED_DEFINITIONS_KEYS:
        raise ConfigurationError(
            "analysis.definitions_key must be one of: " + ", ".join(SUPPORTED_DEFINITIONS_KEYS)
        )
    max_reference_depth = _require_positive_int(
        section.get("max_reference_depth", defaults.max_reference_depth),
        "analysis.max_reference_depth",
    )
    max_traversal_depth = _require_positive_int(
        section.get("max_traversal_depth", defaults.max_traversal_depth),
        "analysis.max_traversal_depth",
    )
    visit_policy_raw = section.get("visit_policy", defaults.visit_policy.value)
    try:
        visit_policy = VisitPolicy(str(visit_policy_raw).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(policy.value for policy in VisitPolicy)
        raise ConfigurationError(f"analysis.visit_policy must be one of: {allowed}") from exc
    return AnalysisSettings(
        definitions_key=definitions_key,
        max_reference_depth=max_reference_depth,
        max_traversal_depth=max_traversal_depth,
        visit_policy=visit_policy,
    )


def _parse_conformance_section(value: Any) -> ConformanceSettings:
    section = _optional_mapping(value, "conformance")
    enabled = section.get("enabled", True)
    if not isinstance(enabled, bool):
        raise ConfigurationError("conformance.enabled must be a boolean.")
    return ConformanceSettings(enabled=enabled)


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
