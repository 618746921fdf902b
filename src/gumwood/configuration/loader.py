"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from gumwood.schema_sources.introspection_transport import parse_header
from gumwood.schema_sources.source_errors import SchemaSourceError

from .runtime_settings import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_BACKOFF_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
    Configuration,
    OutputSettings,
    SourceSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
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

    source = _parse_source_section(parsed.get("source"), path.parent)
    output = _parse_output_section(parsed.get("output"), path.parent)
    return Configuration(path=path, source=source, output=output)


def _parse_source_section(value: Any, base_path: Path) -> SourceSettings:
    section = _optional_mapping(value, "source")
    url = _optional_string(section.get("url"), "source.url")
    json_value = _optional_string(section.get("json"), "source.json")
    schema_value = _optional_string(section.get("schema"), "source.schema")
    if len([item for item in (url, json_value, schema_value) if item]) > 1:
        raise ConfigurationError("At most one schema source (url, json or schema) may be provided.")
    return SourceSettings(
        url=url,
        headers=_normalize_headers(section.get("headers")),
        json_path=_resolve_path(base_path, json_value) if json_value else None,
        schema_path=_resolve_path(base_path, schema_value) if schema_value else None,
        timeout_seconds=_require_positive_int(
            section.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS), "source.timeout_seconds"
        ),
        max_retries=_require_non_negative_int(
            section.get("max_retries", DEFAULT_MAX_RETRIES), "source.max_retries"
        ),
        retry_backoff_seconds=_require_non_negative_number(
            section.get("retry_backoff_seconds", DEFAULT_RETRY_BACKOFF_SECONDS),
            "source.retry_backoff_seconds",
        ),
    )


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _optional_mapping(value, "output")
    out_dir = _optional_string(section.get("out_dir"), "output.out_dir")
    front_matter = _optional_string(section.get("front_matter"), "output.front_matter")
    return OutputSettings(
        out_dir=_resolve_path(base_path, out_dir) if out_dir else None,
        front_matter=front_matter,
    )


def _normalize_headers(value: Any) -> tuple[tuple[str, str], ...]:
    if value is None:
        return ()
    if isinstance(value, Mapping):
        headers = []
        for name, header_value in value.items():
            if not isinstance(name, str) or not name.strip():
                raise ConfigurationError("source.headers names must be non-empty strings.")
            if not isinstance(header_value, str):
                raise ConfigurationError(f"source.headers.{name} must be a string.")
            headers.append((name.strip(), header_value.strip()))
        return tuple(headers)
    if isinstance(value, Sequence) and not isinstance(value, str):
        parsed = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError("source.headers entries must be strings.")
            try:
                parsed.append(parse_header(item))
            except SchemaSourceError as exc:
                raise ConfigurationError(str(exc)) from exc
        return tuple(parsed)
    raise ConfigurationError("source.headers must be a mapping or a list of name:value strings.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    number = _require_non_negative_int(value, field_name)
    if number == 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return number


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value


def _require_non_negative_number(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{field_name} must be a number.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return float(value)
