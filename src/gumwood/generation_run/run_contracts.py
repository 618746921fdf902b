"""Generation run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GenerationRequest:  # pylint: disable=too-many-instance-attributes
    """Input contract for one generation run; ``None`` keeps the configured value."""

    config_path: str | None = None
    url: str | None = None
    json_path: str | None = None
    schema_path: str | None = None
    headers: tuple[str, ...] = ()
    out_dir: str | None = None
    front_matter: str | None = None
    timeout_seconds: int | None = None


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed run."""

    documents: dict[str, str]
    written_paths: tuple[Path, ...]
    stdout_text: str | None
