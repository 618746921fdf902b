"""Generation run use-case service."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import TextIO

from gumwood.configuration import (
    Configuration,
    ConfigurationError,
    OutputSettings,
    SourceSettings,
    load_configuration,
)
from gumwood.markdown_rendering import DOCUMENT_NAMES, document_title, render_schema
from gumwood.output_writing import (
    FrontMatterEntries,
    FrontMatterError,
    apply_front_matter,
    format_for_stdout,
    parse_front_matter,
    write_documents,
)
from gumwood.schema_model import SchemaError
from gumwood.schema_sources import SchemaSourceError, load_schema, parse_header
from gumwood.schema_sources.introspection_transport import PostCallable

from .run_contracts import GenerationOutcome, GenerationRequest

logger = logging.getLogger(__name__)


class GenerationRunError(Exception):
    """Raised when a generation run cannot be completed."""


def execute_generation_run(
    request: GenerationRequest,
    *,
    stdin: TextIO | None = None,
    post: PostCallable | None = None,
) -> GenerationOutcome:
    """Load the schema, render every document and write or collect the output."""
    configuration = _load_run_configuration(request.config_path)
    source = _merge_source_settings(configuration.source, request)
    output = _merge_output_settings(configuration.output, request)
    front_matter = _parse_front_matter(output.front_matter)

    try:
        schema = load_schema(source, stdin=stdin, post=post)
    except (SchemaSourceError, SchemaError) as exc:
        raise GenerationRunError(str(exc)) from exc

    documents = render_schema(schema)
    logger.info(
        "Rendered %s non-empty documents",
        sum(1 for markdown in documents.values() if markdown),
    )
    if front_matter:
        titles = {name: document_title(name) for name in DOCUMENT_NAMES}
        documents = apply_front_matter(documents, front_matter, titles)

    if output.out_dir is None:
        return GenerationOutcome(
            documents=documents,
            written_paths=(),
            stdout_text=format_for_stdout(documents),
        )

    try:
        written = write_documents(documents, output.out_dir)
    except OSError as exc:
        raise GenerationRunError(f"Failed to write documents to {output.out_dir}: {exc}") from exc
    return GenerationOutcome(documents=documents, written_paths=tuple(written), stdout_text=None)


def _load_run_configuration(config_path: str | None) -> Configuration:
    if config_path is None:
        return Configuration()
    try:
        return load_configuration(config_path)
    except ConfigurationError as exc:
        raise GenerationRunError(str(exc)) from exc


def _merge_source_settings(settings: SourceSettings, request: GenerationRequest) -> SourceSettings:
    requested_sources = [
        item for item in (request.url, request.json_path, request.schema_path) if item
    ]
    if len(requested_sources) > 1:
        raise GenerationRunError("At most one schema source (url, json or schema) may be provided.")

    merged = settings
    if requested_sources:
        merged = replace(
            merged,
            url=request.url or None,
            json_path=Path(request.json_path) if request.json_path else None,
            schema_path=Path(request.schema_path) if request.schema_path else None,
        )
    if request.headers:
        try:
            extra_headers = tuple(parse_header(item) for item in request.headers)
        except SchemaSourceError as exc:
            raise GenerationRunError(str(exc)) from exc
        merged = replace(merged, headers=merged.headers + extra_headers)
    if request.timeout_seconds is not None:
        if request.timeout_seconds <= 0:
            raise GenerationRunError("Timeout must be greater than zero.")
        merged = replace(merged, timeout_seconds=request.timeout_seconds)
    return merged


def _merge_output_settings(settings: OutputSettings, request: GenerationRequest) -> OutputSettings:
    merged = settings
    if request.out_dir:
        merged = replace(merged, out_dir=Path(request.out_dir))
    if request.front_matter is not None:
        merged = replace(merged, front_matter=request.front_matter)
    return merged


def _parse_front_matter(text: str | None) -> FrontMatterEntries:
    if not text:
        return ()
    try:
        return parse_front_matter(text)
    except FrontMatterError as exc:
        raise GenerationRunError(str(exc)) from exc
