"""Schema loading from URLs, files and standard input."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from gumwood.configuration.runtime_settings import SourceSettings
from gumwood.schema_model import Schema, parse_schema

from .introspection_transport import PostCallable, fetch_introspection
from .source_errors import SchemaSourceError, UnsupportedSchemaSourceError

logger = logging.getLogger(__name__)


def load_schema(
    settings: SourceSettings,
    *,
    stdin: TextIO | None = None,
    post: PostCallable | None = None,
) -> Schema:
    """Load the schema from the first configured source.

    Sources are tried in the order URL, introspection JSON file, GraphQL
    schema file; standard input is read when none is configured.

    Raises:
      SchemaSourceError: If the source cannot be read.
      SchemaError: If the introspection response is malformed.
    """
    return parse_schema(read_introspection_text(settings, stdin=stdin, post=post))


def read_introspection_text(
    settings: SourceSettings,
    *,
    stdin: TextIO | None = None,
    post: PostCallable | None = None,
) -> str:
    if settings.url:
        logger.info("Introspecting %s", settings.url)
        return fetch_introspection(
            settings.url,
            settings.headers,
            timeout_seconds=settings.timeout_seconds,
            max_retries=settings.max_retries,
            retry_backoff_seconds=settings.retry_backoff_seconds,
            post=post,
        )
    if settings.json_path is not None:
        logger.info("Reading introspection response from %s", settings.json_path)
        return _read_text_file(settings.json_path)
    if settings.schema_path is not None:
        raise UnsupportedSchemaSourceError("GraphQL schema files are not yet implemented")

    logger.info("Reading introspection response from standard input")
    stream = stdin if stdin is not None else sys.stdin
    try:
        return stream.read()
    except UnicodeDecodeError as exc:
        raise SchemaSourceError(f"Standard input is not valid UTF-8: {exc}") from exc


def _read_text_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SchemaSourceError(f"Introspection file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise SchemaSourceError(f"Introspection file {path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise SchemaSourceError(f"Failed to read introspection file {path}: {exc}") from exc
