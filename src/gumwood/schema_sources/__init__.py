"""Schema source exports."""

from .introspection_query import INTROSPECTION_QUERY
from .introspection_transport import RETRYABLE_STATUS_CODES, fetch_introspection, parse_header
from .schema_loader import load_schema, read_introspection_text
from .source_errors import (
    IntrospectionRequestError,
    SchemaSourceError,
    UnsupportedSchemaSourceError,
)

__all__ = [
    "INTROSPECTION_QUERY",
    "RETRYABLE_STATUS_CODES",
    "IntrospectionRequestError",
    "SchemaSourceError",
    "UnsupportedSchemaSourceError",
    "fetch_introspection",
    "load_schema",
    "parse_header",
    "read_introspection_text",
]
