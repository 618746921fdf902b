"""Schema source errors."""

from __future__ import annotations


class SchemaSourceError(Exception):
    """Raised when the introspection response cannot be obtained."""


class IntrospectionRequestError(SchemaSourceError):
    """Raised when the GraphQL server does not answer the introspection query."""


class UnsupportedSchemaSourceError(SchemaSourceError):
    """Raised for sources that are known but not implemented."""
