"""Schema model exports."""

from .schema_entities import (
    MAX_TYPE_REF_DEPTH,
    Directive,
    EnumValue,
    Field,
    Input,
    Schema,
    Type,
    TypeRef,
)
from .schema_parsing import SchemaError, SchemaErrorKind, build_schema, parse_schema

__all__ = [
    "MAX_TYPE_REF_DEPTH",
    "Directive",
    "EnumValue",
    "Field",
    "Input",
    "Schema",
    "Type",
    "TypeRef",
    "SchemaError",
    "SchemaErrorKind",
    "build_schema",
    "parse_schema",
]
