"""Rendering of all types of one GraphQL kind into a single document."""

from __future__ import annotations

from gumwood.schema_model.schema_entities import Schema, Type

from .markdown_primitives import (
    to_description,
    to_header,
    to_inline_code,
    to_list,
    to_named_anchor,
)
from .table_rows import (
    ENUM_VALUE_HEADERS,
    FIELD_HEADERS,
    INPUT_HEADERS,
    EnumValueRow,
    FieldRow,
    InputRow,
    sorted_by_name,
    to_markdown_table,
)


def render_type_collection(schema: Schema, title: str, kind: str) -> str:
    """Render every type of ``kind`` under a ``title`` header, sorted by name."""
    types = schema.get_types_of_kind(kind)
    if not types:
        return ""

    parts = [to_header(1, title)]
    for typ in sorted_by_name(types):
        parts.append(render_type(typ))
    return "".join(parts)


def render_type(typ: Type) -> str:
    """Render one anchored type section.

    Sections appear for every member collection that is present, even when
    it is empty.
    """
    parts: list[str] = []
    if typ.name is not None:
        parts.append(to_header(2, to_named_anchor(typ.name)))
    if typ.description is not None:
        parts.append(to_description(typ.description))

    if typ.fields is not None:
        parts.append(to_header(3, "Fields"))
        rows = [FieldRow(item) for item in sorted_by_name(typ.fields)]
        parts.append(to_markdown_table(FIELD_HEADERS, rows))

    if typ.inputs is not None:
        parts.append(to_header(3, "Inputs"))
        input_rows = [InputRow(item) for item in sorted_by_name(typ.inputs)]
        parts.append(to_markdown_table(INPUT_HEADERS, input_rows))

    if typ.enums is not None:
        parts.append(to_header(3, "Values"))
        value_rows = [EnumValueRow(item) for item in sorted_by_name(typ.enums)]
        parts.append(to_markdown_table(ENUM_VALUE_HEADERS, value_rows))

    if typ.possible_types is not None:
        parts.append(to_header(3, "Implemented by"))
        names = sorted(to_inline_code(possible.name or "") for possible in typ.possible_types)
        parts.append(to_list(names))

    return "".join(parts)
