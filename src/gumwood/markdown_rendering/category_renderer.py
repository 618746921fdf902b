"""Rendering of root operation types (queries, mutations, subscriptions)."""

from __future__ import annotations

from gumwood.schema_model.schema_entities import Field, Schema

from .markdown_primitives import to_description, to_header, to_label, to_notice
from .table_rows import INPUT_HEADERS, InputRow, linked_type_name, sorted_by_name, to_markdown_table


def render_category(schema: Schema, type_name: str | None) -> str:
    """Render the root type named ``type_name``.

    Returns an empty string when the name is missing or the schema holds no
    such type. Fields keep their declaration order.
    """
    if type_name is None:
        return ""
    root_type = schema.get_type(type_name)
    if root_type is None:
        return ""

    parts: list[str] = []
    if root_type.name is not None:
        parts.append(to_header(1, root_type.name))
    if root_type.description is not None:
        parts.append(to_description(root_type.description))
    for field in root_type.fields or ():
        parts.append(render_operation_field(field))
    return "".join(parts)


def render_operation_field(field: Field) -> str:
    parts: list[str] = []
    if field.name is not None:
        parts.append(to_header(2, field.name))
    if field.is_deprecated:
        parts.append(to_notice("Deprecated"))
    if field.description is not None:
        parts.append(to_description(field.description))
    if field.type is not None:
        parts.append(to_label("Type", linked_type_name(field.type)))
    if field.args:
        parts.append(to_header(3, "Arguments"))
        rows = [InputRow(argument) for argument in sorted_by_name(field.args)]
        parts.append(to_markdown_table(INPUT_HEADERS, rows))
    return "".join(parts)
