"""Table rendering for fields, inputs and enum values."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol, TypeVar

from gumwood.schema_model.schema_entities import EnumValue, Field, Input, TypeRef

from .link_resolution import link_for_type_ref
from .markdown_primitives import to_inline_code, to_link, to_table_row, to_table_separator

FIELD_HEADERS: tuple[str, ...] = ("Name", "Type", "Description")
INPUT_HEADERS: tuple[str, ...] = ("Name", "Type", "Description", "Default Value")
ENUM_VALUE_HEADERS: tuple[str, ...] = ("Name", "Description", "Deprecated")


class _Named(Protocol):
    @property
    def name(self) -> str | None: ...


NamedT = TypeVar("NamedT", bound=_Named)


class TableItem(Protocol):
    """Anything that can describe itself as one table row."""

    def table_fields(self) -> list[str]: ...


@dataclass(frozen=True)
class FieldRow:
    field: Field

    def table_fields(self) -> list[str]:
        return [
            to_inline_code(to_safe_string(self.field.name)),
            linked_type_name(self.field.type),
            to_safe_string(self.field.description),
        ]


@dataclass(frozen=True)
class InputRow:
    input: Input

    def table_fields(self) -> list[str]:
        return [
            to_inline_code(to_safe_string(self.input.name)),
            linked_type_name(self.input.type),
            to_safe_string(self.input.description),
            to_inline_code(to_safe_string(self.input.default_value)),
        ]


@dataclass(frozen=True)
class EnumValueRow:
    enum_value: EnumValue

    def table_fields(self) -> list[str]:
        deprecated = (
            to_safe_string(self.enum_value.deprecation_reason)
            if self.enum_value.is_deprecated
            else "no"
        )
        return [
            to_inline_code(to_safe_string(self.enum_value.name)),
            to_safe_string(self.enum_value.description),
            deprecated,
        ]


def to_safe_string(value: str | None) -> str:
    """Return ``value`` trimmed and without newlines so it fits in one table cell."""
    if value is None:
        return ""
    return value.strip().replace("\n", "")


def linked_type_name(type_ref: TypeRef | None) -> str:
    """Return the decorated type name as inline code linking to its documentation."""
    if type_ref is None:
        return ""
    return to_link(to_inline_code(type_ref.decorated_name()), link_for_type_ref(type_ref))


def sorted_by_name(items: Iterable[NamedT]) -> list[NamedT]:
    """Sort by name with unnamed entries first."""
    return sorted(items, key=lambda item: (item.name is not None, item.name or ""))


def to_markdown_table(headers: Sequence[str], items: Sequence[TableItem]) -> str:
    rows = [to_table_row(headers), to_table_separator(len(headers))]
    rows.extend(to_table_row(item.table_fields()) for item in items)
    rows.append("\n")
    return "".join(rows)
