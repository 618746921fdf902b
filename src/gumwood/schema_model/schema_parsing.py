"""Introspection response parsing service."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, TypeVar

from .schema_entities import Directive, EnumValue, Field, Input, Schema, Type, TypeRef

T = TypeVar("T")


class SchemaErrorKind(str, Enum):
    """Reason an introspection response could not be turned into a schema."""

    INVALID_JSON = "invalid_json"
    NOT_AN_OBJECT = "not_an_object"
    MISSING_DATA = "missing_data"
    MISSING_SCHEMA = "missing_schema"
    DESERIALIZATION = "deserialization"


class SchemaError(Exception):
    """Raised when an introspection response cannot be parsed."""

    def __init__(self, message: str, kind: SchemaErrorKind = SchemaErrorKind.DESERIALIZATION):
        super().__init__(message)
        self.kind = kind


def parse_schema(json_text: str) -> Schema:
    """Parse the text of an introspection response into a schema."""
    try:
        response = json.loads(json_text)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"invalid JSON: {exc}", SchemaErrorKind.INVALID_JSON) from exc

    if not isinstance(response, Mapping):
        raise SchemaError("response format not an object", SchemaErrorKind.NOT_AN_OBJECT)
    if "data" not in response:
        raise SchemaError("data not in response", SchemaErrorKind.MISSING_DATA)
    data = response["data"]
    if not isinstance(data, Mapping) or "__schema" not in data:
        raise SchemaError("schema not in response", SchemaErrorKind.MISSING_SCHEMA)
    return build_schema(data["__schema"])


def build_schema(value: Any) -> Schema:
    """Build a schema from a decoded ``__schema`` mapping."""
    section = _require_mapping(value, "__schema")
    return Schema(
        query_type=_optional_object(section, ("queryType", "query_type"), "queryType", _build_type),
        mutation_type=_optional_object(
            section, ("mutationType", "mutation_type"), "mutationType", _build_type
        ),
        subscription_type=_optional_object(
            section, ("subscriptionType", "subscription_type"), "subscriptionType", _build_type
        ),
        types=_optional_list(section, ("types",), "types", _build_type),
        directives=_optional_list(section, ("directives",), "directives", _build_directive),
    )


def _build_type(value: Any, path: str) -> Type:
    section = _require_mapping(value, path)
    return Type(
        name=_optional_string(section, ("name",), f"{path}.name"),
        kind=_optional_string(section, ("kind",), f"{path}.kind"),
        description=_optional_string(section, ("description",), f"{path}.description"),
        fields=_optional_list(section, ("fields",), f"{path}.fields", _build_field),
        inputs=_optional_list(
            section, ("inputFields", "inputs", "input_fields"), f"{path}.inputFields", _build_input
        ),
        interfaces=_optional_list(
            section, ("interfaces",), f"{path}.interfaces", _build_type_ref
        ),
        enums=_optional_list(
            section, ("enumValues", "enums", "enum_values"), f"{path}.enumValues", _build_enum_value
        ),
        possible_types=_optional_list(
            section,
            ("possibleTypes", "possible_types"),
            f"{path}.possibleTypes",
            _build_type_ref,
        ),
    )


def _build_field(value: Any, path: str) -> Field:
    section = _require_mapping(value, path)
    return Field(
        name=_optional_string(section, ("name",), f"{path}.name"),
        description=_optional_string(section, ("description",), f"{path}.description"),
        args=_optional_list(section, ("args",), f"{path}.args", _build_input),
        type=_optional_object(section, ("type", "field_type"), f"{path}.type", _build_type_ref),
        is_deprecated=_optional_bool(
            section, ("isDeprecated", "is_deprecated"), f"{path}.isDeprecated"
        ),
        deprecation_reason=_optional_string(
            section, ("deprecationReason", "deprecation_reason"), f"{path}.deprecationReason"
        ),
    )


def _build_input(value: Any, path: str) -> Input:
    section = _require_mapping(value, path)
    return Input(
        name=_optional_string(section, ("name",), f"{path}.name"),
        description=_optional_string(section, ("description",), f"{path}.description"),
        type=_optional_object(section, ("type", "input_type"), f"{path}.type", _build_type_ref),
        default_value=_optional_string(
            section, ("defaultValue", "default_value"), f"{path}.defaultValue"
        ),
    )


def _build_enum_value(value: Any, path: str) -> EnumValue:
    section = _require_mapping(value, path)
    return EnumValue(
        name=_optional_string(section, ("name",), f"{path}.name"),
        description=_optional_string(section, ("description",), f"{path}.description"),
        is_deprecated=_optional_bool(
            section, ("isDeprecated", "is_deprecated"), f"{path}.isDeprecated"
        ),
        deprecation_reason=_optional_string(
            section, ("deprecationReason", "deprecation_reason"), f"{path}.deprecationReason"
        ),
    )


def _build_type_ref(value: Any, path: str) -> TypeRef:
    # Payload nesting is unbounded; unwrap without recursion.
    levels: list[tuple[str | None, str | None]] = []
    section = _require_mapping(value, path)
    current_path = path
    while True:
        levels.append(
            (
                _optional_string(section, ("name",), f"{current_path}.name"),
                _optional_string(section, ("kind",), f"{current_path}.kind"),
            )
        )
        wrapped = _first_present(section, ("ofType", "of_type"))
        if wrapped is None:
            break
        current_path = f"{current_path}.ofType"
        section = _require_mapping(wrapped, current_path)

    name, kind = levels.pop()
    type_ref = TypeRef(name=name, kind=kind)
    for name, kind in reversed(levels):
        type_ref = TypeRef(name=name, kind=kind, of_type=type_ref)
    return type_ref


def _build_directive(value: Any, path: str) -> Directive:
    section = _require_mapping(value, path)
    locations = _optional_list(
        section, ("locations",), f"{path}.locations", _require_string_item
    )
    return Directive(
        name=_optional_string(section, ("name",), f"{path}.name"),
        description=_optional_string(section, ("description",), f"{path}.description"),
        locations=locations,
        args=_optional_list(section, ("args",), f"{path}.args", _build_input),
    )


def _first_present(section: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = section.get(key)
        if value is not None:
            return value
    return None


def _require_mapping(value: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SchemaError(f"invalid type at {path}: expected an object")
    return value


def _require_string_item(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise SchemaError(f"invalid type at {path}: expected a string")
    return value


def _optional_string(section: Mapping[str, Any], keys: tuple[str, ...], path: str) -> str | None:
    value = _first_present(section, keys)
    if value is None:
        return None
    return _require_string_item(value, path)


def _optional_bool(section: Mapping[str, Any], keys: tuple[str, ...], path: str) -> bool:
    value = _first_present(section, keys)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise SchemaError(f"invalid type at {path}: expected a boolean")
    return value


def _optional_object(
    section: Mapping[str, Any],
    keys: tuple[str, ...],
    path: str,
    builder: Callable[[Any, str], T],
) -> T | None:
    value = _first_present(section, keys)
    if value is None:
        return None
    return builder(value, path)


def _optional_list(
    section: Mapping[str, Any],
    keys: tuple[str, ...],
    path: str,
    builder: Callable[[Any, str], T],
) -> tuple[T, ...] | None:
    value = _first_present(section, keys)
    if value is None:
        return None
    if not isinstance(value, list):
        raise SchemaError(f"invalid type at {path}: expected a list")
    return tuple(builder(item, f"{path}[{index}]") for index, item in enumerate(value))
