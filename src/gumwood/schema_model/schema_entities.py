"""Schema model entities."""

from __future__ import annotations

from dataclasses import dataclass

NON_NULL_KIND = "NON_NULL"
LIST_KIND = "LIST"

# Seven unwrap steps (eight levels), as deep as the TypeRef fragment of the
# introspection query.
MAX_TYPE_REF_DEPTH = 7


@dataclass(frozen=True)
class TypeRef:
    """Reference to a type, possibly wrapped in NON_NULL/LIST levels."""

    name: str | None = None
    kind: str | None = None
    of_type: TypeRef | None = None

    def is_required(self) -> bool:
        return self.kind == NON_NULL_KIND

    def is_list(self) -> bool:
        return self.kind == LIST_KIND

    def actual_name(self) -> str:
        """Return the first name found while unwrapping, or an empty string."""
        current: TypeRef | None = self
        for _ in range(MAX_TYPE_REF_DEPTH + 1):
            if current is None:
                return ""
            if current.name:
                return current.name
            current = current.of_type
        return ""

    def actual_kind(self) -> str:
        """Return the kind of the level where the chain bottoms out."""
        current = self
        for _ in range(MAX_TYPE_REF_DEPTH + 1):
            if current.of_type is None:
                return current.kind or ""
            current = current.of_type
        return ""

    def decorated_name(self) -> str:
        """Return the GraphQL notation of the reference, e.g. ``[ID!]!``."""
        decorated = _decorate(self, depth=0)
        return decorated if decorated is not None else ""


def _decorate(type_ref: TypeRef, *, depth: int) -> str | None:
    if depth > MAX_TYPE_REF_DEPTH:
        return None
    if type_ref.name:
        inner: str | None = type_ref.name
    elif type_ref.of_type is not None:
        inner = _decorate(type_ref.of_type, depth=depth + 1)
    else:
        inner = ""
    if inner is None:
        return None
    if type_ref.is_list():
        inner = f"[{inner}]"
    if type_ref.is_required():
        inner = f"{inner}!"
    return inner


@dataclass(frozen=True)
class Input:
    """Argument of a field or member of an input object."""

    name: str | None = None
    description: str | None = None
    type: TypeRef | None = None
    default_value: str | None = None


@dataclass(frozen=True)
class Field:
    """Field of an object, interface or root operation type."""

    name: str | None = None
    description: str | None = None
    args: tuple[Input, ...] | None = None
    type: TypeRef | None = None
    is_deprecated: bool = False
    deprecation_reason: str | None = None


@dataclass(frozen=True)
class EnumValue:
    """Single value of an enum type."""

    name: str | None = None
    description: str | None = None
    is_deprecated: bool = False
    deprecation_reason: str | None = None


@dataclass(frozen=True)
class Type:  # pylint: disable=too-many-instance-attributes
    """Named type from the introspected type system."""

    name: str | None = None
    kind: str | None = None
    description: str | None = None
    fields: tuple[Field, ...] | None = None
    inputs: tuple[Input, ...] | None = None
    interfaces: tuple[TypeRef, ...] | None = None
    enums: tuple[EnumValue, ...] | None = None
    possible_types: tuple[TypeRef, ...] | None = None

    def __str__(self) -> str:
        return self.name or ""


@dataclass(frozen=True)
class Directive:
    """Directive declared by the schema."""

    name: str | None = None
    description: str | None = None
    locations: tuple[str, ...] | None = None
    args: tuple[Input, ...] | None = None


@dataclass(frozen=True)
class Schema:
    """Deserialized ``__schema`` section of an introspection response."""

    query_type: Type | None = None
    mutation_type: Type | None = None
    subscription_type: Type | None = None
    types: tuple[Type, ...] | None = None
    directives: tuple[Directive, ...] | None = None

    def get_query_name(self) -> str | None:
        return _root_name(self.query_type)

    def get_mutation_name(self) -> str | None:
        return _root_name(self.mutation_type)

    def get_subscription_name(self) -> str | None:
        return _root_name(self.subscription_type)

    def get_type(self, name: str) -> Type | None:
        """Return the first type carrying ``name``."""
        for candidate in self.types or ():
            if candidate.name is not None and candidate.name == name:
                return candidate
        return None

    def get_types_of_kind(self, kind: str) -> list[Type]:
        """Return the types of ``kind`` in source order."""
        return [candidate for candidate in self.types or () if candidate.kind == kind]


def _root_name(root_type: Type | None) -> str | None:
    if root_type is None:
        return None
    return root_type.name
