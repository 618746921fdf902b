"""Cross-document link resolution."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from gumwood.schema_model.schema_entities import TypeRef

KIND_DOCUMENTS: Mapping[str, str] = MappingProxyType(
    {
        "INPUT_OBJECT": "inputs",
        "OBJECT": "objects",
        "ENUM": "enums",
        "INTERFACE": "interfaces",
        "UNION": "unions",
        "SCALAR": "scalars",
    }
)

KIND_TITLES: Mapping[str, str] = MappingProxyType(
    {kind: document.title() for kind, document in KIND_DOCUMENTS.items()}
)


def document_for_kind(kind: str) -> str:
    """Return the document holding types of ``kind``; unknown kinds map to ``""``."""
    return KIND_DOCUMENTS.get(kind, "")


def link_for_type_ref(type_ref: TypeRef) -> str:
    """Return the relative link to the section documenting ``type_ref``."""
    document = document_for_kind(type_ref.actual_kind())
    return f"{document}.md#{type_ref.actual_name().lower()}"
