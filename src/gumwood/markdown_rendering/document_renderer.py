"""Schema to Markdown document map."""

from __future__ import annotations

from gumwood.schema_model.schema_entities import Schema

from .category_renderer import render_category
from .link_resolution import KIND_DOCUMENTS, KIND_TITLES
from .type_collection_renderer import render_type_collection

CATEGORY_DOCUMENTS: tuple[str, ...] = ("queries", "mutations", "subscriptions")
DOCUMENT_NAMES: tuple[str, ...] = CATEGORY_DOCUMENTS + tuple(KIND_DOCUMENTS.values())


def render_schema(schema: Schema) -> dict[str, str]:
    """Render ``schema`` into one Markdown text per document name.

    Every name in ``DOCUMENT_NAMES`` is present; documents without content
    are empty strings.
    """
    contents = {
        "queries": render_category(schema, schema.get_query_name()),
        "mutations": render_category(schema, schema.get_mutation_name()),
        "subscriptions": render_category(schema, schema.get_subscription_name()),
    }
    for kind, document in KIND_DOCUMENTS.items():
        contents[document] = render_type_collection(schema, KIND_TITLES[kind], kind)
    return contents


def document_title(document: str) -> str:
    """Return the human title of a document name, e.g. ``Objects``."""
    return document.title()
