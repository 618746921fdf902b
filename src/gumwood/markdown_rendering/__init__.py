"""Markdown rendering exports."""

from .category_renderer import render_category
from .document_renderer import CATEGORY_DOCUMENTS, DOCUMENT_NAMES, document_title, render_schema
from .link_resolution import KIND_DOCUMENTS, KIND_TITLES, link_for_type_ref
from .type_collection_renderer import render_type_collection

__all__ = [
    "CATEGORY_DOCUMENTS",
    "DOCUMENT_NAMES",
    "KIND_DOCUMENTS",
    "KIND_TITLES",
    "document_title",
    "link_for_type_ref",
    "render_category",
    "render_schema",
    "render_type_collection",
]
