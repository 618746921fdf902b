"""Output writing exports."""

from .document_writer import DOCUMENT_SUFFIX, format_for_stdout, write_documents
from .front_matter import (
    FrontMatterEntries,
    FrontMatterError,
    apply_front_matter,
    parse_front_matter,
    render_front_matter,
)

__all__ = [
    "DOCUMENT_SUFFIX",
    "FrontMatterEntries",
    "FrontMatterError",
    "apply_front_matter",
    "format_for_stdout",
    "parse_front_matter",
    "render_front_matter",
    "write_documents",
]
