"""Front matter for generated documents."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import yaml

FrontMatterEntries = tuple[tuple[str, str], ...]


class FrontMatterError(Exception):
    """Raised when a front matter definition is malformed."""


def parse_front_matter(text: str) -> FrontMatterEntries:
    """Parse ``key:value;key:value`` into ordered entries.

    Empty segments are ignored; the first colon of a segment separates key
    and value.
    """
    entries: list[tuple[str, str]] = []
    for segment in text.split(";"):
        if not segment.strip():
            continue
        key, separator, value = segment.partition(":")
        key = key.strip()
        if not separator or not key:
            raise FrontMatterError(f"Front matter entries must use key:value format: {segment}")
        entries.append((key, value.strip()))
    return tuple(entries)


def render_front_matter(entries: Sequence[tuple[str, str]], document: str, title: str) -> str:
    """Render entries as a YAML front matter block.

    ``{document}`` and ``{title}`` in values are replaced with the document
    name and its title.
    """
    if not entries:
        return ""
    values = {
        key: value.replace("{document}", document).replace("{title}", title)
        for key, value in entries
    }
    body = yaml.safe_dump(values, sort_keys=False, default_flow_style=False, allow_unicode=True)
    return f"---\n{body}---\n\n"


def apply_front_matter(
    contents: Mapping[str, str],
    entries: Sequence[tuple[str, str]],
    titles: Mapping[str, str],
) -> dict[str, str]:
    """Prefix every non-empty document with its front matter block."""
    return {
        document: (
            render_front_matter(entries, document, titles.get(document, document)) + markdown
            if markdown
            else markdown
        )
        for document, markdown in contents.items()
    }
