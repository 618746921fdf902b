"""Markdown text builders."""

from __future__ import annotations

from collections.abc import Sequence


def to_header(level: int, text: str) -> str:
    """Return a header of ``level`` followed by a blank line."""
    return f"{'#' * level} {text}\n\n"


def to_description(text: str) -> str:
    return f"> {text}\n\n"


def to_notice(notice: str) -> str:
    return f"_{notice}_\n"


def to_label(label: str, value: str) -> str:
    return f"**{label}:** {value}\n\n"


def to_inline_code(text: str) -> str:
    """Wrap ``text`` in backticks; empty text stays empty."""
    if not text:
        return ""
    return f"`{text}`"


def to_link(text: str, destination: str) -> str:
    """Return a link to ``destination``; empty text yields no link."""
    if not text:
        return ""
    return f"[{text}]({destination})"


def to_named_anchor(text: str) -> str:
    """Return an HTML anchor named after the lowercased text, then the text itself."""
    return f'<a name="{text.lower()}"></a>{text}'


def to_list(items: Sequence[str]) -> str:
    lines = "".join(f"* {item}\n" for item in items)
    return f"{lines}\n"


def to_table_row(cells: Sequence[str]) -> str:
    return f"| {' | '.join(cells)} |\n"


def to_table_separator(column_count: int) -> str:
    return to_table_row(["---"] * column_count)
