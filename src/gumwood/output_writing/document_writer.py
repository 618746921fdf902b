"""Document writer service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIX = ".md"


def write_documents(contents: Mapping[str, str], out_dir: Path | str) -> list[Path]:
    """Write each non-empty document to ``<out_dir>/<name>.md``.

    Returns:
      The written paths in document name order.

    Raises:
      OSError: If the directory or a file cannot be written.
    """
    destination = Path(out_dir)
    destination.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for name in sorted(contents):
        markdown = contents[name]
        if not markdown:
            logger.debug("Skipping empty document %s", name)
            continue
        path = destination / f"{name}{DOCUMENT_SUFFIX}"
        path.write_text(markdown, encoding="utf-8")
        logger.info("Wrote %s", path)
        written.append(path)
    return written


def format_for_stdout(contents: Mapping[str, str]) -> str:
    """Join non-empty documents in name order, each followed by a newline."""
    return "".join(f"{contents[name]}\n" for name in sorted(contents) if contents[name])
