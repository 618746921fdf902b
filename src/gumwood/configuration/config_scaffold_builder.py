"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "gumwood.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for gumwood.
# Command line options override the values below.
# Replace <OPTIONAL> placeholders only when your setup needs them; delete the rest.

source:
  # Choose at most one schema source (url, json or schema).
  # Standard input is read when none is set.
  url: "<OPTIONAL>"
  # json: "<OPTIONAL>"
  # schema: "<OPTIONAL>"
  headers:
    # Sent with the introspection request.
    Authorization: "<OPTIONAL>"
  timeout_seconds: 30
  max_retries: 2
  retry_backoff_seconds: 0.5

output:
  # Documents are printed to standard output when out_dir is not set.
  out_dir: "<OPTIONAL>"
  # key:value pairs separated by ';'. Values may use {document} and {title}.
  front_matter: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
