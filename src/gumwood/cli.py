"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from gumwood.configuration import DEFAULT_CONFIG_FILENAME, write_placeholder_configuration
from gumwood.generation_run import GenerationRequest, GenerationRunError, execute_generation_run
from gumwood.schema_sources import INTROSPECTION_QUERY


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="gumwood")
def cli() -> None:
    """Convert a GraphQL schema to Markdown."""


@cli.command(name="render")
@click.option("--url", "-u", "url", required=False, help="URL to introspect")
@click.option(
    "--json",
    "-j",
    "json_path",
    required=False,
    type=click.Path(path_type=str),
    help="File containing an introspection response",
)
@click.option(
    "--schema",
    "-s",
    "schema_path",
    required=False,
    type=click.Path(path_type=str),
    help="GraphQL schema file",
)
@click.option(
    "--header",
    "-H",
    "headers",
    multiple=True,
    help="Header to send in the URL request, in name:value format; allows multiple",
)
@click.option(
    "--out-dir",
    "-o",
    "out_dir",
    required=False,
    type=click.Path(file_okay=False, path_type=str),
    help="Output directory for one file per document",
)
@click.option(
    "--front-matter",
    "-f",
    "front_matter",
    required=False,
    help="Front matter for output files, as key:value pairs separated by ';'",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML configuration file",
)
@click.option(
    "--timeout",
    "timeout_seconds",
    required=False,
    type=click.IntRange(min=1),
    help="Seconds to wait for the introspection response",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log progress to stderr.")
def render(  # pylint: disable=too-many-arguments
    url: str | None,
    json_path: str | None,
    schema_path: str | None,
    headers: tuple[str, ...],
    out_dir: str | None,
    front_matter: str | None,
    config_path: str | None,
    timeout_seconds: int | None,
    verbose: bool,
) -> None:
    """Render the schema into Markdown documents.

    Specify the source of the schema using --url, --json or --schema. Without
    a source, the introspection response is read from stdin. With --out-dir,
    one file per non-empty document is written; otherwise all documents are
    printed to stdout.
    """
    if verbose:
        _configure_verbose_logging()
    try:
        outcome = execute_generation_run(
            GenerationRequest(
                config_path=config_path,
                url=url,
                json_path=json_path,
                schema_path=schema_path,
                headers=headers,
                out_dir=out_dir,
                front_matter=front_matter,
                timeout_seconds=timeout_seconds,
            ),
            stdin=sys.stdin,
        )
    except GenerationRunError as exc:
        raise CliError(str(exc)) from exc

    if outcome.stdout_text is not None:
        click.echo(outcome.stdout_text, nl=False)
    else:
        for path in outcome.written_paths:
            click.echo(str(path))


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="introspection-query")
def introspection_query() -> None:
    """Print the introspection query sent to GraphQL servers."""
    click.echo(INTROSPECTION_QUERY, nl=False)


def _configure_verbose_logging() -> None:
    package_logger = logging.getLogger("gumwood")
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
