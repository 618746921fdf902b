"""CLI smoke tests."""

from click.testing import CliRunner
from gumwood.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "render" in result.output
    assert "generate-config" in result.output
    assert "introspection-query" in result.output


def test_render_help_lists_schema_sources() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["render", "-h"])

    assert result.exit_code == 0
    for option in ("--url", "--json", "--schema", "--header", "--out-dir", "--front-matter"):
        assert option in result.output
