"""CLI orchestration integration tests."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner
from gumwood.cli import cli
from gumwood.schema_sources import INTROSPECTION_QUERY


def _sample_path() -> Path:
    return Path(__file__).resolve().parents[3] / "samples" / "sample-introspection.json"


def test_render_command_writes_documents_to_out_dir(tmp_path: Path) -> None:
    runner = CliRunner()
    out_dir = tmp_path / "docs"

    result = runner.invoke(
        cli,
        [
            "render",
            "--json",
            str(_sample_path()),
            "--out-dir",
            str(out_dir),
        ],
    )

    assert result.exit_code == 0
    assert sorted(path.name for path in out_dir.iterdir()) == [
        "enums.md",
        "inputs.md",
        "interfaces.md",
        "mutations.md",
        "objects.md",
        "queries.md",
        "scalars.md",
        "unions.md",
    ]
    assert str(out_dir / "queries.md") in result.output
    queries = (out_dir / "queries.md").read_text(encoding="utf-8")
    assert queries.startswith("# Query\n\n> The root query\n\n## team\n\n")


def test_render_command_prints_documents_without_out_dir() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["render", "-j", str(_sample_path())])

    assert result.exit_code == 0
    assert result.output.startswith("# Enums\n\n")
    assert '## <a name="searchresult"></a>SearchResult' in result.output
    assert result.output.endswith("* `Team`\n\n\n")


def test_render_command_reads_standard_input() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["render"], input=_sample_path().read_text(encoding="utf-8"))

    assert result.exit_code == 0
    assert "# Scalars\n\n" in result.output


def test_render_command_applies_front_matter(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "render",
            "--json",
            str(_sample_path()),
            "--out-dir",
            str(tmp_path),
            "--front-matter",
            "layout:docs;title:{title}",
        ],
    )

    assert result.exit_code == 0
    assert (tmp_path / "enums.md").read_text(encoding="utf-8").startswith(
        "---\nlayout: docs\ntitle: Enums\n---\n\n# Enums\n\n"
    )


def test_render_command_uses_configuration_file(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = tmp_path / "gumwood.yaml"
    config_path.write_text(
        f'source:\n  json: "{_sample_path()}"\noutput:\n  out_dir: "api"\n',
        encoding="utf-8",
    )

    result = runner.invoke(cli, ["render", "--config", str(config_path)])

    assert result.exit_code == 0
    assert (tmp_path / "api" / "objects.md").exists()


def test_render_command_rejects_multiple_sources(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "render",
            "--url",
            "https://example.com/graphql",
            "--json",
            str(_sample_path()),
            "--out-dir",
            str(tmp_path / "docs"),
        ],
    )

    assert result.exit_code != 0
    assert "At most one schema source" in str(result.exception)
    assert not (tmp_path / "docs").exists()


def test_render_command_reports_malformed_response() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["render"], input="[]")

    assert result.exit_code != 0
    assert "response format not an object" in str(result.exception)


def test_generate_config_command_writes_placeholder_file_with_default_name(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=str(tmp_path)):
        result = runner.invoke(cli, ["generate-config"])
        output_path = Path("gumwood.yaml").resolve()

        assert result.exit_code == 0
        assert output_path.exists()
        content = output_path.read_text(encoding="utf-8")
        assert "source:" in content
        assert "output:" in content
        assert "<OPTIONAL>" in content
        assert str(output_path) in result.output


def test_generate_config_command_fails_when_output_file_already_exists(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "gumwood.yaml"
    output_path.write_text("already-there", encoding="utf-8")

    result = runner.invoke(
        cli,
        [
            "generate-config",
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code != 0
    assert "already exists" in str(result.exception).lower()
    assert output_path.read_text(encoding="utf-8") == "already-there"


def test_introspection_query_command_prints_query() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["introspection-query"])

    assert result.exit_code == 0
    assert result.output == INTROSPECTION_QUERY
    assert "__schema" in result.output


def test_render_command_reads_standard_input_without_deprecation_warnings(recwarn) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["render"], input=_sample_path().read_text(encoding="utf-8"))

    assert result.exit_code == 0
    deprecations = [
        str(warning.message)
        for warning in recwarn
        if issubclass(warning.category, DeprecationWarning)
    ]
    assert not [message for message in deprecations if "Click 9.0" in message]
