"""Tests for the command-line interface."""

from pathlib import Path

from click.testing import CliRunner

from bundle_cli.cli import _parse_port, cli

INDEX_HTML = "<html>\n  <head>\n  </head>\n  <body>\n  </body>\n</html>\n"


def make_project():
    Path("src").mkdir()
    Path("src/index.ts").write_text("export {};\n", encoding="utf-8")
    Path("src/index.html").write_text(INDEX_HTML, encoding="utf-8")


def test_version():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert result.output.startswith("bundle-hooks ")


def test_dry_run_lists_expected_files():
    runner = CliRunner()
    with runner.isolated_filesystem():
        make_project()
        result = runner.invoke(cli, ["build", "--dry-run"])

    assert result.exit_code == 0, result.output
    assert "out/index.js" in result.output
    assert "out/index.html" in result.output


def test_malformed_import_triples_are_skipped():
    runner = CliRunner()
    with runner.isolated_filesystem():
        make_project()
        result = runner.invoke(cli, ["build", "--dry-run", "--extern", "react|React|react.js", "oops"])

    assert result.exit_code == 0, result.output
    assert "Invalid argument: oops" in result.output


def test_build_failure_exits_non_zero():
    runner = CliRunner()
    with runner.isolated_filesystem():
        make_project()
        with open("tsconfig.json", "w", encoding="utf-8") as f:
            f.write("{")
        result = runner.invoke(cli, ["build"])

    assert result.exit_code == 1
    assert "Failed to parse tsconfig.json" in result.output


def test_invalid_config_exits_non_zero():
    runner = CliRunner()
    with runner.isolated_filesystem():
        with open("build.yml", "w", encoding="utf-8") as f:
            f.write("build:\n  sourcemap: sometimes\n")
        result = runner.invoke(cli, ["build", "--dry-run"])

    assert result.exit_code == 1
    assert "Invalid sourcemap mode" in result.output


def test_port_falls_back_to_default():
    assert _parse_port("8080") == 8080
    assert _parse_port("abc") == 8000
    assert _parse_port(None) == 8000
    assert _parse_port("70000") == 8000
