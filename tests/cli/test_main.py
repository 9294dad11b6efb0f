"""Tests for the mmg command group."""

from click.testing import CliRunner

from modelmapper.cli.main import cli

runner = CliRunner()


def test_version() -> None:
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "mmg, version 0.1.0" in result.output


def test_commands_registered() -> None:
    assert set(cli.commands) == {"init", "generate", "check"}


def test_help_lists_commands() -> None:
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for name in ("init", "generate", "check"):
        assert name in result.output
