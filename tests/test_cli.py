"""Tests for the root clockspeak CLI."""

import pytest
from click.testing import CliRunner

from clockspeak import __version__
from clockspeak.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "clockspeak" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.parametrize(
    "flags",
    [["--json"], ["-q"], ["-v"], ["--log-json"], ["--lang", "en"], ["-c", "/tmp/none.toml"]],
)
def test_global_flags_accepted(cli_runner: CliRunner, flags: list[str]) -> None:
    result = cli_runner.invoke(cli, [*flags, "--version"])
    assert result.exit_code == 0


def test_invalid_lang_rejected(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--lang", "fr", "time", "12:00"])
    assert result.exit_code == 2


# --- Commands registered ---

EXPECTED_COMMANDS = ["time", "date", "now", "localize"]


@pytest.mark.parametrize("name", EXPECTED_COMMANDS)
def test_command_registered(name: str) -> None:
    assert name in cli.commands


@pytest.mark.parametrize("name", EXPECTED_COMMANDS)
def test_command_help(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, [name, "--help"])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_verbose_debug_logs(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--log-json", "time", "13:00"])
    assert result.exit_code == 0
    assert '"event": "compile_time"' in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_log_lines_carry_clock_context(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--log-json", "--lang", "en", "time", "13:00"])
    assert result.exit_code == 0
    assert '"language": "en"' in result.output
    assert '"clock_source": "system"' in result.output


def test_help_lists_commands_in_registration_order(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    positions = [result.output.index(f"  {name} ") for name in EXPECTED_COMMANDS]
    assert positions == sorted(positions)


@pytest.mark.parametrize("name", EXPECTED_COMMANDS)
def test_help_points_at_examples(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, [name, "--help"])
    assert "Run with --examples for usage examples." in result.output
