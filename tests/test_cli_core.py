"""CLI core stories: traceback flags, help, info, version, unknown command."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner, Result

from greeter import __init__conf__
from greeter.adapters import cli as cli_mod
from greeter.composition import build_production


@pytest.mark.os_agnostic
def test_snapshot_traceback_state_returns_disabled_by_default(managed_traceback_state: None) -> None:
    """snapshot_traceback_state returns both flags disabled initially."""
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_apply_traceback_preferences_enables_both_flags(managed_traceback_state: None) -> None:
    """apply_traceback_preferences(True) enables traceback and force_color."""
    cli_mod.apply_traceback_preferences(True)

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


@pytest.mark.os_agnostic
def test_traceback_flag_is_active_during_command_and_restored_after(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    """--traceback is visible inside the command and gone once main() returns."""
    notes: list[tuple[bool, bool]] = []

    def record() -> None:
        notes.append((lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color))

    monkeypatch.setattr(__init__conf__, "print_info", record)

    exit_code = cli_mod.main(["--traceback", "info"], services_factory=build_production)

    assert exit_code == 0
    assert notes == [(True, True)]
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_restore_traceback_false_keeps_flags_enabled(managed_traceback_state: None) -> None:
    """restore_traceback=False leaves traceback flags enabled after command."""
    cli_mod.main(["--traceback", "info"], restore_traceback=False, services_factory=build_production)

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


@pytest.mark.os_agnostic
def test_when_cli_runs_without_arguments_help_is_printed(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """Verify CLI with no arguments displays help text listing the commands."""
    result = cli_runner.invoke(cli_mod.cli, [], obj=production_factory)

    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "greet" in result.output
    assert "age" in result.output


@pytest.mark.os_agnostic
def test_when_main_receives_no_arguments_help_is_shown(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Verify main with no args shows help."""
    exit_code = cli_mod.main([], services_factory=build_production)

    assert exit_code == 0
    assert "Usage:" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_info_command_displays_project_metadata(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """info command displays project name and version."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=production_factory)

    assert result.exit_code == 0
    assert f"Info for {__init__conf__.name}:" in result.output
    assert __init__conf__.version in result.output


@pytest.mark.os_agnostic
def test_version_option_prints_version(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """--version prints the shell command and version."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["--version"], obj=production_factory)

    assert result.exit_code == 0
    assert f"greeter version {__init__conf__.version}" in result.output


@pytest.mark.os_agnostic
def test_unknown_command_shows_no_such_command_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """Unknown command produces 'No such command' error."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["does-not-exist"], obj=production_factory)

    assert result.exit_code != 0
    assert "No such command" in result.output


@pytest.mark.os_agnostic
def test_invalid_profile_name_is_a_usage_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    clear_config_cache: None,
) -> None:
    """A path-traversing profile name is rejected before any file lookup."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "../etc", "greet"], obj=production_factory)

    assert result.exit_code == 2
    assert "--profile" in result.output
