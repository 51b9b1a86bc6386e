"""Behaviour tests for the CLI entry point and context helpers."""

from __future__ import annotations

import lib_cli_exit_tools
import pytest
import rich_click as click
from click.testing import CliRunner, Result
from lib_layered_config import Config

from greeter.adapters import cli as cli_mod
from greeter.adapters.cli.context import (
    CLIContext,
    apply_traceback_preferences,
    get_cli_context,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from greeter.adapters.cli.main import main
from greeter.composition import build_production, build_testing


@pytest.mark.os_agnostic
def test_main_raises_when_services_factory_is_none() -> None:
    """main() raises ValueError when services_factory is not provided."""
    with pytest.raises(ValueError, match="services_factory is required"):
        main(["--help"], services_factory=None)


@pytest.mark.os_agnostic
def test_main_handles_click_exception(managed_traceback_state: None) -> None:
    """A malformed --set override becomes a usage error exit code."""
    exit_code = main(["--set", "invalid_no_dot=value", "greet"], services_factory=build_testing)

    assert exit_code == 2


@pytest.mark.os_agnostic
def test_main_turns_an_interrupted_age_into_an_exit_code(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Ctrl-C inside a command is reported and returned instead of propagating."""
    from greeter.adapters.cli.commands import greet as greet_cmd

    def _interrupt(birth_year: int) -> int:
        raise KeyboardInterrupt

    monkeypatch.setattr(greet_cmd, "compute_age", _interrupt)

    exit_code = main(["age", "1985"], services_factory=build_production)

    assert exit_code != 0
    assert capsys.readouterr().out == ""


@pytest.mark.os_agnostic
def test_get_cli_context_raises_when_not_initialized() -> None:
    """RuntimeError raised when Click context has no CLIContext."""
    ctx = click.Context(click.Command("test"))
    ctx.obj = "not a CLIContext"

    with pytest.raises(RuntimeError, match="CLI context not initialized"):
        get_cli_context(ctx)


@pytest.mark.os_agnostic
def test_cli_root_raises_when_obj_not_callable(cli_runner: CliRunner) -> None:
    """The root command refuses to run without a services factory."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["greet"], obj="not_callable")

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)


@pytest.mark.os_agnostic
def test_traceback_snapshot_restore_round_trip(managed_traceback_state: None) -> None:
    """snapshot → mutate → restore returns to original state."""
    original = snapshot_traceback_state()

    apply_traceback_preferences(True)
    restore_traceback_state(original)

    assert lib_cli_exit_tools.config.traceback == original[0]
    assert lib_cli_exit_tools.config.traceback_force_color == original[1]


@pytest.mark.os_agnostic
def test_store_and_get_cli_context_round_trip() -> None:
    """Stored CLIContext is retrievable via get_cli_context."""
    ctx = click.Context(click.Command("test"))

    store_cli_context(
        ctx,
        traceback=True,
        config=Config({}, {}),
        services=build_production(),
        profile="staging",
        set_overrides=("a.b=1",),
    )
    result = get_cli_context(ctx)

    assert isinstance(result, CLIContext)
    assert result.traceback is True
    assert result.profile == "staging"
    assert result.set_overrides == ("a.b=1",)
