"""CLI entry point shared by the console script and ``python -m greeter``.

Contents:
    * :func:`main` - Run the CLI and translate the outcome into an exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from greeter import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)

if TYPE_CHECKING:
    from greeter.composition import AppServices


def _invoke_greeter(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    """Invoke the root group and map every outcome to an exit code.

    The services factory travels to the root command as ``ctx.obj``, which
    ``lib_cli_exit_tools.run_cli`` cannot pass, so its behaviour is
    reproduced here.
    """
    from .root import cli

    try:
        cli.main(
            args=list(argv) if argv is not None else sys.argv[1:],
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
        return 0
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        # A failing greet or age, Ctrl-C included, is printed and mapped by lib_cli_exit_tools.
        tracebacks_enabled = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
        apply_traceback_preferences(tracebacks_enabled)
        length_limit = TRACEBACK_VERBOSE_LIMIT if tracebacks_enabled else TRACEBACK_SUMMARY_LIMIT
        lib_cli_exit_tools.print_exception_message(trace_back=tracebacks_enabled, length_limit=length_limit)
        return lib_cli_exit_tools.get_system_exit_code(exc)


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the greeter CLI and return its exit code.

    Args:
        argv: CLI arguments; ``None`` reads ``sys.argv``.
        restore_traceback: Put the traceback flags back to their previous
            values after the run.
        services_factory: Returns the wired :class:`AppServices`. Callers
            outside the adapters layer pass ``build_production``.

    Returns:
        Exit code of the run.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from greeter.composition import build_production
        >>> main(["greet", "Ben", "1985"], services_factory=build_production)  # doctest: +SKIP
        Hello Ben. Your are 34 year old.
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    previous_state = snapshot_traceback_state()
    try:
        return _invoke_greeter(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        # Shutting down from a worker thread would stop logging for the whole process.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
