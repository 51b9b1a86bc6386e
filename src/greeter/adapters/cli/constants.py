"""Shared CLI constants."""

from __future__ import annotations

from typing import Any, Final

#: Shared Click context flags so help output stays consistent across commands.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Settings for commands taking a year argument; ``-6`` must reach the argument, not the option parser.
YEAR_ARGUMENT_CONTEXT_SETTINGS: Final[dict[str, Any]] = {
    **CLICK_CONTEXT_SETTINGS,
    "ignore_unknown_options": True,
}

#: Character budget used when printing truncated tracebacks.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Character budget used when verbose tracebacks are enabled.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "YEAR_ARGUMENT_CONTEXT_SETTINGS",
]
