"""Exit codes returned by the greeter CLI.

Signal codes (130, 143) are listed for reference only; lib_cli_exit_tools
maps signals to them on its own.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """POSIX-conventional exit codes (sysexits.h / errno where applicable).

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    SIGNAL_INT = 130
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
