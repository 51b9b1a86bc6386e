"""CLI command implementations registered on the root group.

Contents:
    * Greeting commands from :mod:`.greet`
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .greet import cli_age, cli_greet
from .info import cli_info

__all__ = [
    "cli_age",
    "cli_config",
    "cli_greet",
    "cli_info",
]
