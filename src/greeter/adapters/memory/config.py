"""In-memory configuration adapters for testing.

Same signatures as the production loader and display adapters, but nothing
is read from disk and nothing is printed.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty Config regardless of profile."""
    return Config({}, {})


def get_default_config_path_in_memory() -> Path:
    """Return a synthetic path (the file does not exist)."""
    return Path(tempfile.gettempdir()) / "greeter" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Swallow the display request."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]
