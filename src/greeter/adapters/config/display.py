"""Render the merged configuration through lib_layered_config's Rich display."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from greeter.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Print ``config`` (or one section of it) to stdout.

    Pending log records are flushed first so they do not interleave with the
    rendered configuration.

    Args:
        config: Configuration to render.
        output_format: TOML-like human view or JSON.
        section: Restrict output to this top-level section.
        console: Rich console to write to; the library default when ``None``.
        profile: Profile name shown in the provenance comments.

    Raises:
        ValueError: If ``section`` does not exist in ``config``.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    _lib_display(
        config,
        output_format=LibOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
