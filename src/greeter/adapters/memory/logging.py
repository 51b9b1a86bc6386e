"""No-op logging initializer for the in-memory wiring."""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Leave lib_log_rich untouched."""


__all__ = ["init_logging_in_memory"]
