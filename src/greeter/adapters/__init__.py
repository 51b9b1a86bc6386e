"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.config` - Layered configuration loading, overrides, and display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory stand-ins used by the test wiring
    * :mod:`.cli` - rich-click command-line interface
"""

from __future__ import annotations

__all__: list[str] = []
