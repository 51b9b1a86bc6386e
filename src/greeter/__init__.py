"""Public package surface exposing the greeter, metadata, and configuration.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: Age computation and greeting
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    GREETING_BIRTH_YEAR,
    REFERENCE_YEAR,
    build_greeting,
    compute_age,
    greet,
)
from .domain.errors import InvalidBirthYearError

__all__ = [
    "GREETING_BIRTH_YEAR",
    "REFERENCE_YEAR",
    "InvalidBirthYearError",
    "build_greeting",
    "compute_age",
    "get_config",
    "greet",
    "print_info",
]
