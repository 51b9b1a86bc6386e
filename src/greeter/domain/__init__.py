"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Age computation and greeting
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    GREETING_BIRTH_YEAR,
    REFERENCE_YEAR,
    build_greeting,
    compute_age,
    greet,
)
from .enums import OutputFormat
from .errors import InvalidBirthYearError

__all__ = [
    # Behaviors
    "GREETING_BIRTH_YEAR",
    "REFERENCE_YEAR",
    "build_greeting",
    "compute_age",
    "greet",
    # Enums
    "OutputFormat",
    # Errors
    "InvalidBirthYearError",
]
