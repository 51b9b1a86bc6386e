"""Pure domain functions with no I/O or framework dependencies.

Ages are counted against a fixed reference year rather than today's date.
The greeting always reports the age of someone born in
:data:`GREETING_BIRTH_YEAR`, whatever birth year the caller passes in.
"""

from __future__ import annotations

from typing import Final

from .errors import InvalidBirthYearError

#: Year every age is measured against.
REFERENCE_YEAR: Final[int] = 2019

#: Birth year the greeting computes its age from.
GREETING_BIRTH_YEAR: Final[int] = 1985

GREETING_TEMPLATE: Final[str] = "Hello {name}. Your are {age} year old."


def _require_year(birth_year: object) -> int:
    """Reject anything that is not a plain ``int`` (``bool`` included)."""
    if isinstance(birth_year, bool) or not isinstance(birth_year, int):
        raise InvalidBirthYearError(f"birth year must be an integer, got {type(birth_year).__name__}: {birth_year!r}")
    return birth_year


def compute_age(birth_year: int) -> int:
    """Return the age in whole years at :data:`REFERENCE_YEAR`.

    Years after the reference year give a negative age; no range checks apply.

    Args:
        birth_year: Calendar year of birth.

    Returns:
        ``REFERENCE_YEAR - birth_year``.

    Raises:
        InvalidBirthYearError: If ``birth_year`` is not an integer.

    Example:
        >>> compute_age(1985)
        34
        >>> compute_age(2025)
        -6
    """
    return REFERENCE_YEAR - _require_year(birth_year)


def build_greeting(name: str, birth_year: int) -> str:
    r"""Return the greeting sentence for ``name``.

    ``birth_year`` is type-checked but the age is always computed from
    :data:`GREETING_BIRTH_YEAR`. The wording of the sentence is fixed and
    must not be corrected.

    Args:
        name: Name to greet. Empty names are accepted.
        birth_year: Calendar year of birth.

    Returns:
        ``"Hello {name}. Your are {age} year old."``

    Raises:
        InvalidBirthYearError: If ``birth_year`` is not an integer.

    Example:
        >>> build_greeting("Ben", 1985)
        'Hello Ben. Your are 34 year old.'
        >>> build_greeting("Alice", 2000)
        'Hello Alice. Your are 34 year old.'
    """
    _require_year(birth_year)
    age = compute_age(GREETING_BIRTH_YEAR)
    return GREETING_TEMPLATE.format(name=name, age=age)


greet = build_greeting


__all__ = [
    "GREETING_BIRTH_YEAR",
    "GREETING_TEMPLATE",
    "REFERENCE_YEAR",
    "build_greeting",
    "compute_age",
    "greet",
]
