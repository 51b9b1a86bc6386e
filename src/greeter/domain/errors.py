"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class InvalidBirthYearError(TypeError):
    """Birth year is not an integer.

    Raised by the greeter functions before any arithmetic happens. Inherits
    from TypeError so callers treating it as a plain type mismatch keep
    working.

    Example:
        >>> from greeter.domain.errors import InvalidBirthYearError
        >>> err = InvalidBirthYearError("birth year must be an integer, got str: 'abc'")
        >>> isinstance(err, TypeError)
        True
    """


__all__ = ["InvalidBirthYearError"]
