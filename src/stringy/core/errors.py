"""Exception hierarchy.

Usage:
    from stringy.core.errors import InvalidInputError, StringyError

    try:
        Stringy(["not", "text"])
    except InvalidInputError:
        ...
"""

from __future__ import annotations

from typing import Any


class StringyError(Exception):
    """Base class for every error raised by this package."""

    pass


class InvalidInputError(StringyError, ValueError):
    """Raised when an argument violates a precondition."""

    pass


class OutOfRangeError(StringyError, IndexError):
    """Raised when reading a character index that does not exist."""

    pass


class ImmutableError(StringyError, TypeError):
    """Raised on any attempt to modify a Stringy value in place."""

    pass


class BackendError(StringyError, RuntimeError):
    """Raised when a backend collaborator fails.

    The original exception is kept as ``__cause__``.
    """

    pass


class ElementTypeError(StringyError, TypeError):
    """Raised when a non-Stringy value is inserted into a collection."""

    def __init__(self, value: Any, expected: type):
        self.value = value
        self.expected = expected
        super().__init__(
            f"Value {value!r} is not an instance of {expected.__name__} "
            f"(given: {type(value).__name__})"
        )
