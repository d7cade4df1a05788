"""Tests for the exception hierarchy."""

import pytest

from stringy import (
    BackendError,
    ElementTypeError,
    ImmutableError,
    InvalidInputError,
    OutOfRangeError,
    Stringy,
    StringyError,
)


@pytest.mark.parametrize(
    "error,builtin",
    [
        (InvalidInputError, ValueError),
        (OutOfRangeError, IndexError),
        (ImmutableError, TypeError),
        (BackendError, RuntimeError),
        (ElementTypeError, TypeError),
    ],
)
def test_errors_are_catchable_as_builtins(error, builtin):
    """Why: callers that only know the builtin exception still catch ours."""
    assert issubclass(error, StringyError)
    assert issubclass(error, builtin)


def test_element_type_error_describes_value():
    error = ElementTypeError(1.5, Stringy)

    assert error.value == 1.5
    assert error.expected is Stringy
    assert str(error) == "Value 1.5 is not an instance of Stringy (given: float)"
