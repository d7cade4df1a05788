"""Tests for PHP-style sprintf."""

import pytest

from stringy import InvalidInputError
from stringy.core.printf import sprintf


@pytest.mark.parametrize(
    "template,args,expected",
    [
        ("%s-%d", ["a", "42abc"], "a-42"),
        ("%05.2f", [3.14159], "03.14"),
        ("%'*8s", ["abc"], "*****abc"),
        ("%-5s|", ["ab"], "ab   |"),
        ("%+d %+d", [5, -5], "+5 -5"),
        ("%05d", [-42], "-0042"),
        ("%b %o %X", [5, 8, 255], "101 10 FF"),
        ("%c", [65], "A"),
        ("%.3s", ["abcdef"], "abc"),
        ("%2$s %1$s", ["a", "b"], "b a"),
        ("100%%", [], "100%"),
    ],
)
def test_conversions(template, args, expected):
    assert sprintf(template, args) == expected


def test_exponent_has_no_zero_padding():
    assert sprintf("%e", [1234.5]) == "1.234500e+3"
    assert sprintf("%.2E", [0.00012]) == "1.20E-4"


def test_negative_numbers_wrap_as_unsigned_64_bit():
    assert sprintf("%x", [-1]) == "ffffffffffffffff"
    assert sprintf("%u", [-1]) == "18446744073709551615"


def test_too_few_arguments():
    with pytest.raises(InvalidInputError, match="2 arguments are required, 1 given"):
        sprintf("%s %s", ["a"])


def test_argument_zero_is_rejected():
    with pytest.raises(InvalidInputError, match="Argument number must be greater than zero"):
        sprintf("%0$s", ["a"])
