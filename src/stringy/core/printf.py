"""printf-style formatting with PHP ``sprintf`` conventions.

Supports argument numbering (``%2$s``), custom pad characters (``%'*10s``),
left alignment, forced signs, width and precision for the conversions
``b c d e E f F g G o s u x X``. ``%%`` is a literal percent sign.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from stringy.core.errors import InvalidInputError

_SPEC_RE = re.compile(r"%(?:(\d+)\$)?((?:[-+ 0]|'.)*)(\d+)?(?:\.(\d+))?([bcdeEfFgGosuxX%])")
_INT_PREFIX_RE = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX_RE = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

_NUMERIC_KINDS = frozenset("deEfFgGu")


def _as_text(value: Any) -> str:
    return str(value)


def _as_int(value: Any) -> int:
    if isinstance(value, bool | int):
        return int(value)
    if isinstance(value, float):
        return int(value)
    match = _INT_PREFIX_RE.match(str(value))
    return int(match.group(0)) if match else 0


def _as_float(value: Any) -> float:
    if isinstance(value, bool | int | float):
        return float(value)
    match = _FLOAT_PREFIX_RE.match(str(value))
    return float(match.group(0)) if match else 0.0


def _exponent(number: float, precision: int, upper: bool) -> str:
    mantissa, exp = f"{number:.{precision}e}".split("e")
    power = int(exp)
    result = f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
    return result.upper() if upper else result


def _convert(kind: str, value: Any, precision: int | None, plus: bool) -> tuple[str, str]:
    """Return ``(sign, digits)`` for one conversion."""
    if kind == "s":
        text = _as_text(value)
        return "", text if precision is None else text[:precision]
    if kind == "c":
        return "", chr(_as_int(value))
    if kind in "bxXo":
        number = _as_int(value)
        if number < 0:
            number += 1 << 64
        spec = {"b": "b", "x": "x", "X": "X", "o": "o"}[kind]
        return "", format(number, spec)
    if kind == "u":
        number = _as_int(value)
        return "", str(number + (1 << 64) if number < 0 else number)
    if kind == "d":
        number = _as_int(value)
        sign = "-" if number < 0 else ("+" if plus else "")
        return sign, str(abs(number))

    number = _as_float(value)
    sign = "-" if number < 0 else ("+" if plus else "")
    digits = 6 if precision is None else precision
    if kind in "fF":
        return sign, f"{abs(number):.{digits}f}"
    if kind in "eE":
        return sign, _exponent(abs(number), digits, kind == "E")
    return sign, format(abs(number), f".{digits or 1}{kind}")


def sprintf(template: str, args: Sequence[Any]) -> str:
    """Expand ``template`` with ``args``.

    Raises:
        InvalidInputError: If the template needs more arguments than given,
            or refers to argument zero.
    """
    position = 0

    def expand(match: re.Match[str]) -> str:
        nonlocal position
        argnum, flags, width, precision, kind = match.groups()
        if kind == "%":
            return "%"
        if argnum is not None:
            index = int(argnum) - 1
            if index < 0:
                raise InvalidInputError("Argument number must be greater than zero")
        else:
            index = position
            position += 1
        if index >= len(args):
            raise InvalidInputError(f"{index + 1} arguments are required, {len(args)} given")

        pad, left, plus = " ", False, False
        i = 0
        while i < len(flags):
            flag = flags[i]
            if flag == "'":
                pad = flags[i + 1]
                i += 2
                continue
            if flag == "-":
                left = True
            elif flag == "+":
                plus = True
            else:
                pad = flag
            i += 1

        sign, body = _convert(kind, args[index], None if precision is None else int(precision), plus)
        size = int(width) if width else 0
        missing = size - len(sign) - len(body)
        if missing <= 0:
            return sign + body
        if left:
            return sign + body + pad * missing
        if pad == "0" and kind in _NUMERIC_KINDS:
            return sign + "0" * missing + body
        return pad * missing + sign + body

    return _SPEC_RE.sub(expand, template)
