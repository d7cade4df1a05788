"""Static facade: every Stringy operation as a function over raw text.

Each call builds a transient ``Stringy`` from ``(text, encoding)``, runs the
operation and unwraps the result: values become ``str``, lists of values
become ``list[str]``; booleans, numbers, raw strings and collections pass
through unchanged.

Usage:
    from stringy import static

    static.camelize("Hello World")               # "helloWorld"
    static.index_of("foobar", "bar")              # 3
    static.to_upper_case("fòô", encoding="UTF-8")  # "FÒÔ"
    static.collection(["a", "b"]).implode("+")    # "a+b"
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable
from typing import Any

from stringy.value.collection import CollectionStringy
from stringy.value.stringy import Stringy

_OPERATIONS = frozenset(
    name
    for name, attr in vars(Stringy).items()
    if not name.startswith("_") and callable(attr) and name != "create"
)


def _unwrap(result: Any) -> Any:
    if isinstance(result, Stringy):
        return result.text
    if isinstance(result, list):
        return [_unwrap(item) for item in result]
    return result


def _operation(name: str) -> Callable[..., Any]:
    method = getattr(Stringy, name)

    @functools.wraps(method)
    def call(text: Any, *args: Any, encoding: str | None = None, **kwargs: Any) -> Any:
        return _unwrap(method(Stringy(text, encoding), *args, **kwargs))

    return call


def create(text: Any = "", encoding: str | None = None) -> Stringy:
    """Build a value; same rules as the ``Stringy`` constructor."""
    return Stringy(text, encoding)


def collection(items: str | Stringy | Iterable[str | Stringy] | None = None) -> CollectionStringy:
    """Build a collection from raw text, a value, or an iterable of either.

    Raises:
        ElementTypeError: If an item is neither raw text nor a value.
    """
    if items is None:
        return CollectionStringy()
    if isinstance(items, str | Stringy):
        items = [items]
    return CollectionStringy(Stringy(item) if isinstance(item, str) else item for item in items)


def __getattr__(name: str) -> Any:
    if name in _OPERATIONS:
        return _operation(name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted({*globals(), *_OPERATIONS})
