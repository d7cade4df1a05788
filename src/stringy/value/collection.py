"""Ordered, homogeneous collection of Stringy values.

Every way of putting an element into the collection (constructor, ``add``,
``insert``, item and slice assignment, ``extend``, ``+=``, ``append`` and
``prepend``) goes through :meth:`CollectionStringy._check`, so a
collection never holds anything but ``Stringy`` values.

Usage:
    words = CollectionStringy.create_from_strings(["fòôbàř", "lall"])
    words.prepend(Stringy("noop")).implode("-")  # "noop-fòôbàř-lall"
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence
from typing import Any, Self, overload

from stringy.core.errors import ElementTypeError
from stringy.value.stringy import Stringy

_UNSET: Any = object()


class CollectionStringy(MutableSequence[Stringy]):
    """A mutable list of immutable string values.

    Not synchronized: share across threads only with external locking.
    """

    def __init__(self, items: Iterable[Stringy] | None = None):
        self._items: list[Stringy] = [self._check(item) for item in items or ()]

    @classmethod
    def create(cls, items: Iterable[Stringy] | None = None) -> Self:
        return cls(items)

    @classmethod
    def create_from_strings(cls, strings: Iterable[str]) -> Self:
        """Lift each raw text to a value."""
        return cls(Stringy(s) for s in strings)

    @staticmethod
    def get_type() -> type[Stringy]:
        return Stringy

    def _check(self, value: Any) -> Stringy:
        if not isinstance(value, Stringy):
            raise ElementTypeError(value, Stringy)
        return value

    # MutableSequence protocol

    @overload
    def __getitem__(self, index: int) -> Stringy: ...

    @overload
    def __getitem__(self, index: slice) -> CollectionStringy: ...

    def __getitem__(self, index: int | slice) -> Stringy | CollectionStringy:
        if isinstance(index, slice):
            return type(self)(self._items[index])
        return self._items[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        if isinstance(index, slice):
            self._items[index] = [self._check(v) for v in value]
        else:
            self._items[index] = self._check(value)

    def __delitem__(self, index: int | slice) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Stringy]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CollectionStringy):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"CollectionStringy({self._items!r})"

    def insert(self, index: int, value: Stringy) -> None:
        self._items.insert(index, self._check(value))

    def extend(self, values: Iterable[Stringy]) -> None:
        checked = [self._check(v) for v in values]
        self._items.extend(checked)

    def count(self, value: Any = _UNSET) -> int:
        """Number of elements, or of elements equal to ``value`` when given."""
        if value is _UNSET:
            return len(self._items)
        return self._items.count(value)

    # Collection API

    def add(self, value: Stringy) -> Self:
        self._items.append(self._check(value))
        return self

    def add_string(self, text: str) -> Self:
        return self.add(Stringy(text))

    def add_stringy(self, value: Stringy) -> Self:
        return self.add(value)

    def get_all(self) -> list[Stringy]:
        return list(self._items)

    def get_generator(self) -> Iterator[Stringy]:
        yield from self._items

    def to_strings(self) -> list[str]:
        return [item.text for item in self._items]

    def implode(self, separator: str = "") -> str:
        return separator.join(item.text for item in self._items)

    def _lift(self, other: str | Stringy | Iterable[Stringy]) -> list[Stringy]:
        if isinstance(other, str):
            return [Stringy(other)]
        if isinstance(other, Stringy):
            return [other]
        if isinstance(other, CollectionStringy):
            return other.get_all()
        if not isinstance(other, Iterable):
            raise ElementTypeError(other, Stringy)
        return [self._check(v) for v in other]

    def append(self, other: str | Stringy | Iterable[Stringy]) -> Self:  # type: ignore[override]
        """Add raw text, a value, or every value of a collection at the end."""
        self._items.extend(self._lift(other))
        return self

    def prepend(self, other: str | Stringy | Iterable[Stringy]) -> Self:
        """Add raw text, a value, or every value of a collection at the front."""
        self._items[0:0] = self._lift(other)
        return self
