"""User-facing types: the string value and its collection."""

from stringy.value.collection import CollectionStringy
from stringy.value.stringy import Stringy

__all__ = [
    "Stringy",
    "CollectionStringy",
]
