"""Stringy: a fluent, immutable Unicode string value for Python.

Usage:
    from stringy import Stringy, s, static

    s("fòôbàř").to_upper_case().to_string()  # "FÒÔBÀŘ"
    Stringy("Hello World").snake_case()      # Stringy("hello_world")
    static.kebab_case("Hello World")         # "hello-world"

    words = static.collection(["fòôbàř", "lall", "öäü"])
    words.implode("+")                       # "fòôbàř+lall+öäü"
"""

from __future__ import annotations

from typing import Any

__version__ = "0.1.0"

# Configuration
from stringy.config import StringySettings, configure, get_settings

# Core primitives
from stringy.core import (
    ENT_COMPAT,
    ENT_HTML5,
    ENT_HTML401,
    ENT_NOQUOTES,
    ENT_QUOTES,
    ENT_SUBSTITUTE,
    ENT_XHTML,
    ENT_XML1,
    BackendError,
    ElementTypeError,
    HtmlFlags,
    ImmutableError,
    InvalidInputError,
    OutOfRangeError,
    PadType,
    StringyError,
)

# Values
from stringy.value import CollectionStringy, Stringy

# Facade
from stringy import static


def s(text: Any = "", encoding: str | None = None) -> Stringy:
    """Shorthand for ``Stringy(text, encoding)``."""
    return Stringy(text, encoding)


__all__ = [
    # Version
    "__version__",
    # Values
    "Stringy",
    "CollectionStringy",
    "s",
    "static",
    # Errors
    "StringyError",
    "InvalidInputError",
    "OutOfRangeError",
    "ImmutableError",
    "BackendError",
    "ElementTypeError",
    # Types
    "PadType",
    "HtmlFlags",
    "ENT_COMPAT",
    "ENT_QUOTES",
    "ENT_NOQUOTES",
    "ENT_HTML401",
    "ENT_XML1",
    "ENT_XHTML",
    "ENT_HTML5",
    "ENT_SUBSTITUTE",
    # Configuration
    "StringySettings",
    "configure",
    "get_settings",
]
