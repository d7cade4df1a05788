"""Core primitives: the exception hierarchy and shared enums.

Architecture Note:
    core/ holds stateless definitions only. Text algorithms live in
    backends/, the user-facing types in value/.
"""

from stringy.core.errors import (
    BackendError,
    ElementTypeError,
    ImmutableError,
    InvalidInputError,
    OutOfRangeError,
    StringyError,
)
from stringy.core.types import (
    ENT_COMPAT,
    ENT_HTML5,
    ENT_HTML401,
    ENT_NOQUOTES,
    ENT_QUOTES,
    ENT_SUBSTITUTE,
    ENT_XHTML,
    ENT_XML1,
    HtmlFlags,
    PadType,
)

__all__ = [
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
]
