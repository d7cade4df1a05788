"""Shared enums and flags."""

from __future__ import annotations

from enum import Enum, IntFlag


class PadType(Enum):
    """Side(s) on which ``pad`` inserts the padding."""

    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


class HtmlFlags(IntFlag):
    """Quote handling and document type for the HTML codecs.

    Values match PHP's ``ENT_*`` constants so stored flag integers keep
    their meaning.
    """

    HTML401 = 0
    NOQUOTES = 0
    COMPAT = 2
    QUOTES = 3
    IGNORE = 4
    SUBSTITUTE = 8
    XML1 = 16
    XHTML = 32
    HTML5 = 48


ENT_COMPAT = HtmlFlags.COMPAT
ENT_QUOTES = HtmlFlags.QUOTES
ENT_NOQUOTES = HtmlFlags.NOQUOTES
ENT_HTML401 = HtmlFlags.HTML401
ENT_XML1 = HtmlFlags.XML1
ENT_XHTML = HtmlFlags.XHTML
ENT_HTML5 = HtmlFlags.HTML5
ENT_SUBSTITUTE = HtmlFlags.SUBSTITUTE
