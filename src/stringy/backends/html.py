"""HTML services built on BeautifulSoup.

Tag stripping keeps the text of removed elements (like PHP ``strip_tags``);
XSS cleaning drops whole scripting elements and any attribute that can run
code. Inputs without a ``<`` are returned untouched so plain text never
picks up entity escaping.
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, Comment

logger = logging.getLogger(__name__)

_PARSER = "html.parser"

_ALLOWED_TAG_RE = re.compile(r"<\s*([A-Za-z][A-Za-z0-9]*)")
_EMPTY_TAG_RE = re.compile(r"<[^/>]*?>\s*?</[^>]*?>")
_MEDIA_QUERY_RE = re.compile(
    r"@media\s+(?:only\s)?(?:[\s{(]|screen|all)\s?[^{]+?\{.*?\}\s*\}\s*",
    re.IGNORECASE | re.DOTALL,
)
_SCRIPT_URL_RE = re.compile(r"^(?:(?:java|vb|live)script:|data:text/html)", re.IGNORECASE)
_CONTROL_RE = re.compile(r"[\x00-\x20]+")

_DANGEROUS_TAGS = (
    "script",
    "style",
    "iframe",
    "frame",
    "frameset",
    "object",
    "embed",
    "applet",
    "meta",
    "link",
    "base",
    "xml",
    "svg",
)


class HtmlBackend:
    """BeautifulSoup-backed HTML cleaning."""

    def strip_tags(self, text: str, allowable_tags: str = "") -> str:
        """Remove markup and comments, keeping text and ``allowable_tags``.

        Args:
            text: HTML fragment.
            allowable_tags: Tags to keep, written as ``"<b><i>"``.

        Returns:
            The fragment without disallowed tags.
        """
        if "<" not in text:
            return text
        allowed = {name.lower() for name in _ALLOWED_TAG_RE.findall(allowable_tags)}
        soup = BeautifulSoup(text, _PARSER)
        for comment in soup.find_all(string=lambda node: isinstance(node, Comment)):
            comment.extract()
        for tag in soup.find_all(True):
            if tag.name not in allowed:
                tag.unwrap()
        return soup.decode(formatter="minimal")

    def xss_clean(self, text: str) -> str:
        """Remove scripting elements, event handlers and script URLs."""
        if "<" not in text:
            return text
        soup = BeautifulSoup(text, _PARSER)
        for comment in soup.find_all(string=lambda node: isinstance(node, Comment)):
            comment.extract()
        removed = 0
        for tag in soup.find_all(_DANGEROUS_TAGS):
            if tag.decomposed:
                continue
            tag.decompose()
            removed += 1
        for tag in soup.find_all(True):
            for name in list(tag.attrs):
                value = tag.attrs[name]
                if isinstance(value, list):
                    value = " ".join(value)
                if self._is_unsafe_attribute(name, str(value)):
                    del tag.attrs[name]
                    removed += 1
        if removed:
            logger.debug("Removed %d unsafe HTML nodes or attributes", removed)
        return soup.decode(formatter="minimal")

    def _is_unsafe_attribute(self, name: str, value: str) -> bool:
        if name.lower().startswith("on"):
            return True
        compact = _CONTROL_RE.sub("", value)
        if _SCRIPT_URL_RE.match(compact):
            return True
        return "expression(" in compact.lower()

    def is_html(self, text: str) -> bool:
        if "<" not in text:
            return False
        return BeautifulSoup(text, _PARSER).find() is not None

    def stripe_empty_tags(self, text: str) -> str:
        return _EMPTY_TAG_RE.sub("", text)

    def stripe_media_queries(self, text: str) -> str:
        return _MEDIA_QUERY_RE.sub("", text)
