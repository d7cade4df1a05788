"""Unicode backend: codepoint-level text primitives.

Python ``str`` already stores codepoints, so this backend is mostly about
the *semantics* the value type relies on: PHP-compatible offsets and
limits, language special casing, case-style conversion, wrapping and the
structural predicates.

Usage:
    from stringy.backends.registry import get_unicode_backend

    utf8 = get_unicode_backend()
    utf8.substr("fòôbàř", -3)      # "bàř"
    utf8.str_camelize("Hello World")  # "helloWorld"
"""

from __future__ import annotations

import base64
import binascii
import codecs
import hashlib
import html
import html.entities
import json
import logging
import os
import random
import re
import secrets
import string
import time
import unicodedata
from collections.abc import Iterable, Sequence
from difflib import SequenceMatcher

from stringy.core.errors import BackendError, InvalidInputError
from stringy.core.types import HtmlFlags, PadType

logger = logging.getLogger(__name__)

# Canonical spellings keyed by the Python codec name (with "-" -> "_").
_CANONICAL_ENCODINGS = {
    "utf_8": "UTF-8",
    "ascii": "ASCII",
    "iso8859_1": "ISO-8859-1",
    "iso8859_2": "ISO-8859-2",
    "iso8859_5": "ISO-8859-5",
    "iso8859_7": "ISO-8859-7",
    "iso8859_9": "ISO-8859-9",
    "iso8859_15": "ISO-8859-15",
    "cp1250": "WINDOWS-1250",
    "cp1251": "WINDOWS-1251",
    "cp1252": "WINDOWS-1252",
    "utf_16": "UTF-16",
    "utf_16_be": "UTF-16BE",
    "utf_16_le": "UTF-16LE",
    "utf_32": "UTF-32",
    "utf_32_be": "UTF-32BE",
    "utf_32_le": "UTF-32LE",
    "utf_7": "UTF-7",
    "koi8_r": "KOI8-R",
    "koi8_u": "KOI8-U",
    "shift_jis": "SJIS",
    "euc_jp": "EUC-JP",
    "euc_kr": "EUC-KR",
    "big5": "BIG5",
    "gb2312": "GB2312",
    "gbk": "GBK",
    "gb18030": "GB18030",
    "cp437": "CP437",
    "cp850": "CP850",
    "cp866": "CP866",
    "mac_roman": "MACINTOSH",
}

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_WHITESPACE_RUN_RE = re.compile(r"\s+")
_DASH_PUNCTUATION = (
    "-֊־᐀᠆‐-―⸗⸚⸺⸻"
    "⹀〜〰゠︱︲﹘﹣－"
)
_LETTER = r"[^\W\d_]"
_CAMEL_SEPARATOR_RE = re.compile(r"[-_\s]+(.)?")
_CAMEL_DIGITS_RE = re.compile(r"\d+(.)?")
_DELIMIT_UPPER_RE = re.compile(r"\B(\w)")
_DELIMIT_SEPARATOR_RE = re.compile(r"[\-_\s]+")
_NUMERIC_RE = re.compile(
    r"[ \t\n\r\v\f]*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?[ \t\n\r\v\f]*\Z"
)
_INVISIBLE_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_HTML_ENTITY_RE = re.compile(r"&(?:#\d+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);")
_HTML_BREAK_RE = re.compile(r"\r\n|\r|\n|<br\s*/?>", re.IGNORECASE)
# Two or more characters that read like UTF-8 bytes rendered as Windows-1252.
_MOJIBAKE_RE = re.compile(
    "[Â-ô]"
    "[\u0080-¿€‚ƒ„…†‡ˆ‰Š"
    "‹ŒŽ‘’“”•–—˜™"
    "š›œžŸ]+"
)
_SURROGATE_RUN_RE = re.compile("[\udc80-\udcff]+")
_REGEX_OPTION_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}
_PHP_BACKREF_RE = re.compile(r"\$(\d+)|\$\{(\d+)\}|\\(\d+)")

_SPECIAL_UPPER = {
    "tr": {"i": "İ"},
    "az": {"i": "İ"},
}
_SPECIAL_LOWER = {
    "tr": {"I": "ı", "İ": "i"},
    "az": {"I": "ı", "İ": "i"},
    "lt": {
        "Ì": "i̇̀",
        "Í": "i̇́",
        "Ĩ": "i̇̃",
    },
}
_KEEP_LENGTH_UPPER = {"ß": "ẞ"}
_KEEP_LENGTH_LOWER = {"İ": "i"}

_BOOLEAN_WORDS = {
    "true": True,
    "1": True,
    "on": True,
    "yes": True,
    "false": False,
    "0": False,
    "off": False,
    "no": False,
}

_NAME_PARTICLES = frozenset(
    {
        "ab", "af", "al", "and", "ap", "bint", "binte", "da", "de", "del", "den",
        "der", "di", "dit", "ibn", "la", "mac", "nic", "of", "ter", "the", "und",
        "van", "von", "y", "zu",
    }
)  # fmt: skip
_NAME_PREFIXES = (
    ("mac", "Mac"),
    ("mc", "Mc"),
    ("nic", "Nic"),
    ("o'", "O'"),
    ("d'", "d'"),
    ("l'", "l'"),
    ("al-", "al-"),
)

_HUMAN_SMALL_WORDS = (
    r"(?<!q&)a", "an", "and", "as", r"at(?!&t)", "but", "by", "en", "for", "if",
    "in", "of", "on", "or", "the", "to", r"v[.]?", "via", r"vs[.]?",
)  # fmt: skip
_APOSTROPHE = r"(?:['’][^\W\d_]*)?"


class UnicodeBackend:
    """Codepoint-indexed string primitives.

    Stateless; one instance is shared per process through
    :func:`stringy.backends.registry.get_unicode_backend`.
    """

    # Encoding

    def normalize_encoding(self, encoding: str | None, fallback: str = "UTF-8") -> str:
        """Return the canonical name of ``encoding``.

        Empty names map to ``fallback``; unknown names fall back as well.
        """
        if not encoding:
            return fallback
        try:
            codec = codecs.lookup(encoding).name.replace("-", "_")
        except LookupError:
            logger.warning("Unknown encoding %r, falling back to %s", encoding, fallback)
            return fallback
        return _CANONICAL_ENCODINGS.get(codec, codec.upper().replace("_", "-"))

    def python_codec(self, encoding: str) -> str:
        """Python codec name for a canonical encoding tag."""
        try:
            return codecs.lookup(encoding).name
        except LookupError:
            return "utf-8"

    def decode(self, data: bytes, encoding: str) -> str:
        """Decode bytes, keeping undecodable bytes as surrogate escapes."""
        return data.decode(self.python_codec(encoding), errors="surrogateescape")

    def to_bytes(self, text: str, encoding: str) -> bytes:
        """Encode text, restoring surrogate-escaped bytes verbatim."""
        try:
            return text.encode(self.python_codec(encoding), errors="surrogateescape")
        except UnicodeEncodeError as exc:
            raise BackendError(f"Cannot encode text as {encoding}: {exc}") from exc

    def encode(self, new_encoding: str, text: str) -> str:
        """Transcode ``text`` into ``new_encoding``.

        Characters the target encoding cannot represent become ``?``.
        """
        codec = self.python_codec(self.normalize_encoding(new_encoding))
        return text.encode(codec, errors="replace").decode(codec, errors="replace")

    # Length, offsets and substrings

    def substr(self, text: str, start: int, length: int | None = None) -> str:
        """Substring by codepoint offset with PHP ``mb_substr`` rules."""
        size = len(text)
        if start < 0:
            start = max(size + start, 0)
        if start > size:
            return ""
        if length is None:
            return text[start:]
        if length < 0:
            end = size + length
            return text[start:end] if end > start else ""
        return text[start : start + length]

    def str_slice(self, text: str, start: int, end: int | None = None) -> str:
        return text[start:end]

    def first_char(self, text: str, n: int) -> str:
        if n <= 0:
            return ""
        return text[:n]

    def str_last_char(self, text: str, n: int) -> str:
        if n <= 0:
            return ""
        return text[-n:]

    def str_offset_exists(self, text: str, offset: int) -> bool:
        if offset >= 0:
            return len(text) > offset
        return len(text) >= abs(offset)

    def str_insert(self, text: str, substring: str, index: int) -> str:
        if index > len(text):
            return text
        return text[:index] + substring + text[index:]

    def str_split(self, text: str, length: int = 1) -> list[str]:
        """Split into pieces of at most ``length`` codepoints."""
        if length < 1:
            raise InvalidInputError("The chunk length must be greater than zero.")
        return [text[i : i + length] for i in range(0, len(text), length)]

    # Searching

    def _offset(self, text: str, offset: int) -> int | None:
        if offset < 0:
            offset = max(len(text) + offset, 0)
        if offset > len(text):
            return None
        return offset

    def strpos(self, haystack: str, needle: str, offset: int = 0) -> int | None:
        """Index of the first ``needle`` at or after ``offset``, or None."""
        start = self._offset(haystack, offset)
        if start is None:
            return None
        index = haystack.find(needle, start)
        return None if index == -1 else index

    def stripos(self, haystack: str, needle: str, offset: int = 0) -> int | None:
        start = self._offset(haystack, offset)
        if start is None:
            return None
        match = re.compile(re.escape(needle), re.IGNORECASE).search(haystack, start)
        return match.start() if match else None

    def strrpos(self, haystack: str, needle: str, offset: int = 0) -> int | None:
        """Index of the last ``needle``; negative offsets bound the search from the end."""
        if offset >= 0:
            if offset > len(haystack):
                return None
            index = haystack.rfind(needle, offset)
        else:
            end = len(haystack) + offset + len(needle)
            if end < 0:
                return None
            index = haystack.rfind(needle, 0, end)
        return None if index == -1 else index

    def strripos(self, haystack: str, needle: str, offset: int = 0) -> int | None:
        pattern = re.compile("(?=" + re.escape(needle) + ")", re.IGNORECASE)
        if offset >= 0:
            low, high = offset, len(haystack)
        else:
            low, high = 0, len(haystack) + offset
        found = None
        for match in pattern.finditer(haystack):
            if low <= match.start() <= high:
                found = match.start()
        return found

    def str_contains(self, haystack: str, needle: str, case_sensitive: bool = True) -> bool:
        if case_sensitive:
            return needle in haystack
        return self.stripos(haystack, needle) is not None

    def str_contains_all(
        self, haystack: str, needles: Sequence[str], case_sensitive: bool = True
    ) -> bool:
        if not needles:
            return False
        return all(self.str_contains(haystack, n, case_sensitive) for n in needles)

    def str_contains_any(
        self, haystack: str, needles: Sequence[str], case_sensitive: bool = True
    ) -> bool:
        return any(self.str_contains(haystack, n, case_sensitive) for n in needles)

    def str_starts_with(self, haystack: str, needle: str, case_sensitive: bool = True) -> bool:
        if needle == "":
            return True
        if case_sensitive:
            return haystack.startswith(needle)
        return self.strtoupper(haystack).startswith(self.strtoupper(needle))

    def str_ends_with(self, haystack: str, needle: str, case_sensitive: bool = True) -> bool:
        if needle == "":
            return True
        if case_sensitive:
            return haystack.endswith(needle)
        return self.strtoupper(haystack).endswith(self.strtoupper(needle))

    def substr_count(self, haystack: str, needle: str, case_sensitive: bool = True) -> int:
        if haystack == "" or needle == "":
            return 0
        if case_sensitive:
            return haystack.count(needle)
        return len(re.findall(re.escape(needle), haystack, re.IGNORECASE))

    # Separators

    def _find(self, text: str, needle: str, case_sensitive: bool, last: bool) -> int | None:
        if last:
            return self.strrpos(text, needle) if case_sensitive else self.strripos(text, needle)
        return self.strpos(text, needle) if case_sensitive else self.stripos(text, needle)

    def substr_before(
        self, text: str, separator: str, case_sensitive: bool = True, last: bool = False
    ) -> str:
        """Portion before the first (or last) separator; empty when absent."""
        if text == "" or separator == "":
            return ""
        index = self._find(text, separator, case_sensitive, last)
        if index is None:
            return ""
        return text[:index]

    def substr_after(
        self, text: str, separator: str, case_sensitive: bool = True, last: bool = False
    ) -> str:
        """Portion after the first (or last) separator; empty when absent."""
        if text == "" or separator == "":
            return ""
        index = self._find(text, separator, case_sensitive, last)
        if index is None:
            return ""
        return text[index + len(separator) :]

    def str_substr(
        self,
        text: str,
        needle: str,
        before_needle: bool = False,
        case_sensitive: bool = True,
        last: bool = False,
    ) -> str:
        """Portion from the needle onwards, or the portion up to it."""
        if text == "" or needle == "":
            return ""
        index = self._find(text, needle, case_sensitive, last)
        if index is None:
            return ""
        if before_needle:
            return text[:index]
        return text[index:]

    def between(self, text: str, start: str, end: str, offset: int = 0) -> str:
        start_index = self.strpos(text, start, offset)
        if start_index is None:
            return ""
        substr_index = start_index + len(start)
        end_index = self.strpos(text, end, substr_index)
        if end_index is None or end_index == substr_index:
            return ""
        return text[substr_index:end_index]

    # Case mapping

    def _language(self, language: str | None) -> str | None:
        if not language:
            return None
        return re.split(r"[-_]", language.lower(), maxsplit=1)[0]

    def strtoupper(
        self, text: str, language: str | None = None, keep_length: bool = False
    ) -> str:
        lang = self._language(language)
        special = _SPECIAL_UPPER.get(lang or "")
        if special:
            text = "".join(special.get(ch, ch) for ch in text)
        if keep_length:
            result = "".join(self._upper_keep_length(ch) for ch in text)
        else:
            result = text.upper()
        if lang == "el":
            decomposed = unicodedata.normalize("NFD", result).replace("́", "")
            result = unicodedata.normalize("NFC", decomposed)
        return result

    def strtolower(
        self, text: str, language: str | None = None, keep_length: bool = False
    ) -> str:
        special = _SPECIAL_LOWER.get(self._language(language) or "")
        if special:
            text = "".join(special.get(ch, ch) for ch in text)
        if keep_length:
            return "".join(self._lower_keep_length(ch) for ch in text)
        return text.lower()

    def _upper_keep_length(self, ch: str) -> str:
        upper = ch.upper()
        if len(upper) == 1:
            return upper
        return _KEEP_LENGTH_UPPER.get(ch, ch)

    def _lower_keep_length(self, ch: str) -> str:
        lower = ch.lower()
        if len(lower) == 1:
            return lower
        return _KEEP_LENGTH_LOWER.get(ch, ch)

    def ucfirst(self, text: str, language: str | None = None, keep_length: bool = False) -> str:
        if text == "":
            return ""
        return self.strtoupper(text[0], language, keep_length) + text[1:]

    def lcfirst(self, text: str, language: str | None = None, keep_length: bool = False) -> str:
        if text == "":
            return ""
        return self.strtolower(text[0], language, keep_length) + text[1:]

    def swap_case(self, text: str) -> str:
        return text.swapcase()

    def titlecase(self, text: str, language: str | None = None) -> str:
        """Upper-case the first letter of each word, lower-case the rest."""

        def title(match: re.Match[str]) -> str:
            word = match.group(0)
            return self.ucfirst(self.strtolower(word, language), language)

        return re.sub(r"[^\W_]+(?:['’][^\W_]+)*", title, text)

    def str_titleize(
        self,
        text: str,
        ignore: Iterable[str] | None = None,
        language: str | None = None,
        word_define_chars: str | None = None,
    ) -> str:
        """Capitalize every word except those in ``ignore``.

        Words are runs of non-whitespace, or, when ``word_define_chars`` is
        given, runs of word characters plus those characters.
        """
        if text == "":
            return ""
        text = self.trim(text)
        ignored = set(ignore or ())
        if word_define_chars:
            pattern = r"[\w" + "".join(re.escape(c) for c in word_define_chars) + r"]+"
        else:
            pattern = r"\S+"

        def title(match: re.Match[str]) -> str:
            word = match.group(0)
            if word in ignored:
                return word
            return self.ucfirst(self.strtolower(word, language), language)

        return re.sub(pattern, title, text)

    def str_titleize_for_humans(self, text: str, ignore: Iterable[str] = ()) -> str:
        """Title-case following the New York Times style guide rules."""
        small = "|".join([*_HUMAN_SMALL_WORDS, *(re.escape(word) for word in ignore)])
        text = self.trim(text)
        if not self.has_lowercase(text):
            text = text.lower()

        main = re.compile(
            r"""\b (_*) (?:
                ( (?<=[ ][/\\]) [^\W\d_]+ [-_/\\\w]+ |
                  [-_\w]+ [@.:] [-_\w@.:/]+ """
            + _APOSTROPHE
            + r""" )
                |
                ( (?i: """
            + small
            + r""" ) """
            + _APOSTROPHE
            + r""" )
                |
                ( [^\W\d_] [^\W\d_'’()\[\]{}]* """
            + _APOSTROPHE
            + r""" )
            ) (_*) \b""",
            re.VERBOSE,
        )

        def replace_word(match: re.Match[str]) -> str:
            leading, path, small_word, word, trailing = match.groups()
            if path:
                body = path
            elif small_word:
                body = small_word.lower()
            elif word and not any(ch.isupper() for ch in word[1:]):
                body = self.ucfirst(word)
            else:
                body = word or ""
            return leading + body + trailing

        text = main.sub(replace_word, text)

        # Small words at the start of the title or of a subsentence.
        text = re.sub(
            r"""( \A [^\w\s]* | [:.;?!][ ]+ | [ ]['"“‘(\[][ ]* ) ( """ + small + r""" ) \b""",
            lambda m: m.group(1) + self.ucfirst(m.group(2)),
            text,
            flags=re.VERBOSE | re.IGNORECASE,
        )
        # ...and at the end of the title or of an inserted subphrase.
        text = re.sub(
            r"""\b ( """ + small + r""" ) (?= [^\w\s]* \Z | ['"’”)\]] [ ] )""",
            lambda m: self.ucfirst(m.group(1)),
            text,
            flags=re.VERBOSE | re.IGNORECASE,
        )
        # Small words starting a hyphenated compound ("in-flight").
        text = re.sub(
            r"""\b (?<!-) ( """ + small + r""" ) (?= -[^\W\d_]+ )""",
            lambda m: self.ucfirst(m.group(1)),
            text,
            flags=re.VERBOSE | re.IGNORECASE,
        )
        # Small words ending a hyphenated compound ("Stand-in").
        text = re.sub(
            r"""\b (?<!…) ( [^\W\d_]+- ) ( """ + small + r""" ) (?! - )""",
            lambda m: m.group(1) + self.ucfirst(m.group(2)),
            text,
            flags=re.VERBOSE | re.IGNORECASE,
        )
        return text

    def str_capitalize_name(self, text: str) -> str:
        """Capitalize a personal name, keeping particles such as "van" or "de"."""
        text = self.collapse_whitespace(text)
        words = []
        for position, word in enumerate(text.split(" ")):
            lower = self.strtolower(word)
            if position > 0 and lower in _NAME_PARTICLES:
                words.append(lower)
            else:
                words.append(self._capitalize_name_part(lower))
        parts = []
        for position, part in enumerate(" ".join(words).split("-")):
            if position > 0 and part.lower() in _NAME_PARTICLES:
                parts.append(part.lower())
            else:
                parts.append(self.ucfirst(part))
        return "-".join(parts)

    def _capitalize_name_part(self, lower: str) -> str:
        for prefix, rendered in _NAME_PREFIXES:
            rest = lower[len(prefix) :]
            if lower.startswith(prefix) and len(rest) >= 3:
                return rendered + self.ucfirst(rest)
        return self.ucfirst(lower)

    # Case styles

    def str_camelize(self, text: str) -> str:
        text = self.lcfirst(self.trim(text))
        text = re.sub(r"^[-_]+", "", text)
        text = _CAMEL_SEPARATOR_RE.sub(
            lambda m: self.strtoupper(m.group(1)) if m.group(1) else "", text
        )
        return _CAMEL_DIGITS_RE.sub(lambda m: self.strtoupper(m.group(0)), text)

    def str_upper_camelize(self, text: str) -> str:
        return self.ucfirst(self.str_camelize(text))

    def str_delimit(self, text: str, delimiter: str) -> str:
        """Lower-case words joined by ``delimiter``.

        A delimiter is inserted before inner upper-case letters and in place
        of spaces, dashes and underscores.
        """
        text = _DELIMIT_UPPER_RE.sub(
            lambda m: "-" + m.group(1) if m.group(1).isupper() else m.group(1),
            self.trim(text),
        )
        text = self.strtolower(text)
        return _DELIMIT_SEPARATOR_RE.sub(lambda _: delimiter, text)

    def str_dasherize(self, text: str) -> str:
        return self.str_delimit(text, "-")

    def str_underscored(self, text: str) -> str:
        return self.str_delimit(text, "_")

    def str_snakeize(self, text: str) -> str:
        text = self.normalize_whitespace(text).replace("-", "_")

        def split_char(match: re.Match[str]) -> str:
            ch = match.group(0)
            if ch in string.digits:
                return "_" + ch + "_"
            if ch.isupper():
                return "_" + self.strtolower(ch)
            return ch

        text = re.sub(r"\w", split_char, text)
        text = _WHITESPACE_RUN_RE.sub("_", text)
        text = re.sub(r"_+", "_", text)
        return self.trim(text.strip("_"))

    def str_humanize(self, text: str) -> str:
        text = text.replace("_id", "").replace("_", " ")
        return self.ucfirst(self.trim(text))

    # Whitespace

    def _is_blank_char(self, ch: str) -> bool:
        return unicodedata.category(ch)[0] in "ZC" and not ("\ud800" <= ch <= "\udfff")

    def trim(self, text: str, chars: str | None = None) -> str:
        """Strip separators and control characters, or ``chars``, from both ends."""
        if chars is not None:
            return text.strip(chars)
        return self.rtrim(self.ltrim(text))

    def ltrim(self, text: str, chars: str | None = None) -> str:
        if chars is not None:
            return text.lstrip(chars)
        start = 0
        while start < len(text) and self._is_blank_char(text[start]):
            start += 1
        return text[start:]

    def rtrim(self, text: str, chars: str | None = None) -> str:
        if chars is not None:
            return text.rstrip(chars)
        end = len(text)
        while end > 0 and self._is_blank_char(text[end - 1]):
            end -= 1
        return text[:end]

    def normalize_whitespace(self, text: str) -> str:
        """Replace exotic whitespace (no-break, thin, ideographic...) with a plain space."""
        return "".join(
            " " if ch.isspace() and ch not in "\t\n\r\x0b\x0c " else ch for ch in text
        )

    def collapse_whitespace(self, text: str) -> str:
        return self.trim(_WHITESPACE_RUN_RE.sub(" ", text))

    def strip_whitespace(self, text: str) -> str:
        return _WHITESPACE_RUN_RE.sub("", text)

    def str_pad(
        self,
        text: str,
        length: int,
        pad_string: str = " ",
        pad_type: str | PadType = PadType.RIGHT,
    ) -> str:
        """Pad ``text`` to ``length`` codepoints.

        Raises:
            InvalidInputError: If ``pad_type`` is not left, right or both.
        """
        try:
            side = pad_type if isinstance(pad_type, PadType) else PadType(str(pad_type).lower())
        except ValueError:
            raise InvalidInputError(
                f"Pad expects pad_type to be one of 'left', 'right' or 'both', got {pad_type!r}"
            ) from None

        diff = length - len(text)
        if pad_string == "" or diff <= 0:
            return text

        def fill(size: int) -> str:
            return (pad_string * (size // len(pad_string) + 1))[:size]

        if side is PadType.LEFT:
            return fill(diff) + text
        if side is PadType.BOTH:
            left = diff // 2
            return fill(left) + text + fill(diff - left)
        return text + fill(diff)

    # Splitting

    def str_to_lines(self, text: str) -> list[str]:
        return _LINE_BREAK_RE.split(text)

    def str_to_words(
        self,
        text: str,
        char_list: str = "",
        remove_empty_values: bool = False,
        remove_short_values: int | None = None,
    ) -> list[str]:
        """Split into words, keeping the runs between words as elements.

        Words are runs of letters (plus ``char_list``), optionally joined by
        dashes or apostrophes.
        """
        if text == "":
            return [] if remove_empty_values else [""]
        if char_list:
            letter = "(?:" + _LETTER + "|[" + "".join(re.escape(c) for c in char_list) + "])"
        else:
            letter = _LETTER
        pattern = f"({letter}+(?:[{_DASH_PUNCTUATION}’']{letter}+)*)"
        pieces = re.split(pattern, text)
        if remove_short_values is None and not remove_empty_values:
            return pieces
        return self.reduce_string_array(pieces, remove_empty_values, remove_short_values)

    def reduce_string_array(
        self,
        values: Iterable[str],
        remove_empty_values: bool = True,
        remove_short_values: int | None = None,
    ) -> list[str]:
        result = []
        for value in values:
            if remove_empty_values and value.strip() == "":
                continue
            if remove_short_values is not None and len(value) < remove_short_values:
                continue
            result.append(value)
        return result

    def str_split_pattern(self, text: str, pattern: str, limit: int = -1) -> list[str]:
        """Split on a regular expression.

        A non-negative ``limit`` keeps only the first ``limit`` pieces.
        """
        if limit == 0:
            return []
        if pattern == "":
            return [text]
        try:
            pieces = re.split(pattern, text)
        except re.error as exc:
            raise BackendError(f"Invalid split pattern {pattern!r}: {exc}") from exc
        if limit > 0:
            return pieces[:limit]
        return pieces

    def explode(self, text: str, delimiter: str, limit: int) -> list[str]:
        """PHP ``explode`` semantics for positive, zero and negative limits."""
        if delimiter == "":
            raise InvalidInputError("The delimiter must not be empty.")
        if limit >= 0:
            return text.split(delimiter, max(limit, 1) - 1)
        pieces = text.split(delimiter)
        return pieces[:limit]

    # Wrapping

    def wordwrap(self, text: str, width: int = 75, break_: str = "\n", cut: bool = False) -> str:
        """Wrap at ``width`` codepoints, breaking only at spaces unless ``cut``."""
        if text == "":
            return ""
        if break_ == "":
            raise InvalidInputError("The break string cannot be empty.")
        if width == 0 and cut:
            raise InvalidInputError("Can't force cut when width is zero.")

        size = len(text)
        break_len = len(break_)
        out: list[str] = []
        last_start = last_space = 0
        current = 0
        while current < size:
            ch = text[current]
            if (
                ch == break_[0]
                and current + break_len < size
                and text.startswith(break_, current)
            ):
                out.append(text[last_start : current + break_len])
                current += break_len - 1
                last_start = last_space = current + 1
            elif ch == " ":
                if current - last_start >= width:
                    out.append(text[last_start:current] + break_)
                    last_start = current + 1
                last_space = current
            elif current - last_start >= width and cut and last_start >= last_space:
                out.append(text[last_start:current] + break_)
                last_start = last_space = current
            elif current - last_start >= width and last_start < last_space:
                out.append(text[last_start:last_space] + break_)
                last_start = last_space = last_space + 1
            current += 1
        if last_start != size:
            out.append(text[last_start:])
        return "".join(out)

    def wordwrap_per_line(
        self,
        text: str,
        width: int,
        break_: str = "\n",
        cut: bool = False,
        add_final_break: bool = True,
        delimiter: str | None = None,
    ) -> str:
        """Wrap each line separately; a final delimiter is added only if one is given."""
        lines = self.str_to_lines(text) if delimiter is None else text.split(delimiter)
        wrapped = [self.wordwrap(line, width, break_, cut) for line in lines]
        final_break = delimiter if add_final_break and delimiter is not None else ""
        joiner = "\n" if delimiter is None else delimiter
        return joiner.join(wrapped) + final_break

    def str_limit_after_word(self, text: str, length: int, add_on: str = "…") -> str:
        if length <= 0:
            return ""
        if len(text) <= length:
            return text
        if text[length - 1] == " ":
            return text[: length - 1] + add_on
        head = text[:length]
        words = head.split(" ")[:-1]
        shortened = " ".join(words)
        if shortened == "":
            return head[: length - 1] + add_on
        return shortened + add_on

    def str_truncate(self, text: str, length: int, substring: str = "") -> str:
        if length >= len(text):
            return text
        available = length - len(substring)
        if available <= 0:
            return substring[: max(length, 0)]
        return text[:available] + substring

    def str_truncate_safe(
        self,
        text: str,
        length: int,
        substring: str = "",
        ignore_do_not_split_words_for_one_word: bool = True,
    ) -> str:
        """Truncate without splitting a word.

        A single word longer than ``length`` is cut anyway unless
        ``ignore_do_not_split_words_for_one_word`` is False.
        """
        if text == "" or length <= 0:
            return substring
        if length >= len(text):
            return text
        length -= len(substring)
        if length <= 0:
            return substring
        truncated = text[:length]
        space_after = self.strpos(text, " ", length - 1)
        if space_after != length:
            last_space = truncated.rfind(" ")
            if last_space != -1:
                truncated = truncated[:last_space]
            elif space_after is not None and not ignore_do_not_split_words_for_one_word:
                truncated = ""
        return truncated + substring

    def extract_text(
        self,
        text: str,
        search: str = "",
        length: int | None = None,
        replacer: str = "…",
    ) -> str:
        """Excerpt around the first ``search`` hit, marking skipped text with ``replacer``."""
        if text == "":
            return ""
        trim_chars = "\t\r\n -_()!~?=+/*\\,.:;\"'[]{}`&"
        if length is None:
            length = round(len(text) / 2)

        def boundary(start: int) -> int | None:
            hits = [i for i in (self.strpos(text, " ", start), self.strpos(text, ".", start)) if i]
            return min(hits) if hits else None

        if search == "":
            end = min(length - 1, len(text)) if length > 0 else 0
            position = boundary(end)
            if position:
                return text[:position].rstrip(trim_chars) + replacer
            return text

        word_position = self.stripos(text, search) or 0
        half_side = int(word_position - length / 2 + len(search) / 2)
        start = 0
        if half_side > 0:
            half_text = text[:half_side]
            start = max(half_text.rfind(" "), half_text.rfind("."), 0)

        if word_position and half_side > 0:
            offset = min(start + length - 1, len(text))
            end = boundary(offset)
            span = end - start if end is not None else 0
            if span <= 0:
                return replacer + text[start:].lstrip(trim_chars)
            return replacer + text[start : start + span].strip(trim_chars) + replacer

        offset = min(length - 1, len(text))
        end = boundary(max(offset, 0))
        if end:
            return text[:end].rstrip(trim_chars) + replacer
        return text

    # Replacement

    def str_replace(
        self,
        search: str | Sequence[str],
        replacement: str | Sequence[str],
        subject: str,
        case_sensitive: bool = True,
    ) -> str:
        """Replace every occurrence; list searches are applied in order."""
        if isinstance(search, str):
            pairs = [(search, replacement if isinstance(replacement, str) else "".join(replacement[:1]))]
        elif isinstance(replacement, str):
            pairs = [(s, replacement) for s in search]
        else:
            pairs = [
                (s, replacement[i] if i < len(replacement) else "") for i, s in enumerate(search)
            ]
        for needle, value in pairs:
            if needle == "":
                continue
            if case_sensitive:
                subject = subject.replace(needle, value)
            else:
                subject = re.sub(re.escape(needle), lambda _, v=value: v, subject, flags=re.IGNORECASE)
        return subject

    def str_replace_first(self, search: str, replacement: str, subject: str) -> str:
        index = subject.find(search) if search else -1
        if index == -1:
            return subject
        return subject[:index] + replacement + subject[index + len(search) :]

    def str_replace_last(self, search: str, replacement: str, subject: str) -> str:
        index = subject.rfind(search) if search else -1
        if index == -1:
            return subject
        return subject[:index] + replacement + subject[index + len(search) :]

    def str_replace_beginning(self, text: str, search: str, replacement: str) -> str:
        if search == "":
            return replacement + text
        if text.startswith(search):
            return replacement + text[len(search) :]
        return text

    def str_replace_ending(self, text: str, search: str, replacement: str) -> str:
        if search == "":
            return text + replacement
        if text.endswith(search):
            return text[: len(text) - len(search)] + replacement
        return text

    def regex_replace(
        self,
        text: str,
        pattern: str,
        replacement: str,
        options: str = "",
        delimiter: str = "/",
    ) -> str:
        """Regex replace with PHP-style options and ``$1`` back-references."""
        flags = 0
        for option in options:
            flags |= _REGEX_OPTION_FLAGS.get(option, 0)
        if delimiter and delimiter != "\\":
            pattern = pattern.replace("\\" + delimiter, delimiter)
        template = _PHP_BACKREF_RE.sub(
            lambda m: "\\g<" + (m.group(1) or m.group(2) or m.group(3)) + ">",
            replacement.replace("\\\\", "\x00"),
        ).replace("\x00", "\\\\")
        try:
            return re.sub(pattern, template, text, flags=flags)
        except re.error as exc:
            raise BackendError(f"Invalid regular expression {pattern!r}: {exc}") from exc

    def str_matches_pattern(self, text: str, pattern: str) -> bool:
        try:
            return re.search(pattern, text) is not None
        except re.error as exc:
            raise BackendError(f"Invalid regular expression {pattern!r}: {exc}") from exc

    # Comparison

    def str_longest_common_prefix(self, a: str, b: str) -> str:
        size = 0
        for x, y in zip(a, b, strict=False):
            if x != y:
                break
            size += 1
        return a[:size]

    def str_longest_common_suffix(self, a: str, b: str) -> str:
        size = 0
        for x, y in zip(reversed(a), reversed(b), strict=False):
            if x != y:
                break
            size += 1
        return a[len(a) - size :]

    def str_longest_common_substring(self, a: str, b: str) -> str:
        if a == "" or b == "":
            return ""
        best_length = best_end = 0
        previous = [0] * (len(b) + 1)
        for i in range(1, len(a) + 1):
            current = [0] * (len(b) + 1)
            for j in range(1, len(b) + 1):
                if a[i - 1] == b[j - 1]:
                    current[j] = previous[j - 1] + 1
                    if current[j] > best_length:
                        best_length, best_end = current[j], i
            previous = current
        return a[best_end - best_length : best_end]

    def similarity(self, a: str, b: str) -> float:
        """Percentage of matching characters between both strings."""
        if a == "" and b == "":
            return 0.0
        return SequenceMatcher(None, a, b, autojunk=False).ratio() * 100.0

    # Predicates

    def is_alpha(self, text: str) -> bool:
        return all(ch.isalpha() for ch in text)

    def is_alphanumeric(self, text: str) -> bool:
        return all(ch.isalnum() for ch in text)

    def is_blank(self, text: str) -> bool:
        return all(ch.isspace() for ch in text)

    def is_hexadecimal(self, text: str) -> bool:
        return all(ch in string.hexdigits for ch in text)

    def is_lowercase(self, text: str) -> bool:
        return all(ch.islower() for ch in text)

    def is_uppercase(self, text: str) -> bool:
        return all(ch.isupper() for ch in text)

    def has_lowercase(self, text: str) -> bool:
        return any(ch.islower() for ch in text)

    def has_uppercase(self, text: str) -> bool:
        return any(ch.isupper() for ch in text)

    def is_punctuation(self, text: str) -> bool:
        return all(
            unicodedata.category(ch).startswith("P") or ch in string.punctuation for ch in text
        )

    def is_printable(self, text: str) -> bool:
        return _INVISIBLE_RE.search(text) is None

    def is_empty(self, text: str) -> bool:
        """PHP ``empty()``: the empty string and ``"0"`` are empty."""
        return text in ("", "0")

    def is_numeric(self, text: str) -> bool:
        return _NUMERIC_RE.match(text) is not None

    def is_base64(self, text: str, empty_string_is_valid: bool = True) -> bool:
        if text == "":
            return empty_string_is_valid
        try:
            decoded = base64.b64decode(text.encode("ascii"), validate=True)
        except (binascii.Error, UnicodeEncodeError, ValueError):
            return False
        return base64.b64encode(decoded).decode("ascii") == text

    def is_json(self, text: str, only_array_or_object_results_are_valid: bool = False) -> bool:
        if text == "":
            return False
        try:
            value = json.loads(text, parse_constant=_reject_json_constant)
        except (ValueError, RecursionError):
            return False
        if only_array_or_object_results_are_valid:
            return isinstance(value, dict | list)
        return True

    def is_serialized(self, text: str) -> bool:
        """Whether ``text`` is a complete PHP ``serialize()`` payload."""
        try:
            end = _PhpSerializedParser(text).value(0)
        except (ValueError, RecursionError):
            return False
        return end == len(text)

    def to_boolean(self, text: str) -> bool:
        key = text.lower()
        if key in _BOOLEAN_WORDS:
            return _BOOLEAN_WORDS[key]
        if self.is_numeric(text):
            return float(text) > 0
        return text.strip() != ""

    # HTML entities

    def htmlspecialchars(self, text: str, flags: int = HtmlFlags.QUOTES) -> str:
        text = text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
        if flags & HtmlFlags.COMPAT:
            text = text.replace('"', "&quot;")
        if flags & HtmlFlags.QUOTES == HtmlFlags.QUOTES:
            text = text.replace("'", "&#039;")
        return text

    def htmlentities(self, text: str, flags: int = HtmlFlags.COMPAT) -> str:
        """Encode every character that has a named HTML entity."""
        out = []
        for ch in self.htmlspecialchars(text, flags):
            name = html.entities.codepoint2name.get(ord(ch))
            if name is None or ch in "&<>\"'":
                out.append(ch)
            else:
                out.append(f"&{name};")
        return "".join(out)

    def html_entity_decode(self, text: str, flags: int = HtmlFlags.COMPAT) -> str:
        """Decode entities; quote entities follow the same rules as encoding."""
        decode_double = bool(flags & HtmlFlags.COMPAT)
        decode_single = flags & HtmlFlags.QUOTES == HtmlFlags.QUOTES

        def decode(match: re.Match[str]) -> str:
            value = html.unescape(match.group(0))
            if value == '"' and not decode_double:
                return match.group(0)
            if value == "'" and not decode_single:
                return match.group(0)
            return value

        return _HTML_ENTITY_RE.sub(decode, text)

    def remove_html_breaks(self, text: str, replacement: str = "") -> str:
        return _HTML_BREAK_RE.sub(lambda _: replacement, text)

    # Repair

    def cleanup(self, text: str) -> str:
        """Repair broken UTF-8.

        Removes byte-order marks and C0 controls, reinterprets stray bytes as
        Windows-1252 and fixes UTF-8 that was decoded as Windows-1252.
        """
        text = _SURROGATE_RUN_RE.sub(
            lambda m: m.group(0).encode("utf-8", "surrogateescape").decode("cp1252", "replace"),
            text,
        )
        text = text.replace("﻿", "")
        text = _INVISIBLE_RE.sub("", text)
        return self.fix_simple_utf8(text)

    def fix_simple_utf8(self, text: str) -> str:
        def repair(match: re.Match[str]) -> str:
            chunk = match.group(0)
            try:
                return chunk.encode("cp1252").decode("utf-8")
            except UnicodeError:
                return chunk

        return _MOJIBAKE_RE.sub(repair, text)

    # Random and unique strings

    def get_random_string(self, length: int, possible_chars: str) -> str:
        if length < 1:
            raise InvalidInputError("The random string length must be greater than zero.")
        if possible_chars == "":
            raise InvalidInputError("The random string alphabet must not be empty.")
        return "".join(secrets.choice(possible_chars) for _ in range(length))

    def get_unique_string(self, entropy_extra: str | int = "", use_md5: bool = True) -> str:
        helper = f"{secrets.randbelow(2**31)}{os.getpid()}{entropy_extra}"
        unique = f"{helper}{time.time_ns():x}.{secrets.token_hex(4)}"
        if use_md5:
            return hashlib.md5((unique + helper).encode("utf-8")).hexdigest()
        return unique

    def str_shuffle(self, text: str) -> str:
        chars = list(text)
        random.shuffle(chars)
        return "".join(chars)


def _reject_json_constant(name: str) -> float:
    raise ValueError(f"{name} is not valid JSON")


class _PhpSerializedParser:
    """Recursive-descent validator for PHP's ``serialize()`` format."""

    max_depth = 128

    def __init__(self, data: str):
        self.data = data
        self.depth = 0
        self.raw = data.encode("utf-8", "surrogateescape")

    def _expect(self, position: int, token: str) -> int:
        if not self.data.startswith(token, position):
            raise ValueError(f"expected {token!r} at {position}")
        return position + len(token)

    def _until(self, position: int, stop: str, pattern: str) -> tuple[str, int]:
        end = self.data.find(stop, position)
        if end == -1 or not re.fullmatch(pattern, self.data[position:end]):
            raise ValueError(f"malformed token at {position}")
        return self.data[position:end], end + 1

    def value(self, position: int) -> int:
        kind = self.data[position : position + 1]
        if kind == "N":
            return self._expect(position + 1, ";")
        position = self._expect(position + 1, ":")
        if kind == "b":
            _, position = self._until(position, ";", "[01]")
            return position
        if kind == "i":
            _, position = self._until(position, ";", r"[+-]?\d+")
            return position
        if kind == "d":
            _, position = self._until(position, ";", r"[+-]?(?:\d+(?:\.\d*)?(?:[eE][+-]?\d+)?|INF|NAN)")
            return position
        if kind == "s":
            size, position = self._until(position, ":", r"\d+")
            position = self._string(position, int(size))
            return self._expect(position, ";")
        if kind == "a":
            count, position = self._until(position, ":", r"\d+")
            return self._members(position, int(count))
        if kind == "O":
            size, position = self._until(position, ":", r"\d+")
            position = self._string(position, int(size))
            position = self._expect(position, ":")
            count, position = self._until(position, ":", r"\d+")
            return self._members(position, int(count))
        raise ValueError(f"unknown type {kind!r} at {position}")

    def _string(self, position: int, size: int) -> int:
        """Consume ``"<size bytes>"`` and return the position after the closing quote."""
        position = self._expect(position, '"')
        prefix = len(self.data[:position].encode("utf-8", "surrogateescape"))
        chunk = self.raw[prefix : prefix + size]
        if len(chunk) != size:
            raise ValueError("string length mismatch")
        position += len(chunk.decode("utf-8", "surrogateescape"))
        return self._expect(position, '"')

    def _members(self, position: int, count: int) -> int:
        position = self._expect(position, "{")
        self.depth += 1
        if self.depth > self.max_depth:
            raise ValueError(f"nesting deeper than {self.max_depth} at {position}")
        for _ in range(count * 2):
            position = self.value(position)
        self.depth -= 1
        return self._expect(position, "}")
