"""Immutable Unicode string value with a fluent API.

Every transformation returns a new ``Stringy`` carrying the same encoding
tag; predicates and searches return plain Python values.

Usage:
    from stringy import Stringy

    Stringy("fòôbàř").to_upper_case()            # Stringy("FÒÔBÀŘ")
    Stringy("Hello World").snake_case().to_string()  # "hello_world"
    Stringy("abcdef")[1:4]                       # Stringy("bcd")
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import html
import re
import sys
import zlib
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self
from urllib.parse import quote, quote_plus, unquote, unquote_plus

from stringy.backends.registry import (
    get_ascii_backend,
    get_cipher,
    get_email_backend,
    get_html_backend,
    get_password_hasher,
    get_unicode_backend,
)
from stringy.config import get_settings
from stringy.core.errors import BackendError, ImmutableError, InvalidInputError, OutOfRangeError
from stringy.core.printf import sprintf
from stringy.core.types import HtmlFlags, PadType

if TYPE_CHECKING:
    from stringy.value.collection import CollectionStringy

_HEX_ESCAPE_RE = re.compile(r"\\x([0-9a-fA-F]+)")
_PERCENT_U_RE = re.compile(r"%u([0-9a-fA-F]{4})")
_NAMED_FORMAT_RE = re.compile(r"%%|%:(\w*)")


def _text(value: Any) -> str:
    if isinstance(value, Stringy):
        return value.text
    return str(value)


def _coerce(value: Any, encoding: str) -> str:
    """Turn a constructor argument into text.

    Raises:
        InvalidInputError: For containers and objects without a text form.
    """
    if isinstance(value, Stringy):
        return value.text
    if value is None:
        return ""
    if isinstance(value, str):
        return str(value)
    if isinstance(value, bytes | bytearray | memoryview):
        return get_unicode_backend().decode(bytes(value), encoding)
    if isinstance(value, list | tuple | dict | set | frozenset):
        raise InvalidInputError("Passed value cannot be an array")
    if isinstance(value, int | float):
        return str(value)
    if type(value).__str__ is object.__str__:
        raise InvalidInputError(
            f"Passed object must have a __str__ method (given: {type(value).__name__})"
        )
    return str(value)


def _equality_operand(value: Any) -> str:
    if isinstance(value, Stringy):
        return value.text
    if isinstance(value, str | int | float | bool):
        return str(value)
    raise InvalidInputError(f"expected: int|float|str|Stringy -> given: {type(value).__name__}")


@dataclass(frozen=True, eq=False, repr=False)
class Stringy:
    """An immutable sequence of codepoints tagged with an encoding name.

    Attributes:
        text: The characters.
        encoding: Canonical encoding name, never empty.
    """

    text: str
    encoding: str

    def __init__(self, text: Any = "", encoding: str | None = None):
        default = get_settings().default_encoding
        normalized = get_unicode_backend().normalize_encoding(encoding, fallback=default)
        object.__setattr__(self, "encoding", normalized)
        object.__setattr__(self, "text", _coerce(text, normalized))

    @classmethod
    def create(cls, text: Any = "", encoding: str | None = None) -> Self:
        """Construct a value; same rules as the constructor."""
        return cls(text, encoding)

    def _new(self, text: str, encoding: str | None = None) -> Self:
        new = object.__new__(type(self))
        object.__setattr__(new, "text", text)
        object.__setattr__(new, "encoding", encoding or self.encoding)
        return new

    def _list(self, pieces: Iterable[str]) -> list[Self]:
        return [self._new(piece) for piece in pieces]

    def _collection(self, values: Iterable[Stringy]) -> CollectionStringy:
        from stringy.value.collection import CollectionStringy

        return CollectionStringy(values)

    # Python data model

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        if self.encoding == "UTF-8":
            return f"Stringy({self.text!r})"
        return f"Stringy({self.text!r}, encoding={self.encoding!r})"

    def __len__(self) -> int:
        return len(self.text)

    def __bool__(self) -> bool:
        return self.text != ""

    def __iter__(self) -> Iterator[str]:
        return iter(self.text)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Stringy | str):
            return _text(item) in self.text
        return False

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return self._new(self.text[index])
        return self.offset_get(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self.offset_set(index, value)

    def __delitem__(self, index: int) -> None:
        self.offset_unset(index)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Stringy):
            return self.text == other.text
        if isinstance(other, str):
            return self.text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)

    def __add__(self, other: object) -> Self:
        if isinstance(other, Stringy | str):
            return self._new(self.text + _text(other))
        return NotImplemented

    def __radd__(self, other: object) -> Self:
        if isinstance(other, str):
            return self._new(other + self.text)
        return NotImplemented

    # Construction and conversion

    def to_string(self) -> str:
        return self.text

    def json_serialize(self) -> str:
        return self.text

    def to_bytes(self, encoding: str | None = None) -> bytes:
        """UTF-8 bytes of the text, or the text transcoded to ``encoding``.

        The UTF-8 view does not depend on the encoding tag; hashing and base64
        work on it.

        Raises:
            BackendError: If ``encoding`` cannot represent the text.
        """
        return get_unicode_backend().to_bytes(self.text, encoding or "UTF-8")

    def encode(self, new_encoding: str, auto_detect: bool = False) -> Self:
        """Transcode into ``new_encoding``; unrepresentable characters become ``?``.

        With ``auto_detect`` broken UTF-8 is repaired first.
        """
        utf8 = get_unicode_backend()
        text = utf8.cleanup(self.text) if auto_detect else self.text
        encoding = utf8.normalize_encoding(new_encoding)
        return self._new(utf8.encode(encoding, text), encoding)

    def set_internal_encoding(self, new_encoding: str) -> Self:
        """Same text, new encoding tag. No transcoding happens."""
        encoding = get_unicode_backend().normalize_encoding(
            new_encoding, fallback=get_settings().default_encoding
        )
        return self._new(self.text, encoding)

    def get_encoding(self) -> str:
        return self.encoding

    # Indexed access

    def length(self) -> int:
        return len(self.text)

    def count(self) -> int:
        return len(self.text)

    def at(self, index: int) -> Self:
        """The codepoint at ``index`` as a value.

        Raises:
            OutOfRangeError: If ``index`` is outside the text.
        """
        return self._new(self.offset_get(index))

    def offset_exists(self, offset: int) -> bool:
        return get_unicode_backend().str_offset_exists(self.text, offset)

    def offset_get(self, offset: int) -> str:
        """The codepoint at ``offset``; negative offsets count from the end.

        Raises:
            OutOfRangeError: If no character exists at ``offset``.
        """
        if not self.offset_exists(offset):
            raise OutOfRangeError(f"No character at index {offset}")
        return self.text[offset]

    def offset_set(self, offset: int, value: Any) -> None:
        raise ImmutableError("Stringy object is immutable, cannot modify char")

    def offset_unset(self, offset: int) -> None:
        raise ImmutableError("Stringy object is immutable, cannot unset char")

    def chars(self) -> list[str]:
        return list(self.text)

    def chunk(self, length: int = 1) -> list[Self]:
        """Split into values of at most ``length`` codepoints.

        Raises:
            InvalidInputError: If ``length`` is less than one.
        """
        if length < 1:
            raise InvalidInputError("The chunk length must be greater than zero.")
        if self.text == "":
            return []
        return self._list(get_unicode_backend().str_split(self.text, length))

    def chunk_collection(self, length: int = 1) -> CollectionStringy:
        return self._collection(self.chunk(length))

    def iterator(self) -> Iterator[str]:
        return iter(self.text)

    # Affixes

    def append(self, *suffix: str | Stringy) -> Self:
        return self._new(self.text + "".join(_text(s) for s in suffix))

    def prepend(self, *prefix: str | Stringy) -> Self:
        return self._new("".join(_text(p) for p in prefix) + self.text)

    def append_stringy(self, *values: Stringy | CollectionStringy) -> Self:
        """Append values; collections are joined without a separator first."""
        return self._new(self.text + "".join(self._joined(v) for v in values))

    def prepend_stringy(self, *values: Stringy | CollectionStringy) -> Self:
        return self._new("".join(self._joined(v) for v in values) + self.text)

    def _joined(self, value: Stringy | CollectionStringy) -> str:
        if isinstance(value, Stringy):
            return value.text
        return value.implode("")

    def ensure_left(self, substring: str) -> Self:
        if self.text.startswith(substring):
            return self
        return self._new(substring + self.text)

    def ensure_right(self, substring: str) -> Self:
        if self.text.endswith(substring):
            return self
        return self._new(self.text + substring)

    def remove_left(self, substring: str) -> Self:
        if substring and self.text.startswith(substring):
            return self._new(self.text[len(substring) :])
        return self

    def remove_right(self, substring: str) -> Self:
        if substring and self.text.endswith(substring):
            return self._new(self.text[: len(self.text) - len(substring)])
        return self

    def surround(self, substring: str) -> Self:
        return self._new(substring + self.text + substring)

    def wrap(self, substring: str) -> Self:
        return self.surround(substring)

    def repeat(self, multiplier: int) -> Self:
        return self._new(self.text * max(multiplier, 0))

    def insert(self, substring: str, index: int) -> Self:
        """Insert ``substring`` before ``index``; an index past the end is a no-op."""
        return self._new(get_unicode_backend().str_insert(self.text, substring, index))

    # Substrings

    def substr(self, start: int, length: int | None = None) -> Self:
        return self._new(get_unicode_backend().substr(self.text, start, length))

    def substring(self, start: int, length: int | None = None) -> Self:
        return self.substr(start, length)

    def slice(self, start: int, end: int | None = None) -> Self:
        """Codepoints from ``start`` up to, not including, ``end``."""
        return self._new(get_unicode_backend().str_slice(self.text, start, end))

    def first(self, n: int) -> Self:
        return self._new(get_unicode_backend().first_char(self.text, n))

    def last(self, n: int) -> Self:
        return self._new(get_unicode_backend().str_last_char(self.text, n))

    def before(self, separator: str) -> Self:
        """Everything before the first ``separator``; empty when it is absent."""
        if separator == "" or separator not in self.text:
            return self._new("")
        return self._new(self.text.split(separator, 1)[0])

    def after(self, separator: str) -> Self:
        """Split on ``separator``, drop the first piece, join the rest with spaces.

        Unlike :meth:`after_first` the separators themselves are not kept.
        """
        if separator == "":
            return self._new("")
        return self._new(" ".join(self.text.split(separator)[1:]))

    def before_first(self, separator: str) -> Self:
        return self._new(get_unicode_backend().substr_before(self.text, separator))

    def before_first_ignore_case(self, separator: str) -> Self:
        return self._new(
            get_unicode_backend().substr_before(self.text, separator, case_sensitive=False)
        )

    def before_last(self, separator: str) -> Self:
        return self._new(get_unicode_backend().substr_before(self.text, separator, last=True))

    def before_last_ignore_case(self, separator: str) -> Self:
        return self._new(
            get_unicode_backend().substr_before(
                self.text, separator, case_sensitive=False, last=True
            )
        )

    def after_first(self, separator: str) -> Self:
        return self._new(get_unicode_backend().substr_after(self.text, separator))

    def after_first_ignore_case(self, separator: str) -> Self:
        return self._new(
            get_unicode_backend().substr_after(self.text, separator, case_sensitive=False)
        )

    def after_last(self, separator: str) -> Self:
        return self._new(get_unicode_backend().substr_after(self.text, separator, last=True))

    def after_last_ignore_case(self, separator: str) -> Self:
        return self._new(
            get_unicode_backend().substr_after(
                self.text, separator, case_sensitive=False, last=True
            )
        )

    def between(self, start: str, end: str, offset: int = 0) -> Self:
        return self._new(get_unicode_backend().between(self.text, start, end, offset))

    def substring_of(self, needle: str, before_needle: bool = False) -> Self:
        return self._new(get_unicode_backend().str_substr(self.text, needle, before_needle))

    def substring_of_ignore_case(self, needle: str, before_needle: bool = False) -> Self:
        return self._new(
            get_unicode_backend().str_substr(self.text, needle, before_needle, case_sensitive=False)
        )

    def last_substring_of(self, needle: str, before_needle: bool = False) -> Self:
        return self._new(
            get_unicode_backend().str_substr(self.text, needle, before_needle, last=True)
        )

    def last_substring_of_ignore_case(self, needle: str, before_needle: bool = False) -> Self:
        return self._new(
            get_unicode_backend().str_substr(
                self.text, needle, before_needle, case_sensitive=False, last=True
            )
        )

    def nth(self, step: int, offset: int = 0) -> Self:
        """Every ``step``-th codepoint starting at ``offset``."""
        if step < 1:
            return self._new("")
        return self._new(get_unicode_backend().substr(self.text, offset)[::step])

    # Searching

    def index_of(self, needle: str, offset: int = 0) -> int | None:
        """Index of the first ``needle`` at or after ``offset``, or None."""
        return get_unicode_backend().strpos(self.text, needle, offset)

    def index_of_ignore_case(self, needle: str, offset: int = 0) -> int | None:
        return get_unicode_backend().stripos(self.text, needle, offset)

    def index_of_last(self, needle: str, offset: int = 0) -> int | None:
        return get_unicode_backend().strrpos(self.text, needle, offset)

    def index_of_last_ignore_case(self, needle: str, offset: int = 0) -> int | None:
        return get_unicode_backend().strripos(self.text, needle, offset)

    def contains(self, needle: str, case_sensitive: bool = True) -> bool:
        return get_unicode_backend().str_contains(self.text, needle, case_sensitive)

    def contains_all(self, needles: Sequence[str], case_sensitive: bool = True) -> bool:
        return get_unicode_backend().str_contains_all(self.text, needles, case_sensitive)

    def contains_any(self, needles: Sequence[str], case_sensitive: bool = True) -> bool:
        return get_unicode_backend().str_contains_any(self.text, needles, case_sensitive)

    def starts_with(self, substring: str, case_sensitive: bool = True) -> bool:
        return get_unicode_backend().str_starts_with(self.text, substring, case_sensitive)

    def ends_with(self, substring: str, case_sensitive: bool = True) -> bool:
        return get_unicode_backend().str_ends_with(self.text, substring, case_sensitive)

    def starts_with_any(self, substrings: Sequence[str], case_sensitive: bool = True) -> bool:
        return any(self.starts_with(s, case_sensitive) for s in substrings)

    def ends_with_any(self, substrings: Sequence[str], case_sensitive: bool = True) -> bool:
        return any(self.ends_with(s, case_sensitive) for s in substrings)

    def is_(self, pattern: str) -> bool:
        """Whether the whole text matches ``pattern``, where ``*`` is a wildcard."""
        if self.text == pattern:
            return True
        regex = re.escape(pattern).replace(r"\*", ".*")
        return get_unicode_backend().str_matches_pattern(self.text, rf"\A{regex}\Z")

    def in_(self, other: str, case_sensitive: bool = True) -> bool:
        """Whether this text occurs in ``other``."""
        return get_unicode_backend().str_contains(_text(other), self.text, case_sensitive)

    def count_substr(self, substring: str, case_sensitive: bool = True) -> int:
        return get_unicode_backend().substr_count(self.text, substring, case_sensitive)

    # Case

    def to_lower_case(self, keep_length: bool = False, language: str | None = None) -> Self:
        return self._new(get_unicode_backend().strtolower(self.text, language, keep_length))

    def to_upper_case(self, keep_length: bool = False, language: str | None = None) -> Self:
        return self._new(get_unicode_backend().strtoupper(self.text, language, keep_length))

    def lower_case_first(self, language: str | None = None) -> Self:
        return self._new(get_unicode_backend().lcfirst(self.text, language))

    def upper_case_first(self, language: str | None = None) -> Self:
        return self._new(get_unicode_backend().ucfirst(self.text, language))

    def swap_case(self) -> Self:
        return self._new(get_unicode_backend().swap_case(self.text))

    def to_title_case(self, language: str | None = None) -> Self:
        return self._new(get_unicode_backend().titlecase(self.text, language))

    def titleize(
        self,
        ignore: Iterable[str] | None = None,
        word_chars: str | None = None,
        language: str | None = None,
    ) -> Self:
        return self._new(
            get_unicode_backend().str_titleize(self.text, ignore, language, word_chars)
        )

    def titleize_for_humans(self, ignore: Iterable[str] = ()) -> Self:
        return self._new(get_unicode_backend().str_titleize_for_humans(self.text, ignore))

    def capitalize_personal_name(self) -> Self:
        return self._new(get_unicode_backend().str_capitalize_name(self.text))

    # Case styles

    def camelize(self) -> Self:
        return self._new(get_unicode_backend().str_camelize(self.text))

    def upper_camelize(self) -> Self:
        return self._new(get_unicode_backend().str_upper_camelize(self.text))

    def _case_words(self) -> list[str]:
        return get_unicode_backend().str_to_words(self.text, "", True)

    def studly_case(self) -> Self:
        utf8 = get_unicode_backend()
        return self._new("".join(utf8.ucfirst(word) for word in self._case_words()))

    def pascal_case(self) -> Self:
        return self.studly_case()

    def snake_case(self) -> Self:
        utf8 = get_unicode_backend()
        return self._new("_".join(utf8.strtolower(word) for word in self._case_words()))

    def kebab_case(self) -> Self:
        utf8 = get_unicode_backend()
        return self._new("-".join(utf8.strtolower(word) for word in self._case_words()))

    def snakeize(self) -> Self:
        return self._new(get_unicode_backend().str_snakeize(self.text))

    def dasherize(self) -> Self:
        return self._new(get_unicode_backend().str_dasherize(self.text))

    def underscored(self) -> Self:
        return self._new(get_unicode_backend().str_underscored(self.text))

    def delimit(self, delimiter: str) -> Self:
        return self._new(get_unicode_backend().str_delimit(self.text, delimiter))

    def humanize(self) -> Self:
        return self._new(get_unicode_backend().str_humanize(self.text))

    # Whitespace and wrapping

    def trim(self, chars: str | None = None) -> Self:
        return self._new(get_unicode_backend().trim(self.text, chars))

    def trim_left(self, chars: str | None = None) -> Self:
        return self._new(get_unicode_backend().ltrim(self.text, chars))

    def trim_right(self, chars: str | None = None) -> Self:
        return self._new(get_unicode_backend().rtrim(self.text, chars))

    def strip_whitespace(self) -> Self:
        return self._new(get_unicode_backend().strip_whitespace(self.text))

    def collapse_whitespace(self) -> Self:
        return self._new(get_unicode_backend().collapse_whitespace(self.text))

    def to_spaces(self, tab_length: int = 4) -> Self:
        return self._new(self.text.replace("\t", " " * tab_length))

    def to_tabs(self, tab_length: int = 4) -> Self:
        if tab_length < 1:
            return self
        return self._new(self.text.replace(" " * tab_length, "\t"))

    def pad(self, length: int, pad_str: str = " ", pad_type: str | PadType = PadType.RIGHT) -> Self:
        """Pad to ``length`` codepoints on the left, right or both sides.

        Raises:
            InvalidInputError: If ``pad_type`` is not one of left, right or both.
        """
        return self._new(get_unicode_backend().str_pad(self.text, length, pad_str, pad_type))

    def pad_left(self, length: int, pad_str: str = " ") -> Self:
        return self.pad(length, pad_str, PadType.LEFT)

    def pad_right(self, length: int, pad_str: str = " ") -> Self:
        return self.pad(length, pad_str, PadType.RIGHT)

    def pad_both(self, length: int, pad_str: str = " ") -> Self:
        return self.pad(length, pad_str, PadType.BOTH)

    def line_wrap(
        self,
        limit: int,
        break_: str = "\n",
        add_final_break: bool = True,
        delimiter: str | None = None,
    ) -> Self:
        """Wrap every line at ``limit`` codepoints, cutting long words."""
        return self._new(
            get_unicode_backend().wordwrap_per_line(
                self.text, limit, break_, True, add_final_break, delimiter
            )
        )

    def line_wrap_after_word(
        self,
        limit: int,
        break_: str = "\n",
        add_final_break: bool = True,
        delimiter: str | None = None,
    ) -> Self:
        """Wrap every line at ``limit`` codepoints without splitting words."""
        return self._new(
            get_unicode_backend().wordwrap_per_line(
                self.text, limit, break_, False, add_final_break, delimiter
            )
        )

    def hard_wrap(self, width: int, break_: str = "\n") -> Self:
        return self.line_wrap(width, break_, False)

    def soft_wrap(self, width: int, break_: str = "\n") -> Self:
        return self.line_wrap_after_word(width, break_, False)

    def shorten_after_word(self, length: int, add_on: str = "…") -> Self:
        return self._new(get_unicode_backend().str_limit_after_word(self.text, length, add_on))

    # Replacement

    def replace(self, search: str, replacement: str, case_sensitive: bool = True) -> Self:
        return self._new(
            get_unicode_backend().str_replace(search, replacement, self.text, case_sensitive)
        )

    def replace_all(
        self,
        search: Sequence[str],
        replacement: str | Sequence[str],
        case_sensitive: bool = True,
    ) -> Self:
        """Replace each search string in turn.

        A list of replacements is matched to ``search`` by position; missing
        entries mean the empty string.
        """
        return self._new(
            get_unicode_backend().str_replace(list(search), replacement, self.text, case_sensitive)
        )

    def replace_first(self, search: str, replacement: str) -> Self:
        return self._new(get_unicode_backend().str_replace_first(search, replacement, self.text))

    def replace_last(self, search: str, replacement: str) -> Self:
        return self._new(get_unicode_backend().str_replace_last(search, replacement, self.text))

    def replace_beginning(self, search: str, replacement: str) -> Self:
        return self._new(
            get_unicode_backend().str_replace_beginning(self.text, search, replacement)
        )

    def replace_ending(self, search: str, replacement: str) -> Self:
        return self._new(get_unicode_backend().str_replace_ending(self.text, search, replacement))

    def regex_replace(
        self, pattern: str, replacement: str, options: str = "", delimiter: str = "/"
    ) -> Self:
        """Replace regex matches; ``$1`` and ``${1}`` refer to groups.

        Args:
            pattern: Python regular expression.
            replacement: Replacement text.
            options: Flag letters ``i``, ``m``, ``s`` and ``x``; others are ignored.
            delimiter: Delimiter whose escaped form in ``pattern`` is unescaped.
        """
        return self._new(
            get_unicode_backend().regex_replace(self.text, pattern, replacement, options, delimiter)
        )

    def strip(self, search: str | Sequence[str]) -> Self:
        """Remove every occurrence of ``search`` (or of each string in it)."""
        if isinstance(search, str):
            return self.replace(search, "")
        return self.replace_all(search, "")

    # Splitting

    def split(self, pattern: str, limit: int | None = None) -> list[Self]:
        """Split on the regular expression ``pattern``.

        A non-negative ``limit`` keeps only the first ``limit`` pieces.
        """
        if self.text == "":
            return []
        pieces = get_unicode_backend().str_split_pattern(
            self.text, pattern, -1 if limit is None else limit
        )
        return self._list(pieces)

    def split_collection(self, pattern: str, limit: int | None = None) -> CollectionStringy:
        return self._collection(self.split(pattern, limit))

    def explode(self, delimiter: str, limit: int = sys.maxsize) -> list[Self]:
        """Split on the literal ``delimiter`` with PHP ``explode`` limits.

        A positive limit caps the number of pieces (the last one holds the
        rest), a negative limit drops that many pieces from the end.

        Raises:
            InvalidInputError: If ``delimiter`` is empty.
        """
        if self.text == "":
            return []
        return self._list(get_unicode_backend().explode(self.text, delimiter, limit))

    def explode_collection(self, delimiter: str, limit: int = sys.maxsize) -> CollectionStringy:
        return self._collection(self.explode(delimiter, limit))

    def lines(self) -> list[Self]:
        return self._list(get_unicode_backend().str_to_lines(self.text))

    def lines_collection(self) -> CollectionStringy:
        return self._collection(self.lines())

    def words(
        self,
        char_list: str = "",
        remove_empty: bool = False,
        remove_short: int | None = None,
    ) -> list[Self]:
        """Words and the runs between them, in order.

        Args:
            char_list: Extra characters that count as letters.
            remove_empty: Drop empty and whitespace-only pieces.
            remove_short: Drop pieces shorter than this many codepoints.
        """
        pieces = get_unicode_backend().str_to_words(self.text, char_list, remove_empty, remove_short)
        return self._list(pieces)

    def words_collection(
        self,
        char_list: str = "",
        remove_empty: bool = False,
        remove_short: int | None = None,
    ) -> CollectionStringy:
        return self._collection(self.words(char_list, remove_empty, remove_short))

    # Codecs

    def base64_encode(self) -> Self:
        return self._new(base64.b64encode(self.to_bytes()).decode("ascii"))

    def base64_decode(self) -> Self:
        """Strict base64 decoding; invalid input gives an empty value."""
        try:
            raw = base64.b64decode(self.text.encode("ascii"), validate=True)
        except (binascii.Error, UnicodeEncodeError, ValueError):
            return self._new("")
        return self._new(get_unicode_backend().decode(raw, "UTF-8"))

    def hex_encode(self) -> Self:
        return self._new("".join(f"\\x{ord(ch):04x}" for ch in self.text))

    def hex_decode(self) -> Self:
        return self._new(_HEX_ESCAPE_RE.sub(lambda m: chr(int(m.group(1), 16)), self.text))

    def url_encode(self) -> Self:
        """``application/x-www-form-urlencoded`` encoding (spaces become ``+``)."""
        encoded = quote_plus(self.text, safe="", errors="surrogateescape")
        return self._new(encoded.replace("~", "%7E"))

    def url_decode(self) -> Self:
        return self._new(unquote_plus(self.text))

    def url_encode_raw(self) -> Self:
        """RFC 3986 percent-encoding (spaces become ``%20``)."""
        return self._new(quote(self.text, safe="", errors="surrogateescape"))

    def url_decode_raw(self) -> Self:
        return self._new(unquote(self.text))

    def url_decode_multi(self) -> Self:
        """Decode repeatedly until the text no longer changes."""
        return self._new(self._decode_until_stable(unquote_plus))

    def url_decode_raw_multi(self) -> Self:
        return self._new(self._decode_until_stable(unquote))

    def _decode_until_stable(self, decode: Any) -> str:
        text = _PERCENT_U_RE.sub(lambda m: chr(int(m.group(1), 16)), self.text)
        text = html.unescape(text)
        while True:
            decoded = decode(text)
            if decoded == text:
                return decoded
            text = decoded

    def html_encode(self, flags: int = HtmlFlags.COMPAT) -> Self:
        return self._new(get_unicode_backend().htmlentities(self.text, flags))

    def html_decode(self, flags: int = HtmlFlags.COMPAT) -> Self:
        return self._new(get_unicode_backend().html_entity_decode(self.text, flags))

    def escape(self) -> Self:
        """Escape ``& < > " '`` for HTML output."""
        return self._new(get_unicode_backend().htmlspecialchars(self.text, HtmlFlags.QUOTES))

    def urlify(
        self,
        separator: str = "-",
        language: str | None = None,
        replacements: Mapping[str, str] | None = None,
        lower: bool = True,
    ) -> Self:
        return self._new(
            get_ascii_backend().to_slugify(
                self.text,
                separator,
                language or get_settings().default_language,
                replacements,
                True,
                lower,
            )
        )

    def slugify(
        self,
        separator: str = "-",
        language: str | None = None,
        replacements: Mapping[str, str] | None = None,
        replace_extra_symbols: bool = True,
        lower: bool = True,
        transliterate: bool = False,
    ) -> Self:
        """Lower-case ASCII slug with words joined by ``separator``."""
        return self._new(
            get_ascii_backend().to_slugify(
                self.text,
                separator,
                language or get_settings().default_language,
                replacements,
                replace_extra_symbols,
                lower,
                transliterate,
            )
        )

    def to_ascii(self, language: str | None = None, remove_unsupported: bool = True) -> Self:
        return self._new(
            get_ascii_backend().to_ascii(
                self.text, language or get_settings().default_language, remove_unsupported
            )
        )

    def to_transliterate(self, strict: bool = False, unknown: str = "?") -> Self:
        return self._new(get_ascii_backend().to_transliterate(self.text, unknown, strict))

    def tidy(self) -> Self:
        """Replace Windows-1252 smart quotes, dashes and ellipses with ASCII."""
        return self._new(get_ascii_backend().normalize_msword(self.text))

    def utf8ify(self) -> Self:
        return self._new(get_unicode_backend().cleanup(self.text))

    # Hashing and encryption

    def crc32(self) -> int:
        return zlib.crc32(self.to_bytes())

    def md5(self) -> Self:
        return self.hash("md5")

    def sha1(self) -> Self:
        return self.hash("sha1")

    def sha256(self) -> Self:
        return self.hash("sha256")

    def sha512(self) -> Self:
        return self.hash("sha512")

    def hash(self, algorithm: str) -> Self:
        """Hex digest using any algorithm ``hashlib.new`` accepts.

        Raises:
            BackendError: If the algorithm is not available.
        """
        try:
            digest = hashlib.new(algorithm, self.to_bytes())
        except (ValueError, TypeError) as exc:
            raise BackendError(f"Unsupported hash algorithm: {algorithm}") from exc
        return self._new(digest.hexdigest())

    def crypt(self, salt: str) -> Self:
        return self._new(get_password_hasher().crypt(self.text, salt))

    def bcrypt(self, options: Mapping[str, Any] | None = None) -> Self:
        """bcrypt hash; ``options["cost"]`` overrides the configured rounds."""
        rounds = (options or {}).get("cost")
        return self._new(get_password_hasher().hash(self.text, rounds))

    def encrypt(self, password: str) -> Self:
        return self._new(get_cipher().encrypt(self.text, password))

    def decrypt(self, password: str) -> Self:
        """Reverse :meth:`encrypt`.

        Raises:
            BackendError: On a wrong password or corrupted ciphertext.
        """
        return self._new(get_cipher().decrypt(self.text, password))

    # Predicates

    def is_alpha(self) -> bool:
        return get_unicode_backend().is_alpha(self.text)

    def is_alphanumeric(self) -> bool:
        return get_unicode_backend().is_alphanumeric(self.text)

    def is_base64(self, empty_valid: bool = True) -> bool:
        return get_unicode_backend().is_base64(self.text, empty_valid)

    def is_blank(self) -> bool:
        return get_unicode_backend().is_blank(self.text)

    def is_whitespace(self) -> bool:
        return self.is_blank()

    def is_email(
        self,
        example_check: bool = False,
        typo_check: bool = False,
        temporary_check: bool = False,
        dns_check: bool = False,
    ) -> bool:
        return get_email_backend().is_valid(
            self.text, example_check, typo_check, temporary_check, dns_check
        )

    def is_empty(self) -> bool:
        return get_unicode_backend().is_empty(self.text)

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    def is_equals(self, *values: Any) -> bool:
        return self.is_equals_case_sensitive(*values)

    def is_equals_case_sensitive(self, *values: Any) -> bool:
        """Whether every value has exactly this text.

        Raises:
            InvalidInputError: If a value is not a Stringy, str, int, float or bool.
        """
        operands = [_equality_operand(v) for v in values]
        return all(operand == self.text for operand in operands)

    def is_equals_case_insensitive(self, *values: Any) -> bool:
        utf8 = get_unicode_backend()
        operands = [_equality_operand(v) for v in values]
        upper = utf8.strtoupper(self.text)
        return all(utf8.strtoupper(operand) == upper for operand in operands)

    def match_case_sensitive(self, *values: Any) -> bool:
        return self.is_equals_case_sensitive(*values)

    def match_case_insensitive(self, *values: Any) -> bool:
        return self.is_equals_case_insensitive(*values)

    def is_hexadecimal(self) -> bool:
        return get_unicode_backend().is_hexadecimal(self.text)

    def is_html(self) -> bool:
        return get_html_backend().is_html(self.text)

    def is_json(self, only_structured: bool = False) -> bool:
        return get_unicode_backend().is_json(self.text, only_structured)

    def is_lower_case(self) -> bool:
        return get_unicode_backend().is_lowercase(self.text)

    def is_upper_case(self) -> bool:
        return get_unicode_backend().is_uppercase(self.text)

    def has_lower_case(self) -> bool:
        return get_unicode_backend().has_lowercase(self.text)

    def has_upper_case(self) -> bool:
        return get_unicode_backend().has_uppercase(self.text)

    def is_numeric(self) -> bool:
        return get_unicode_backend().is_numeric(self.text)

    def is_printable(self) -> bool:
        return get_unicode_backend().is_printable(self.text)

    def is_punctuation(self) -> bool:
        return get_unicode_backend().is_punctuation(self.text)

    def is_serialized(self) -> bool:
        return get_unicode_backend().is_serialized(self.text)

    def is_similar(self, other: str | Stringy, min_percent: float = 80.0) -> bool:
        return self.similarity(other) >= min_percent

    def similarity(self, other: str | Stringy) -> float:
        """Similarity to ``other`` as a percentage between 0 and 100."""
        return get_unicode_backend().similarity(self.text, _text(other))

    def to_boolean(self) -> bool:
        """Interpret the text as a flag: true/1/on/yes and false/0/off/no.

        Other numeric text is true when positive; anything else is true when
        non-blank.
        """
        return get_unicode_backend().to_boolean(self.text)

    # Miscellaneous

    def reverse(self) -> Self:
        return self._new(self.text[::-1])

    def shuffle(self) -> Self:
        return self._new(get_unicode_backend().str_shuffle(self.text))

    def format(self, *args: Any) -> Self:
        """printf-style formatting with ``%:name`` placeholders.

        Mapping arguments fill ``%:name`` placeholders and are removed from the
        positional arguments; any remaining ``%:`` is kept literally. When
        several mappings name the same placeholder the first one wins.

        Usage:
            Stringy("There are %:count monkeys").format({"count": 5})
            Stringy("%s has %05.1f%%").format("x", 3.14159)  # "x has 003.1%"

        Raises:
            InvalidInputError: If the template needs more arguments than given.
        """
        positional = []
        names: dict[str, Any] = {}
        for arg in args:
            if not isinstance(arg, Mapping):
                positional.append(arg)
                continue
            for name, value in arg.items():
                names.setdefault(str(name).removeprefix("%:"), value)

        def substitute(match: re.Match[str]) -> str:
            name = match.group(1)
            if name is None:
                return "%%"
            if name in names:
                return _text(names[name]).replace("%", "%%")
            return "%%:" + name

        return self._new(sprintf(_NAMED_FORMAT_RE.sub(substitute, self.text), positional))

    def append_password(self, length: int) -> Self:
        return self.append_random_string(length, get_settings().password_alphabet)

    def append_random_string(self, length: int, alphabet: str | None = None) -> Self:
        """Append ``length`` characters drawn from ``alphabet``.

        Raises:
            InvalidInputError: If ``length`` is not positive or the alphabet is empty.
        """
        chars = get_settings().random_alphabet if alphabet is None else alphabet
        return self.append(get_unicode_backend().get_random_string(length, chars))

    def append_unique_identifier(self, extra: str | int = "", md5: bool = True) -> Self:
        return self.append(get_unicode_backend().get_unique_string(extra, md5))

    def new_line_to_html_break(self) -> Self:
        return self.remove_html_break("<br>")

    def remove_html(self, allowable_tags: str = "") -> Self:
        return self._new(get_html_backend().strip_tags(self.text, allowable_tags))

    def remove_html_break(self, replacement: str = "") -> Self:
        return self._new(get_unicode_backend().remove_html_breaks(self.text, replacement))

    def remove_xss(self) -> Self:
        return self._new(get_html_backend().xss_clean(self.text))

    def stripe_css_media_queries(self) -> Self:
        return self._new(get_html_backend().stripe_media_queries(self.text))

    def stripe_empty_html_tags(self) -> Self:
        return self._new(get_html_backend().stripe_empty_tags(self.text))

    def truncate(self, length: int, suffix: str = "") -> Self:
        """Cut to ``length`` codepoints including ``suffix``."""
        return self._new(get_unicode_backend().str_truncate(self.text, length, suffix))

    def safe_truncate(self, length: int, suffix: str = "", ignore_single_word: bool = True) -> Self:
        """Like :meth:`truncate` but never splits a word."""
        return self._new(
            get_unicode_backend().str_truncate_safe(self.text, length, suffix, ignore_single_word)
        )

    def extract_text(self, search: str = "", length: int | None = None, replacer: str = "…") -> Self:
        return self._new(get_unicode_backend().extract_text(self.text, search, length, replacer))

    def longest_common_prefix(self, other: str | Stringy) -> Self:
        return self._new(get_unicode_backend().str_longest_common_prefix(self.text, _text(other)))

    def longest_common_substring(self, other: str | Stringy) -> Self:
        return self._new(
            get_unicode_backend().str_longest_common_substring(self.text, _text(other))
        )

    def longest_common_suffix(self, other: str | Stringy) -> Self:
        return self._new(get_unicode_backend().str_longest_common_suffix(self.text, _text(other)))
