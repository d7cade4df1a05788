"""ASCII backend: transliteration, slugs and smart-quote folding.

Language tables run first (German ``ä`` becomes ``ae``, Danish ``å``
becomes ``aa``); everything else falls through a shared table for letters
Unicode does not decompose (``ø``, ``ł``, Cyrillic, Greek) and finally
through compatibility decomposition with combining marks dropped.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Mapping

_CYRILLIC = {
    "А": "A", "Б": "B", "В": "V", "Г": "G", "Д": "D", "Е": "E", "Ё": "Yo",
    "Ж": "Zh", "З": "Z", "И": "I", "Й": "Y", "К": "K", "Л": "L", "М": "M",
    "Н": "N", "О": "O", "П": "P", "Р": "R", "С": "S", "Т": "T", "У": "U",
    "Ф": "F", "Х": "Kh", "Ц": "Ts", "Ч": "Ch", "Ш": "Sh", "Щ": "Shch", "Ъ": "",
    "Ы": "Y", "Ь": "", "Э": "E", "Ю": "Yu", "Я": "Ya", "Є": "Ye", "І": "I",
    "Ї": "Yi", "Ґ": "G", "Ђ": "Dj", "Ј": "J", "Љ": "Lj", "Њ": "Nj", "Ћ": "C",
    "Џ": "Dz", "Ў": "U",
}  # fmt: skip

_GREEK = {
    "Α": "A", "Β": "V", "Γ": "G", "Δ": "D", "Ε": "E", "Ζ": "Z", "Η": "I",
    "Θ": "Th", "Ι": "I", "Κ": "K", "Λ": "L", "Μ": "M", "Ν": "N", "Ξ": "X",
    "Ο": "O", "Π": "P", "Ρ": "R", "Σ": "S", "Τ": "T", "Υ": "Y", "Φ": "F",
    "Χ": "Ch", "Ψ": "Ps", "Ω": "O",
}  # fmt: skip

_LATIN = {
    "Æ": "AE", "æ": "ae", "Ø": "O", "ø": "o", "Œ": "OE", "œ": "oe", "ß": "ss",
    "ẞ": "SS", "Đ": "D", "đ": "d", "Ð": "D", "ð": "d", "Ł": "L", "ł": "l",
    "Þ": "TH", "þ": "th", "ı": "i", "Ħ": "H", "ħ": "h", "Ŧ": "T", "ŧ": "t",
    "Ŋ": "NG", "ŋ": "ng", "ĸ": "k", "ſ": "s", "Ŀ": "L", "ŀ": "l", "ŉ": "'n",
}  # fmt: skip

_MSWORD = {
    "«": '"', "»": '"', "“": '"', "”": '"', "„": '"', "‟": '"', "″": '"',
    "‘": "'", "’": "'", "‚": "'", "‛": "'", "‹": "'", "›": "'", "′": "'",
    "–": "-", "—": "-", "‐": "-", "‑": "-", "…": "...", "\u00a0": " ",
}  # fmt: skip


def _with_lowercase(table: Mapping[str, str]) -> dict[str, str]:
    merged = dict(table)
    for key, value in table.items():
        merged.setdefault(key.lower(), value.lower())
    return merged


_GENERIC = {
    **_with_lowercase(_CYRILLIC),
    **_with_lowercase(_GREEK),
    "ς": "s",
    **_LATIN,
    **_MSWORD,
}

_LANGUAGE_TABLES: dict[str, dict[str, str]] = {
    "de": {"Ä": "Ae", "Ö": "Oe", "Ü": "Ue", "ä": "ae", "ö": "oe", "ü": "ue", "ß": "ss", "ẞ": "SS"},
    "da": {"Æ": "Ae", "æ": "ae", "Ø": "Oe", "ø": "oe", "Å": "Aa", "å": "aa"},
    "nb": {"Æ": "Ae", "æ": "ae", "Ø": "Oe", "ø": "oe", "Å": "Aa", "å": "aa"},
    "uk": _with_lowercase({"Г": "H", "И": "Y", "І": "I", "Ї": "Yi", "Є": "Ye", "Ґ": "G"}),
    "bg": _with_lowercase({"Щ": "Sht", "Ъ": "A", "Ь": "Y", "Ю": "Yu", "Я": "Ya"}),
    "ka": {
        "ა": "a", "ბ": "b", "გ": "g", "დ": "d", "ე": "e", "ვ": "v", "ზ": "z",
        "თ": "t", "ი": "i", "კ": "k", "ლ": "l", "მ": "m", "ნ": "n", "ო": "o",
        "პ": "p", "ჟ": "zh", "რ": "r", "ს": "s", "ტ": "t", "უ": "u", "ფ": "f",
        "ქ": "k", "ღ": "gh", "ყ": "q", "შ": "sh", "ჩ": "ch", "ც": "ts", "ძ": "dz",
        "წ": "ts", "ჭ": "ch", "ხ": "kh", "ჯ": "j", "ჰ": "h",
    },  # fmt: skip
}
_LANGUAGE_TABLES["no"] = _LANGUAGE_TABLES["nb"]

_EXTRA_SYMBOLS: dict[str, dict[str, str]] = {
    "en": {
        "@": "at", "&": "and", "%": "percent", "+": "plus", "€": "euro",
        "$": "dollar", "£": "pound", "¥": "yen", "₹": "rupee", "°": "degrees",
    },  # fmt: skip
    "de": {"@": "at", "&": "und", "%": "prozent", "+": "plus", "€": "euro", "$": "dollar"},
    "fr": {"@": "arobase", "&": "et", "%": "pourcent", "+": "plus", "€": "euro", "$": "dollar"},
    "es": {"@": "arroba", "&": "y", "%": "por ciento", "+": "mas", "€": "euro", "$": "dolar"},
}

_MSWORD_RE = re.compile("[" + "".join(_MSWORD) + "]")


def _language_code(language: str | None) -> str:
    if not language:
        return "en"
    return re.split(r"[-_]", language.lower(), maxsplit=1)[0]


class AsciiBackend:
    """Table-driven ASCII folding."""

    def _table(self, language: str | None) -> dict[str, str]:
        specific = _LANGUAGE_TABLES.get(_language_code(language))
        if not specific:
            return _GENERIC
        return {**_GENERIC, **specific}

    def _fold(self, ch: str, table: Mapping[str, str], decompose: bool) -> str | None:
        if ch.isascii():
            return ch
        if ch in table:
            return table[ch]
        if not decompose:
            return None
        parts = [
            table.get(c, c)
            for c in unicodedata.normalize("NFKD", ch)
            if not unicodedata.combining(c)
        ]
        folded = "".join(parts)
        if folded and folded.isascii():
            return folded
        return None

    def to_ascii(self, text: str, language: str = "en", remove_unsupported: bool = True) -> str:
        table = self._table(language)
        out = []
        for ch in text:
            folded = self._fold(ch, table, decompose=True)
            if folded is None:
                folded = "" if remove_unsupported else ch
            out.append(folded)
        return "".join(out)

    def to_transliterate(self, text: str, unknown: str = "?", strict: bool = False) -> str:
        table = self._table(None)
        out = []
        for ch in text:
            folded = self._fold(ch, table, decompose=not strict)
            out.append(unknown if folded is None else folded)
        return "".join(out)

    def to_slugify(
        self,
        text: str,
        separator: str = "-",
        language: str = "en",
        replacements: Mapping[str, str] | None = None,
        replace_extra_symbols: bool = True,
        use_str_to_lower: bool = True,
        use_transliterate: bool = False,
    ) -> str:
        for search, replacement in (replacements or {}).items():
            text = text.replace(search, replacement)
        if replace_extra_symbols:
            symbols = _EXTRA_SYMBOLS.get(_language_code(language), _EXTRA_SYMBOLS["en"])
            for symbol, word in symbols.items():
                text = text.replace(symbol, f" {word} ")
        if use_transliterate:
            text = self.to_transliterate(text, unknown="")
        else:
            text = self.to_ascii(text, language)
        text = text.replace("'", "")
        if use_str_to_lower:
            text = text.lower()
        sep = re.escape(separator)
        text = re.sub(rf"[^A-Za-z0-9\s_\-{sep}]", "", text)
        text = re.sub(rf"[\s_\-{sep}]+", lambda _: separator, text)
        return text.strip(separator) if separator else text

    def normalize_msword(self, text: str) -> str:
        if text == "":
            return ""
        return _MSWORD_RE.sub(lambda m: _MSWORD[m.group(0)], text)
