"""Tests for the Unicode backend primitives."""

import pytest

from stringy import BackendError, InvalidInputError
from stringy.backends.unicode import UnicodeBackend


@pytest.fixture
def utf8():
    return UnicodeBackend()


# Encoding


@pytest.mark.parametrize(
    "given,expected",
    [
        ("UTF-8", "UTF-8"),
        ("utf_8", "UTF-8"),
        ("Latin1", "ISO-8859-1"),
        ("windows-1251", "WINDOWS-1251"),
        ("koi8-r", "KOI8-R"),
        ("shift_jis", "SJIS"),
    ],
)
def test_normalize_encoding(utf8, given, expected):
    assert utf8.normalize_encoding(given) == expected


def test_normalize_encoding_fallback(utf8):
    assert utf8.normalize_encoding("", fallback="ASCII") == "ASCII"
    assert utf8.normalize_encoding("bogus-8", fallback="ASCII") == "ASCII"


def test_decode_and_to_bytes_preserve_bad_bytes(utf8):
    text = utf8.decode(b"ok\xff", "UTF-8")

    assert text.startswith("ok")
    assert utf8.to_bytes(text, "UTF-8") == b"ok\xff"


def test_to_bytes_reports_unencodable_text(utf8):
    with pytest.raises(BackendError, match="ASCII"):
        utf8.to_bytes("fòô", "ASCII")


def test_encode_transcodes_with_replacement(utf8):
    assert utf8.encode("ISO-8859-1", "fòô€") == "fòô?"


# Offsets


@pytest.mark.parametrize(
    "start,length,expected",
    [(0, 3, "fòô"), (-3, None, "bàř"), (-10, 2, "fò"), (6, None, ""), (1, -1, "òôbà")],
)
def test_substr_follows_mb_substr(utf8, start, length, expected):
    assert utf8.substr("fòôbàř", start, length) == expected


def test_str_split(utf8):
    assert utf8.str_split("fòôbà", 2) == ["fò", "ôb", "à"]
    with pytest.raises(InvalidInputError):
        utf8.str_split("abc", 0)


def test_strpos_family_returns_none_when_absent(utf8):
    assert utf8.strpos("abc", "d") is None
    assert utf8.stripos("ABC", "b") == 1
    assert utf8.strrpos("abcabc", "b") == 4
    assert utf8.strripos("ABCabc", "B") == 4
    assert utf8.strpos("abc", "a", -1) is None
    assert utf8.strpos("abc", "c", -1) == 2


# Wrapping


def test_wordwrap_breaks_at_spaces(utf8):
    assert utf8.wordwrap("The quick brown fox", 10) == "The quick\nbrown fox"


def test_wordwrap_keeps_long_words_without_cut(utf8):
    assert utf8.wordwrap("A very long woooooooooooord.", 8) == "A very\nlong\nwoooooooooooord."


def test_wordwrap_cuts_long_words(utf8):
    assert utf8.wordwrap("A very long woooooooooooord.", 8, "\n", True) == (
        "A very\nlong\nwooooooo\nooooord."
    )


def test_wordwrap_rejects_bad_arguments(utf8):
    with pytest.raises(InvalidInputError):
        utf8.wordwrap("abc", 2, "")
    with pytest.raises(InvalidInputError):
        utf8.wordwrap("abc", 0, "\n", True)


# Splitting


def test_explode_limits(utf8):
    assert utf8.explode("a,b,c", ",", 1) == ["a,b,c"]
    assert utf8.explode("a,b,c", ",", -2) == ["a"]
    assert utf8.explode("a,b,c", ",", -5) == []


def test_str_split_pattern_rejects_invalid_regex(utf8):
    with pytest.raises(BackendError):
        utf8.str_split_pattern("abc", "[")


def test_str_matches_pattern(utf8):
    assert utf8.str_matches_pattern("foobar", r"o+b")
    assert not utf8.str_matches_pattern("foo\nbar", r"\Afoo.*bar\Z")
    with pytest.raises(BackendError):
        utf8.str_matches_pattern("abc", "[")


def test_reduce_string_array(utf8):
    assert utf8.reduce_string_array(["a", " ", "", "abc"]) == ["a", "abc"]
    assert utf8.reduce_string_array(["a", " ", "abc"], False, 2) == ["abc"]


# Case styles and naming


def test_titleize_for_humans_keeps_paths_and_urls(utf8):
    assert utf8.str_titleize_for_humans("a guide to example.com") == "A Guide to example.com"


def test_titleize_for_humans_ignore_list(utf8):
    assert utf8.str_titleize_for_humans("war peace and love", ["peace"]) == "War peace and Love"


def test_capitalize_name_prefixes(utf8):
    assert utf8.str_capitalize_name("o'neil") == "O'Neil"
    assert utf8.str_capitalize_name("maria del mar") == "Maria del Mar"


# Comparison


def test_similarity_is_a_percentage(utf8):
    assert utf8.similarity("abcd", "abcf") == 75.0


def test_longest_common_substring(utf8):
    assert utf8.str_longest_common_substring("fòôbàř", "xôbàx") == "ôbà"
    assert utf8.str_longest_common_substring("", "x") == ""


# Repair


def test_cleanup_removes_control_characters(utf8):
    assert utf8.cleanup("a\x00b\x1fc\n") == "abc\n"


def test_fix_simple_utf8_leaves_valid_text(utf8):
    assert utf8.fix_simple_utf8("Déjà vu") == "Déjà vu"
    assert utf8.fix_simple_utf8("DÃ©jà vu") == "Déjà vu"
