"""Tests for Stringy construction, indexing, affixes, substrings and search."""

import dataclasses
import logging

import pytest

from stringy import (
    BackendError,
    CollectionStringy,
    ImmutableError,
    InvalidInputError,
    OutOfRangeError,
    Stringy,
    StringyError,
)


class _Named:
    def __str__(self):
        return "named"


# Construction


def test_construct_from_text():
    value = Stringy("fòôbàř")

    assert value.text == "fòôbàř"
    assert value.encoding == "UTF-8"


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, ""),
        ("", ""),
        (5, "5"),
        (1.5, "1.5"),
        (True, "True"),
        (_Named(), "named"),
    ],
)
def test_construct_coerces_scalars(raw, expected):
    assert Stringy(raw).text == expected


def test_construct_from_stringy_copies_text():
    assert Stringy(Stringy("foo")).text == "foo"


def test_construct_from_bytes_uses_encoding():
    assert Stringy("fòô".encode()).text == "fòô"
    assert Stringy(b"f\xf6", "ISO-8859-1").text == "fö"


@pytest.mark.parametrize("raw", [["a"], ("a",), {"a": 1}, {"a"}])
def test_construct_rejects_containers(raw):
    with pytest.raises(InvalidInputError, match="cannot be an array"):
        Stringy(raw)


def test_construct_rejects_object_without_str():
    """Why: object() would stringify to its repr, which is never what the caller meant."""
    with pytest.raises(InvalidInputError, match="__str__"):
        Stringy(object())


def test_errors_share_base_and_builtin_types():
    with pytest.raises(StringyError):
        Stringy(["a"])
    with pytest.raises(ValueError):
        Stringy(["a"])


def test_create_matches_constructor():
    assert Stringy.create("foo", "UTF-8") == Stringy("foo")


@pytest.mark.parametrize(
    "given,canonical",
    [
        ("utf8", "UTF-8"),
        ("latin-1", "ISO-8859-1"),
        ("cp1252", "WINDOWS-1252"),
        ("", "UTF-8"),
        (None, "UTF-8"),
    ],
)
def test_encoding_is_normalized(given, canonical):
    assert Stringy("x", given).encoding == canonical


def test_unknown_encoding_falls_back_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        value = Stringy("x", "no-such-encoding")

    assert value.encoding == "UTF-8"
    assert "Unknown encoding" in caplog.text


def test_set_internal_encoding_keeps_text():
    value = Stringy("fòô").set_internal_encoding("latin1")

    assert value.text == "fòô"
    assert value.get_encoding() == "ISO-8859-1"


def test_encode_replaces_unrepresentable_characters():
    value = Stringy("fòô").encode("ASCII")

    assert value.text == "f??"
    assert value.encoding == "ASCII"


def test_to_bytes_round_trips_undecodable_bytes():
    assert Stringy(b"ab\xff").to_bytes() == b"ab\xff"


def test_to_bytes_transcodes_only_on_request():
    value = Stringy("é", "ISO-8859-1")

    assert value.to_bytes() == b"\xc3\xa9"
    assert value.to_bytes("ISO-8859-1") == b"\xe9"
    with pytest.raises(BackendError):
        value.to_bytes("ASCII")


def test_string_conversions():
    value = Stringy("foo")

    assert str(value) == "foo"
    assert value.to_string() == "foo"
    assert value.json_serialize() == "foo"
    assert f"{value}!" == "foo!"


# Python data model


def test_repr_shows_text_and_non_default_encoding():
    assert repr(Stringy("foo")) == "Stringy('foo')"
    assert repr(Stringy("foo", "ASCII")) == "Stringy('foo', encoding='ASCII')"


def test_equality_and_hash():
    assert Stringy("foo") == Stringy("foo")
    assert Stringy("foo") == "foo"
    assert Stringy("foo") != "bar"
    assert hash(Stringy("foo")) == hash(Stringy("foo"))
    assert len({Stringy("foo"), Stringy("foo"), Stringy("bar")}) == 2


def test_len_bool_iter_contains(unicode_text):
    value = Stringy(unicode_text)

    assert len(value) == 6
    assert bool(value)
    assert not Stringy("")
    assert list(value) == ["f", "ò", "ô", "b", "à", "ř"]
    assert "ôb" in value
    assert Stringy("bà") in value
    assert 1 not in value


def test_concatenation_returns_values():
    assert Stringy("foo") + "bar" == Stringy("foobar")
    assert isinstance("bar" + Stringy("foo"), Stringy)
    assert ("bar" + Stringy("foo")).text == "barfoo"


def test_getitem_by_index_and_slice(unicode_text):
    value = Stringy(unicode_text)

    assert value[0] == "f"
    assert value[-1] == "ř"
    assert value[1:3] == Stringy("òô")
    assert isinstance(value[1:3], Stringy)


def test_mutation_is_rejected():
    value = Stringy("foo")

    with pytest.raises(ImmutableError):
        value[0] = "x"
    with pytest.raises(ImmutableError):
        del value[0]
    with pytest.raises(ImmutableError):
        value.offset_set(0, "x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        value.text = "bar"  # type: ignore[misc]

    assert value.text == "foo"


def test_immutable_error_is_type_error():
    with pytest.raises(TypeError):
        Stringy("foo").offset_unset(0)


# Indexed access


def test_at_supports_negative_indexes(unicode_text):
    value = Stringy(unicode_text)

    assert value.at(0) == "f"
    assert value.at(-1) == "ř"


@pytest.mark.parametrize("index", [6, -7, 100])
def test_at_out_of_range_raises(unicode_text, index):
    with pytest.raises(OutOfRangeError):
        Stringy(unicode_text).at(index)


def test_out_of_range_error_is_index_error():
    with pytest.raises(IndexError):
        Stringy("")[0]


@pytest.mark.parametrize(
    "offset,expected",
    [(0, True), (2, True), (3, False), (-1, True), (-3, True), (-4, False)],
)
def test_offset_exists(offset, expected):
    assert Stringy("foo").offset_exists(offset) is expected


def test_length_and_count(unicode_text):
    assert Stringy(unicode_text).length() == 6
    assert Stringy(unicode_text).count() == 6
    assert Stringy("").length() == 0


def test_chars_and_iterator(unicode_text):
    assert Stringy(unicode_text).chars() == list(unicode_text)
    assert list(Stringy("ab").iterator()) == ["a", "b"]


def test_chunk():
    assert Stringy("abcde").chunk(2) == [Stringy("ab"), Stringy("cd"), Stringy("e")]
    assert Stringy("fòô").chunk() == [Stringy("f"), Stringy("ò"), Stringy("ô")]
    assert Stringy("").chunk(3) == []


def test_chunk_rejects_non_positive_length():
    with pytest.raises(InvalidInputError):
        Stringy("abc").chunk(0)


def test_chunk_collection():
    chunks = Stringy("abcd").chunk_collection(2)

    assert isinstance(chunks, CollectionStringy)
    assert chunks.to_strings() == ["ab", "cd"]


# Affixes


def test_append_and_prepend_variadic():
    assert Stringy("b").append("c", Stringy("d")) == "bcd"
    assert Stringy("c").prepend("a", "b") == "abc"


def test_append_stringy_joins_collections():
    collection = CollectionStringy.create_from_strings(["x", "y"])

    assert Stringy("a").append_stringy(Stringy("b"), collection) == "abxy"
    assert Stringy("a").prepend_stringy(collection) == "xya"


def test_ensure_left_and_right():
    assert Stringy("foobar").ensure_left("foo") == "foobar"
    assert Stringy("bar").ensure_left("foo") == "foobar"
    assert Stringy("foobar").ensure_right("bar") == "foobar"
    assert Stringy("foo").ensure_right("bar") == "foobar"


def test_remove_left_and_right():
    assert Stringy("foobar").remove_left("foo") == "bar"
    assert Stringy("foobar").remove_left("bar") == "foobar"
    assert Stringy("foobar").remove_right("bar") == "foo"
    assert Stringy("foobar").remove_right("") == "foobar"


def test_surround_and_wrap():
    assert Stringy("foo").surround("*") == "*foo*"
    assert Stringy("foo").wrap("'") == "'foo'"


@pytest.mark.parametrize("multiplier,expected", [(3, "fòfòfò"), (1, "fò"), (0, ""), (-1, "")])
def test_repeat(multiplier, expected):
    assert Stringy("fò").repeat(multiplier) == expected


def test_insert():
    assert Stringy("foo").insert("X", 1) == "fXoo"
    assert Stringy("foo").insert("X", 3) == "fooX"
    assert Stringy("foo").insert("X", 10) == "foo"


def test_operations_return_new_values_with_same_encoding():
    """PROPERTY: transformations never mutate the receiver and keep its encoding tag."""
    original = Stringy("foo", "ISO-8859-1")

    appended = original.append("bar")

    assert original.text == "foo"
    assert appended.text == "foobar"
    assert appended.encoding == "ISO-8859-1"


# Substrings


@pytest.mark.parametrize(
    "start,length,expected",
    [
        (0, None, "abcdef"),
        (-3, None, "def"),
        (1, 2, "bc"),
        (2, -1, "cde"),
        (4, -3, ""),
        (10, None, ""),
    ],
)
def test_substr(start, length, expected):
    assert Stringy("abcdef").substr(start, length) == expected
    assert Stringy("abcdef").substring(start, length) == expected


@pytest.mark.parametrize(
    "start,end,expected",
    [(1, 4, "bcd"), (-3, None, "def"), (0, -1, "abcde"), (3, 0, "")],
)
def test_slice(start, end, expected):
    assert Stringy("abcdef").slice(start, end) == expected


def test_first_and_last(unicode_text):
    value = Stringy(unicode_text)

    assert value.first(3) == "fòô"
    assert value.first(0) == ""
    assert value.first(10) == unicode_text
    assert value.last(2) == "àř"
    assert value.last(-1) == ""


def test_before_and_after():
    value = Stringy("foo-bar-baz")

    assert value.before("-") == "foo"
    assert value.before("x") == ""
    assert value.after("-") == "bar baz"
    assert value.after("x") == ""


def test_before_and_after_first_and_last():
    value = Stringy("foo.bar.baz")

    assert value.before_first(".") == "foo"
    assert value.before_last(".") == "foo.bar"
    assert value.after_first(".") == "bar.baz"
    assert value.after_last(".") == "baz"
    assert value.after_last("!") == ""


def test_separator_lookups_ignoring_case():
    value = Stringy("FooBARbaz")

    assert value.before_first_ignore_case("bar") == "Foo"
    assert value.before_last_ignore_case("b") == "FooBAR"
    assert value.after_first_ignore_case("BAR") == "baz"
    assert value.after_last_ignore_case("B") == "az"


def test_between():
    value = Stringy("{foo} and {bar}")

    assert value.between("{", "}") == "foo"
    assert value.between("{", "}", 1) == "bar"
    assert value.between("[", "]") == ""
    assert Stringy("{foo").between("{", "}") == ""


def test_substring_of():
    value = Stringy("foobarbaz")

    assert value.substring_of("bar") == "barbaz"
    assert value.substring_of("bar", True) == "foo"
    assert value.substring_of("qux") == ""
    assert value.substring_of_ignore_case("BAR") == "barbaz"
    assert value.last_substring_of("a") == "az"
    assert value.last_substring_of_ignore_case("A", True) == "foobarb"


def test_nth():
    assert Stringy("abcdef").nth(2) == "ace"
    assert Stringy("abcdef").nth(2, 1) == "bdf"
    assert Stringy("abcdef").nth(0) == ""


# Searching


def test_index_of():
    value = Stringy("foobarbar")

    assert value.index_of("bar") == 3
    assert value.index_of("bar", 4) == 6
    assert value.index_of("x") is None
    assert value.index_of("foo", 20) is None


def test_index_of_last():
    value = Stringy("foobarbar")

    assert value.index_of_last("bar") == 6
    assert value.index_of_last("bar", -4) == 3
    assert value.index_of_last("x") is None


def test_index_of_ignoring_case():
    value = Stringy("fòôBÀŘbàř")

    assert value.index_of_ignore_case("bàř") == 3
    assert value.index_of_last_ignore_case("BÀŘ") == 6
    assert value.index_of_ignore_case("qux") is None


def test_index_of_found_at_zero_is_not_none():
    """Why: zero is a valid index and must stay distinguishable from "absent"."""
    assert Stringy("foo").index_of("f") == 0


def test_contains():
    value = Stringy("foobar")

    assert value.contains("bar")
    assert not value.contains("BAR")
    assert value.contains("BAR", case_sensitive=False)
    assert value.contains_all(["foo", "bar"])
    assert not value.contains_all(["foo", "qux"])
    assert not value.contains_all([])
    assert value.contains_any(["qux", "bar"])
    assert not value.contains_any([])


def test_starts_and_ends_with():
    value = Stringy("FòôBàř")

    assert value.starts_with("Fòô")
    assert not value.starts_with("fòô")
    assert value.starts_with("fòô", case_sensitive=False)
    assert value.ends_with("BÀŘ", case_sensitive=False)
    assert value.starts_with_any(["x", "Fò"])
    assert value.ends_with_any(["x", "àř"])
    assert not value.ends_with_any([])


@pytest.mark.parametrize(
    "pattern,expected",
    [("foo*", True), ("*bar", True), ("foo*bar", True), ("f*z", False), ("foobar", True)],
)
def test_is_wildcard(pattern, expected):
    assert Stringy("foobar").is_(pattern) is expected


def test_is_treats_regex_characters_literally():
    assert Stringy("a.b").is_("a.b")
    assert not Stringy("axb").is_("a.b")


def test_in():
    assert Stringy("foo").in_("xxfooxx")
    assert not Stringy("foo").in_("XXFOOXX")
    assert Stringy("foo").in_("XXFOOXX", case_sensitive=False)


def test_count_substr():
    value = Stringy("foobarBAR")

    assert value.count_substr("bar") == 1
    assert value.count_substr("bar", case_sensitive=False) == 2
    assert value.count_substr("") == 0
