"""Property tests for Stringy invariants."""

from hypothesis import given
from hypothesis import strategies as st

from stringy import PadType, Stringy

text = st.text(max_size=40)
printable = st.text(alphabet=st.characters(blacklist_categories=("Cc", "Cs")), max_size=40)
cased = st.text(alphabet="abcxyzABCXYZàéîõüÀÉÎÕÜß", max_size=20)


@st.composite
def pad_arguments(draw):
    return (
        draw(st.integers(min_value=0, max_value=50)),
        draw(st.text(min_size=1, max_size=3)),
        draw(st.sampled_from(list(PadType))),
    )


@given(raw=text)
def test_length_matches_chars(raw):
    """PROPERTY: length counts codepoints, one per element of chars()."""
    value = Stringy(raw)

    assert value.length() == len(value.chars()) == len(raw)


@given(raw=text)
def test_reverse_is_an_involution(raw):
    """PROPERTY: reversing twice gives back the original text."""
    assert Stringy(raw).reverse().reverse() == raw


@given(raw=text)
def test_base64_round_trip(raw):
    """PROPERTY: base64_decode inverts base64_encode."""
    assert Stringy(raw).base64_encode().base64_decode() == raw


@given(raw=text, tag=st.sampled_from(["ASCII", "ISO-8859-1", "WINDOWS-1251", "KOI8-R"]))
def test_retagging_keeps_the_byte_view(raw, tag):
    """PROPERTY: set_internal_encoding never changes what digests see."""
    value = Stringy(raw)
    retagged = value.set_internal_encoding(tag)

    assert retagged.sha256() == value.sha256()
    assert retagged.crc32() == value.crc32()


@given(raw=text)
def test_hex_round_trip(raw):
    """PROPERTY: hex_decode inverts hex_encode."""
    assert Stringy(raw).hex_encode().hex_decode() == raw


@given(raw=printable)
def test_url_round_trip(raw):
    """PROPERTY: url_decode inverts url_encode for printable text."""
    assert Stringy(raw).url_encode().url_decode() == raw
    assert Stringy(raw).url_encode_raw().url_decode_raw() == raw


@given(raw=text, suffix=text)
def test_append_then_ends_with(raw, suffix):
    """PROPERTY: appended text is a suffix, prepended text is a prefix."""
    assert Stringy(raw).append(suffix).ends_with(suffix)
    assert Stringy(raw).prepend(suffix).starts_with(suffix)


@given(raw=text, affix=text)
def test_ensure_left_and_right(raw, affix):
    """PROPERTY: ensure_* always yields the affix and never doubles an existing one."""
    left = Stringy(raw).ensure_left(affix)
    right = Stringy(raw).ensure_right(affix)

    assert left.starts_with(affix)
    assert right.ends_with(affix)
    assert left.ensure_left(affix) == left
    assert right.ensure_right(affix) == right


@given(raw=text, args=pad_arguments())
def test_pad_reaches_requested_length(raw, args):
    """PROPERTY: padding yields max(length, original length) codepoints."""
    length, pad_str, side = args

    padded = Stringy(raw).pad(length, pad_str, side)

    assert padded.length() == max(length, len(raw))
    assert raw in padded.text


@given(raw=text, times=st.integers(min_value=0, max_value=5))
def test_repeat_multiplies_length(raw, times):
    """PROPERTY: repeat(n) has n times the length."""
    assert Stringy(raw).repeat(times).length() == len(raw) * times


@given(raw=text, size=st.integers(min_value=1, max_value=10))
def test_chunks_rejoin_to_original(raw, size):
    """PROPERTY: chunks are at most `size` long and concatenate to the original."""
    chunks = Stringy(raw).chunk(size)

    assert "".join(chunk.text for chunk in chunks) == raw
    assert all(1 <= chunk.length() <= size for chunk in chunks)


@given(raw=cased)
def test_upper_of_lower_equals_upper(raw):
    """PROPERTY: for cased letters, upper(lower(s)) == upper(s)."""
    value = Stringy(raw)

    assert value.to_lower_case().to_upper_case() == value.to_upper_case()


@given(raw=text, other=text)
def test_operations_never_mutate_receiver(raw, other):
    """PROPERTY: no operation changes the value it was called on."""
    value = Stringy(raw)

    value.append(other)
    value.replace(other, "x")
    value.to_upper_case()
    value.collapse_whitespace()
    value.slugify()

    assert value.text == raw


@given(raw=text, start=st.integers(-50, 50), end=st.integers(-50, 50))
def test_slice_matches_python_slicing(raw, start, end):
    """PROPERTY: slice(start, end) follows Python slice semantics on codepoints."""
    assert Stringy(raw).slice(start, end) == raw[start:end]


@given(raw=text, needle=st.text(min_size=1, max_size=3))
def test_index_of_is_consistent_with_contains(raw, needle):
    """PROPERTY: index_of returns None exactly when the needle is absent."""
    value = Stringy(raw)
    index = value.index_of(needle)

    assert (index is None) == (not value.contains(needle))
    if index is not None:
        assert raw[index : index + len(needle)] == needle
