import pytest
from hypothesis import given, strategies as st

from utilkit.urlencode import urldecode, urlencode, urlencode_all


def test_urlencode_keeps_reserved_characters():
    assert urlencode("a/b?c=d&e") == "a/b?c=d&e"


def test_urlencode_all_escapes_space_and_slash():
    assert urlencode_all("a b/c") == "a%20b%2Fc"


def test_urlencode_escapes_space():
    assert urlencode("a b") == "a%20b"


def test_limit_cuts_plain_characters():
    assert urlencode_all("abcdef", limit=4) == "abc"


def test_limit_stops_before_escape_that_does_not_fit():
    assert urlencode_all("ab c", limit=5) == "ab"


def test_encode_stops_at_nul():
    assert urlencode_all("ab\x00cd") == "ab"


def test_limit_below_one_rejected():
    with pytest.raises(ValueError):
        urlencode("abc", limit=0)
    with pytest.raises(ValueError):
        urldecode("abc", limit=0)


def test_urldecode_escape():
    assert urldecode("a%20b") == b"a b"


def test_urldecode_incomplete_escape_kept():
    assert urldecode("%4") == b"%4"


def test_urldecode_invalid_digits_count_as_zero():
    assert urldecode("%zz") == b"\x00"


def test_urldecode_limit():
    assert urldecode("abcdef", limit=3) == b"ab"


@given(st.text().filter(lambda s: "\x00" not in s))
def test_round_trip_all(text):
    encoded = urlencode_all(text)
    assert encoded.isascii()
    assert urldecode(encoded) == text.encode("utf-8")


@given(st.text().filter(lambda s: "\x00" not in s))
def test_round_trip_reserved(text):
    assert urldecode(urlencode(text)) == text.encode("utf-8")


@given(st.text().filter(lambda s: "\x00" not in s), st.integers(min_value=1, max_value=50))
def test_limit_respected(text, limit):
    assert len(urlencode_all(text, limit=limit)) <= limit - 1