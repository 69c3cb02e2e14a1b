import pytest

from utilkit.unicode import utf8_to_ansi


def test_polish_text_to_cp1250():
    text = "zażółć gęślą jaźń"
    assert utf8_to_ansi(text.encode("utf-8"), "cp1250") == text.encode("cp1250")


def test_unmappable_character_replaced():
    assert utf8_to_ansi("€".encode("utf-8"), "latin-1") == b"?"


def test_invalid_utf8_replaced():
    assert utf8_to_ansi(b"a\xffb", "ascii") == b"a?b"


def test_empty_input():
    assert utf8_to_ansi(b"", "cp1252") == b""


def test_stops_at_nul():
    assert utf8_to_ansi(b"ab\x00cd", "ascii") == b"ab"


def test_unknown_encoding():
    with pytest.raises(LookupError):
        utf8_to_ansi(b"abc", "no-such-codec")