"""Conversions between integers, hex/binary strings and byte buffers."""

import string

_HEX_DIGITS = frozenset(string.hexdigits)
_LOWER_HEX = frozenset("0123456789abcdef")


def hex_string_to_int(text: str) -> int:
    """Convert a string of hex digits to an integer; empty text gives 0."""
    if any(ch not in _HEX_DIGITS for ch in text):
        raise ValueError(f"invalid hex string: {text!r}")
    return int(text, 16) if text else 0


def int_to_hex_string(value: int) -> str:
    """Format a 32-bit integer as upper-case hex, padded to an even length."""
    text = format(value & 0xFFFFFFFF, "X")
    if len(text) % 2:
        text = "0" + text
    return text


def bin_string_to_int(text: str) -> int:
    """Convert a binary string to an integer; characters other than '1' count as 0."""
    return sum(1 << power for power, ch in enumerate(reversed(text)) if ch == "1")


def int_to_bin_string(value: int) -> str:
    """Format a positive integer in binary, zero-padded to a multiple of 7 digits.

    Zero and negative values give ``"0"``.
    """
    if value <= 0:
        return "0"
    text = format(value, "b")
    width = -(-len(text) // 7) * 7
    return text.rjust(width, "0")


def hex_string_to_buf(text: str) -> bytes:
    """Convert pairs of hex digits to bytes; odd-length text gives ``b""``."""
    if len(text) % 2:
        return b""
    return bytes(hex_string_to_int(text[pos:pos + 2]) for pos in range(0, len(text), 2))


def buf_to_hex_string(data: bytes) -> str:
    """Format bytes as upper-case hex."""
    return bytes(data).hex().upper()


def hex_string_clean_to_buf(text: str) -> bytes:
    """Strip ``0x`` prefixes and non-hex characters, then convert to bytes.

    Raises ValueError when the number of hex digits left is odd.
    """
    lowered = text.strip().lower()
    lowered = lowered.replace("0x", "").replace("\n", "").replace("\r", "")
    digits = "".join(ch for ch in lowered if ch in _LOWER_HEX)
    if len(digits) % 2:
        raise ValueError("Number of hex characters in data is uneven!")
    return hex_string_to_buf(digits)