"""Base64 encoding with a standard and a file-name-safe alphabet."""

import base64
from enum import Enum

_UPPER_LOWER_DIGITS = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ" "abcdefghijklmnopqrstuvwxyz" "0123456789"
)
_BASIC_CHARS = frozenset(_UPPER_LOWER_DIGITS + "+/")


class Alphabet(Enum):
    """Base64 alphabets."""

    BASIC = _UPPER_LOWER_DIGITS + "+/"
    FSAFE = _UPPER_LOWER_DIGITS + "-,"

    @property
    def chars(self) -> str:
        return self.value


_FSAFE_TABLE = str.maketrans("+/", "-,")


def b64encode(data: bytes, alphabet: Alphabet = Alphabet.BASIC) -> str:
    """Encode bytes to base64 text, padded with ``=``."""
    text = base64.b64encode(bytes(data)).decode("ascii")
    if alphabet is Alphabet.FSAFE:
        text = text.translate(_FSAFE_TABLE)
    return text


def _chunks(values, size):
    for pos in range(0, len(values), size):
        yield values[pos:pos + size]


def b64decode(text: str, alphabet: Alphabet = Alphabet.BASIC) -> bytes:
    """Decode base64 text.

    Decoding stops at the first ``=`` or at the first character outside the
    standard base64 character set. A trailing group of a single character
    yields no output.
    """
    chars = alphabet.chars
    values = []
    for ch in text:
        if ch == "=" or ch not in _BASIC_CHARS:
            break
        values.append(chars.find(ch) & 0xFF)

    out = bytearray()
    for quad in _chunks(values, 4):
        count = len(quad)
        a, b, c, d = quad + [0] * (4 - count)
        triple = (
            ((a << 2) + ((b & 0x30) >> 4)) & 0xFF,
            (((b & 0x0F) << 4) + ((c & 0x3C) >> 2)) & 0xFF,
            (((c & 0x03) << 6) + d) & 0xFF,
        )
        out.extend(triple[: 3 if count == 4 else count - 1])
    return bytes(out)