"""MD5 message digest."""

import math
import struct
from typing import List, Union

_MASK = 0xFFFFFFFF
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)
_BLOCK = 64

# Additive constants: floor(abs(sin(i + 1)) * 2**32).
_T = tuple(int(abs(math.sin(i + 1)) * 2**32) & _MASK for i in range(64))

_SHIFTS = (
    (7, 12, 17, 22),
    (5, 9, 14, 20),
    (4, 11, 16, 23),
    (6, 10, 15, 21),
)


def _f(x: int, y: int, z: int) -> int:
    return (x & y) | (~x & z)


def _g(x: int, y: int, z: int) -> int:
    return (x & z) | (y & ~z)


def _h(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


def _i(x: int, y: int, z: int) -> int:
    return (y ^ (x | (~z & _MASK))) & _MASK


_ROUNDS = (
    (_f, lambda step: step),
    (_g, lambda step: (1 + 5 * step) % 16),
    (_h, lambda step: (5 + 3 * step) % 16),
    (_i, lambda step: (7 * step) % 16),
)


def _rotate_left(value: int, count: int) -> int:
    value &= _MASK
    return ((value << count) | (value >> (32 - count))) & _MASK


def _transform(state: List[int], block: bytes) -> None:
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for round_no, (func, index) in enumerate(_ROUNDS):
        shifts = _SHIFTS[round_no]
        for step in range(16):
            k = round_no * 16 + step
            total = (a + func(b, c, d) + words[index(step)] + _T[k]) & _MASK
            a, d, c, b = d, c, b, (b + _rotate_left(total, shifts[step % 4])) & _MASK
    state[0] = (state[0] + a) & _MASK
    state[1] = (state[1] + b) & _MASK
    state[2] = (state[2] + c) & _MASK
    state[3] = (state[3] + d) & _MASK


class Md5:
    """Incremental MD5 hasher."""

    digest_size = 16
    block_size = _BLOCK
    name = "md5"

    def __init__(self, data: bytes = b""):
        self._state = list(_INITIAL_STATE)
        self._length = 0
        self._pending = b""
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        if isinstance(data, str):
            raise TypeError("strings must be encoded before hashing")
        data = bytes(data)
        self._length += len(data)
        buffered = self._pending + data
        full = len(buffered) - len(buffered) % _BLOCK
        for start in range(0, full, _BLOCK):
            _transform(self._state, buffered[start:start + _BLOCK])
        self._pending = buffered[full:]

    def digest(self) -> bytes:
        """Return the 16-byte digest of everything fed so far."""
        state = list(self._state)
        used = len(self._pending)
        pad_len = 56 - used if used < 56 else 120 - used
        bit_count = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        tail = self._pending + b"\x80" + b"\x00" * (pad_len - 1)
        tail += struct.pack("<Q", bit_count)
        for start in range(0, len(tail), _BLOCK):
            _transform(state, tail[start:start + _BLOCK])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        """Return the digest as 32 lower-case hex digits."""
        return self.digest().hex()

    def copy(self) -> "Md5":
        """Return an independent hasher with the same state."""
        clone = Md5()
        clone._state = list(self._state)
        clone._length = self._length
        clone._pending = self._pending
        return clone


def md_string(text: Union[str, bytes]) -> str:
    """Return the lower-case hex MD5 digest of ``text``.

    Text is taken up to its first NUL character; strings are UTF-8 encoded.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    end = data.find(0)
    if end >= 0:
        data = data[:end]
    return Md5(data).hexdigest()