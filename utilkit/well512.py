"""WELL512 pseudo-random number generator."""

import random
from typing import Iterable, Iterator, Optional

_MASK = 0xFFFFFFFF
_RAND_MAX = 0x7FFF
_STATE_SIZE = 16


class Well512:
    """WELL512 generator over a state of sixteen 32-bit words."""

    def __init__(self, state: Iterable[int], index: int = 0):
        words = list(state)
        if len(words) != _STATE_SIZE:
            raise ValueError(f"state must hold {_STATE_SIZE} words")
        if any(not 0 <= word <= _MASK for word in words):
            raise ValueError("state words must be 32-bit unsigned values")
        if not 0 <= index < _STATE_SIZE:
            raise ValueError(f"index must be in range 0..{_STATE_SIZE - 1}")
        self._state = words
        self._index = index

    @classmethod
    def seeded(cls, rng: Optional[random.Random] = None) -> "Well512":
        """Build a generator whose state is filled from ``rng`` 15 bits at a time."""
        rng = rng if rng is not None else random.Random()
        state = [
            ((rng.randint(0, _RAND_MAX) << 16) | rng.randint(0, _RAND_MAX)) & _MASK
            for _ in range(_STATE_SIZE)
        ]
        return cls(state, 0)

    @property
    def state(self) -> tuple:
        return tuple(self._state)

    @property
    def index(self) -> int:
        return self._index

    def next_value(self) -> int:
        """Advance the generator and return the next 32-bit value."""
        s = self._state
        i = self._index
        a = s[i]
        c = s[(i + 13) & 15]
        b = (a ^ c ^ (a << 16) ^ (c << 15)) & _MASK
        c = s[(i + 9) & 15]
        c ^= c >> 11
        a = s[i] = (b ^ c) & _MASK
        d = (a ^ ((a << 5) & 0xDA442D24)) & _MASK
        i = (i + 15) & 15
        a = s[i]
        s[i] = (a ^ b ^ d ^ (a << 2) ^ (b << 18) ^ (c << 28)) & _MASK
        self._index = i
        return s[i]

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next_value()