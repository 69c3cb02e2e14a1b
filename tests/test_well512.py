import random
from itertools import islice

import pytest

from utilkit.well512 import Well512


def test_zero_state_stays_zero():
    gen = Well512([0] * 16)
    assert [gen.next_value() for _ in range(20)] == [0] * 20


def test_same_state_gives_same_sequence():
    state = list(range(1, 17))
    first = Well512(state)
    second = Well512(state)
    assert list(islice(first, 50)) == [second.next_value() for _ in range(50)]


def test_values_are_32_bit():
    gen = Well512.seeded(random.Random(7))
    values = list(islice(gen, 200))
    assert all(0 <= value < 2**32 for value in values)
    assert len(set(values)) > 1


def test_index_moves_backwards_by_one():
    gen = Well512(list(range(16)))
    gen.next_value()
    assert gen.index == 15


def test_returned_value_is_stored_in_state():
    gen = Well512(list(range(100, 116)))
    value = gen.next_value()
    assert gen.state[gen.index] == value


def test_seeded_is_reproducible():
    first = Well512.seeded(random.Random(42))
    second = Well512.seeded(random.Random(42))
    assert first.state == second.state
    assert all(word < 2**31 for word in first.state)


def test_wrong_state_length_rejected():
    with pytest.raises(ValueError):
        Well512([1, 2, 3])


def test_out_of_range_word_rejected():
    with pytest.raises(ValueError):
        Well512([2**32] + [0] * 15)


def test_bad_index_rejected():
    with pytest.raises(ValueError):
        Well512([0] * 16, 16)