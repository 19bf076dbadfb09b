import random
from functools import reduce
from operator import xor

import pytest

from pragemastik.maksimalkan_xor import MAX_VALUE, generate_cases, is_valid, maximize_xor, run


def _subarray_xor_total(values):
    return sum(
        reduce(xor, values[i:j]) for i in range(len(values)) for j in range(i + 1, len(values) + 1)
    )


def test_sample_one():
    assert maximize_xor([33554431, 33554431]) == (1, 0)


def test_sample_two():
    assert maximize_xor([1, 3, 2]) == (2, 33554428)


def test_run_sample_text():
    assert run("3\n1 3 2\n") == "2 33554428\n"


def test_single_zero_becomes_all_ones():
    assert maximize_xor([0]) == (1, MAX_VALUE - 1)


@pytest.mark.parametrize("seed", range(6))
def test_choice_beats_random_replacements(seed):
    rng = random.Random(seed)
    values = [rng.randint(0, MAX_VALUE - 1) for _ in range(rng.randint(1, 6))]
    index, value = maximize_xor(values)
    chosen = values.copy()
    chosen[index - 1] = value
    best = _subarray_xor_total(chosen)
    assert best >= _subarray_xor_total(values)
    for _ in range(20):
        other = values.copy()
        other[rng.randrange(len(values))] = rng.randint(0, MAX_VALUE - 1)
        assert best >= _subarray_xor_total(other)


def test_empty_rejected():
    with pytest.raises(ValueError):
        maximize_xor([])


def test_out_of_range_rejected():
    with pytest.raises(ValueError):
        maximize_xor([MAX_VALUE])


def test_generated_cases_valid():
    cases = generate_cases(random.Random(2))
    first = next(cases)
    assert len(first) == 1
    assert is_valid(first)
    assert is_valid(next(cases))
    assert not is_valid([-1])