import random

import pytest

from pragemastik.pertahanan_ganesha import (
    MAX_N,
    count_safe_removals,
    generate_cases,
    is_valid,
    run,
)


def test_single_element_equal_to_x():
    assert count_safe_removals([5], 5) == 1


def test_every_removal_unsafe():
    assert count_safe_removals([1, 2, 3], 3) == 0


def test_mixed_removals():
    assert count_safe_removals([3, 1, 2], 4) == 2


def test_x_zero_is_always_reachable():
    assert count_safe_removals([4, 7, 9], 0) == 0


def test_x_beyond_total_is_always_safe():
    values = [2, 3, 4, 5]
    assert count_safe_removals(values, sum(values) + 1) == len(values)


def test_duplicate_of_x_makes_both_unsafe():
    assert count_safe_removals([6, 6, 1], 6) == count_safe_removals([6, 6], 6) == 0


@pytest.mark.parametrize("seed", range(5))
def test_order_does_not_matter(seed):
    rng = random.Random(seed)
    values = [rng.randint(1, 30) for _ in range(15)]
    x = rng.randint(1, 100)
    shuffled = values[:]
    rng.shuffle(shuffled)
    result = count_safe_removals(values, x)
    assert result == count_safe_removals(shuffled, x)
    assert 0 <= result <= len(values)


def test_run_matches_function():
    assert run("3 4\n3 1 2\n") == f"{count_safe_removals([3, 1, 2], 4)}\n"


def test_negative_value_rejected():
    with pytest.raises(ValueError):
        count_safe_removals([1, -2], 3)


def test_negative_x_rejected():
    with pytest.raises(ValueError):
        count_safe_removals([1, 2], -1)


def test_is_valid():
    assert is_valid([1, 5000], 5000)
    assert not is_valid([], 1)
    assert not is_valid([0], 1)
    assert not is_valid([1], 5001)
    assert not is_valid([1] * (MAX_N + 1), 1)


def test_generated_cases_are_valid():
    cases = list(generate_cases(random.Random(3)))
    assert len(cases) == 30
    assert all(is_valid(values, x) and len(values) == MAX_N for values, x in cases)