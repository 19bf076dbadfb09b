import random

import pytest

from pragemastik.membuat_permutasi import (
    count_permutation_pairs,
    count_permutation_pairs_naive,
    generate_cases,
    is_valid,
    run,
)


def test_two_singletons():
    assert count_permutation_pairs([1, 2], 2) == 1


def test_overlapping_choices():
    assert count_permutation_pairs([1, 2, 1], 2) == 2
    assert count_permutation_pairs_naive([1, 2, 1], 2) == 2


def test_single_element_has_no_pairs():
    assert count_permutation_pairs([1], 5) == count_permutation_pairs_naive([1], 5)
    assert count_permutation_pairs_naive([1], 5) == 0


@pytest.mark.parametrize("seed", range(10))
def test_fast_matches_naive(seed):
    rng = random.Random(seed)
    m = rng.randint(2, 5)
    values = [rng.randint(1, m) for _ in range(rng.randint(1, 14))]
    assert count_permutation_pairs(values, m) == count_permutation_pairs_naive(values, m)


def test_run_matches_function():
    values = [3, 1, 2, 3, 2, 1]
    text = f"{len(values)} 3\n{' '.join(map(str, values))}\n"
    assert run(text) == f"{count_permutation_pairs_naive(values, 3)}\n"


def test_value_out_of_range_rejected():
    with pytest.raises(ValueError):
        count_permutation_pairs([1, 4], 3)


def test_m_out_of_range_rejected():
    with pytest.raises(ValueError):
        count_permutation_pairs([1], 1)


def test_generated_cases_valid_and_agree():
    cases = generate_cases(random.Random(4))
    for _ in range(5):
        values, m = next(cases)
        assert is_valid(values, m)
        assert count_permutation_pairs(values, m) == count_permutation_pairs_naive(values, m)


def test_is_valid_rejects_bad_values():
    assert not is_valid([0], 2)
    assert not is_valid([], 2)