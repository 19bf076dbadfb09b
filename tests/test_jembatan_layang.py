import random

import pytest

from pragemastik.jembatan_layang import (
    bridge_products,
    bridge_products_naive,
    generate_cases,
    is_valid,
    run,
)

SAMPLE_ISLANDS = [[2, 1, 5], [3], [1, 4], [1], [1, 3, 5, 6]]
SAMPLE_QUERIES = [1, 3, 5, 2, 4, 6, 7]
SAMPLE_ANSWERS = [0, 4, 18, 0, 8, 24, 24]


def test_sample_answers():
    assert bridge_products(SAMPLE_ISLANDS, SAMPLE_QUERIES) == SAMPLE_ANSWERS


def test_sample_answers_naive():
    assert bridge_products_naive(SAMPLE_ISLANDS, SAMPLE_QUERIES) == SAMPLE_ANSWERS


def test_run_sample_text():
    text = "5 7\n3 2 1 5\n1 3\n2 1 4\n1 1\n4 1 3 5 6\n1\n3\n5\n2\n4\n6\n7\n"
    assert run(text) == "0\n4\n18\n0\n8\n24\n24\n"


@pytest.mark.parametrize("seed", range(8))
def test_fast_matches_naive(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 6)
    islands = [[rng.randint(1, 20) for _ in range(rng.randint(0, 5))] for _ in range(n)]
    queries = [rng.randint(1, 25) for _ in range(15)]
    assert bridge_products(islands, queries) == bridge_products_naive(islands, queries)


def test_generated_small_cases_agree_and_valid():
    cases = generate_cases(random.Random(3))
    for _ in range(6):
        islands, queries = next(cases)
        assert is_valid(islands, queries)
        assert bridge_products(islands, queries) == bridge_products_naive(islands, queries)


def test_no_islands_rejected():
    with pytest.raises(ValueError):
        bridge_products([], [1])


def test_is_valid_rejects_bad_heights():
    assert not is_valid([[0]], [1])
    assert not is_valid([[1]], [])
    assert is_valid([[1]], [1])