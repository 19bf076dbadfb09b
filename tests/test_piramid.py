import itertools
import random

from pragemastik.piramid import MOD, generate_cases, is_valid, pyramid_sum, pyramid_sum_naive, run


def test_sample():
    assert run("4\n1 2 3 4\n") == "55\n"
    assert pyramid_sum([1, 2, 3, 4]) == 55


def test_single_value():
    assert pyramid_sum([17]) == 17
    assert pyramid_sum_naive([17]) == 17


def test_matches_best_ordering():
    rng = random.Random(11)
    for n in range(1, 7):
        values = [rng.randint(1, 50) for _ in range(n)]
        best = min(pyramid_sum_naive(list(p)) for p in itertools.permutations(values))
        assert pyramid_sum(values) == best


def test_order_of_input_does_not_matter():
    values = [5, 1, 9, 3, 7, 2]
    assert pyramid_sum(values) == pyramid_sum(sorted(values, reverse=True))


def test_result_is_reduced():
    values = [10**9] * 50
    assert 0 <= pyramid_sum(values) < MOD
    assert 0 <= pyramid_sum_naive(values) < MOD


def test_first_generated_cases_are_valid():
    for n, values in itertools.islice(generate_cases(random.Random(4)), 5):
        assert n <= 2000
        assert is_valid(n, values)


def test_invalid_inputs():
    assert not is_valid(0, [])
    assert not is_valid(2, [1])
    assert not is_valid(1, [0])