import random

from pragemastik.kotak_pensil import generate_cases, is_valid, longest_zero_run, run


def test_sample_one():
    assert run("4 4\n1001\n0011\n1000\n0101\n") == "3\n"


def test_sample_two():
    assert run("1 2\n00\n") == "2\n"


def test_all_empty_grid():
    n, m = 4, 7
    assert longest_zero_run(["0" * m] * n) == max(n, m)


def test_all_full_grid():
    assert longest_zero_run(["111", "111"]) == 0


def test_transpose_invariant():
    for grid in generate_cases(random.Random(12)):
        transposed = ["".join(col) for col in zip(*grid)]
        assert longest_zero_run(grid) == longest_zero_run(transposed)


def test_generated_cases_are_valid():
    cases = list(generate_cases(random.Random(13)))
    assert len(cases) == 50
    assert all(is_valid(grid) for grid in cases)
    assert all(longest_zero_run(grid) >= 1 for grid in cases)


def test_invalid_grids():
    assert not is_valid(["111"])
    assert not is_valid(["0a"])
    assert not is_valid(["00", "0"])
    assert not is_valid([])