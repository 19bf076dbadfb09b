import random

import pytest

from pragemastik.jarak_benteng import generate_cases, is_valid, min_fort_distance, run


@pytest.mark.parametrize(
    "text, expected",
    [
        ("10 5\n9 1 6 7 2\n4 10 4 8 3\n", "1\n"),
        ("2 2\n2 1\n1 2\n", "2\n"),
        ("5 3\n1 2 1\n4 4 5\n", "0\n"),
        ("200 3\n17 130 55\n187 23 79\n", "94\n"),
    ],
)
def test_samples(text, expected):
    assert run(text) == expected


def test_swapping_axes_keeps_answer():
    rng = random.Random(6)
    rows = [rng.randint(1, 1000) for _ in range(30)]
    cols = [rng.randint(1, 1000) for _ in range(30)]
    assert min_fort_distance(rows, cols) == min_fort_distance(cols, rows)


def test_input_order_does_not_matter():
    rows, cols = [17, 130, 55], [187, 23, 79]
    assert min_fort_distance(rows, cols) == min_fort_distance(sorted(rows), sorted(cols, reverse=True))


def test_too_few_forts():
    with pytest.raises(ValueError):
        min_fort_distance([1], [1])


def test_length_mismatch():
    with pytest.raises(ValueError):
        min_fort_distance([1, 2], [1, 2, 3])


def test_generated_cases_are_valid():
    cases = list(generate_cases(random.Random(7)))
    assert len(cases) == 70
    assert all(is_valid(*case) for case in cases)


def test_invalid_inputs():
    assert not is_valid(5, [1, 6], [1, 2])
    assert not is_valid(5, [1], [1])