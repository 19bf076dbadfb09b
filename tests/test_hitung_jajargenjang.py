import random
from itertools import islice

import pytest

from pragemastik.hitung_jajargenjang import count_parallelograms, generate_cases, is_valid, run

GRID_3_XS = [-1, -1, -1, 0, 0, 0, 1, 1, 1]
GRID_3_YS = [-1, 0, 1, -1, 0, 1, -1, 0, 1]

GRID_7X5_XS = [x for x in range(-3, 4) for _ in range(-2, 3)]
GRID_7X5_YS = [y for _ in range(-3, 4) for y in range(-2, 3)]


def test_sample_one():
    assert count_parallelograms(GRID_3_XS, GRID_3_YS) == 22


def test_sample_two():
    assert count_parallelograms(GRID_7X5_XS, GRID_7X5_YS) == 1968


def test_run_sample_text():
    text = "9\n-1 -1 -1 0 0 0 1 1 1\n-1 0 1 -1 0 1 -1 0 1\n"
    assert run(text) == "22\n"


def test_unit_square():
    assert count_parallelograms([0, 0, 1, 1], [0, 1, 0, 1]) == 1


def test_collinear_points_form_none():
    xs = list(range(10))
    assert count_parallelograms(xs, [2 * x + 1 for x in xs]) == 0


def test_vertical_line_forms_none_in_any_order():
    ys = [5, -1, 3, 0, 2, 4, 1]
    assert count_parallelograms([7] * len(ys), ys) == 0


def test_translation_and_order_invariance():
    points = list(zip(GRID_3_XS, GRID_3_YS))
    random.Random(1).shuffle(points)
    xs = [x + 12345 for x, _ in points]
    ys = [y - 999 for _, y in points]
    assert count_parallelograms(xs, ys) == count_parallelograms(GRID_3_XS, GRID_3_YS)


def test_duplicate_points_rejected():
    with pytest.raises(ValueError):
        count_parallelograms([0, 0, 1], [0, 0, 1])


def test_length_mismatch_rejected():
    with pytest.raises(ValueError):
        count_parallelograms([0, 1], [0])


def test_is_valid():
    assert is_valid(GRID_3_XS, GRID_3_YS)
    assert not is_valid([], [])
    assert not is_valid([1_000_000_000], [0])
    assert not is_valid([0, 1], [0])


def test_generated_cases_are_valid_and_distinct():
    cases = list(islice(generate_cases(random.Random(4)), 3))
    assert len(cases) == 3
    for xs, ys in cases:
        assert is_valid(xs, ys)
        assert len(set(zip(xs, ys))) == len(xs)
        assert count_parallelograms(xs, ys) >= 0