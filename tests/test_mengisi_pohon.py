import random

import pytest

from pragemastik.mengisi_pohon import (
    MAX_VALUE,
    fill_tree,
    generate_cases,
    is_valid,
    run,
    score,
)
from pragemastik.verdict import Verdict

SAMPLE1 = "5\n4 -1 -1 1 -1\n1 3\n4 5\n5 2\n2 1\n"
SAMPLE2 = "5\n4 -1 -1 -1 1\n1 3\n4 5\n5 2\n2 1\n"
SAMPLE3 = "5\n4 -1 -1 1 -1\n1 3\n4 1\n5 2\n2 1\n"
SAMPLE1_ANSWER = "4 3 10 1 2"

EDGES = [(1, 3), (4, 5), (5, 2), (2, 1)]


def _format_input(values, edges):
    lines = [str(len(values)), " ".join(map(str, values))]
    lines.extend(f"{u} {v}" for u, v in edges)
    return "\n".join(lines) + "\n"


def test_sample1_is_solved_and_accepted():
    result = fill_tree([4, -1, -1, 1, -1], EDGES)
    assert result[0] == 4
    assert result[3] == 1
    output = " ".join(map(str, result))
    assert score(SAMPLE1, SAMPLE1_ANSWER, output) is Verdict.ACCEPTED


def test_sample2_is_impossible():
    assert fill_tree([4, -1, -1, -1, 1], EDGES) is None
    assert run(SAMPLE2) == "-1\n"


def test_sample3_is_not_a_path():
    assert fill_tree([4, -1, -1, 1, -1], [(1, 3), (4, 1), (5, 2), (2, 1)]) is None
    assert run(SAMPLE3) == "-1\n"


def test_run_output_is_accepted():
    assert score(SAMPLE1, SAMPLE1_ANSWER, run(SAMPLE1)) is Verdict.ACCEPTED


def test_filled_values_within_bounds():
    result = fill_tree([-1, -1, -1], [(1, 2), (2, 3)])
    assert all(1 <= v <= MAX_VALUE for v in result)
    assert score(_format_input([-1, -1, -1], [(1, 2), (2, 3)]), "1 2 3", " ".join(map(str, result))) is Verdict.ACCEPTED


def test_fill_tree_rejects_single_node():
    with pytest.raises(ValueError):
        fill_tree([5], [])


def test_fill_tree_rejects_wrong_edge_count():
    with pytest.raises(ValueError):
        fill_tree([1, 2, 3], [(1, 2)])


def test_fill_tree_rejects_edge_out_of_range():
    with pytest.raises(ValueError):
        fill_tree([1, 2], [(1, 3)])


@pytest.mark.parametrize(
    "contestant",
    [
        "",
        "4 3 10 1",
        "4 3 1000001 1 2",
        "5 3 10 1 2",
        "4 3 10 1 5",
        "-1",
    ],
)
def test_score_wrong_answers(contestant):
    assert score(SAMPLE1, SAMPLE1_ANSWER, contestant) is Verdict.WRONG_ANSWER


def test_score_both_impossible():
    assert score(SAMPLE2, "-1", "-1") is Verdict.ACCEPTED


def test_score_claimed_solution_when_impossible():
    assert score(SAMPLE2, "-1", "4 3 10 1 2") is Verdict.WRONG_ANSWER


def test_score_accepts_reference_answer():
    assert score(SAMPLE1, SAMPLE1_ANSWER, SAMPLE1_ANSWER) is Verdict.ACCEPTED


def test_score_rejects_incomplete_input():
    with pytest.raises(ValueError):
        score("5\n4 -1", SAMPLE1_ANSWER, SAMPLE1_ANSWER)


def test_is_valid():
    assert is_valid([4, -1, -1, 1, -1], EDGES)
    assert not is_valid([4, -1, -1, 1, -1], EDGES[:3])
    assert not is_valid([0, -1, -1, 1, -1], EDGES)
    assert not is_valid([1, 2, 3, 4], [(1, 2), (2, 1), (3, 4)])
    assert not is_valid([1], [])


def test_generated_cases_are_valid_and_solutions_accepted():
    cases = list(generate_cases(random.Random(7)))
    assert all(is_valid(values, edges) for values, edges in cases)
    for values, edges in cases[:5]:
        assert fill_tree(values, edges) is not None
    for values, edges in cases:
        result = fill_tree(values, edges)
        if result is None:
            continue
        text = _format_input(values, edges)
        output = " ".join(map(str, result))
        assert score(text, output, output) is Verdict.ACCEPTED