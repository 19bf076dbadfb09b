import itertools
import random

import pytest

from pragemastik.kepulauan import generate_cases, is_valid, island_costs, run

SAMPLE = "5 4 3\n1 2 3 4 5\n1 2\n4 2\n1 4\n5 3\n1 2\n3 5\n1 5\n"


def test_sample():
    assert run(SAMPLE) == "0\n0\n4\n"


def test_sample_direct():
    values = [1, 2, 3, 4, 5]
    edges = [(1, 2), (4, 2), (1, 4), (5, 3)]
    assert island_costs(values, edges, [(1, 2), (3, 5), (1, 5)]) == [0, 0, 4]


def test_no_edges_sums_values():
    values = [7, 3, 9]
    queries = [(1, 2), (2, 3), (1, 3)]
    assert island_costs(values, [], queries) == [values[0] + values[1], values[1] + values[2], values[0] + values[2]]


def test_same_node_is_free():
    rng = random.Random(3)
    values = [rng.randint(1, 100) for _ in range(20)]
    assert island_costs(values, [], [(i, i) for i in range(1, 21)]) == [0] * 20


def test_symmetric_queries():
    rng = random.Random(8)
    values = [rng.randint(1, 100) for _ in range(30)]
    edges = [(rng.randint(1, 30), rng.randint(1, 30)) for _ in range(15)]
    queries = [(rng.randint(1, 30), rng.randint(1, 30)) for _ in range(40)]
    swapped = [(v, u) for u, v in queries]
    assert island_costs(values, edges, queries) == island_costs(values, edges, swapped)


def test_bad_edge_rejected():
    with pytest.raises(ValueError):
        island_costs([1, 2], [(1, 3)], [])


def test_first_generated_case_is_valid():
    (case,) = itertools.islice(generate_cases(random.Random(2)), 1)
    assert case[0] == 100
    assert is_valid(*case)


def test_invalid_inputs():
    assert not is_valid(2, [1, 2], [(1, 3)], [])
    assert not is_valid(2, [0, 2], [], [])
    assert not is_valid(2, [1], [], [])