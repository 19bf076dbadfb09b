"""Kotak Pensil: longest straight run of empty cells in a grid."""

from itertools import groupby

MAX_N = 100
MAX_M = 100


def _longest_zero_run(lines):
    return max(
        (sum(1 for _ in group) for lines_ in [lines] for line in lines_ for key, group in groupby(line) if key == "0"),
        default=0,
    )


def longest_zero_run(grid):
    """Return the longest horizontal or vertical run of '0' cells in ``grid``."""
    columns = ["".join(column) for column in zip(*grid)]
    return max(_longest_zero_run(grid), _longest_zero_run(columns))


def is_valid(grid):
    """Check the input constraints: a 1..100 by 1..100 grid of '0'/'1' with a '0'."""
    if not 1 <= len(grid) <= MAX_N:
        return False
    width = len(grid[0])
    if not 1 <= width <= MAX_M or any(len(row) != width for row in grid):
        return False
    cells = "".join(grid)
    return set(cells) <= {"0", "1"} and "0" in cells


def _random_grid(rng, n, m, ratio):
    cells = [[""] * m for _ in range(n)]
    cells[rng.randint(0, n - 1)][rng.randint(0, m - 1)] = "0"
    for row in cells:
        for j, cell in enumerate(row):
            if not cell:
                row[j] = "1" if rng.randint(1, 100) <= ratio else "0"
    return ["".join(row) for row in cells]


def generate_cases(rng):
    """Yield grids used as test inputs, drawn from ``rng``."""
    for _ in range(10):
        yield _random_grid(rng, rng.randint(1, MAX_N), rng.randint(1, MAX_M), 0)
    for i in range(30):
        yield _random_grid(rng, rng.randint(1, 20), rng.randint(1, 20), 50 + 50 // (i + 1))
    for i in range(10):
        yield _random_grid(rng, rng.randint(1, MAX_N), rng.randint(1, MAX_M), 50 + 50 // (i + 1))


def run(text):
    """Solve one input given as text and return the output text."""
    n, _m, *rows = text.split()
    return f"{longest_zero_run(rows[:int(n)])}\n"