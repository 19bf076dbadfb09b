"""Taman Bilangan: shortest walk through a number grid, one residue class at a time."""

from itertools import permutations, product
from operator import add

MIN_N = 2
MAX_N = 12
INF = 10**18


def _check(grid):
    n = len(grid)
    if n < MIN_N:
        raise ValueError(f"the grid needs at least {MIN_N} rows")
    if any(len(row) != n for row in grid):
        raise ValueError("the grid must be square")
    if sorted(a for row in grid for a in row) != list(range(1, n * n + 1)):
        raise ValueError(f"the grid must hold every number 1..{n * n} once")


def _groups(grid):
    _check(grid)
    n = len(grid)
    groups = [[] for _ in range(n)]
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            groups[value % n].append((r, c))
    return groups


def _distance(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _group_paths(cells):
    """Cheapest walk through all ``cells`` for every start and end: ``best[s][e]``."""
    k = len(cells)
    dist = [[_distance(a, b) for b in cells] for a in cells]
    full = (1 << k) - 1
    best = []
    for s in range(k):
        table = [None] * (full + 1)
        start = [INF] * k
        start[s] = 0
        table[1 << s] = start
        for mask in range(full + 1):
            if not mask >> s & 1 or mask == 1 << s:
                continue
            row = [INF] * k
            for e in range(k):
                bit = 1 << e
                if e != s and mask & bit:
                    row[e] = min(map(add, table[mask ^ bit], dist[e]))
            table[mask] = row
        best.append(table[full])
    return best


def _relax(lines):
    for line in lines:
        for j in range(1, len(line)):
            line[j] = min(line[j], line[j - 1] + 1)
        for j in range(len(line) - 2, -1, -1):
            line[j] = min(line[j], line[j + 1] + 1)


def _reach(groups, mask, ends):
    """For every cell, the cheapest cost of ending a walk over ``mask`` and stepping onto it."""
    n = len(groups)
    field = [[INF] * n for _ in range(n)]
    for j, cells in enumerate(groups):
        if mask >> j & 1:
            for m, (r, c) in enumerate(cells):
                field[r][c] = ends[j * n + m]
    _relax(field)
    columns = [list(column) for column in zip(*field)]
    _relax(columns)
    return [list(row) for row in zip(*columns)]


def min_garden_walk(grid):
    """Return the shortest Manhattan walk visiting every cell, finishing each residue
    class (value modulo n) before starting the next."""
    groups = _groups(grid)
    n = len(groups)
    paths = [_group_paths(cells) for cells in groups]
    full = (1 << n) - 1
    enter = [None] * (full + 1)
    free = [0] * n
    ends = []
    for mask in range(1, full + 1):
        ends = [INF] * (n * n)
        for j, cells in enumerate(groups):
            bit = 1 << j
            if not mask & bit:
                continue
            prev = mask ^ bit
            entry = [enter[prev][r][c] for r, c in cells] if prev else free
            # Walks are reversible, so paths[j][m] also lists the costs of ending at m.
            for m, through in enumerate(paths[j]):
                ends[j * n + m] = min(map(add, entry, through))
        if mask != full:
            enter[mask] = _reach(groups, mask, ends)
    return min(ends)


def min_garden_walk_naive(grid):
    """Same as :func:`min_garden_walk`, trying every order of classes and cells."""
    groups = _groups(grid)
    orders = [list(permutations(cells)) for cells in groups]
    best = INF
    for group_order in permutations(range(len(groups))):
        for choice in product(*(orders[g] for g in group_order)):
            walk = [cell for order in choice for cell in order]
            best = min(best, sum(_distance(a, b) for a, b in zip(walk, walk[1:])))
    return best


def is_valid(grid):
    """Check the input constraints: an n by n permutation of 1..n*n with 2 <= n <= 12."""
    if not MIN_N <= len(grid) <= MAX_N:
        return False
    try:
        _check(grid)
    except ValueError:
        return False
    return True


def _random_grid(rng, n):
    values = list(range(1, n * n + 1))
    rng.shuffle(values)
    return [values[i * n:(i + 1) * n] for i in range(n)]


def _nice_grid(rng, n):
    grid = [list(range(n * i + 1, n * i + n + 1)) for i in range(n)]
    for row in grid:
        rng.shuffle(row)
    rng.shuffle(grid)
    return grid


def _sudoku_like_grid(rng):
    n = 9
    pools = [[] for _ in range(n)]
    for value in range(1, n * n + 1):
        pools[value % n].append(value)
    for pool in pools:
        rng.shuffle(pool)
    order = list(range(n))
    rng.shuffle(order)
    grid = [[0] * n for _ in range(n)]
    for block, group in enumerate(order):
        block_row, block_col = divmod(block, 3)
        for index, value in enumerate(pools[group]):
            k, l = divmod(index, 3)
            grid[3 * block_row + k][3 * block_col + l] = value
    return grid


def generate_cases(rng):
    """Yield grids used as test inputs, drawn from ``rng``."""
    for _ in range(20):
        yield _random_grid(rng, rng.randint(MIN_N, 4))
    for _ in range(3):
        yield _nice_grid(rng, rng.randint(MIN_N, 4))
    for _ in range(10):
        yield _random_grid(rng, rng.randint(11, MAX_N))
    for _ in range(3):
        yield _nice_grid(rng, rng.randint(11, MAX_N))
    for _ in range(10):
        yield _random_grid(rng, MAX_N)
    for _ in range(2):
        yield _nice_grid(rng, MAX_N)
    for _ in range(3):
        yield _sudoku_like_grid(rng)


def run(text):
    """Solve one input given as text and return the output text."""
    n, *values = map(int, text.split())
    grid = [values[i * n:(i + 1) * n] for i in range(n)]
    return f"{min_garden_walk(grid)}\n"