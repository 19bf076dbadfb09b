"""Jarak Benteng: smallest row gap plus smallest column gap between forts."""

MIN_N = 2
MAX_N = 100
MAX_M = 1_000_000_000


def _min_gap(coords):
    ordered = sorted(coords)
    return min(b - a for a, b in zip(ordered, ordered[1:]))


def min_fort_distance(rows, cols):
    """Return the smallest gap among ``rows`` plus the smallest gap among ``cols``."""
    if len(rows) != len(cols):
        raise ValueError("rows and cols differ in length")
    if len(rows) < MIN_N:
        raise ValueError("at least two forts are needed")
    return _min_gap(rows) + _min_gap(cols)


def is_valid(m, rows, cols):
    """Check the input constraints."""
    if not 1 <= m <= MAX_M or not MIN_N <= len(rows) <= MAX_N or len(rows) != len(cols):
        return False
    return all(1 <= c <= m for c in [*rows, *cols])


def _random_list(rng, n, low, high):
    return [rng.randint(low, high) for _ in range(n)]


def generate_cases(rng):
    """Yield ``(m, rows, cols)`` test inputs, drawn from ``rng``."""
    for _ in range(20):
        n = rng.randint(MIN_N, 100)
        yield MAX_M, _random_list(rng, n, 1, MAX_M), _random_list(rng, n, 1, MAX_M)
    for _ in range(20):
        m = rng.randint(1, 100)
        n = rng.randint(MIN_N, MAX_N)
        yield m, _random_list(rng, n, 1, m), _random_list(rng, n, 1, m)
    for _ in range(10):
        r = rng.randint(1, MAX_M)
        c = rng.randint(1, MAX_M)
        yield MAX_M, [r] * MAX_N, [c] * MAX_N
    for _ in range(20):
        rows = rng.sample(range(1, MAX_M + 1), MAX_N)
        cols = rng.sample(range(1, MAX_M + 1), MAX_N)
        yield MAX_M, rows, cols


def run(text):
    """Solve one input given as text and return the output text."""
    _m, n, *rest = map(int, text.split())
    return f"{min_fort_distance(rest[:n], rest[n:2 * n])}\n"