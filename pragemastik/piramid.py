"""Piramid: smallest total of a number pyramid over any ordering of its base."""

MOD = 1_000_000_007
MAX_N = 200_000
MAX_VALUE = 1_000_000_000


def pyramid_sum(values):
    """Return the minimum, modulo 1e9+7, of the pyramid total over all orderings of ``values``."""
    ordered = sorted(values)
    n = len(ordered)
    half = n // 2
    binom = 1
    total = 0
    for i in range(n):
        binom = binom * (n + 1 - i) % MOD * pow(i + 1, MOD - 2, MOD) % MOD
        position = 2 * (half - i) - 1 if i < half else 2 * (i - half)
        total = (total + ordered[position] * (binom - 1)) % MOD
    return total


def pyramid_sum_naive(values):
    """Return the pyramid total, modulo 1e9+7, for the base in the given order."""
    row = [v % MOD for v in values]
    total = 0
    while row:
        total = (total + sum(row)) % MOD
        row = [(a + b) % MOD for a, b in zip(row, row[1:])]
    return total


def is_valid(n, values):
    """Check the input constraints."""
    return 1 <= n <= MAX_N and len(values) == n and all(1 <= a <= MAX_VALUE for a in values)


def _values(rng, n):
    return [rng.randint(1, MAX_VALUE) for _ in range(n)]


def generate_cases(rng):
    """Yield ``(n, values)`` test inputs, drawn from ``rng``."""
    for _ in range(5):
        n = rng.randint(1, 2000)
        yield n, _values(rng, n)
    for _ in range(10):
        n = rng.randint(2000, MAX_N)
        yield n, _values(rng, n)


def run(text):
    """Solve one input given as text and return the output text."""
    n, *values = map(int, text.split())
    return f"{pyramid_sum(values[:n])}\n"