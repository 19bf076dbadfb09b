"""Tekan Satu: remainder modulo 6 of the number written as n ones."""

MIN_N = 1
MAX_N = 1337
_BY_RESIDUE = (3, 1, 5)


def press_one(n):
    """Return the repunit of length ``n`` modulo 6."""
    return _BY_RESIDUE[n % 3]


def press_one_by_digits(n):
    """Return the repunit of length ``n`` modulo 6, built one digit at a time."""
    result = 0
    for _ in range(n):
        result = (result * 10 + 1) % 6
    return result


def is_valid(n):
    """Check the input constraint 1 <= n <= 1337."""
    return MIN_N <= n <= MAX_N


def generate_cases(rng):
    """Yield the judge's test inputs, drawn from ``rng``."""
    for _ in range(111):
        yield rng.randint(MIN_N, MAX_N)


def run(text):
    """Solve one input given as text and return the output text."""
    (n,) = map(int, text.split())
    return f"{press_one(n)}\n"