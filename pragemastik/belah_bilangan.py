"""Belah Bilangan: the largest bit length among the digits of a number."""

import string

MAX_LENGTH = 100
_DIGITS = frozenset(string.digits)


def split_count(s):
    """Return the largest bit length of any digit in the decimal string ``s``."""
    if not s or not set(s) <= _DIGITS:
        raise ValueError(f"not a decimal number: {s!r}")
    return max(int(c).bit_length() for c in s)


def is_valid(s):
    """Check the input constraints: 1..100 digits, no leading zero."""
    if not 1 <= len(s) <= MAX_LENGTH:
        return False
    if len(s) > 1 and s[0] == "0":
        return False
    return set(s) <= _DIGITS


def _random_number(rng, length, top):
    head = str(rng.randint(1, top))
    return head + "".join(str(rng.randint(0, top)) for _ in range(length - 1))


def generate_cases(rng):
    """Yield the judge's test inputs, drawn from ``rng``."""
    yield "0"
    for _ in range(10):
        yield _random_number(rng, rng.randint(1, 10), rng.randint(1, 9))
    for _ in range(10):
        yield _random_number(rng, rng.randint(50, 100), rng.randint(1, 9))
    yield _random_number(rng, MAX_LENGTH, 9)


def run(text):
    """Solve one input given as text and return the output text."""
    (s,) = text.split()
    return f"{split_count(s)}\n"