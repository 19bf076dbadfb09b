"""Cari Ganjil: find an odd multiple of n, with its custom scorer."""

import re

from pragemastik.verdict import Verdict

MIN_N = 1
MAX_N = 1000
MIN_ANSWER = 1
MAX_ANSWER = 1_000_000_000

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def find_odd_multiple(n):
    """Return an odd multiple of ``n``, or -1 when none exists."""
    return n if n % 2 else -1


def _leading_int(text):
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def _required_int(text, what):
    value = _leading_int(text)
    if value is None:
        raise ValueError(f"missing integer in {what}")
    return value


def score(test_input, test_output, contestant_output):
    """Judge a contestant's answer against the test input and the judge's answer."""
    n = _required_int(test_input, "test input")
    answer = _leading_int(contestant_output)
    if answer is None:
        return Verdict.WRONG_ANSWER
    if _required_int(test_output, "test output") == -1:
        return Verdict.ACCEPTED if answer == -1 else Verdict.WRONG_ANSWER
    if answer % n == 0 and MIN_ANSWER <= answer <= MAX_ANSWER:
        return Verdict.ACCEPTED
    return Verdict.WRONG_ANSWER


def is_valid(n):
    """Check the input constraint 1 <= n <= 1000."""
    return MIN_N <= n <= MAX_N


def generate_cases(rng):
    """Yield the judge's test inputs, drawn from ``rng``."""
    for _ in range(30):
        yield rng.randint(MIN_N, MAX_N)


def run(text):
    """Solve one input given as text and return the output text."""
    (n,) = map(int, text.split())
    return f"{find_odd_multiple(n)}\n"