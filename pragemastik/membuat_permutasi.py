"""Membuat Permutasi: pairs of subarrays that together form a permutation of 1..m."""

from collections import Counter

MIN_N = 1
MAX_N = 200_000
MIN_M = 2
MAX_M = 20


def _check(values, m):
    if not MIN_M <= m <= MAX_M:
        raise ValueError(f"m must lie in {MIN_M}..{MAX_M}")
    if any(not 1 <= v <= m for v in values):
        raise ValueError(f"values must lie in 1..{m}")


def count_permutation_pairs(values, m):
    """Count unordered pairs of disjoint subarrays whose values together are exactly 1..m."""
    _check(values, m)
    masks = Counter()
    n = len(values)
    for start in range(n):
        mask = 0
        for v in values[start:min(n, start + m)]:
            bit = 1 << (v - 1)
            if mask & bit:
                break
            mask |= bit
            masks[mask] += 1
    full = (1 << m) - 1
    total = sum(count * masks.get(full ^ mask, 0) for mask, count in masks.items() if mask != full)
    return total // 2


def count_permutation_pairs_naive(values, m):
    """Same as :func:`count_permutation_pairs`, trying every pair of subarrays."""
    _check(values, m)
    n = len(values)
    total = 0
    for first_len in range(1, m):
        second_len = m - first_len
        for first in range(n - m + 1):
            head = values[first:first + first_len]
            for second in range(first + first_len, n - second_len + 1):
                if len(set(head + values[second:second + second_len])) == m:
                    total += 1
    return total


def is_valid(values, m):
    """Check the input constraints."""
    if not MIN_N <= len(values) <= MAX_N or not MIN_M <= m <= MAX_M:
        return False
    return all(1 <= v <= m for v in values)


def _random_array(rng, n, m):
    return [rng.randint(1, m) for _ in range(n)]


def _uniformer_array(rng, n, m):
    values = []
    for start in range(0, n, m):
        values.extend(range(1, min(m, n - start) + 1))
        tail = values[start:]
        rng.shuffle(tail)
        values[start:] = tail
    return values


def _uniform_array(n, m):
    return [i % m + 1 for i in range(n)]


def generate_cases(rng):
    """Yield ``(values, m)`` test inputs, drawn from ``rng``."""
    for _ in range(2):
        m = rng.randint(MIN_M, MAX_M)
        yield _random_array(rng, 1, m), m
    for _ in range(3):
        n = rng.randint(1, 10)
        m = rng.randint(MIN_M, max(n, MIN_M))
        yield _random_array(rng, n, m), m
    for _ in range(10):
        n, m = rng.randint(10, 500), rng.randint(MIN_M, MAX_M)
        yield _random_array(rng, n, m), m
        n, m = rng.randint(10, 500), rng.randint(MIN_M, MAX_M)
        yield _uniformer_array(rng, n, m), m
    yield _uniform_array(rng.randint(10, 500), MIN_M), MIN_M
    yield _uniform_array(rng.randint(10, 500), MAX_M), MAX_M
    for _ in range(3):
        m = rng.randint(MIN_M, MAX_M)
        yield _random_array(rng, MAX_N, m), m
        m = rng.randint(MIN_M, MAX_M)
        yield _uniformer_array(rng, MAX_N, m), m
    yield _uniform_array(MAX_N, MIN_M), MIN_M
    yield _uniform_array(MAX_N, MAX_M), MAX_M
    yield _uniformer_array(rng, MAX_N, MIN_M), MIN_M
    yield _uniformer_array(rng, MAX_N, MAX_M), MAX_M


def run(text):
    """Solve one input given as text and return the output text."""
    n, m, *values = map(int, text.split())
    return f"{count_permutation_pairs(values[:n], m)}\n"