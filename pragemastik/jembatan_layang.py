"""Jembatan Layang: ways to pick one low enough bridge on every island."""

from bisect import bisect_right
from math import prod

MOD = 998_244_353
MAX_N = 100_000
MAX_BRIDGES = 200_000
MAX_Q = 100_000
MIN_H = 1
MAX_H = 1_000_000_000


def _check_islands(islands):
    if not islands:
        raise ValueError("at least one island is needed")


def bridge_products(islands, queries):
    """For each query height, return the product over islands of bridges no higher than it.

    The product is taken modulo 998244353.
    """
    _check_islands(islands)
    n = len(islands)
    bridges = sorted((h, island) for island, heights in enumerate(islands) for h in heights)
    counts = [0] * n
    nonzero = 0
    product = 0
    answers = [0] * len(queries)
    position = 0
    for index in sorted(range(len(queries)), key=queries.__getitem__):
        limit = queries[index]
        while position < len(bridges) and bridges[position][0] <= limit:
            island = bridges[position][1]
            if nonzero == n:
                product = product * pow(counts[island], MOD - 2, MOD) % MOD
                counts[island] += 1
                product = product * counts[island] % MOD
            else:
                counts[island] += 1
                if counts[island] == 1:
                    nonzero += 1
                    if nonzero == n:
                        product = prod(counts) % MOD
            position += 1
        answers[index] = product
    return answers


def bridge_products_naive(islands, queries):
    """Same as :func:`bridge_products`, counting each island's bridges per query."""
    _check_islands(islands)
    ordered = [sorted(heights) for heights in islands]
    answers = []
    for limit in queries:
        product = 1
        for heights in ordered:
            product = product * bisect_right(heights, limit) % MOD
        answers.append(product)
    return answers


def is_valid(islands, queries):
    """Check the input constraints."""
    if not 1 <= len(islands) <= MAX_N or not 1 <= len(queries) <= MAX_Q:
        return False
    if sum(map(len, islands)) > MAX_BRIDGES:
        return False
    heights = [h for island in islands for h in island]
    return all(MIN_H <= h <= MAX_H for h in [*heights, *queries])


def _bridge_counts(rng, n, total):
    counts = [1] * n
    for _ in range(total - n):
        counts[rng.randint(0, n - 1)] += 1
    return counts


def _random_bridges(rng, n, total, low, high):
    return [[rng.randint(low, high) for _ in range(k)] for k in _bridge_counts(rng, n, total)]


def _nonzero_bridges(rng, n, total, low, high):
    return [[1, *(rng.randint(low, high) for _ in range(k - 1))] for k in _bridge_counts(rng, n, total)]


def _queries(rng, q, low, high):
    return [rng.randint(low, high) for _ in range(q)]


def generate_cases(rng):
    """Yield ``(islands, queries)`` test inputs, drawn from ``rng``."""
    for _ in range(4):
        n, q = rng.randint(1, 50), rng.randint(1, 50)
        yield _random_bridges(rng, n, rng.randint(n, 200), MIN_H, 100), _queries(rng, q, MIN_H, 200)
        n, q = rng.randint(1, 50), rng.randint(1, 50)
        yield _random_bridges(rng, n, rng.randint(n, 200), MIN_H, MAX_H), _queries(rng, q, MIN_H, MAX_H)
        n, q = rng.randint(1, 50), rng.randint(1, 50)
        yield _nonzero_bridges(rng, n, rng.randint(n, 200), MIN_H, MAX_H), _queries(rng, q, MIN_H, MAX_H)
    for _ in range(8):
        n, q = rng.randint(1, 500), rng.randint(1, 500)
        yield _random_bridges(rng, n, rng.randint(n, 2000), MIN_H, 2000), _queries(rng, q, MIN_H, 2000)
        n, q = rng.randint(1, 500), rng.randint(1, 500)
        yield _random_bridges(rng, n, rng.randint(n, 2000), MIN_H, MAX_H), _queries(rng, q, MIN_H, MAX_H)
        n, q = rng.randint(1, 500), rng.randint(1, 500)
        yield _nonzero_bridges(rng, n, rng.randint(n, 2000), MIN_H, MAX_H), _queries(rng, q, MIN_H, MAX_H)
    for _ in range(3):
        yield _random_bridges(rng, MAX_N, MAX_BRIDGES, MIN_H, MAX_H), _queries(rng, MAX_Q, MIN_H, MAX_H)
        yield (
            _nonzero_bridges(rng, MAX_N, MAX_BRIDGES, MIN_H, MAX_H // 10),
            _queries(rng, MAX_Q, MIN_H, MAX_H // 10),
        )
    yield _random_bridges(rng, 1, MAX_BRIDGES, MIN_H, MAX_H), _queries(rng, MAX_Q, MIN_H, MAX_H)


def run(text):
    """Solve one input given as text and return the output text."""
    tokens = iter(map(int, text.split()))
    n, q = next(tokens), next(tokens)
    islands = []
    for _ in range(n):
        k = next(tokens)
        islands.append([next(tokens) for _ in range(k)])
    queries = [next(tokens) for _ in range(q)]
    return "".join(f"{a}\n" for a in bridge_products(islands, queries))