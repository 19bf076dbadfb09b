"""Sepasang Bintang: pairs of stars whose closed neighbourhoods split the sky in two."""

from collections import Counter
from itertools import chain, combinations, islice
from math import isqrt

MIN_N = 2
MAX_N = 100_000
MAX_M = 200_000

_BASES = (2, 3)
_MODS = (1_000_000_007, 998_244_353)


def _check(n, edges):
    if n < 1:
        raise ValueError("the graph needs at least one node")
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) outside 1..{n}")
        if u == v:
            raise ValueError(f"self loop on node {u}")


def _add(a, b):
    return tuple((x + y) % mod for x, y, mod in zip(a, b, _MODS))


def _sub(a, b):
    return tuple((x - y) % mod for x, y, mod in zip(a, b, _MODS))


def count_star_pairs(n, edges):
    """For every k in 2..n, count pairs of nodes among 1..k whose closed
    neighbourhoods (within nodes 1..k) are disjoint and together cover 1..k."""
    _check(n, edges)
    earlier = [[] for _ in range(n + 1)]
    for u, v in edges:
        earlier[max(u, v)].append(min(u, v))

    powers = [(1, 1)]
    for _ in range(n):
        last = powers[-1]
        powers.append(tuple(p * b % mod for p, b, mod in zip(last, _BASES, _MODS)))

    closed = list(powers)
    counts = Counter()
    prefix = (0, 0)
    answers = []
    for u in range(1, n + 1):
        prefix = _add(prefix, powers[u])
        counts[closed[u]] += 1
        for v in earlier[u]:
            counts[closed[u]] -= 1
            counts[closed[v]] -= 1
            closed[u] = _add(closed[u], powers[v])
            closed[v] = _add(closed[v], powers[u])
            counts[closed[u]] += 1
            counts[closed[v]] += 1
        total = sum(counts.get(_sub(prefix, closed[v]), 0) for v in (*earlier[u], u))
        if u >= MIN_N:
            answers.append(total)
    return answers


def count_star_pairs_naive(n, edges):
    """Same as :func:`count_star_pairs`, checking every pair of nodes directly."""
    _check(n, edges)
    answers = []
    for limit in range(MIN_N, n + 1):
        closed = {u: {u} for u in range(1, limit + 1)}
        for u, v in edges:
            if max(u, v) <= limit:
                closed[u].add(v)
                closed[v].add(u)
        answers.append(sum(
            1
            for u, v in combinations(range(1, limit + 1), 2)
            if closed[u].isdisjoint(closed[v]) and len(closed[u]) + len(closed[v]) == limit
        ))
    return answers


def is_valid(n, edges):
    """Check the input constraints: no self loops and no repeated edges."""
    if not MIN_N <= n <= MAX_N or not 0 <= len(edges) <= MAX_M:
        return False
    seen = set()
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n) or u == v:
            return False
        key = frozenset((u, v))
        if key in seen:
            return False
        seen.add(key)
    return True


def _random_graph(rng, n, m):
    seen = set()
    edges = []
    while len(edges) < m:
        for _ in range(101):
            u, v = rng.randint(1, n), rng.randint(1, n)
            if u != v and (u, v) not in seen and (v, u) not in seen:
                break
        else:
            break
        seen.add((u, v))
        edges.append((u, v))
    return edges


def _big_star_pair_graph(rng, n, m, first_size):
    m = max(m, n - 2)
    perm = list(range(1, n + 1))
    rng.shuffle(perm)
    edges = []
    for i in range(n - 2):
        centre = perm[0] if i < first_size else perm[1]
        leaf = perm[i + 2]
        edges.append((centre, leaf) if rng.randint(0, 1) else (leaf, centre))
    seen = set()
    while len(edges) < m:
        i, j = rng.randint(2, n - 1), rng.randint(2, n - 1)
        if i == j or (i, j) in seen or (j, i) in seen:
            break
        seen.add((i, j))
        edges.append((perm[i], perm[j]))
    return edges


def _pair_of_complete_graph(rng, n, m, first_size):
    first = ((i, j) for i in range(2, first_size + 1) for j in range(1, i))
    second = ((i, j) for i in range(first_size + 2, n + 1) for j in range(first_size + 1, i))
    edges = list(islice(chain(first, second), m))
    rng.shuffle(edges)
    return [(v, u) if rng.randint(1, 100) <= 50 else (u, v) for u, v in edges]


def generate_cases(rng):
    """Yield ``(n, edges)`` test inputs, drawn from ``rng``."""
    for _ in range(30):
        n = rng.randint(10, 30)
        yield n, _random_graph(rng, n, rng.randint(0, n * (n - 1) // 2))
    for i in range(10):
        n = rng.randint(10, 100)
        m = rng.randint(0, (n - 1) * (n - 2) // 2)
        yield n, _big_star_pair_graph(rng, n, m, rng.randint(0, n - 2))
        yield 100, _pair_of_complete_graph(rng, 100, MAX_M, 5 * (i + 1))
    for _ in range(2):
        n = rng.randint(100, 1000)
        yield n, _random_graph(rng, n, MAX_M)
        n = rng.randint(MAX_N // 3, MAX_N)
        yield n, _random_graph(rng, n, MAX_M)
    for _ in range(6):
        n = rng.randint(100, 1000)
        yield n, _big_star_pair_graph(rng, n, MAX_M, rng.randint(0, n - 2))
        n = rng.randint(MAX_N // 3, MAX_N)
        yield n, _big_star_pair_graph(rng, n, MAX_M, rng.randint(0, n - 2))
        n = rng.randint(100, 1000)
        yield n, _pair_of_complete_graph(rng, n, MAX_M, rng.randint(1, n))
        n = rng.randint(MAX_N // 3, MAX_N)
        yield n, _pair_of_complete_graph(rng, n, MAX_M, rng.randint(1, isqrt(MAX_M)))
    n = isqrt(MAX_M)
    yield n, _pair_of_complete_graph(rng, n, MAX_M, 1)
    yield n, _pair_of_complete_graph(rng, n, MAX_M, n // 2)


def run(text):
    """Solve one input given as text and return the output text."""
    tokens = iter(map(int, text.split()))
    n, m = next(tokens), next(tokens)
    edges = [(next(tokens), next(tokens)) for _ in range(m)]
    return " ".join(map(str, count_star_pairs(n, edges))) + "\n"