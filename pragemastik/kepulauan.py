"""Kepulauan: cost of joining islands, each island priced by its cheapest node."""

MAX_N = 200_000
MAX_M = 200_000
MAX_Q = 200_000
MAX_VALUE = 1_000_000


def island_costs(values, edges, queries):
    """Answer each query ``(u, v)`` with 0 if connected, else the sum of both islands' minima.

    Nodes are numbered from 1; ``values[i - 1]`` belongs to node ``i``.
    """
    n = len(values)
    parent = list(range(n + 1))

    def find(x):
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) outside 1..{n}")
        ru, rv = find(u), find(v)
        if ru != rv:
            parent[ru] = rv

    cheapest = {}
    for node, value in enumerate(values, start=1):
        root = find(node)
        cheapest[root] = min(cheapest.get(root, value), value)

    answers = []
    for u, v in queries:
        ru, rv = find(u), find(v)
        answers.append(0 if ru == rv else cheapest[ru] + cheapest[rv])
    return answers


def is_valid(n, values, edges, queries):
    """Check the input constraints."""
    if not 1 <= n <= MAX_N or len(edges) > MAX_M or len(values) != n:
        return False
    if not all(1 <= a <= MAX_VALUE for a in values):
        return False
    return all(1 <= u <= n and 1 <= v <= n for u, v in [*edges, *queries])


def _random_pairs(rng, n, count):
    return [(rng.randint(1, n), rng.randint(1, n)) for _ in range(count)]


def _case(rng, n, m, q):
    values = [rng.randint(1, MAX_VALUE) for _ in range(n)]
    return n, values, _random_pairs(rng, n, m), _random_pairs(rng, n, q)


def generate_cases(rng):
    """Yield ``(n, values, edges, queries)`` test inputs, drawn from ``rng``."""
    for _ in range(3):
        yield _case(rng, 100, 100, MAX_Q)
    yield _case(rng, MAX_N, MAX_M, MAX_Q)


def run(text):
    """Solve one input given as text and return the output text."""
    tokens = iter(map(int, text.split()))
    n, m, q = next(tokens), next(tokens), next(tokens)
    values = [next(tokens) for _ in range(n)]
    edges = [(next(tokens), next(tokens)) for _ in range(m)]
    queries = [(next(tokens), next(tokens)) for _ in range(q)]
    return "".join(f"{a}\n" for a in island_costs(values, edges, queries))