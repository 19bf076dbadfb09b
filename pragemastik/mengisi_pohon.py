"""Mengisi Pohon: fill the blanks of a tree so that every path reads in sorted order."""

from collections import deque

from pragemastik.verdict import Verdict

MIN_N = 2
MAX_N = 100
MIN_VALUE = 1
MAX_VALUE = 1_000_000
EMPTY = -1


def _adjacency(n, edges):
    adjacency = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) outside 1..{n}")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _spread(values, adjacency, start, first, step):
    """Walk outward from ``start``, keeping given values and filling blanks by ``step``."""
    filled = [None] * len(adjacency)
    queue = deque([(start, first)])
    while queue:
        u, proposal = queue.popleft()
        if filled[u] is not None:
            continue
        given = values[u - 1]
        filled[u] = proposal if given == EMPTY else given
        queue.extend((v, filled[u] + step) for v in adjacency[u])
    return filled


def _is_monotone(filled, adjacency):
    nodes = range(1, len(adjacency))
    if any(filled[u] is None for u in nodes):
        return False
    for u in nodes:
        value = filled[u]
        if not MIN_VALUE <= value <= MAX_VALUE:
            return False
        higher = sum(1 for v in adjacency[u] if value < filled[v])
        if higher > 1 or len(adjacency[u]) - higher > 1:
            return False
    return True


def fill_tree(values, edges):
    """Fill every -1 in ``values`` so the tree's path is sorted; return None if impossible.

    Nodes are numbered from 1; ``values[i - 1]`` belongs to node ``i``.
    """
    n = len(values)
    if n < MIN_N:
        raise ValueError(f"the tree needs at least {MIN_N} nodes")
    if len(edges) != n - 1:
        raise ValueError(f"a tree on {n} nodes has {n - 1} edges")
    adjacency = _adjacency(n, edges)
    if any(len(neighbours) > 2 for neighbours in adjacency):
        return None
    leaf = next((u for u in range(1, n + 1) if len(adjacency[u]) == 1), None)
    if leaf is None:
        return None
    for first, step in ((MIN_VALUE, 1), (MAX_VALUE, -1)):
        filled = _spread(values, adjacency, leaf, first, step)
        if _is_monotone(filled, adjacency):
            return filled[1:]
    return None


def _read_ints(text):
    for token in text.split():
        try:
            yield int(token)
        except ValueError:
            return


def _parse_input(text):
    tokens = _read_ints(text)
    try:
        n = next(tokens)
        values = [next(tokens) for _ in range(n)]
        edges = [(next(tokens), next(tokens)) for _ in range(n - 1)]
    except StopIteration:
        raise ValueError("incomplete test input") from None
    return n, values, edges


def score(test_input, test_output, contestant_output):
    """Judge a contestant's filling against the test input and the judge's answer."""
    n, values, edges = _parse_input(test_input)
    adjacency = _adjacency(n, edges)
    answers = list(_read_ints(contestant_output))
    if not answers:
        return Verdict.WRONG_ANSWER
    judge = next(_read_ints(test_output), None)
    if judge is None:
        raise ValueError("missing integer in test output")
    if judge == -1:
        return Verdict.ACCEPTED if answers[0] == -1 else Verdict.WRONG_ANSWER
    if len(answers) < n:
        return Verdict.WRONG_ANSWER
    answers = answers[:n]
    if any(not MIN_VALUE <= a <= MAX_VALUE for a in answers):
        return Verdict.WRONG_ANSWER
    if any(given != EMPTY and given != a for given, a in zip(values, answers)):
        return Verdict.WRONG_ANSWER

    leaves = [u for u in range(1, n + 1) if len(adjacency[u]) == 1]
    if not leaves:
        raise ValueError("the tree has no leaf")
    order = []
    queue = deque([(leaves[-1], 0)])
    while queue:
        u, parent = queue.popleft()
        order.append(answers[u - 1])
        queue.extend((v, u) for v in adjacency[u] if v != parent)
    if order != sorted(order) and order != sorted(order, reverse=True):
        return Verdict.WRONG_ANSWER
    return Verdict.ACCEPTED


def is_valid(values, edges):
    """Check the input constraints: a tree on 2..100 nodes with values -1 or 1..1e6."""
    n = len(values)
    if not MIN_N <= n <= MAX_N or len(edges) != n - 1:
        return False
    if any(v != EMPTY and not MIN_VALUE <= v <= MAX_VALUE for v in values):
        return False
    try:
        adjacency = _adjacency(n, edges)
    except ValueError:
        return False
    seen = {1}
    stack = [1]
    while stack:
        u = stack.pop()
        for v in adjacency[u]:
            if v not in seen:
                seen.add(v)
                stack.append(v)
    return len(seen) == n


def _renumber(rng, n, pairs):
    labels = list(range(1, n + 1))
    rng.shuffle(labels)
    edges = [(labels[u], labels[v]) for u, v in pairs]
    rng.shuffle(edges)
    return edges


def _random_tree(rng, n):
    return _renumber(rng, n, [(i, rng.randint(0, i - 1)) for i in range(1, n)])


def _random_line(rng, n):
    return _renumber(rng, n, [(i - 1, i) for i in range(1, n)])


def _random_array(rng, n, low, high, ratio):
    values = []
    for _ in range(n):
        if rng.randint(1, 100) <= ratio:
            values.append(rng.randint(low, high))
        else:
            values.append(EMPTY)
    return values


def _random_yes_array(rng, n, edges, low, high, ratio):
    pool = set()
    while len(pool) < n:
        pool.add(rng.randint(low, high))
    ascending = sorted(pool)
    adjacency = _adjacency(n, edges)
    leaves = [u for u in range(1, n + 1) if len(adjacency[u]) == 1]
    leaf = leaves[rng.randint(0, 1)]
    values = [EMPTY] * n
    queue = deque([(leaf, 0)])
    position = 0
    while queue:
        u, parent = queue.popleft()
        if rng.randint(1, 100) <= ratio:
            values[u - 1] = ascending[position]
        position += 1
        queue.extend((v, u) for v in adjacency[u] if v != parent)
    return values


def _yes_case(rng, n, low, high, ratio):
    edges = _random_line(rng, n)
    return _random_yes_array(rng, n, edges, low, high, ratio), edges


def _any_case(rng, n, edges_of, low, high, ratio):
    edges = edges_of(rng, n)
    return _random_array(rng, n, low, high, ratio), edges


def generate_cases(rng):
    """Yield ``(values, edges)`` test inputs, drawn from ``rng``."""
    for ratio in (0, 25, 50, 75, 100):
        yield _yes_case(rng, 6, 1, 10, ratio)
    for ratio in (25, 50, 75, 100):
        yield _any_case(rng, 6, _random_tree, 1, 10, ratio)
    for _ in range(20):
        n = rng.randint(MIN_N, 10)
        yield _yes_case(rng, n, MIN_VALUE, n, rng.randint(0, 100))
    for _ in range(20):
        yield _yes_case(rng, rng.randint(MIN_N, MAX_N), MIN_VALUE, MAX_VALUE, rng.randint(0, 100))
        yield _yes_case(rng, MAX_N, MIN_VALUE, MAX_VALUE, rng.randint(0, 100))
    for _ in range(10):
        n = rng.randint(MIN_N, MAX_N)
        yield _any_case(rng, n, _random_line, MIN_VALUE, n, rng.randint(0, 100))
    for _ in range(6):
        n = rng.randint(MIN_N, MAX_N)
        yield _any_case(rng, n, _random_tree, MIN_VALUE, MAX_VALUE, rng.randint(0, 100))
        yield _any_case(rng, MAX_N, _random_tree, MIN_VALUE, MAX_VALUE, rng.randint(0, 100))


def run(text):
    """Solve one input given as text and return the output text."""
    _n, values, edges = _parse_input(text)
    filled = fill_tree(values, edges)
    if filled is None:
        return "-1\n"
    return " ".join(map(str, filled)) + "\n"