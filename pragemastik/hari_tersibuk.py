"""Hari Tersibuk: the busiest day within every subtree of an organisation tree."""

MIN_N = 2
MAX_N = 100_000
MIN_H = 1
MAX_H = 100_000


class _MaxAddTree:
    """Range add over days 1..size with the global maximum kept at the root."""

    def __init__(self, size):
        self._size = size
        self._best = [0] * (4 * size)
        self._pending = [0] * (4 * size)

    @property
    def maximum(self):
        return self._best[1]

    def add(self, left, right, delta):
        self._add(1, 1, self._size, left, right, delta)

    def _add(self, node, lo, hi, left, right, delta):
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            self._best[node] += delta
            self._pending[node] += delta
            return
        mid = (lo + hi) // 2
        self._add(2 * node, lo, mid, left, right, delta)
        self._add(2 * node + 1, mid + 1, hi, left, right, delta)
        self._best[node] = max(self._best[2 * node], self._best[2 * node + 1]) + self._pending[node]


def _children(n, parents):
    if len(parents) != n - 1:
        raise ValueError("expected one parent for every node but the root")
    children = [[] for _ in range(n + 1)]
    for child, parent in enumerate(parents, start=2):
        if not 1 <= parent <= n:
            raise ValueError(f"parent {parent} outside 1..{n}")
        children[parent].append(child)
    return children


def _preorder(children, n):
    order = []
    stack = [1]
    while stack:
        u = stack.pop()
        order.append(u)
        stack.extend(reversed(children[u]))
    if len(order) != n:
        raise ValueError("parents do not form a tree rooted at node 1")
    return order


def _check_segments(h, segments):
    for left, right in segments:
        if not 1 <= left <= right <= h:
            raise ValueError(f"segment ({left}, {right}) outside 1..{h}")


def _prepare(h, parents, segments):
    n = len(segments)
    if n < 1:
        raise ValueError("the tree needs at least one node")
    children = _children(n, parents)
    _check_segments(h, segments)
    return n, children, _preorder(children, n)


def busiest_days(h, parents, segments):
    """Return, for nodes 1..n, the most segments of its subtree covering one day.

    ``parents[i]`` is the parent of node ``i + 2``; ``segments[i]`` is node ``i + 1``'s days.
    """
    n, children, order = _prepare(h, parents, segments)
    start = [0] * (n + 1)
    for position, u in enumerate(order):
        start[u] = position
    size = [1] * (n + 1)
    for u in reversed(order):
        for v in children[u]:
            size[u] += size[v]
    heavy = [max(kids, key=size.__getitem__, default=0) for kids in children]

    tree = _MaxAddTree(h)

    def cover_subtree(u, delta):
        for w in order[start[u]:start[u] + size[u]]:
            tree.add(*segments[w - 1], delta)

    answers = [0] * (n + 1)
    stack = [(1, True, False)]
    while stack:
        u, keep, expanded = stack.pop()
        if not expanded:
            stack.append((u, keep, True))
            if heavy[u]:
                stack.append((heavy[u], True, False))
            stack.extend((v, False, False) for v in children[u] if v != heavy[u])
            continue
        for v in children[u]:
            if v != heavy[u]:
                cover_subtree(v, 1)
        tree.add(*segments[u - 1], 1)
        answers[u] = tree.maximum
        if not keep:
            cover_subtree(u, -1)
    return answers[1:]


def busiest_days_naive(h, parents, segments):
    """Same as :func:`busiest_days`, counting every day of every subtree directly."""
    n, children, order = _prepare(h, parents, segments)
    coverage = [None] * (n + 1)
    answers = [0] * (n + 1)
    for u in reversed(order):
        left, right = segments[u - 1]
        days = [1 if left <= d <= right else 0 for d in range(h + 1)]
        for v in children[u]:
            days = [a + b for a, b in zip(days, coverage[v])]
            coverage[v] = None
        coverage[u] = days
        answers[u] = max(days)
    return answers[1:]


def is_valid(n, h, parents, segments):
    """Check the input constraints."""
    if not (MIN_N <= n <= MAX_N and MIN_H <= h <= MAX_H and len(segments) == n):
        return False
    try:
        _prepare(h, parents, segments)
    except ValueError:
        return False
    return True


def _random_tree(rng, n):
    return [rng.randint(1, i - 1) for i in range(2, n + 1)]


def _k_tree(n, k):
    return [(i - 2) // k + 1 for i in range(2, n + 1)]


def _random_segments(rng, n, h):
    segments = []
    for _ in range(n):
        left, right = rng.randint(MIN_H, h), rng.randint(MIN_H, h)
        segments.append((min(left, right), max(left, right)))
    return segments


def _unit_segments(rng, n, h):
    segments = []
    for _ in range(n):
        day = rng.randint(1, h)
        segments.append((day, day))
    return segments


def generate_cases(rng):
    """Yield ``(n, h, parents, segments)`` test inputs, drawn from ``rng``."""
    for i in range(3):
        n, h = i + 7, 10
        yield n, h, _random_tree(rng, n), _random_segments(rng, n, h)
    for _ in range(15):
        n, h = rng.randint(50, 500), rng.randint(50, 500)
        yield n, h, _random_tree(rng, n), _random_segments(rng, n, h)
    for _ in range(3):
        n, h = rng.randint(50, 500), rng.randint(50, 500)
        yield n, h, _random_tree(rng, n), _unit_segments(rng, n, h)
    n, h = rng.randint(50, 500), 1
    yield n, h, _random_tree(rng, n), _random_segments(rng, n, h)
    for k in (1, 2, 3, None):
        n, h = rng.randint(50, 500), rng.randint(50, 500)
        yield n, h, _k_tree(n, k or n - 1), _random_segments(rng, n, h)
    for _ in range(3):
        yield MAX_N, MAX_H, _random_tree(rng, MAX_N), _random_segments(rng, MAX_N, MAX_H)
    for n, k in ((MAX_N // 2, 1), (MAX_N, 2), (MAX_N, MAX_N - 1)):
        yield n, MAX_H, _k_tree(n, k), _random_segments(rng, n, MAX_H)


def run(text):
    """Solve one input given as text and return the output text."""
    tokens = iter(map(int, text.split()))
    n, h = next(tokens), next(tokens)
    parents = [next(tokens) for _ in range(n - 1)]
    segments = [(next(tokens), next(tokens)) for _ in range(n)]
    return " ".join(map(str, busiest_days(h, parents, segments))) + "\n"