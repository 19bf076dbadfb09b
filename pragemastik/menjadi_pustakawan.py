"""Menjadi Pustakawan: range sums over a shelf whose sections can be reversed."""

from bisect import bisect_left
from itertools import accumulate

MAX_N = 200_000
MAX_Q = 100_000
MIN_HEIGHT = 1
MAX_HEIGHT = 1_000_000_000

FLIP = "B"
SUM = "J"


class Library:
    """A shelf of books split into sections; each section may be turned around."""

    def __init__(self, heights, boundaries):
        n = len(heights)
        if n < 1:
            raise ValueError("the shelf needs at least one book")
        boundaries = list(boundaries)
        if any(not 1 <= b <= n - 1 for b in boundaries):
            raise ValueError(f"boundaries must lie in 1..{n - 1}")
        if boundaries != sorted(boundaries):
            raise ValueError("boundaries must be sorted")
        self._size = n
        self._bounds = [0, *boundaries, n]
        self._prefix = [0, *accumulate(heights)]
        self._flipped = [False] * (len(self._bounds) - 1)

    @property
    def size(self):
        """Number of books on the shelf."""
        return self._size

    @property
    def sections(self):
        """Number of sections on the shelf."""
        return len(self._flipped)

    def flip(self, section):
        """Reverse the order of the books in ``section`` (numbered from 1)."""
        if not 1 <= section <= len(self._flipped):
            raise ValueError(f"section {section} outside 1..{len(self._flipped)}")
        self._flipped[section - 1] = not self._flipped[section - 1]

    def _section_of(self, position):
        return bisect_left(self._bounds, position) - 1

    def _partial(self, section, left, right):
        if self._flipped[section]:
            mirror = self._bounds[section] + self._bounds[section + 1] + 1
            left, right = mirror - right, mirror - left
        return self._prefix[right] - self._prefix[left - 1]

    def total(self, left, right):
        """Return the total height of the books at positions ``left..right``."""
        if not 1 <= left <= right <= self._size:
            raise ValueError(f"range ({left}, {right}) outside 1..{self._size}")
        first = self._section_of(left)
        last = self._section_of(right)
        if first == last:
            return self._partial(first, left, right)
        first_end = self._bounds[first + 1]
        last_start = self._bounds[last]
        return (
            self._partial(first, left, first_end)
            + self._prefix[last_start]
            - self._prefix[first_end]
            + self._partial(last, last_start + 1, right)
        )


def process(heights, boundaries, queries):
    """Run ``queries`` (``('B', i)`` or ``('J', l, r)``) and return every sum asked for."""
    library = Library(heights, boundaries)
    answers = []
    for kind, *args in queries:
        if kind == FLIP:
            library.flip(*args)
        elif kind == SUM:
            answers.append(library.total(*args))
        else:
            raise ValueError(f"unknown query type {kind!r}")
    return answers


def _valid_query(query, n, m):
    kind, *args = query
    if kind == FLIP:
        return len(args) == 1 and 1 <= args[0] <= m + 1
    if kind == SUM:
        return len(args) == 2 and 1 <= args[0] <= args[1] <= n
    return False


def is_valid(heights, boundaries, queries):
    """Check the input constraints, including that some query asks for a sum."""
    n, m, q = len(heights), len(boundaries), len(queries)
    if not (1 <= n <= MAX_N and 0 <= m < n and 1 <= q <= MAX_Q):
        return False
    if not all(MIN_HEIGHT <= h <= MAX_HEIGHT for h in heights):
        return False
    if any(not 1 <= b <= n - 1 for b in boundaries) or list(boundaries) != sorted(boundaries):
        return False
    if not all(_valid_query(query, n, m) for query in queries):
        return False
    return any(query[0] == SUM for query in queries)


def _values(rng, n, low, high):
    return [rng.randint(low, high) for _ in range(n)]


def _partitions(rng, n, m):
    return sorted(rng.sample(range(1, n), m))


def _random_range(rng, n):
    left, right = rng.randint(1, n), rng.randint(1, n)
    return (SUM, min(left, right), max(left, right))


def _flip_check_queries(rng, n, m):
    queries = [(SUM, i, i) for i in range(1, n + 1)]
    queries.extend(_random_range(rng, n) for _ in range(10))
    queries.extend((FLIP, i) for i in range(1, m + 2))
    queries.extend((SUM, i, i) for i in range(1, n + 1))
    queries.extend(_random_range(rng, n) for _ in range(10))
    return queries


def _random_queries(rng, n, m, q):
    queries = [_random_range(rng, n)]
    for _ in range(q - 1):
        if rng.randint(1, 2) == 1:
            queries.append((FLIP, rng.randint(1, m + 1)))
        else:
            queries.append(_random_range(rng, n))
    rng.shuffle(queries)
    return queries


def _stress_sum_queries(rng, n, q):
    queries = [(SUM, rng.randint(1, 10), n - rng.randint(0, 9)) for _ in range(q)]
    rng.shuffle(queries)
    return queries


def _stress_flip_queries(rng, n, m, q):
    queries = [_random_range(rng, n)]
    queries.extend((FLIP, rng.randint(1, m + 1)) for _ in range(q - 1))
    rng.shuffle(queries)
    return queries


def generate_cases(rng):
    """Yield ``(heights, boundaries, queries)`` test inputs, drawn from ``rng``."""
    for _ in range(2):
        n, m = 20, 5
        yield _values(rng, n, 1, 100), _partitions(rng, n, m), _flip_check_queries(rng, n, m)
    for n, m in ((1, 0), (20, 0)):
        yield _values(rng, n, 1, 100), [], _flip_check_queries(rng, n, m)
    yield _values(rng, 20, 1, 100), _partitions(rng, 20, 19), _flip_check_queries(rng, 20, 19)
    for _ in range(3):
        n = rng.randint(100, 500)
        m = rng.randint(0, n - 1)
        q = rng.randint(100, 500)
        yield _values(rng, n, 1, 100), _partitions(rng, n, m), _random_queries(rng, n, m, q)
    for _ in range(2):
        m = rng.randint(0, MAX_N - 1)
        yield (
            _values(rng, MAX_N, 1, MAX_HEIGHT),
            _partitions(rng, MAX_N, m),
            _random_queries(rng, MAX_N, m, MAX_Q),
        )
    m = rng.randint(0, MAX_N - 1)
    yield (
        _values(rng, MAX_N, MAX_HEIGHT, MAX_HEIGHT),
        _partitions(rng, MAX_N, m),
        _random_queries(rng, MAX_N, m, MAX_Q),
    )
    m = rng.randint(0, MAX_N - 1)
    yield _values(rng, MAX_N, 1, MAX_HEIGHT), _partitions(rng, MAX_N, m), _stress_sum_queries(rng, MAX_N, MAX_Q)
    m = rng.randint(0, MAX_N - 1)
    yield (
        _values(rng, MAX_N, 1, MAX_HEIGHT),
        _partitions(rng, MAX_N, m),
        _stress_flip_queries(rng, MAX_N, m, MAX_Q),
    )


def run(text):
    """Solve one input given as text and return the output text."""
    tokens = iter(text.split())
    n, m, q = int(next(tokens)), int(next(tokens)), int(next(tokens))
    heights = [int(next(tokens)) for _ in range(n)]
    boundaries = [int(next(tokens)) for _ in range(m)]
    queries = []
    for _ in range(q):
        kind = next(tokens)
        arity = 1 if kind == FLIP else 2
        queries.append((kind, *(int(next(tokens)) for _ in range(arity))))
    return "".join(f"{a}\n" for a in process(heights, boundaries, queries))