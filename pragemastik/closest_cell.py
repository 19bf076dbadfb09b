"""Closest Cell 2: total pull of friends on a wisp, each capped by its reach."""

MAX_QUERIES = 100_000
MAX_COORD = 200_000_000

ADD = 1
ASK = 2

_OFFSET = 2**31
_SIZE = 2**32


class _SparseFenwick:
    """Prefix sums over a huge index range, storing only touched nodes."""

    def __init__(self, size):
        self._size = size
        self._tree = {}

    def add(self, index, delta):
        while index <= self._size:
            self._tree[index] = self._tree.get(index, 0) + delta
            index += index & -index

    def prefix(self, index):
        total = 0
        while index > 0:
            total += self._tree.get(index, 0)
            index -= index & -index
        return total


class _Axis:
    """Sum of min(|x - t|, reach) over all friends along one axis."""

    def __init__(self):
        self._slope = _SparseFenwick(_SIZE)
        self._const = _SparseFenwick(_SIZE)
        self.total = 0

    def _update(self, position, slope, const):
        index = max(position + _OFFSET, 1)
        if index > _SIZE:
            return
        self._slope.add(index, slope)
        self._const.add(index, const)

    def add(self, t, reach):
        self.total += reach
        self._update(t - reach + 1, 1, reach - t)
        self._update(t + 1, -2, 2 * t)
        self._update(t + reach + 1, 1, -t - reach)

    def cost(self, x):
        index = min(max(x + _OFFSET, 0), _SIZE)
        return self.total - self._const.prefix(index) - x * self._slope.prefix(index)


class ClosestCell:
    """Friends placed on a grid; a wisp's power is the capped distance to all of them."""

    def __init__(self):
        self._axes = (_Axis(), _Axis())
        self._friends = []

    def add_friend(self, x, y, a, b):
        """Place a friend at ``(x, y)`` whose pull is capped at ``a`` and ``b`` per axis."""
        if a < 0 or b < 0:
            raise ValueError("reach must not be negative")
        self._axes[0].add(x, a)
        self._axes[1].add(y, b)
        self._friends.append((x, y))

    def power(self, x, y):
        """Return the sum over friends of min(|x - fx|, a) + min(|y - fy|, b)."""
        return self._axes[0].cost(x) + self._axes[1].cost(y)

    def best_power(self):
        """Return the smallest power per axis over friends' coordinates, summed; 0 with no friends."""
        if not self._friends:
            return 0
        xs_axis, ys_axis = self._axes
        return min(xs_axis.cost(x) for x, _ in self._friends) + min(ys_axis.cost(y) for _, y in self._friends)


def process(queries):
    """Run ``queries`` and return the answer of every ask, followed by the best power."""
    cell = ClosestCell()
    answers = []
    for query in queries:
        kind, *args = query
        if kind == ADD:
            cell.add_friend(*args)
        elif kind == ASK:
            answers.append(cell.power(*args))
        else:
            raise ValueError(f"unknown query type {kind}")
    answers.append(cell.best_power())
    return answers


def is_valid(queries):
    """Check the input constraints."""
    if not 0 < len(queries) < MAX_QUERIES:
        return False
    for query in queries:
        if not query or query[0] not in (ADD, ASK) or len(query) != 7 - 2 * query[0]:
            return False
        if not all(-MAX_COORD < c < MAX_COORD for c in query[1:3]):
            return False
        if not all(0 <= r < MAX_COORD for r in query[3:]):
            return False
    return True


def _queries(rng, n, limit, add_weight):
    queries = []
    for _ in range(n):
        if rng.randint(0, 3) < add_weight:
            queries.append((
                ADD,
                rng.randint(-limit + 1, limit - 1),
                rng.randint(-limit + 1, limit - 1),
                rng.randint(0, limit - 1),
                rng.randint(0, limit - 1),
            ))
        else:
            queries.append((ASK, rng.randint(-limit + 1, limit - 1), rng.randint(-limit + 1, limit - 1)))
    return queries


def generate_cases(rng):
    """Yield lists of queries used as test inputs, drawn from ``rng``."""
    limit = 2
    while limit <= MAX_COORD:
        size = 1
        while size < MAX_QUERIES:
            for add_weight in range(1, 4):
                yield _queries(rng, rng.randint(size, 10 * size - 1), limit, add_weight)
            size *= 10
        limit *= 100


def run(text):
    """Solve one input given as text and return the output text."""
    tokens = iter(map(int, text.split()))
    queries = []
    for _ in range(next(tokens)):
        kind = next(tokens)
        arity = 4 if kind == ADD else 2
        queries.append((kind, *(next(tokens) for _ in range(arity))))
    return "".join(f"{a}\n" for a in process(queries))