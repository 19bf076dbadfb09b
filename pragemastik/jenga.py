"""Bermain Jenga: which player wins a game of blocks."""

MAX_T = 100_000
MAX_VALUE = 10_000_000

ARCELLO = "Arcello"
BISONO = "Bisono"

_SMALL = (
    (False, False, False, False),
    (False, True, True, False),
    (False, False, True, True),
)
_LARGE = (
    (True, True, False, False, True, True, True, False, False),
    (True, True, True, False, False, True, True, True, True),
    (True, True, True, True, True, True, False, False, True),
)


def winner(m, k, counts):
    """Return the winner's name for a game with ``k`` and block counts ``a1..a5``."""
    if len(counts) != 5:
        raise ValueError("expected five block counts")
    _a1, a2, _a3, a4, a5 = counts
    ones = a2 + a4
    twos = k + 3 * a5
    table = _LARGE if twos > 3 else _SMALL
    return ARCELLO if table[ones % 3][twos % 9] else BISONO


def is_valid(games):
    """Check the input constraints on ``(m, k, counts)`` games."""
    if not 0 < len(games) < MAX_T:
        return False
    for m, k, counts in games:
        if not 0 < m < MAX_VALUE or not 1 <= k <= 3 or len(counts) != 5:
            return False
        if not all(0 <= a < MAX_VALUE for a in counts):
            return False
    return True


def _small_games(rng):
    games = []
    for a2 in range(10):
        for a4 in range(10):
            for a5 in range(10):
                for k in range(1, 4):
                    m = rng.randint(1, MAX_VALUE - 1)
                    a1 = rng.randint(0, MAX_VALUE - 1)
                    a3 = rng.randint(0, MAX_VALUE - 1)
                    games.append((m, k, (a1, a2, a3, a4, a5)))
    return games


def _random_games(rng, t, limit):
    return [
        (rng.randint(1, limit - 1), rng.randint(1, 3), tuple(rng.randint(0, limit - 1) for _ in range(5)))
        for _ in range(t)
    ]


def generate_cases(rng):
    """Yield lists of ``(m, k, counts)`` games used as test inputs, drawn from ``rng``."""
    yield _small_games(rng)
    size = 1
    while size < MAX_T:
        limit = 1000
        while limit <= MAX_VALUE:
            yield _random_games(rng, rng.randint(size, 10 * size - 1), limit)
            limit *= 10
        size *= 10


def run(text):
    """Solve one input given as text and return the output text."""
    tokens = iter(map(int, text.split()))
    lines = []
    for _ in range(next(tokens)):
        m, k = next(tokens), next(tokens)
        counts = tuple(next(tokens) for _ in range(5))
        lines.append(f"{winner(m, k, counts)}\n")
    return "".join(lines)