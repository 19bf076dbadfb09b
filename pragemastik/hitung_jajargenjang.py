"""Hitung Jajargenjang 1: count parallelograms with corners among given points."""

from collections import Counter
from itertools import combinations
from math import gcd

MAX_N = 1000
MAX_COORD = 1_000_000_000


def _pairs(count):
    return count * (count - 1) // 2


def count_parallelograms(xs, ys):
    """Return the number of non-degenerate parallelograms whose corners are given points."""
    if len(xs) != len(ys):
        raise ValueError("xs and ys differ in length")
    points = list(zip(xs, ys))
    if len(set(points)) != len(points):
        raise ValueError("points must be distinct")
    by_middle = Counter()
    by_middle_and_direction = Counter()
    for (x1, y1), (x2, y2) in combinations(points, 2):
        middle = (x1 + x2, y1 + y2)
        dx, dy = x1 - x2, y1 - y2
        g = gcd(dx, dy)
        dx, dy = dx // g, dy // g
        if dx < 0 or (dx == 0 and dy < 0):
            dx, dy = -dx, -dy
        by_middle[middle] += 1
        by_middle_and_direction[middle, dx, dy] += 1
    diagonals = sum(_pairs(c) for c in by_middle.values())
    collinear = sum(_pairs(c) for c in by_middle_and_direction.values())
    return diagonals - collinear


def is_valid(xs, ys):
    """Check the input constraints."""
    if not 0 < len(xs) < MAX_N or len(xs) != len(ys):
        return False
    return all(-MAX_COORD < c < MAX_COORD for c in [*xs, *ys])


def _offset(rng, mult):
    return rng.randint(-mult + 1, mult - 1) if mult > 0 else 0


def _coordinates(rng, m, mult_x, mult_y, max_value):
    offset_x = _offset(rng, mult_x)
    offset_y = _offset(rng, mult_y)
    seen = set()
    xs, ys = [], []
    for _ in range(m):
        roll = rng.randint(-max_value + 1, max_value - 1)
        x, y = offset_x + roll * mult_x, offset_y + roll * mult_y
        roll = rng.randint(-max_value + 1, max_value - 1)
        x, y = x - roll * mult_y, y + roll * mult_x
        if (x, y) not in seen:
            seen.add((x, y))
            xs.append(x)
            ys.append(y)
    return xs, ys


def generate_cases(rng):
    """Yield ``(xs, ys)`` test inputs, drawn from ``rng``."""
    max_value = 2
    while max_value <= 1024:
        m = 62
        while m < MAX_N:
            mult_x = rng.randint(1, 200_000)
            mult_y = rng.randint(0, 200_000)
            yield _coordinates(rng, m, mult_x, mult_y, max_value)
            m *= 2
        max_value *= 2


def run(text):
    """Solve one input given as text and return the output text."""
    n, *rest = map(int, text.split())
    return f"{count_parallelograms(rest[:n], rest[n:2 * n])}\n"