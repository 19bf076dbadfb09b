"""Perayaan Ketiga: third smallest area cut from a convex polygon by one straight cut."""

import heapq
import math

MIN_N = 4
MAX_N = 100_000
MIN_COORD = -400_000_000
MAX_COORD = 400_000_000


def _doubled_area(chain):
    closed = zip(chain, [*chain[1:], chain[0]])
    return abs(sum(x1 * y2 - x2 * y1 for (x1, y1), (x2, y2) in closed))


def third_smallest_area(points):
    """Return twice the third smallest area of a piece of 3 or 4 consecutive vertices."""
    n = len(points)
    if n < 3:
        raise ValueError("a polygon needs at least three vertices")
    areas = []
    for i in range(n):
        areas.append(_doubled_area([points[(i + j) % n] for j in range(3)]))
        if n > 4:
            areas.append(_doubled_area([points[(i + j) % n] for j in range(4)]))
    return heapq.nsmallest(3, areas)[-1]


def _orientation(a, b, c):
    return a[0] * (b[1] - c[1]) + b[0] * (c[1] - a[1]) + c[0] * (a[1] - b[1])


def _cw(a, b, c):
    return _orientation(a, b, c) < 0


def _ccw(a, b, c):
    return _orientation(a, b, c) > 0


def convex_hull(points):
    """Return the strict convex hull of ``points`` in clockwise order."""
    ordered = sorted(points)
    if len(ordered) <= 1:
        return ordered
    first, last = ordered[0], ordered[-1]
    up, down = [first], [first]
    for i, point in enumerate(ordered[1:], start=1):
        final = i == len(ordered) - 1
        if final or _cw(first, point, last):
            while len(up) >= 2 and not _cw(up[-2], up[-1], point):
                up.pop()
            up.append(point)
        if final or _ccw(first, point, last):
            while len(down) >= 2 and not _ccw(down[-2], down[-1], point):
                down.pop()
            down.append(point)
    return up + down[-2:0:-1]


def is_valid(points):
    """Check the input constraints: a strictly convex clockwise polygon of distinct points."""
    n = len(points)
    if not MIN_N <= n <= MAX_N:
        return False
    if not all(MIN_COORD <= c <= MAX_COORD for point in points for c in point):
        return False
    if len(set(points)) != n:
        return False
    return all(_cw(points[i], points[(i + 1) % n], points[(i + 2) % n]) for i in range(n))


def _steps(rng, coords):
    low = high = coords[0]
    steps = []
    for c in coords[1:-1]:
        if rng.randint(0, 1):
            steps.append(c - high)
            high = c
        else:
            steps.append(low - c)
            low = c
    steps.append(coords[-1] - high)
    steps.append(low - coords[-1])
    return steps


def _random_convex_polygon(rng, n, low, high):
    while True:
        count = 2 * n
        xs = sorted(rng.sample(range(low, high + 1), count))
        ys = sorted(rng.sample(range(low, high + 1), count))
        x_steps = _steps(rng, xs)
        y_steps = _steps(rng, ys)
        rng.shuffle(y_steps)
        vectors = sorted(zip(x_steps, y_steps), key=lambda v: math.atan2(v[1], v[0]), reverse=True)
        walk = []
        x = y = min_x = min_y = 0
        for dx, dy in vectors:
            walk.append((x, y))
            x += dx
            y += dy
            min_x, min_y = min(min_x, x), min(min_y, y)
        shifted = [(px + xs[0] - min_x, py + ys[0] - min_y) for px, py in walk]
        hull = convex_hull(shifted)
        if len(hull) < n:
            continue
        chosen = sorted(rng.sample(range(len(hull)), n))
        return [hull[i] for i in chosen]


def generate_cases(rng):
    """Yield polygons, as lists of ``(x, y)`` vertices, used as test inputs."""
    yield [(-1, -1), (-1, 1), (1, 1), (1, -1)]
    yield [(-1, 0), (0, 1), (1, 0), (0, -1)]
    yield [(-MAX_COORD, -MAX_COORD), (-MAX_COORD, MAX_COORD), (MAX_COORD, MAX_COORD), (MAX_COORD, -MAX_COORD)]
    for _ in range(10):
        yield _random_convex_polygon(rng, rng.randint(4, 10), MIN_COORD, MAX_COORD)
    for _ in range(10):
        yield _random_convex_polygon(rng, rng.randint(11, 100), -1000, 1000)
    for _ in range(10):
        yield _random_convex_polygon(rng, rng.randint(11, 500), MIN_COORD, MAX_COORD)
    for _ in range(4):
        yield _random_convex_polygon(rng, rng.randint(MAX_N // 2, MAX_N), MIN_COORD, MAX_COORD)
    for _ in range(4):
        yield _random_convex_polygon(rng, MAX_N, MIN_COORD, MAX_COORD)


def run(text):
    """Solve one input given as text and return the output text."""
    n, *coords = map(int, text.split())
    points = list(zip(coords[0:2 * n:2], coords[1:2 * n:2]))
    return f"{third_smallest_area(points)}\n"