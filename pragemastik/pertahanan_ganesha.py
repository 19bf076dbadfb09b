"""Pertahanan Ganesha: elements whose removal leaves no subset summing to x."""

MIN_N = 1
MAX_N = 5000
MIN_VALUE = 1
MAX_VALUE = 5000


def count_safe_removals(values, x):
    """Count positions whose removal leaves no subset of the rest with sum ``x``."""
    if x < 0:
        raise ValueError("x must not be negative")
    if any(v < 0 for v in values):
        raise ValueError("values must not be negative")
    mask = (1 << (x + 1)) - 1
    prefixes = [1]
    for value in values:
        reachable = prefixes[-1]
        prefixes.append((reachable | reachable << value) & mask)
    # Bit k of ``suffix`` is set when the elements after the position reach x - k.
    suffix = 1 << x
    safe = 0
    for before, value in zip(reversed(prefixes[:-1]), reversed(values)):
        if not before & suffix:
            safe += 1
        suffix |= suffix >> value
    return safe


def is_valid(values, x):
    """Check the input constraints."""
    if not MIN_N <= len(values) <= MAX_N or not MIN_VALUE <= x <= MAX_VALUE:
        return False
    return all(MIN_VALUE <= v <= MAX_VALUE for v in values)


def generate_cases(rng):
    """Yield ``(values, x)`` test inputs, drawn from ``rng``."""
    for _ in range(30):
        x = rng.randint(MAX_VALUE // 2, MAX_VALUE)
        yield [rng.randint(MIN_VALUE, MAX_VALUE) for _ in range(MAX_N)], x


def run(text):
    """Solve one input given as text and return the output text."""
    n, x, *values = map(int, text.split())
    return f"{count_safe_removals(values[:n], x)}\n"