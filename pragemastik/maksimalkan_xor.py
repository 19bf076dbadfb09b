"""Maksimalkan XOR: change one element to maximise the sum of all subarray XORs."""

BITS = 25
MAX_N = 100_000
MAX_VALUE = 1 << BITS


def _ending_counts(bits):
    """For each position, counts of subarrays ending just before it with XOR bit 0 and 1."""
    counts = []
    zero = one = 0
    for b in bits:
        counts.append((zero, one))
        if b:
            zero, one = one, zero
        if b:
            one += 1
        else:
            zero += 1
    counts.append((zero, one))
    return counts


def maximize_xor(values):
    """Return ``(index, value)``: the 1-based position to change and its new value."""
    if not values:
        raise ValueError("at least one value is needed")
    if any(not 0 <= v < MAX_VALUE for v in values):
        raise ValueError(f"values must lie in 0..{MAX_VALUE - 1}")
    n = len(values)
    target = [0] * n
    gain = [0] * n
    for bit in range(BITS):
        weight = 1 << bit
        bits = [(v >> bit) & 1 for v in values]
        prefix = _ending_counts(bits)
        suffix = _ending_counts(bits[::-1])[::-1]
        for j, b in enumerate(bits):
            p0, p1 = prefix[j]
            s0, s1 = suffix[j + 1]
            rest_zero = (p0 + 1) * (s0 + 1) + p1 * s1
            rest_one = (p0 + 1) * s1 + p1 * (s0 + 1)
            if b:
                if rest_one >= rest_zero:
                    gain[j] += weight * (rest_one - rest_zero)
                else:
                    target[j] += weight
            elif rest_zero > rest_one:
                gain[j] += weight * (rest_zero - rest_one)
                target[j] += weight
    best = max(range(n), key=gain.__getitem__)
    return best + 1, target[best]


def is_valid(values):
    """Check the input constraints."""
    return 0 < len(values) < MAX_N and all(0 <= v < MAX_VALUE for v in values)


def _values(rng, n):
    return [rng.randint(0, MAX_VALUE - 1) for _ in range(n)]


def generate_cases(rng):
    """Yield lists of values used as test inputs, drawn from ``rng``."""
    yield _values(rng, 1)
    size = 1
    while size < MAX_N:
        for _ in range(10):
            yield _values(rng, rng.randint(size, 10 * size - 1))
        size *= 10


def run(text):
    """Solve one input given as text and return the output text."""
    n, *values = map(int, text.split())
    index, value = maximize_xor(values[:n])
    return f"{index} {value}\n"