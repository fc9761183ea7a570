DEFAULT_TOLERANCE = 0.001


def relative_error(actual, expected):
    if actual == expected:
        return 0.0
    if expected == 0:
        return float('inf')
    return abs(actual - expected) / abs(expected)


def within_tolerance(actual, expected, tolerance=DEFAULT_TOLERANCE):
    """Accept actual when it is within a relative tolerance of expected; zero must match exactly."""
    if expected == 0:
        return actual == 0
    return relative_error(actual, expected) < tolerance
