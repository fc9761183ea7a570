from ufixed64.errors import (
    MustBeGreaterThanOne,
    MustBeGreaterThanZero,
    MustBeLessThanOne,
    MustBeLessThanTwo,
)
from ufixed64.normalize import most_significant_bit, normalized_exponent
from ufixed64.utils.math import ONE, TWO, check_uint128

# Working scale: 64 guard bits below the 64.64 fraction
WIDE = 128
WIDE_ONE = 1 << WIDE
WIDE_TWO = 2 << WIDE


def _log2_of_fraction(y, bits=64):
    """log2 of y in [1, 2) given at 2**128 scale, returned with ``bits`` fractional bits.

    Squares y once per result bit; whenever the square reaches 2 the bit is set
    and y is halved back into [1, 2).
    """
    result = 0
    bit = 1 << (bits - 1)
    for _ in range(bits):
        y = (y * y) >> WIDE
        if y >= WIDE_TWO:
            y >>= 1
            result |= bit
        bit >>= 1
    return result


# log2(10) = 3 + log2(1.25) and log2(1.0001), both at 128 fractional bits
LOG2_10 = (3 << WIDE) + _log2_of_fraction((10 << WIDE) >> 3, bits=WIDE)
LOG2_1_0001 = _log2_of_fraction((10001 << WIDE) // 10000, bits=WIDE)

# Reciprocals at 2**128 scale
INV_LOG2_10 = (1 << (2 * WIDE)) // LOG2_10
INV_LOG2_1_0001 = (1 << (2 * WIDE)) // LOG2_1_0001


def log2_wide(x):
    """log2 of a 64.64 value >= 1 at 2**128 scale, rounded down."""
    n = normalized_exponent(x)
    # exact: x << 64 has room for any n <= 63
    reduced = (x << 64) >> n
    return (n << WIDE) + _log2_of_fraction(reduced, bits=WIDE)


def log_base_0_5_wide(x):
    """-log2 of a 64.64 value in (0, 1) at 2**128 scale, rounded up."""
    k = 64 - most_significant_bit(x)
    # x * 2**k lands in [1, 2) without losing bits
    return (k << WIDE) - _log2_of_fraction(x << (64 + k), bits=WIDE)


def _checked_log2_wide(x):
    check_uint128(x)
    if x < ONE:
        raise MustBeGreaterThanOne(x)
    return log2_wide(x)


def log_base_2_of_fraction(x):
    check_uint128(x)
    if x >= TWO:
        raise MustBeLessThanTwo(x)
    if x < ONE:
        raise MustBeGreaterThanOne(x)
    return _log2_of_fraction(x << 64, bits=WIDE) >> 64


def log_base_2(x):
    return _checked_log2_wide(x) >> 64


def log_base_10(x):
    return (_checked_log2_wide(x) * INV_LOG2_10) >> (2 * WIDE - 64)


def log_base_1_0001(x):
    return (_checked_log2_wide(x) * INV_LOG2_1_0001) >> (2 * WIDE - 64)


def log_base_0_5(x):
    """-log2(x) for 0 < x <= 1."""
    check_uint128(x)
    if x == 0:
        raise MustBeGreaterThanZero(x)
    if x > ONE:
        raise MustBeLessThanOne(x)
    if x == ONE:
        return 0
    return log_base_0_5_wide(x) >> 64
