from ufixed64.errors import MustBeGreaterThanZero, MustBeLessThan64, MustBeLessThanOne
from ufixed64.logarithm import WIDE, WIDE_ONE, log2_wide, log_base_0_5_wide
from ufixed64.roots import integer_sqrt
from ufixed64.utils.math import FRACTION_MASK, ONE, check_uint128

# Upper bound on what _pow2_of_fraction loses to truncation, in units of 2**-128.
# Each of the 64 steps drops under one unit from the multiply and under two from
# the floored root, and later steps at most double earlier losses.
POW2_SLACK = 6 * 64


def _root_table():
    """2**(2**-i) for i = 1..64 at 2**128 scale, each derived from the previous by a square root."""
    roots = []
    root = 2 << WIDE
    for _ in range(64):
        root = integer_sqrt(root << WIDE)
        roots.append(root)
    return tuple(roots)


ROOTS_OF_TWO = _root_table()


def _pow2_of_fraction(f):
    """2**f at 2**128 scale for a 64-bit fraction f, rounded down."""
    result = WIDE_ONE
    bit = 1 << 63
    for root in ROOTS_OF_TWO:
        if f & bit:
            result = (result * root) >> WIDE
        bit >>= 1
    return result


def _pow2(x):
    k = x >> 64
    if k >= 64:
        raise MustBeLessThan64(x)
    f = x & FRACTION_MASK
    if f == 0:
        return ONE << k
    return (_pow2_of_fraction(f) << k) >> 64


def _pow2_negative(x):
    """2**-x for a non-negative 64.64 exponent x, rounded down; underflows quietly to 0."""
    k = x >> 64
    if k >= 128:
        return 0
    f = x & FRACTION_MASK
    if f == 0:
        return ONE >> k
    # divide by an upper bound of 2**f so the quotient stays below the true value
    inverse = (1 << (2 * WIDE)) // (_pow2_of_fraction(f) + POW2_SLACK)
    return inverse >> (k + 64)


def pow_base_2_of_fraction(x):
    check_uint128(x)
    if x == 0:
        raise MustBeGreaterThanZero(x)
    if x >= ONE:
        raise MustBeLessThanOne(x)
    return _pow2_of_fraction(x) >> 64


def pow_base_2(x):
    check_uint128(x)
    return _pow2(x)


def pow(base, exponent):
    """base ** exponent as 2 ** (exponent * log2(base))."""
    check_uint128(base)
    check_uint128(exponent)
    if exponent == 0:
        return ONE
    if base == 0:
        return 0
    if base == ONE:
        return ONE
    if base > ONE:
        return _pow2((log2_wide(base) * exponent) >> WIDE)
    # log2(base) is negative here: carry its magnitude, rounded up, and take the reciprocal power
    magnitude = -((-log_base_0_5_wide(base) * exponent) >> WIDE)
    return _pow2_negative(magnitude)
