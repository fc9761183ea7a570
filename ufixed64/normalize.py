from ufixed64.utils.math import check_uint128


def most_significant_bit(x):
    """Index of the highest set bit of a 128-bit magnitude, 0 for x == 0."""
    n = 0
    for shift in (64, 32, 16, 8, 4, 2, 1):
        if x >= 1 << shift:
            x >>= shift
            n += shift
    return n


def normalized_exponent(x):
    """floor(log2) of the integer part of a 64.64 number, in [0, 63]."""
    check_uint128(x)
    return most_significant_bit(x >> 64)
