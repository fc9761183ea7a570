from ufixed64.utils.math import check_uint128

# x << 64 never needs more than 192 bits
SQRT_WIDTH = 192


def integer_sqrt(n, width=None):
    """floor(sqrt(n)) by the digit-by-digit method, one result bit per step.

    ``width`` is the (even) number of bits the search starts from; with a fixed
    width every call runs the same number of iterations.
    """
    if n < 0:
        raise ValueError("Square root of a negative number")
    if width is None:
        width = n.bit_length() + (n.bit_length() & 1)
    if n >= 1 << width:
        raise ValueError(f"{n} does not fit in {width} bits")

    remainder = n
    root = 0
    bit = 1 << (width - 2) if width >= 2 else 0
    while bit:
        if remainder >= root + bit:
            remainder -= root + bit
            root = (root >> 1) + bit
        else:
            root >>= 1
        bit >>= 2
    return root


def sqrt(x):
    """Square root of a 64.64 number, rounded down."""
    check_uint128(x)
    return integer_sqrt(x << 64, SQRT_WIDTH)
