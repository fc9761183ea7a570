from decimal import Context, Decimal, ROUND_DOWN

from ufixed64.errors import MustBeUint128

# Precision high enough to hold a full 128-bit magnitude plus 20 decimal places.
# A private context keeps conversions independent of the calling thread's decimal settings.
CONTEXT = Context(prec=76)

ONE = 1 << 64
TWO = 2 << 64
MAX_64x64 = (1 << 128) - 1
FRACTION_MASK = ONE - 1

SCALE = Decimal(ONE)
DECIMAL_PLACES = Decimal("1e-20")


def check_uint128(x):
    """Reject anything that is not an unsigned 128-bit magnitude."""
    if isinstance(x, bool) or not isinstance(x, int):
        raise TypeError(f"Expected an int magnitude, got {type(x).__name__}")
    if x < 0 or x > MAX_64x64:
        raise MustBeUint128(x)
    return x


def from_int(x):
    """Convert an integer to a 64.64 fixed-point number."""
    return check_uint128(x << 64)


def to_64x64_round_down(value):
    """Converts a decimal value to a 64.64 fixed-point integer, truncating toward zero."""
    if isinstance(value, float):
        value = repr(value)
    return int(CONTEXT.multiply(Decimal(value), SCALE))


def to_actual_by_64x64(x):
    """Converts a 64.64 fixed-point integer to a Decimal with 20 decimal places."""
    actual = CONTEXT.divide(Decimal(int(x)), SCALE)
    return actual.quantize(DECIMAL_PLACES, rounding=ROUND_DOWN, context=CONTEXT)


def parse_64x64(value):
    """Reads a raw encoded magnitude given as int, decimal string or 0x-prefixed hex string."""
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if text.lower().startswith('0x'):
        return int(text, 16)
    return int(text)
