import os
from decimal import ROUND_FLOOR, Context, Decimal

import pytest

from ufixed64 import FixedPointKernel
from ufixed64.utils.math import to_64x64_round_down

CONFIG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'config')


@pytest.fixture
def kernel():
    return FixedPointKernel()


@pytest.fixture
def vectors_path():
    return os.path.join(CONFIG_DIR, 'vectors.yaml')


@pytest.fixture
def config_path():
    return os.path.join(CONFIG_DIR, 'config.yaml')


def q(value):
    """Shorthand for encoding a decimal string the way the vectors do."""
    return to_64x64_round_down(value)


def close(actual, expected, tolerance=0.001):
    if expected == 0:
        return actual == 0
    return abs(actual - expected) / expected < tolerance


# 120 digits is far beyond the 2**-64 resolution being checked
EXACT = Context(prec=120)


def exact_floor(value):
    """floor(value * 2**64) for a Decimal computed in EXACT."""
    return int(EXACT.multiply(value, Decimal(2 ** 64)).to_integral_value(rounding=ROUND_FLOOR))


def real(x_64x64):
    return EXACT.divide(Decimal(x_64x64), Decimal(2 ** 64))


def exact_log(x_64x64, base):
    return EXACT.divide(real(x_64x64).ln(EXACT), Decimal(base).ln(EXACT))


def exact_pow(base_64x64, exponent_64x64):
    return EXACT.power(real(base_64x64), real(exponent_64x64))
