import logging

from ufixed64.errors import FixedPointError
from ufixed64.logarithm import (
    log_base_0_5,
    log_base_1_0001,
    log_base_2,
    log_base_2_of_fraction,
    log_base_10,
)
from ufixed64.normalize import normalized_exponent
from ufixed64.power import pow, pow_base_2, pow_base_2_of_fraction
from ufixed64.roots import sqrt

OPERATIONS = {
    'normalized_exponent': normalized_exponent,
    'log_base_2_of_fraction': log_base_2_of_fraction,
    'log_base_2': log_base_2,
    'log_base_10': log_base_10,
    'log_base_1_0001': log_base_1_0001,
    'log_base_0_5': log_base_0_5,
    'pow_base_2_of_fraction': pow_base_2_of_fraction,
    'pow_base_2': pow_base_2,
    'pow': pow,
    'sqrt': sqrt,
}

BINARY_OPERATIONS = frozenset(['pow'])


class FixedPointKernel:
    """Named entry points over the 64.64 functions, the surface a harness calls.

    Logging goes through the ``ufixed64.kernel`` logger; its level is set once by
    whoever configures logging (see ``harness.logger.get_logger``).
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def operations(self):
        return list(OPERATIONS)

    def arity(self, name):
        return 2 if name in BINARY_OPERATIONS else 1

    def call(self, name, *args):
        if name not in OPERATIONS:
            raise ValueError(f"Unknown operation: {name}")
        if len(args) != self.arity(name):
            raise TypeError(f"{name} takes {self.arity(name)} argument(s), got {len(args)}")
        try:
            result = OPERATIONS[name](*args)
        except FixedPointError as e:
            self.logger.warning(f"{name}{args} failed: {e}")
            raise
        self.logger.debug(f"{name}{args} -> {result}")
        return result

    def normalized_exponent(self, x):
        return self.call('normalized_exponent', x)

    def log_base_2_of_fraction(self, x):
        return self.call('log_base_2_of_fraction', x)

    def log_base_2(self, x):
        return self.call('log_base_2', x)

    def log_base_10(self, x):
        return self.call('log_base_10', x)

    def log_base_1_0001(self, x):
        return self.call('log_base_1_0001', x)

    def log_base_0_5(self, x):
        return self.call('log_base_0_5', x)

    def pow_base_2_of_fraction(self, x):
        return self.call('pow_base_2_of_fraction', x)

    def pow_base_2(self, x):
        return self.call('pow_base_2', x)

    def pow(self, base, exponent):
        return self.call('pow', base, exponent)

    def sqrt(self, x):
        return self.call('sqrt', x)
