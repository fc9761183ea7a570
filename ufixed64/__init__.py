from ufixed64.errors import (
    FixedPointError,
    MustBeGreaterThanOne,
    MustBeGreaterThanZero,
    MustBeLessThan64,
    MustBeLessThanOne,
    MustBeLessThanTwo,
    MustBeUint128,
)
from ufixed64.kernel import OPERATIONS, FixedPointKernel
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
from ufixed64.utils.math import (
    MAX_64x64,
    ONE,
    from_int,
    to_64x64_round_down,
    to_actual_by_64x64,
)
