class FixedPointError(ArithmeticError):
    """A domain failure carrying the encoded magnitude that caused it."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"{self.__class__.__name__}({value})")


class MustBeGreaterThanZero(FixedPointError):
    pass


class MustBeGreaterThanOne(FixedPointError):
    pass


class MustBeLessThanOne(FixedPointError):
    pass


class MustBeLessThanTwo(FixedPointError):
    pass


class MustBeLessThan64(FixedPointError):
    pass


class MustBeUint128(FixedPointError):
    pass


ERRORS = {
    cls.__name__: cls
    for cls in (
        MustBeGreaterThanZero,
        MustBeGreaterThanOne,
        MustBeLessThanOne,
        MustBeLessThanTwo,
        MustBeLessThan64,
        MustBeUint128,
    )
}
