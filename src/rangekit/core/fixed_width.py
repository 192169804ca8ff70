"""Fixed-width integer bound types whose stepping traps on overflow."""

import operator
from typing import ClassVar, Self

from rangekit.core.errors import RangeOverflowError, fail


class FixedWidthInt(int):
    """An ``int`` confined to a two's-complement (or unsigned) bit width.

    Plain arithmetic falls back to ``int``; only ``advanced`` and the
    constructor enforce the domain.
    """

    BITS: ClassVar[int] = 0
    SIGNED: ClassVar[bool] = True
    MIN: ClassVar[int] = 0
    MAX: ClassVar[int] = 0

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if cls.SIGNED:
            cls.MIN = -(1 << (cls.BITS - 1))
            cls.MAX = (1 << (cls.BITS - 1)) - 1
        else:
            cls.MIN = 0
            cls.MAX = (1 << cls.BITS) - 1

    def __new__(cls, value: int = 0) -> Self:
        if isinstance(value, bool):
            raise TypeError(f"{cls.__name__} does not accept bool values")
        number = operator.index(value)
        if number < cls.MIN or number > cls.MAX:
            fail(
                RangeOverflowError,
                f"{number} is outside {cls.__name__} [{cls.MIN}, {cls.MAX}]",
            )
        return super().__new__(cls, number)

    def advanced(self, by: int) -> Self:
        result = int(self) + by
        if result < self.MIN or result > self.MAX:
            fail(
                RangeOverflowError,
                f"arithmetic overflow: {int(self)} advanced by {by} leaves "
                f"{type(self).__name__} [{self.MIN}, {self.MAX}]",
            )
        return type(self)(result)

    def distance_to(self, other: int) -> int:
        return int(other) - int(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    __str__ = int.__repr__


class Int8(FixedWidthInt):
    BITS = 8


class Int16(FixedWidthInt):
    BITS = 16


class Int32(FixedWidthInt):
    BITS = 32


class Int64(FixedWidthInt):
    BITS = 64


class UInt8(FixedWidthInt):
    BITS = 8
    SIGNED = False


class UInt16(FixedWidthInt):
    BITS = 16
    SIGNED = False


class UInt32(FixedWidthInt):
    BITS = 32
    SIGNED = False


class UInt64(FixedWidthInt):
    BITS = 64
    SIGNED = False
