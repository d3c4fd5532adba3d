from typing import Any, Optional, Self

import gmpy2
from .. import constants
from ..integer.abstract.IArbitraryInteger import IArbitraryInteger
from ..mpc.types import MPFR, MPZ_TYPE, MPQ_TYPE, MPFR_TYPE
from ..rational.abstract.IArbitraryRational import IArbitraryRational
from .abstract.IArbitraryFloat import IArbitraryFloat


class ArbitraryFloat(IArbitraryFloat):
    """Arbitrary-precision binary float with an explicit precision."""

    def __init__(self, value: Any = 0, precision: Optional[int] = None) -> None:
        """Initialize a float rounded to the given precision.

        Args:
            value: Number or numeric string; an ArbitraryInteger is converted exactly
                   before rounding
            precision (Optional[int]): Bits of significance, DEFAULT_FLOAT_PRECISION
                   when omitted
        """
        if precision is None:
            precision = constants.DEFAULT_FLOAT_PRECISION
        if isinstance(value, IArbitraryInteger):
            value = value.get_value()
        elif isinstance(value, IArbitraryFloat):
            value = value.get_value()
        self._precision = precision
        self._value = gmpy2.mpfr(value, precision)

    @classmethod
    def from_integer(cls, integer: IArbitraryInteger, precision: int) -> Self:
        return cls(integer.get_value(), precision)

    def get_precision(self) -> int:
        return self._precision

    def get_value(self) -> MPFR:
        return self._value

    # Integer capabilities
    # ------------------------------------------------------------------------------

    def add(self, integer: IArbitraryInteger) -> "ArbitraryFloat":
        with gmpy2.context(precision=self._precision):
            result = self._value + integer.get_value()
        return ArbitraryFloat(result, self._precision)

    def subtract(self, integer: IArbitraryInteger) -> "ArbitraryFloat":
        with gmpy2.context(precision=self._precision):
            result = self._value - integer.get_value()
        return ArbitraryFloat(result, self._precision)

    def multiply(self, integer: IArbitraryInteger) -> "ArbitraryFloat":
        with gmpy2.context(precision=self._precision):
            result = self._value * integer.get_value()
        return ArbitraryFloat(result, self._precision)

    def subtract_float(self, other: IArbitraryFloat) -> "ArbitraryFloat":
        with gmpy2.context(precision=self._precision):
            result = self._value - other.get_value()
        return ArbitraryFloat(result, self._precision)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (IArbitraryFloat, IArbitraryRational, IArbitraryInteger)):
            return self._value == other.get_value()
        if isinstance(other, (int, float, MPZ_TYPE, MPQ_TYPE, MPFR_TYPE)):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __float__(self) -> float:
        return float(self._value)

    def __repr__(self):
        return f"ArbitraryFloat('{self._value}', {self._precision})"

    def __str__(self):
        return str(self._value)
