from typing import Any, Self

import gmpy2
from ..classifier.Kind import INTEGER_KINDS
from ..errors import TypeMismatch
from ..integer.abstract.IArbitraryInteger import IArbitraryInteger
from ..mpc import MPC, Cell
from ..mpc.types import MPZ, MPQ, MPZ_TYPE, MPQ_TYPE
from .abstract.IArbitraryRational import IArbitraryRational


class ArbitraryRational(IArbitraryRational):
    """Arbitrary-precision rational held as a canonical numerator/denominator pair of cells."""

    def __init__(self, numerator: Any = 0, denominator: Any = 1) -> None:
        """Initialize a rational, reduced to lowest terms with a positive denominator.

        Args:
            numerator: Integer numerator, or an mpq when denominator is omitted
            denominator: Non-zero integer denominator

        Raises:
            ZeroDivisionError: If denominator is zero
        """
        if isinstance(numerator, MPQ_TYPE) and denominator == 1:
            value = numerator
        else:
            value = gmpy2.mpq(
                ArbitraryRational._to_mpz(numerator), ArbitraryRational._to_mpz(denominator)
            )
        self._numerator = MPC.init_set(value.numerator)
        self._denominator = MPC.init_set(value.denominator)

    @classmethod
    def from_cells(cls, numerator: Cell, denominator: Cell) -> Self:
        """Take ownership of cells that already hold a canonical pair."""
        instance = cls.__new__(cls)
        instance._numerator = numerator
        instance._denominator = denominator
        return instance

    def get_numerator(self) -> MPZ:
        return self._numerator.get()

    def get_denominator(self) -> MPZ:
        return self._denominator.get()

    def get_numerator_cell(self) -> Cell:
        return self._numerator

    def get_denominator_cell(self) -> Cell:
        return self._denominator

    def get_value(self) -> MPQ:
        return gmpy2.mpq(self._numerator.get(), self._denominator.get())

    # Integer capabilities
    # ------------------------------------------------------------------------------

    def add(self, integer: IArbitraryInteger) -> "ArbitraryRational":
        return ArbitraryRational(self.get_value() + integer.get_value())

    def subtract(self, integer: IArbitraryInteger) -> "ArbitraryRational":
        return ArbitraryRational(self.get_value() - integer.get_value())

    def multiply(self, integer: IArbitraryInteger) -> "ArbitraryRational":
        return ArbitraryRational(self.get_value() * integer.get_value())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (IArbitraryRational, IArbitraryInteger)):
            return self.get_value() == other.get_value()
        if isinstance(other, (int, MPZ_TYPE, MPQ_TYPE)):
            return self.get_value() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.get_value())

    def __repr__(self):
        return f"ArbitraryRational({self.get_numerator()}, {self.get_denominator()})"

    def __str__(self):
        return f"{self.get_numerator()}/{self.get_denominator()}"

    # Private Methods
    # ------------------------------------------------------------------------------

    @staticmethod
    def _to_mpz(value: Any) -> MPZ:
        if isinstance(value, IArbitraryInteger):
            return value.get_value()
        if isinstance(value, (int, MPZ_TYPE)) and not isinstance(value, bool):
            return MPC.mpz(value)
        raise TypeMismatch("ArbitraryRational", value, INTEGER_KINDS)
