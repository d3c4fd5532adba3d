from abc import abstractmethod
from typing import Self

from ...capabilities import SupportsIntegerAdd, SupportsIntegerSubtract, SupportsIntegerMultiply
from ...mpc.types import MPFR


class IArbitraryFloat(SupportsIntegerAdd, SupportsIntegerSubtract, SupportsIntegerMultiply):
    """Abstract base class defining the interface for an arbitrary-precision float."""

    @abstractmethod
    def get_precision(self) -> int:
        """Get the precision.

        Returns:
            int: Bits of significance
        """

    @abstractmethod
    def get_value(self) -> MPFR:
        """Get the value as an mpfr.

        Returns:
            MPFR: The value, rounded to get_precision() bits
        """

    @abstractmethod
    def subtract_float(self, other: "IArbitraryFloat") -> Self:
        """Compute self - other at self's precision.

        Args:
            other (IArbitraryFloat): Float operand

        Returns:
            Self: Difference at self's precision
        """
