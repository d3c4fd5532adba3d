from abc import abstractmethod

from ...capabilities import SupportsIntegerAdd, SupportsIntegerSubtract, SupportsIntegerMultiply
from ...mpc.Cell import Cell
from ...mpc.types import MPZ, MPQ


class IArbitraryRational(SupportsIntegerAdd, SupportsIntegerSubtract, SupportsIntegerMultiply):
    """Abstract base class defining the interface for an arbitrary-precision rational."""

    @abstractmethod
    def get_numerator(self) -> MPZ:
        """Get the numerator.

        Returns:
            MPZ: The numerator, sign carrier of the value
        """

    @abstractmethod
    def get_denominator(self) -> MPZ:
        """Get the denominator.

        Returns:
            MPZ: The denominator, always positive
        """

    @abstractmethod
    def get_numerator_cell(self) -> Cell:
        """Get the cell holding the numerator."""

    @abstractmethod
    def get_denominator_cell(self) -> Cell:
        """Get the cell holding the denominator."""

    @abstractmethod
    def get_value(self) -> MPQ:
        """Get the value as an mpq.

        Returns:
            MPQ: Snapshot of the value
        """
