from abc import ABC, abstractmethod

from ..integer.abstract.IArbitraryInteger import IArbitraryInteger


class SupportsIntegerAdd(ABC):
    """Tower member that can add an ArbitraryInteger to itself."""

    @abstractmethod
    def add(self, integer: IArbitraryInteger) -> "SupportsIntegerAdd":
        """Compute self + integer. Commutative, so callers may swap operand order.

        Args:
            integer (IArbitraryInteger): Integer operand

        Returns:
            SupportsIntegerAdd: New value of the implementing type
        """
