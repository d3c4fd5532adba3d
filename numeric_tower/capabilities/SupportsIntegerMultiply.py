from abc import ABC, abstractmethod

from ..integer.abstract.IArbitraryInteger import IArbitraryInteger


class SupportsIntegerMultiply(ABC):
    """Tower member that can multiply itself by an ArbitraryInteger."""

    @abstractmethod
    def multiply(self, integer: IArbitraryInteger) -> "SupportsIntegerMultiply":
        """Compute self * integer. Commutative, so callers may swap operand order.

        Args:
            integer (IArbitraryInteger): Integer operand

        Returns:
            SupportsIntegerMultiply: New value of the implementing type
        """
