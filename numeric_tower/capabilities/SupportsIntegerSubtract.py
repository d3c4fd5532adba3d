from abc import ABC, abstractmethod

from ..integer.abstract.IArbitraryInteger import IArbitraryInteger


class SupportsIntegerSubtract(ABC):
    """Tower member that can subtract an ArbitraryInteger from itself."""

    @abstractmethod
    def subtract(self, integer: IArbitraryInteger) -> "SupportsIntegerSubtract":
        """Compute self - integer. Order sensitive.

        Args:
            integer (IArbitraryInteger): Integer operand

        Returns:
            SupportsIntegerSubtract: New value of the implementing type
        """
