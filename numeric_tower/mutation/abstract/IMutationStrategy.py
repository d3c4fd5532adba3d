from abc import ABC, abstractmethod
from typing import Callable, Optional, Tuple

from ...integer.abstract.IArbitraryInteger import IArbitraryInteger
from ...mpc.Cell import Cell

Primitive = Callable[[Cell], None]
PairPrimitive = Callable[[Cell, Cell], None]


class IMutationStrategy(ABC):
    """Abstract base class defining the allocating and in-place call forms."""

    @staticmethod
    @abstractmethod
    def allocate(receiver: IArbitraryInteger, primitive: Primitive) -> IArbitraryInteger:
        """Run a primitive into a fresh cell, leaving every operand untouched.

        Args:
            receiver (IArbitraryInteger): Integer whose type the result takes
            primitive (Primitive): Writes the result into the cell it is given

        Returns:
            IArbitraryInteger: New integer owning the fresh cell
        """

    @staticmethod
    @abstractmethod
    def allocate_pair(
        receiver: IArbitraryInteger, primitive: PairPrimitive
    ) -> Tuple[IArbitraryInteger, IArbitraryInteger]:
        """Run a two-output primitive into two fresh cells.

        Args:
            receiver (IArbitraryInteger): Integer whose type the results take
            primitive (PairPrimitive): Writes both results into the cells it is given

        Returns:
            Tuple[IArbitraryInteger, IArbitraryInteger]: The two new integers
        """

    @staticmethod
    @abstractmethod
    def mutate(receiver: IArbitraryInteger, primitive: Primitive) -> None:
        """Run a primitive with the receiver's own cell as destination.

        Args:
            receiver (IArbitraryInteger): Integer to mutate
            primitive (Primitive): Writes the result into the cell it is given
        """

    @staticmethod
    @abstractmethod
    def unary(
        receiver: IArbitraryInteger, primitive: PairPrimitive, in_place: bool
    ) -> Optional[IArbitraryInteger]:
        """Apply a (destination, source) primitive to the receiver in either call form.

        Args:
            receiver (IArbitraryInteger): Source operand, destination when in_place
            primitive (PairPrimitive): Called as primitive(destination, source)
            in_place (bool): Overwrite the receiver instead of allocating

        Returns:
            Optional[IArbitraryInteger]: New integer, or None when in_place
        """
