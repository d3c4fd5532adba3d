from abc import ABC, abstractmethod
from typing import Any

from ...integer.abstract.IArbitraryInteger import IArbitraryInteger
from ..Operation import Operation, FusedOperation


class IPromotionDispatcher(ABC):
    """Abstract base class defining the interface for cross-type promotion."""

    @staticmethod
    @abstractmethod
    def binary_op(operation: Operation, receiver: IArbitraryInteger, arg: Any) -> Any:
        """Compute receiver <operation> arg in the representation the operand kinds call for.

        Integer operands produce a new integer. Rational and float operands
        produce a value of their own type, at the float operand's precision.

        Args:
            operation (Operation): Operation to perform
            receiver (IArbitraryInteger): Left operand, never modified
            arg: Right operand of any tower kind

        Returns:
            The new ArbitraryInteger, ArbitraryRational or ArbitraryFloat

        Raises:
            TypeMismatch: If arg is of an unsupported kind
        """

    @staticmethod
    @abstractmethod
    def binary_op_inplace(operation: Operation, receiver: IArbitraryInteger, arg: Any) -> None:
        """Overwrite receiver with receiver <operation> arg.

        Args:
            operation (Operation): Operation to perform
            receiver (IArbitraryInteger): Left operand and destination
            arg: ArbitraryInteger or native integer

        Raises:
            TypeMismatch: If arg is of any other kind; receiver is left untouched
        """

    @staticmethod
    @abstractmethod
    def fused_inplace(
        operation: FusedOperation, receiver: IArbitraryInteger, b: Any, c: Any
    ) -> None:
        """Overwrite receiver with receiver +/- b * c.

        Args:
            operation (FusedOperation): ADDMUL or SUBMUL
            receiver (IArbitraryInteger): Accumulator and destination
            b: ArbitraryInteger or native integer
            c: ArbitraryInteger, native big integer or non-negative native small integer

        Raises:
            TypeMismatch: If b or c is of an unsupported kind
            RangeError: If c is a negative native small integer
        """
