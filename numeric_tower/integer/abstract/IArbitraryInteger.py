from abc import ABC, abstractmethod
from typing import Any, Self, Tuple

from ...mpc.Cell import Cell
from ...mpc.types import MPZ


class IArbitraryInteger(ABC):
    """Abstract base class defining the interface for an arbitrary-precision integer.

    Operands may be ArbitraryIntegers, native small or big integers, and for the
    allocating binary operations also ArbitraryRationals and ArbitraryFloats.
    """

    @classmethod
    @abstractmethod
    def from_cell(cls, cell: Cell) -> Self:
        """Wrap a freshly computed cell. The new integer takes ownership of it.

        Args:
            cell (Cell): Cell to own

        Returns:
            Self: Integer owning the cell
        """

    @abstractmethod
    def get_cell(self) -> Cell:
        """Get the storage cell owned by this integer.

        Returns:
            Cell: The owned cell
        """

    @abstractmethod
    def get_value(self) -> MPZ:
        """Get the current value.

        Returns:
            MPZ: Snapshot of the value
        """

    # Binary operations
    # ------------------------------------------------------------------------------

    @abstractmethod
    def add(self, x: Any) -> Any:
        """Compute self + x.

        Args:
            x: ArbitraryInteger, native integer, ArbitraryRational or ArbitraryFloat

        Returns:
            ArbitraryInteger, or the rational/float result when x is one

        Raises:
            TypeMismatch: If x is of an unsupported kind
        """

    @abstractmethod
    def add_inplace(self, x: Any) -> None:
        """Set self to self + x.

        Args:
            x: ArbitraryInteger or native integer

        Raises:
            TypeMismatch: If x is of any other kind
        """

    @abstractmethod
    def subtract(self, x: Any) -> Any:
        """Compute self - x.

        Args:
            x: ArbitraryInteger, native integer, ArbitraryRational or ArbitraryFloat

        Returns:
            ArbitraryInteger, or the rational/float result when x is one

        Raises:
            TypeMismatch: If x is of an unsupported kind
        """

    @abstractmethod
    def subtract_inplace(self, x: Any) -> None:
        """Set self to self - x.

        Args:
            x: ArbitraryInteger or native integer

        Raises:
            TypeMismatch: If x is of any other kind
        """

    @abstractmethod
    def multiply(self, x: Any) -> Any:
        """Compute self * x.

        Args:
            x: ArbitraryInteger, native integer, ArbitraryRational or ArbitraryFloat

        Returns:
            ArbitraryInteger, or the rational/float result when x is one

        Raises:
            TypeMismatch: If x is of an unsupported kind
        """

    @abstractmethod
    def multiply_inplace(self, x: Any) -> None:
        """Set self to self * x.

        Args:
            x: ArbitraryInteger or native integer

        Raises:
            TypeMismatch: If x is of any other kind
        """

    # Fused operations
    # ------------------------------------------------------------------------------

    @abstractmethod
    def addmul_inplace(self, b: Any, c: Any) -> None:
        """Set self to self + b * c.

        Args:
            b: ArbitraryInteger or native integer
            c: ArbitraryInteger, native big integer or non-negative native small integer

        Raises:
            TypeMismatch: If b or c is of an unsupported kind
            RangeError: If c is a negative native small integer
        """

    @abstractmethod
    def submul_inplace(self, b: Any, c: Any) -> None:
        """Set self to self - b * c.

        Args:
            b: ArbitraryInteger or native integer
            c: ArbitraryInteger, native big integer or non-negative native small integer

        Raises:
            TypeMismatch: If b or c is of an unsupported kind
            RangeError: If c is a negative native small integer
        """

    # Unary operations
    # ------------------------------------------------------------------------------

    @abstractmethod
    def negate(self) -> Self:
        """Compute -self."""

    @abstractmethod
    def negate_inplace(self) -> None:
        """Set self to -self."""

    @abstractmethod
    def absolute_value(self) -> Self:
        """Compute |self|."""

    @abstractmethod
    def absolute_value_inplace(self) -> None:
        """Set self to |self|."""

    # Roots
    # ------------------------------------------------------------------------------

    @abstractmethod
    def sqrt(self) -> Self:
        """Compute the truncated square root.

        Raises:
            DomainError: If self is negative
        """

    @abstractmethod
    def sqrt_inplace(self) -> None:
        """Set self to its truncated square root.

        Raises:
            DomainError: If self is negative
        """

    @abstractmethod
    def sqrt_with_remainder(self) -> Tuple[Self, Self]:
        """Compute the truncated square root and the remainder self - root**2.

        Returns:
            Tuple[Self, Self]: (root, remainder)

        Raises:
            DomainError: If self is negative
        """

    @abstractmethod
    def kth_root(self, n: int) -> Self:
        """Compute the n-th root truncated toward zero.

        Args:
            n (int): Positive native degree

        Raises:
            TypeMismatch: If n is not a native integer
            RangeError: If n is not positive or does not fit a native word
            DomainError: If self is negative and n is even
        """

    @abstractmethod
    def kth_root_with_remainder(self, n: int) -> Tuple[Self, Self]:
        """Compute the truncated n-th root and the remainder self - root**n.

        Args:
            n (int): Positive native degree

        Returns:
            Tuple[Self, Self]: (root, remainder)

        Raises:
            TypeMismatch: If n is not a native integer
            RangeError: If n is not positive or does not fit a native word
            DomainError: If self is negative and n is even
        """
