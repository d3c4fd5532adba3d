from abc import ABC, abstractmethod
from typing import ContextManager

from ..Cell import Cell
from ..types import MPZ, IntegerLike


class IMPC(ABC):
    """Abstract base class defining the interface for multi-precision computing operations.

    Every primitive writes its result into a destination cell (``rop``). All
    inputs are read before the destination is assigned, so any destination may
    alias any input.
    """

    @staticmethod
    @abstractmethod
    def mpz(value: IntegerLike) -> MPZ:
        """Convert a Python integer to an mpz.

        Args:
            value (int): Integer value to convert

        Returns:
            mpz: Multi-precision integer
        """

    # Cell lifecycle
    # ------------------------------------------------------------------------------

    @staticmethod
    @abstractmethod
    def init() -> Cell:
        """Create a fresh cell holding zero.

        Returns:
            Cell: New cell
        """

    @staticmethod
    @abstractmethod
    def init_set(value: IntegerLike) -> Cell:
        """Create a fresh cell holding the given integer.

        Args:
            value (IntegerLike): Native integer or mpz to store

        Returns:
            Cell: New cell
        """

    @staticmethod
    @abstractmethod
    def set(rop: Cell, value: IntegerLike) -> None:
        """Overwrite a cell with the given integer.

        Args:
            rop (Cell): Destination cell
            value (IntegerLike): Native integer or mpz to store
        """

    @staticmethod
    @abstractmethod
    def clear(cell: Cell) -> None:
        """Release a cell. A cleared cell can no longer be used.

        Args:
            cell (Cell): Cell to release
        """

    @staticmethod
    @abstractmethod
    def temporary(value: IntegerLike) -> ContextManager[Cell]:
        """Acquire a temporary cell holding value, cleared when the scope exits.

        Args:
            value (IntegerLike): Native integer or mpz to store

        Returns:
            ContextManager[Cell]: Scope yielding the temporary cell
        """

    # Arithmetic
    # ------------------------------------------------------------------------------

    @staticmethod
    @abstractmethod
    def add(rop: Cell, op1: Cell, op2: Cell) -> None:
        """Set rop to op1 + op2."""

    @staticmethod
    @abstractmethod
    def add_ui(rop: Cell, op1: Cell, op2: int) -> None:
        """Set rop to op1 + op2 for a non-negative native op2."""

    @staticmethod
    @abstractmethod
    def sub(rop: Cell, op1: Cell, op2: Cell) -> None:
        """Set rop to op1 - op2."""

    @staticmethod
    @abstractmethod
    def sub_ui(rop: Cell, op1: Cell, op2: int) -> None:
        """Set rop to op1 - op2 for a non-negative native op2."""

    @staticmethod
    @abstractmethod
    def mul(rop: Cell, op1: Cell, op2: Cell) -> None:
        """Set rop to op1 * op2."""

    @staticmethod
    @abstractmethod
    def mul_si(rop: Cell, op1: Cell, op2: int) -> None:
        """Set rop to op1 * op2 for a signed native op2."""

    @staticmethod
    @abstractmethod
    def addmul(rop: Cell, op1: Cell, op2: Cell) -> None:
        """Set rop to rop + op1 * op2."""

    @staticmethod
    @abstractmethod
    def addmul_ui(rop: Cell, op1: Cell, op2: int) -> None:
        """Set rop to rop + op1 * op2 for a non-negative native op2."""

    @staticmethod
    @abstractmethod
    def submul(rop: Cell, op1: Cell, op2: Cell) -> None:
        """Set rop to rop - op1 * op2."""

    @staticmethod
    @abstractmethod
    def submul_ui(rop: Cell, op1: Cell, op2: int) -> None:
        """Set rop to rop - op1 * op2 for a non-negative native op2."""

    @staticmethod
    @abstractmethod
    def neg(rop: Cell, op: Cell) -> None:
        """Set rop to -op."""

    @staticmethod
    @abstractmethod
    def abs(rop: Cell, op: Cell) -> None:
        """Set rop to |op|."""

    # Roots
    # ------------------------------------------------------------------------------

    @staticmethod
    @abstractmethod
    def sqrt(rop: Cell, op: Cell) -> None:
        """Set rop to the truncated square root of a non-negative op.

        Args:
            rop (Cell): Destination cell
            op (Cell): Non-negative operand

        Raises:
            ValueError: If op is negative
        """

    @staticmethod
    @abstractmethod
    def sqrtrem(rop1: Cell, rop2: Cell, op: Cell) -> None:
        """Set rop1 to the truncated square root of op and rop2 to op - rop1**2.

        Args:
            rop1 (Cell): Destination of the root
            rop2 (Cell): Destination of the remainder
            op (Cell): Non-negative operand

        Raises:
            ValueError: If op is negative
        """

    @staticmethod
    @abstractmethod
    def root(rop: Cell, op: Cell, n: int) -> None:
        """Set rop to the n-th root of op truncated toward zero.

        Args:
            rop (Cell): Destination cell
            op (Cell): Operand, negative only when n is odd
            n (int): Positive degree

        Raises:
            ValueError: If n is not positive, or op is negative and n is even
        """

    @staticmethod
    @abstractmethod
    def rootrem(rop1: Cell, rop2: Cell, op: Cell, n: int) -> None:
        """Set rop1 to the truncated n-th root of op and rop2 to op - rop1**n.

        Args:
            rop1 (Cell): Destination of the root
            rop2 (Cell): Destination of the remainder
            op (Cell): Operand, negative only when n is odd
            n (int): Positive degree

        Raises:
            ValueError: If n is not positive, or op is negative and n is even
        """
