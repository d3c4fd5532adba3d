from typing import Any, Self, Tuple

from ..classifier import OperandClassifier, Kind, INTEGER_KINDS
from ..dispatch import PromotionDispatcher, Operation, FusedOperation
from ..errors import TypeMismatch, RangeError, DomainError
from ..mpc import MPC, Cell
from ..mpc.types import MPZ
from ..mutation import MutationStrategy
from .abstract.IArbitraryInteger import IArbitraryInteger


class ArbitraryInteger(IArbitraryInteger):
    """Arbitrary-precision integer owning a single mutable MPC cell."""

    def __init__(self, value: Any = 0) -> None:
        """Initialize an integer from a native integer, an mpz or another ArbitraryInteger.

        Args:
            value: Initial value; an ArbitraryInteger is copied, never shared

        Raises:
            TypeMismatch: If value is not an integer of the tower
        """
        kind = OperandClassifier.classify(value)
        if kind is Kind.ARBITRARY_INT:
            self._cell = MPC.init_set(value.get_value())
        elif kind in INTEGER_KINDS:
            self._cell = MPC.init_set(value)
        else:
            raise TypeMismatch("ArbitraryInteger", value, INTEGER_KINDS)

    @classmethod
    def from_cell(cls, cell: Cell) -> Self:
        instance = cls.__new__(cls)
        instance._cell = cell
        return instance

    def get_cell(self) -> Cell:
        return self._cell

    def get_value(self) -> MPZ:
        return self._cell.get()

    def copy(self) -> Self:
        return self.from_cell(MPC.init_set(self._cell.get()))

    # Binary operations
    # ------------------------------------------------------------------------------

    def add(self, x: Any) -> Any:
        return PromotionDispatcher.binary_op(Operation.ADD, self, x)

    def add_inplace(self, x: Any) -> None:
        PromotionDispatcher.binary_op_inplace(Operation.ADD, self, x)

    def subtract(self, x: Any) -> Any:
        return PromotionDispatcher.binary_op(Operation.SUBTRACT, self, x)

    def subtract_inplace(self, x: Any) -> None:
        PromotionDispatcher.binary_op_inplace(Operation.SUBTRACT, self, x)

    def multiply(self, x: Any) -> Any:
        return PromotionDispatcher.binary_op(Operation.MULTIPLY, self, x)

    def multiply_inplace(self, x: Any) -> None:
        PromotionDispatcher.binary_op_inplace(Operation.MULTIPLY, self, x)

    # Fused operations
    # ------------------------------------------------------------------------------

    def addmul_inplace(self, b: Any, c: Any) -> None:
        PromotionDispatcher.fused_inplace(FusedOperation.ADDMUL, self, b, c)

    def submul_inplace(self, b: Any, c: Any) -> None:
        PromotionDispatcher.fused_inplace(FusedOperation.SUBMUL, self, b, c)

    # Unary operations
    # ------------------------------------------------------------------------------

    def negate(self) -> Self:
        return MutationStrategy.unary(self, MPC.neg, in_place=False)

    def negate_inplace(self) -> None:
        MutationStrategy.unary(self, MPC.neg, in_place=True)

    def absolute_value(self) -> Self:
        return MutationStrategy.unary(self, MPC.abs, in_place=False)

    def absolute_value_inplace(self) -> None:
        MutationStrategy.unary(self, MPC.abs, in_place=True)

    # Roots
    # ------------------------------------------------------------------------------

    def sqrt(self) -> Self:
        self._require_non_negative("sqrt")
        return MutationStrategy.unary(self, MPC.sqrt, in_place=False)

    def sqrt_inplace(self) -> None:
        self._require_non_negative("sqrt_inplace")
        MutationStrategy.unary(self, MPC.sqrt, in_place=True)

    def sqrt_with_remainder(self) -> Tuple[Self, Self]:
        self._require_non_negative("sqrt_with_remainder")
        source = self._cell
        return MutationStrategy.allocate_pair(
            self, lambda root, rem: MPC.sqrtrem(root, rem, source)
        )

    def kth_root(self, n: int) -> Self:
        degree = self._check_degree("kth_root", n)
        source = self._cell
        return MutationStrategy.allocate(self, lambda rop: MPC.root(rop, source, degree))

    def kth_root_with_remainder(self, n: int) -> Tuple[Self, Self]:
        degree = self._check_degree("kth_root_with_remainder", n)
        source = self._cell
        return MutationStrategy.allocate_pair(
            self, lambda root, rem: MPC.rootrem(root, rem, source, degree)
        )

    # Operator protocol
    # ------------------------------------------------------------------------------

    def __add__(self, other: Any) -> Any:
        if OperandClassifier.classify(other) is Kind.UNSUPPORTED:
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Any:
        if OperandClassifier.classify(other) is Kind.UNSUPPORTED:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> Any:
        kind = OperandClassifier.classify(other)
        if kind in INTEGER_KINDS:
            difference = self.subtract(other)
            difference.negate_inplace()
            return difference
        if kind in (Kind.ARBITRARY_RATIONAL, Kind.ARBITRARY_FLOAT):
            return other.subtract(self)
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        if OperandClassifier.classify(other) is Kind.UNSUPPORTED:
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    # Rational and float operands fall back to __add__ and friends, rebinding the name
    def __iadd__(self, other: Any) -> Any:
        if OperandClassifier.classify(other) not in INTEGER_KINDS:
            return NotImplemented
        self.add_inplace(other)
        return self

    def __isub__(self, other: Any) -> Any:
        if OperandClassifier.classify(other) not in INTEGER_KINDS:
            return NotImplemented
        self.subtract_inplace(other)
        return self

    def __imul__(self, other: Any) -> Any:
        if OperandClassifier.classify(other) not in INTEGER_KINDS:
            return NotImplemented
        self.multiply_inplace(other)
        return self

    def __neg__(self) -> Self:
        return self.negate()

    def __abs__(self) -> Self:
        return self.absolute_value()

    def __eq__(self, other: object) -> bool:
        kind = OperandClassifier.classify(other)
        if kind is Kind.ARBITRARY_INT:
            return self.get_value() == other.get_value()
        if kind in (Kind.NATIVE_SMALL, Kind.NATIVE_BIG):
            return self.get_value() == other
        return NotImplemented

    __hash__ = None  # mutable

    def __int__(self) -> int:
        return int(self.get_value())

    def __repr__(self):
        return f"ArbitraryInteger({self.get_value()})"

    def __str__(self):
        return str(self.get_value())

    # Private Methods
    # ------------------------------------------------------------------------------

    def _require_non_negative(self, operation: str) -> None:
        value = self.get_value()
        if value < 0:
            raise DomainError(operation, value, f"square root of negative number {value}")

    def _check_degree(self, operation: str, n: Any) -> int:
        """Validate a root degree before any cell is allocated."""
        kind = OperandClassifier.classify(n)
        if kind is Kind.NATIVE_BIG:
            raise RangeError(operation, n, f"degree must be a positive native integer, got {n}")
        if kind is not Kind.NATIVE_SMALL:
            raise TypeMismatch(operation, n, (Kind.NATIVE_SMALL,))
        if n <= 0:
            raise RangeError(operation, n, f"degree must be positive, got {n}")
        value = self.get_value()
        if value < 0 and n % 2 == 0:
            raise DomainError(operation, value, f"even root of negative number {value}")
        return n
