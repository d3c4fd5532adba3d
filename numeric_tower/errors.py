"""Errors raised by numeric tower operations."""

from typing import Any, Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from .classifier.Kind import Kind


class NumericTowerError(Exception):
    """Base class for numeric tower errors."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation


class TypeMismatch(NumericTowerError, TypeError):
    """Operand kind is not accepted by the operation."""

    def __init__(self, operation: str, operand: Any, accepted: Iterable["Kind"]) -> None:
        self.operand = operand
        self.accepted = tuple(accepted)
        expected = ", ".join(kind.label for kind in self.accepted)
        super().__init__(
            operation, f"expected {expected}, got {type(operand).__name__}"
        )


class RangeError(NumericTowerError, ValueError):
    """A numeric precondition of the operation is violated."""

    def __init__(self, operation: str, value: Any, message: str) -> None:
        self.value = value
        super().__init__(operation, message)


class DomainError(NumericTowerError, ValueError):
    """The operation is mathematically undefined for the input."""

    def __init__(self, operation: str, value: Any, message: str) -> None:
        self.value = value
        super().__init__(operation, message)
