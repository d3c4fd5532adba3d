from typing import Optional

from .types import MPZ


class Cell:
    """Owned storage for one multi-precision integer.

    A cell holds a single ``mpz`` value and is the destination of every MPC
    primitive. Once cleared it can no longer be read or written.
    """

    __slots__ = ("_value",)

    def __init__(self, value: MPZ) -> None:
        self._value: Optional[MPZ] = value

    def get(self) -> MPZ:
        if self._value is None:
            raise RuntimeError("Cell has been cleared")
        return self._value

    def set(self, value: MPZ) -> None:
        if self._value is None:
            raise RuntimeError("Cell has been cleared")
        self._value = value

    def clear(self) -> None:
        self._value = None

    def is_cleared(self) -> bool:
        return self._value is None

    def __repr__(self):
        return f"<Cell({self._value})>"
