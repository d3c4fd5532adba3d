import logging
from contextlib import contextmanager
from typing import Iterator, Tuple

import gmpy2
from .Cell import Cell
from .abstract.IMPC import IMPC
from .types import MPZ, IntegerLike

logger = logging.getLogger(__name__)


class MPC(IMPC):
    """Implementation of multi-precision computing operations on top of gmpy2."""

    _live_temporaries = 0

    @staticmethod
    def mpz(value: IntegerLike) -> MPZ:
        return gmpy2.mpz(value)

    # Cell lifecycle
    # ------------------------------------------------------------------------------

    @staticmethod
    def init() -> Cell:
        return Cell(gmpy2.mpz(0))

    @staticmethod
    def init_set(value: IntegerLike) -> Cell:
        return Cell(gmpy2.mpz(value))

    @staticmethod
    def set(rop: Cell, value: IntegerLike) -> None:
        rop.set(gmpy2.mpz(value))

    @staticmethod
    def clear(cell: Cell) -> None:
        cell.clear()

    @staticmethod
    @contextmanager
    def temporary(value: IntegerLike) -> Iterator[Cell]:
        cell = MPC.init_set(value)
        MPC._live_temporaries += 1
        logger.debug("acquired temporary cell (%d live)", MPC._live_temporaries)
        try:
            yield cell
        finally:
            MPC.clear(cell)
            MPC._live_temporaries -= 1
            logger.debug("released temporary cell (%d live)", MPC._live_temporaries)

    @staticmethod
    def live_temporaries() -> int:
        """Number of temporary cells acquired and not yet released."""
        return MPC._live_temporaries

    # Arithmetic
    # ------------------------------------------------------------------------------

    @staticmethod
    def add(rop: Cell, op1: Cell, op2: Cell) -> None:
        rop.set(op1.get() + op2.get())

    @staticmethod
    def add_ui(rop: Cell, op1: Cell, op2: int) -> None:
        rop.set(op1.get() + MPC._unsigned(op2))

    @staticmethod
    def sub(rop: Cell, op1: Cell, op2: Cell) -> None:
        rop.set(op1.get() - op2.get())

    @staticmethod
    def sub_ui(rop: Cell, op1: Cell, op2: int) -> None:
        rop.set(op1.get() - MPC._unsigned(op2))

    @staticmethod
    def mul(rop: Cell, op1: Cell, op2: Cell) -> None:
        rop.set(op1.get() * op2.get())

    @staticmethod
    def mul_si(rop: Cell, op1: Cell, op2: int) -> None:
        rop.set(op1.get() * op2)

    @staticmethod
    def addmul(rop: Cell, op1: Cell, op2: Cell) -> None:
        rop.set(rop.get() + op1.get() * op2.get())

    @staticmethod
    def addmul_ui(rop: Cell, op1: Cell, op2: int) -> None:
        rop.set(rop.get() + op1.get() * MPC._unsigned(op2))

    @staticmethod
    def submul(rop: Cell, op1: Cell, op2: Cell) -> None:
        rop.set(rop.get() - op1.get() * op2.get())

    @staticmethod
    def submul_ui(rop: Cell, op1: Cell, op2: int) -> None:
        rop.set(rop.get() - op1.get() * MPC._unsigned(op2))

    @staticmethod
    def neg(rop: Cell, op: Cell) -> None:
        rop.set(-op.get())

    @staticmethod
    def abs(rop: Cell, op: Cell) -> None:
        rop.set(abs(op.get()))

    # Roots
    # ------------------------------------------------------------------------------

    @staticmethod
    def sqrt(rop: Cell, op: Cell) -> None:
        rop.set(gmpy2.isqrt(op.get()))  # gmpy2 raises ValueError for negative op

    @staticmethod
    def sqrtrem(rop1: Cell, rop2: Cell, op: Cell) -> None:
        root, rem = gmpy2.isqrt_rem(op.get())
        rop1.set(root)
        rop2.set(rem)

    @staticmethod
    def root(rop: Cell, op: Cell, n: int) -> None:
        root, _ = MPC._signed_root(op.get(), n)
        rop.set(root)

    @staticmethod
    def rootrem(rop1: Cell, rop2: Cell, op: Cell, n: int) -> None:
        root, rem = MPC._signed_root(op.get(), n)
        rop1.set(root)
        rop2.set(rem)

    # Private Methods
    # ------------------------------------------------------------------------------

    @staticmethod
    def _unsigned(value: int) -> int:
        if value < 0:
            raise ValueError(f"Unsigned operand required, got {value}")
        return value

    @staticmethod
    def _signed_root(value: MPZ, n: int) -> Tuple[MPZ, MPZ]:
        """Truncated n-th root and remainder, extended to negative values for odd n."""
        if n <= 0:
            raise ValueError(f"Root degree must be positive, got {n}")
        if value >= 0:
            return gmpy2.iroot_rem(value, n)
        if n % 2 == 0:
            raise ValueError(f"Even root of negative number {value}")
        root, rem = gmpy2.iroot_rem(-value, n)
        return -root, -rem
