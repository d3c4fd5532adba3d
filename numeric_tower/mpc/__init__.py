"""Multi-precision computing module."""

from .MPC import MPC
from .Cell import Cell
from .abstract.IMPC import IMPC
from .types import MPZ, MPQ, MPFR, IntegerLike

__all__ = ["MPC", "Cell", "IMPC", "MPZ", "MPQ", "MPFR", "IntegerLike"]
