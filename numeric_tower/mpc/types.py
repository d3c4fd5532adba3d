"""Type definitions for multi-precision computing operations."""

from typing import NewType, Union
from gmpy2 import mpz as _mpz, mpq as _mpq, mpfr as _mpfr

# Define base types from gmpy2
MPZ = NewType("MPZ", _mpz)
MPQ = NewType("MPQ", _mpq)
MPFR = NewType("MPFR", _mpfr)

# Runtime classes, for isinstance checks
MPZ_TYPE = type(_mpz(0))
MPQ_TYPE = type(_mpq(0))
MPFR_TYPE = type(_mpfr(0))

# Anything a cell can be set from
IntegerLike = Union[int, MPZ]
