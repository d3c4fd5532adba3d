"""Multi-precision numeric tower over GMP."""

from .integer import ArbitraryInteger, IArbitraryInteger
from .rational import ArbitraryRational, IArbitraryRational
from .floating import ArbitraryFloat, IArbitraryFloat
from .classifier import Kind, OperandClassifier
from .errors import NumericTowerError, TypeMismatch, RangeError, DomainError

__all__ = [
    "ArbitraryInteger",
    "ArbitraryRational",
    "ArbitraryFloat",
    "IArbitraryInteger",
    "IArbitraryRational",
    "IArbitraryFloat",
    "Kind",
    "OperandClassifier",
    "NumericTowerError",
    "TypeMismatch",
    "RangeError",
    "DomainError",
]
