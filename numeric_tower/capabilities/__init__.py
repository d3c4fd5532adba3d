"""Integer capability interfaces implemented by the rational and float tower members."""

from .SupportsIntegerAdd import SupportsIntegerAdd
from .SupportsIntegerSubtract import SupportsIntegerSubtract
from .SupportsIntegerMultiply import SupportsIntegerMultiply

__all__ = ["SupportsIntegerAdd", "SupportsIntegerSubtract", "SupportsIntegerMultiply"]
