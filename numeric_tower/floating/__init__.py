"""Arbitrary-precision float module."""

from .ArbitraryFloat import ArbitraryFloat
from .abstract.IArbitraryFloat import IArbitraryFloat

__all__ = ["ArbitraryFloat", "IArbitraryFloat"]
