"""Arbitrary-precision rational module."""

from .ArbitraryRational import ArbitraryRational
from .abstract.IArbitraryRational import IArbitraryRational

__all__ = ["ArbitraryRational", "IArbitraryRational"]
