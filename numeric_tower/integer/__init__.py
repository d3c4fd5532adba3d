"""Arbitrary-precision integer module."""

from .ArbitraryInteger import ArbitraryInteger
from .abstract.IArbitraryInteger import IArbitraryInteger

__all__ = ["ArbitraryInteger", "IArbitraryInteger"]
