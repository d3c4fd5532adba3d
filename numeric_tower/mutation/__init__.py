"""Allocating and in-place call forms."""

from .MutationStrategy import MutationStrategy
from .abstract.IMutationStrategy import IMutationStrategy, Primitive, PairPrimitive

__all__ = ["MutationStrategy", "IMutationStrategy", "Primitive", "PairPrimitive"]
