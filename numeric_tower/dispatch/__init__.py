"""Cross-type promotion module."""

from .Operation import Operation, FusedOperation
from .PromotionDispatcher import PromotionDispatcher
from .abstract.IPromotionDispatcher import IPromotionDispatcher

__all__ = ["Operation", "FusedOperation", "PromotionDispatcher", "IPromotionDispatcher"]
