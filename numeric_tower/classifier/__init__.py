"""Operand classification module."""

from .Kind import Kind, INTEGER_KINDS, NUMERIC_KINDS
from .OperandClassifier import OperandClassifier
from .abstract.IOperandClassifier import IOperandClassifier

__all__ = ["Kind", "INTEGER_KINDS", "NUMERIC_KINDS", "OperandClassifier", "IOperandClassifier"]
