from typing import Any

from .. import constants
from ..floating.abstract.IArbitraryFloat import IArbitraryFloat
from ..integer.abstract.IArbitraryInteger import IArbitraryInteger
from ..mpc.types import MPZ_TYPE
from ..rational.abstract.IArbitraryRational import IArbitraryRational
from .Kind import Kind
from .abstract.IOperandClassifier import IOperandClassifier


class OperandClassifier(IOperandClassifier):
    """Classifies operands by type tag and, for Python ints, by machine-word range."""

    @staticmethod
    def classify(operand: Any) -> Kind:
        if isinstance(operand, IArbitraryInteger):
            return Kind.ARBITRARY_INT
        if isinstance(operand, bool):  # bool is an int subclass but not a number here
            return Kind.UNSUPPORTED
        if isinstance(operand, int):
            if constants.NATIVE_SMALL_MIN <= operand <= constants.NATIVE_SMALL_MAX:
                return Kind.NATIVE_SMALL
            return Kind.NATIVE_BIG
        if isinstance(operand, MPZ_TYPE):
            return Kind.NATIVE_BIG
        if isinstance(operand, IArbitraryRational):
            return Kind.ARBITRARY_RATIONAL
        if isinstance(operand, IArbitraryFloat):
            return Kind.ARBITRARY_FLOAT
        return Kind.UNSUPPORTED
