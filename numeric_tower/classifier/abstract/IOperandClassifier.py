from abc import ABC, abstractmethod
from typing import Any

from ..Kind import Kind


class IOperandClassifier(ABC):
    """Abstract base class defining the interface for operand classification."""

    @staticmethod
    @abstractmethod
    def classify(operand: Any) -> Kind:
        """Report which variant of the numeric tower an operand belongs to.

        Never raises; operands outside the tower are Kind.UNSUPPORTED.

        Args:
            operand: Any object

        Returns:
            Kind: The operand's kind
        """
