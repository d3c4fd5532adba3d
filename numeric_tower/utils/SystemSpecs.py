"""Utility class for native machine parameters."""

from typing import Tuple

from .EnvironmentManager import EnvironmentManager, EnvironmentVariables


class SystemSpecs:
    """Utility class for determining the native integer range and float defaults."""

    @staticmethod
    def get_native_word_bits() -> int:
        """
        Width in bits of a native small integer.

        Configurable via the NATIVE_WORD_BITS environment variable. Default is 64.
        Values below 2 fall back to the default.

        Returns:
            int: Word size in bits
        """
        bits = EnvironmentManager.get_int(EnvironmentVariables.NATIVE_WORD_BITS)
        if bits < 2:
            return EnvironmentVariables.NATIVE_WORD_BITS.default_value
        return bits

    @staticmethod
    def get_native_small_range() -> Tuple[int, int]:
        """
        Inclusive bounds of a signed native small integer.

        Returns:
            Tuple[int, int]: (minimum, maximum)
        """
        bits = SystemSpecs.get_native_word_bits()
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1

    @staticmethod
    def get_default_float_precision() -> int:
        precision = EnvironmentManager.get_int(EnvironmentVariables.DEFAULT_FLOAT_PRECISION)
        if precision < 2:
            return EnvironmentVariables.DEFAULT_FLOAT_PRECISION.default_value
        return precision
