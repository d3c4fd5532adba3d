# constants.py

from dotenv import load_dotenv

from .utils import SystemSpecs

load_dotenv()


NATIVE_WORD_BITS = SystemSpecs.get_native_word_bits()                  # Width of a native small integer
NATIVE_SMALL_MIN, NATIVE_SMALL_MAX = SystemSpecs.get_native_small_range()
DEFAULT_FLOAT_PRECISION = SystemSpecs.get_default_float_precision()    # Bits of significance for new floats
