from enum import Enum


class Kind(Enum):
    """Variants of the numeric tower an operand can belong to."""

    ARBITRARY_INT = "ArbitraryInteger"
    NATIVE_SMALL = "native small integer"
    ARBITRARY_RATIONAL = "ArbitraryRational"
    ARBITRARY_FLOAT = "ArbitraryFloat"
    NATIVE_BIG = "native big integer"
    UNSUPPORTED = "unsupported"

    @property
    def label(self) -> str:
        return self.value


# Kinds an integer cell can be mutated with
INTEGER_KINDS = (Kind.ARBITRARY_INT, Kind.NATIVE_SMALL, Kind.NATIVE_BIG)

# Kinds accepted by allocating binary operations
NUMERIC_KINDS = INTEGER_KINDS + (Kind.ARBITRARY_RATIONAL, Kind.ARBITRARY_FLOAT)
