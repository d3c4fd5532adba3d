import pytest
from gmpy2 import mpq

from numeric_tower import ArbitraryInteger, ArbitraryRational, ArbitraryFloat


def test_binary_operators():
    """Test the +, - and * operators with native operands."""
    a = ArbitraryInteger(10)
    assert a + (-3) == 7
    assert a - 4 == 6
    assert a * 2**64 == 10 * 2**64


def test_reflected_operators():
    """Test the operators with a native int on the left."""
    a = ArbitraryInteger(3)
    assert 5 + a == 8
    assert 10 - a == 7
    assert 2**70 - a == 2**70 - 3
    assert -2 * a == -6


def test_reflected_subtract_from_rational():
    """Test rational - integer goes through the rational's subtract capability."""
    result = ArbitraryRational(1, 2) - ArbitraryInteger(1)
    assert result == ArbitraryRational(-1, 2)


def test_reflected_subtract_from_float():
    """Test subtracting an integer from a float."""
    result = ArbitraryFloat("2.5", 64) - ArbitraryInteger(1)
    assert result == 1.5
    assert result.get_precision() == 64


def test_mixed_operators_promote():
    """Test that operators promote to rational and float results."""
    assert ArbitraryInteger(5) - ArbitraryRational(1, 2) == ArbitraryRational(9, 2)
    assert ArbitraryInteger(2) * ArbitraryFloat("0.25") == 0.5


def test_augmented_assignment_mutates_in_place():
    """Test that += with an integer mutates the receiver in place."""
    a = ArbitraryInteger(5)
    alias = a
    a += 3
    a *= 2
    a -= 1
    assert a is alias
    assert alias == 15


def test_augmented_assignment_with_rational_rebinds():
    """Test that += with a rational promotes and leaves the old integer untouched."""
    a = ArbitraryInteger(5)
    alias = a
    a += ArbitraryRational(1, 2)
    assert isinstance(a, ArbitraryRational)
    assert a.get_value() == mpq(11, 2)
    assert alias == 5


def test_unsupported_operand_raises_type_error():
    """Test that an unsupported operand raises TypeError."""
    with pytest.raises(TypeError):
        ArbitraryInteger(1) + "x"
    with pytest.raises(TypeError):
        "x" - ArbitraryInteger(1)


def test_unary_operators():
    """Test unary minus and abs()."""
    a = ArbitraryInteger(-8)
    assert -a == 8
    assert abs(a) == 8
    assert a == -8


def test_equality_across_kinds():
    """Test value equality with integers, rationals and native ints."""
    assert ArbitraryInteger(2) == ArbitraryRational(4, 2)
    assert ArbitraryInteger(2**80) == 2**80
    assert ArbitraryInteger(1) != ArbitraryInteger(2)
    assert ArbitraryInteger(1) != "1"


def test_integer_is_unhashable():
    """Test that a mutable integer cannot be hashed."""
    with pytest.raises(TypeError):
        hash(ArbitraryInteger(1))


def test_conversions():
    """Test int(), str() and repr()."""
    a = ArbitraryInteger(-(2**70))
    assert int(a) == -(2**70)
    assert str(a) == str(-(2**70))
    assert repr(ArbitraryInteger(7)) == "ArbitraryInteger(7)"
