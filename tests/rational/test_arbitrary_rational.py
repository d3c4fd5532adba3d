import pytest
from gmpy2 import mpq

from numeric_tower import ArbitraryInteger, ArbitraryRational, TypeMismatch


def test_canonical_form():
    """Test that rationals are reduced with a positive denominator."""
    r = ArbitraryRational(4, -6)
    assert r.get_numerator() == -2
    assert r.get_denominator() == 3
    assert str(r) == "-2/3"


def test_construction_from_mpq_and_integers():
    """Test construction from mpq values and ArbitraryIntegers."""
    assert ArbitraryRational(mpq(3, 9)) == ArbitraryRational(1, 3)
    assert ArbitraryRational(ArbitraryInteger(6), 4).get_value() == mpq(3, 2)
    assert ArbitraryRational(7) == 7


def test_zero_denominator_raises():
    """Test that a zero denominator raises ZeroDivisionError."""
    with pytest.raises(ZeroDivisionError):
        ArbitraryRational(1, 0)


@pytest.mark.parametrize("value", [1.5, "1/2", True])
def test_non_integer_parts_raise(value):
    """Test that non-integer parts raise TypeMismatch."""
    with pytest.raises(TypeMismatch):
        ArbitraryRational(value, 2)


def test_integer_capabilities():
    """Test the integer add, subtract and multiply capabilities."""
    r = ArbitraryRational(1, 2)
    three = ArbitraryInteger(3)
    assert r.add(three) == ArbitraryRational(7, 2)
    assert r.subtract(three) == ArbitraryRational(-5, 2)
    assert r.multiply(three) == ArbitraryRational(3, 2)
    assert r == ArbitraryRational(1, 2)


def test_hash_follows_value():
    """Test that equal rationals hash alike."""
    assert hash(ArbitraryRational(2, 4)) == hash(ArbitraryRational(1, 2))
