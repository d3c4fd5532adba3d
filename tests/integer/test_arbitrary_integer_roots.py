import pytest
from gmpy2 import mpz, is_square

from numeric_tower import ArbitraryInteger, TypeMismatch, RangeError, DomainError


def test_sqrt_truncates():
    """Test that sqrt truncates toward zero."""
    assert ArbitraryInteger(10).sqrt() == 3
    assert ArbitraryInteger(10**40).sqrt() == 10**20


def test_sqrt_inplace():
    """Test that sqrt_inplace overwrites the receiver."""
    a = ArbitraryInteger(99)
    assert a.sqrt_inplace() is None
    assert a == 9


def test_sqrt_of_negative_raises_in_both_forms():
    """Test that both sqrt forms report a DomainError and leave the receiver alone."""
    a = ArbitraryInteger(-4)
    with pytest.raises(DomainError) as error:
        a.sqrt()
    assert error.value.operation == "sqrt"
    with pytest.raises(DomainError):
        a.sqrt_inplace()
    assert a == -4


def test_sqrt_with_remainder():
    """Test that sqrt_with_remainder returns root and remainder."""
    root, rem = ArbitraryInteger(10).sqrt_with_remainder()
    assert (root, rem) == (ArbitraryInteger(3), ArbitraryInteger(1))


@pytest.mark.parametrize(
    "value",
    [0, 1, 2, 15, 16, 17, 10**40, 10**40 + 7, (2**64 + 1) ** 2, 2**127 - 1],
)
def test_sqrt_with_remainder_invariant(value):
    """Test value == s*s + r with 0 <= r <= 2s, r == 0 exactly for perfect squares."""
    n = ArbitraryInteger(value)
    s, r = n.sqrt_with_remainder()
    s, r = s.get_value(), r.get_value()
    assert s * s + r == value
    assert 0 <= r <= 2 * s
    assert (r == 0) == is_square(mpz(value))


def test_sqrt_with_remainder_of_negative_raises():
    """Test that sqrt_with_remainder of a negative raises DomainError."""
    with pytest.raises(DomainError):
        ArbitraryInteger(-1).sqrt_with_remainder()


def test_kth_root():
    """Test that kth_root truncates."""
    assert ArbitraryInteger(27).kth_root(3) == ArbitraryInteger(3)
    assert ArbitraryInteger(28).kth_root(3) == 3
    assert ArbitraryInteger(2**200).kth_root(10) == 2**20
    assert ArbitraryInteger(12345).kth_root(1) == 12345


def test_kth_root_of_negative_with_odd_degree():
    """Test that an odd root of a negative truncates toward zero."""
    assert ArbitraryInteger(-27).kth_root(3) == -3
    assert ArbitraryInteger(-30).kth_root(3) == -3


def test_kth_root_of_negative_with_even_degree_raises():
    """Test that an even root of a negative raises DomainError."""
    with pytest.raises(DomainError):
        ArbitraryInteger(-16).kth_root(2)


@pytest.mark.parametrize("degree", [0, -1, -(2**40)])
def test_kth_root_with_non_positive_degree_raises(degree):
    """Test that a degree below one raises RangeError."""
    with pytest.raises(RangeError) as error:
        ArbitraryInteger(10).kth_root(degree)
    assert error.value.value == degree


def test_kth_root_with_native_big_degree_raises():
    """Test that a degree beyond the native word raises RangeError."""
    with pytest.raises(RangeError):
        ArbitraryInteger(10).kth_root(2**64)


@pytest.mark.parametrize("degree", [1.5, "3", True, ArbitraryInteger(3)])
def test_kth_root_with_non_native_degree_raises(degree):
    """Test that a non-native degree raises TypeMismatch."""
    with pytest.raises(TypeMismatch):
        ArbitraryInteger(10).kth_root(degree)


def test_kth_root_with_remainder():
    """Test that kth_root_with_remainder returns root and remainder."""
    root, rem = ArbitraryInteger(30).kth_root_with_remainder(3)
    assert (root, rem) == (3, 3)


@pytest.mark.parametrize("value, degree", [(10**30 + 1, 5), (-(10**21) - 3, 7), (1, 4)])
def test_kth_root_with_remainder_invariant(value, degree):
    """Test that root**degree + remainder equals the receiver."""
    root, rem = ArbitraryInteger(value).kth_root_with_remainder(degree)
    assert root.get_value() ** degree + rem.get_value() == value
