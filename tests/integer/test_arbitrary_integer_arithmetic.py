import pytest
from gmpy2 import mpz

from numeric_tower import ArbitraryInteger, ArbitraryRational, ArbitraryFloat, TypeMismatch
from numeric_tower.mpc import MPC


INTEGER_OPERANDS = [
    ArbitraryInteger(-9),
    ArbitraryInteger(10**30),
    0,
    7,
    -7,
    2**80,
    -(2**80),
    mpz(-(2**70)),
]


@pytest.fixture
def receiver():
    return ArbitraryInteger(123456789)


def test_add_native_small_negative():
    """Test that adding a negative native int subtracts."""
    assert ArbitraryInteger(10).add(-3) == ArbitraryInteger(7)


def test_subtract_rational():
    """Test that subtracting a rational promotes to a rational."""
    assert ArbitraryInteger(5).subtract(ArbitraryRational(1, 2)) == ArbitraryRational(9, 2)


def test_multiply_native_small():
    """Test multiplication by a native int."""
    assert ArbitraryInteger(6).multiply(7) == ArbitraryInteger(42)


def test_construction():
    """Test construction from native ints and mpz values."""
    assert ArbitraryInteger() == 0
    assert ArbitraryInteger(2**100) == 2**100
    assert ArbitraryInteger(mpz(-5)) == -5


def test_construction_copies_another_integer():
    """Test that constructing from an ArbitraryInteger copies its value."""
    original = ArbitraryInteger(5)
    copy = ArbitraryInteger(original)
    copy.add_inplace(1)
    assert original == 5
    assert copy == 6


@pytest.mark.parametrize("value", [1.5, "5", True, ArbitraryRational(1, 2)])
def test_construction_rejects_non_integers(value):
    """Test that non-integer values are rejected at construction."""
    with pytest.raises(TypeMismatch):
        ArbitraryInteger(value)


@pytest.mark.parametrize("x", INTEGER_OPERANDS)
def test_add_then_subtract_is_identity(receiver, x):
    """Test that adding then subtracting an integer restores the receiver."""
    assert receiver.add(x).subtract(x) == receiver


@pytest.mark.parametrize("x", [ArbitraryRational(-5, 7), ArbitraryRational(1, 3)])
def test_add_then_subtract_rational_is_identity(receiver, x):
    """Test that adding then subtracting a rational restores the receiver."""
    total = receiver.add(x)
    assert isinstance(total, ArbitraryRational)
    assert total.get_value() - x.get_value() == receiver.get_value()


def test_add_then_subtract_float_is_identity(receiver):
    """Test that adding then subtracting an exact float restores the receiver."""
    x = ArbitraryFloat("0.5", 128)
    total = receiver.add(x)
    assert isinstance(total, ArbitraryFloat)
    assert total.subtract_float(x) == receiver


@pytest.mark.parametrize(
    "a, b",
    [(3, -4), (10**40, 10**39 + 7), (-(2**65), 2**65 - 1)],
)
def test_add_and_multiply_commute(a, b):
    """Test that add and multiply give the same result in either order."""
    a, b = ArbitraryInteger(a), ArbitraryInteger(b)
    assert a.add(b) == b.add(a)
    assert a.multiply(b) == b.multiply(a)


@pytest.mark.parametrize("x", INTEGER_OPERANDS)
@pytest.mark.parametrize(
    "allocating, in_place",
    [
        ("add", "add_inplace"),
        ("subtract", "subtract_inplace"),
        ("multiply", "multiply_inplace"),
    ],
)
def test_inplace_agrees_with_allocating(receiver, x, allocating, in_place):
    """Test that each in-place form matches its allocating form."""
    expected = getattr(receiver, allocating)(x)
    target = receiver.copy()
    assert getattr(target, in_place)(x) is None
    assert target == expected
    assert receiver == 123456789


@pytest.mark.parametrize("x", INTEGER_OPERANDS)
def test_allocating_forms_leave_operands_unmodified(receiver, x):
    """Test that allocating forms modify neither receiver nor operand."""
    before = x.get_value() if isinstance(x, ArbitraryInteger) else x
    receiver.add(x)
    receiver.subtract(x)
    receiver.multiply(x)
    assert receiver == 123456789
    assert (x.get_value() if isinstance(x, ArbitraryInteger) else x) == before


def test_aliased_add_inplace_doubles():
    """Test that adding an integer to itself in place doubles it."""
    a = ArbitraryInteger(-(10**25))
    a.add_inplace(a)
    assert a == -2 * 10**25


def test_aliased_subtract_inplace_is_zero():
    """Test that subtracting an integer from itself in place gives zero."""
    a = ArbitraryInteger(2**90)
    a.subtract_inplace(a)
    assert a == 0


def test_aliased_multiply_inplace_squares():
    """Test that multiplying an integer by itself in place squares it."""
    a = ArbitraryInteger(-(2**40))
    a.multiply_inplace(a)
    assert a == 2**80


def test_negate_and_absolute_value():
    """Test negate and absolute_value in both forms."""
    a = ArbitraryInteger(-17)
    assert a.negate() == 17
    assert a.absolute_value() == 17
    assert a == -17

    a.negate_inplace()
    assert a == 17
    a.negate_inplace()
    a.absolute_value_inplace()
    assert a == 17


def test_no_temporaries_survive_arithmetic(receiver):
    """Test that no temporary cell outlives an operation."""
    for x in INTEGER_OPERANDS:
        receiver.add(x)
        receiver.copy().subtract_inplace(x)
    assert MPC.live_temporaries() == 0
