from fractions import Fraction

import pytest

from bitdecimal.arithmetic import NegativeOverflowError, PositiveOverflowError, add
from bitdecimal.value import MAX_MANTISSA, Decimal96, InvalidDecimalError


def _exact(value: Decimal96) -> Fraction:
    return Fraction(value.mantissa * value.sign, 10**value.scale)


SAMPLES = [
    Decimal96(7),
    Decimal96(12, negative=True),
    Decimal96(2463, scale=3),
    Decimal96(2463, scale=3, negative=True),
    Decimal96(314, scale=2),
    Decimal96(123456789, scale=5, negative=True),
    Decimal96(0),
    Decimal96(8, scale=28),
]


@pytest.mark.parametrize("first", SAMPLES)
@pytest.mark.parametrize("second", SAMPLES)
def test_add_is_commutative(first, second):
    assert _exact(add(first, second)) == _exact(add(second, first))


def test_opposite_values_give_positive_zero():
    value = Decimal96(2463, scale=3)
    result = add(value, value.with_sign(-1))
    assert result.mantissa == 0
    assert result.negative is False
    result = add(value.with_sign(-1), value)
    assert result.mantissa == 0
    assert result.negative is False


def test_result_takes_sign_of_larger_magnitude():
    result = add(Decimal96(3), Decimal96(12, negative=True))
    assert result.negative is True
    assert _exact(result) == -9


def test_positive_overflow_raises():
    with pytest.raises(PositiveOverflowError):
        add(Decimal96(MAX_MANTISSA), Decimal96(1))


def test_negative_overflow_raises():
    with pytest.raises(NegativeOverflowError):
        add(Decimal96(MAX_MANTISSA, negative=True), Decimal96(1, negative=True))


def test_overflow_with_fraction_drops_a_digit():
    first = Decimal96(MAX_MANTISSA, scale=1)
    second = Decimal96(5, scale=1)
    result = add(first, second)
    assert result.scale == 0
    assert abs(_exact(result) - (_exact(first) + _exact(second))) <= 1


def test_max_minus_max_is_zero():
    result = add(Decimal96(MAX_MANTISSA), Decimal96(MAX_MANTISSA, negative=True))
    assert result.mantissa == 0


@pytest.mark.parametrize("bad", [Decimal96.nan(), Decimal96.infinity(1)])
def test_non_finite_operand_is_rejected(bad):
    with pytest.raises(InvalidDecimalError):
        add(bad, Decimal96(1))