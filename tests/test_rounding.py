import pytest

from bitdecimal.rounding import floor, negate, round_value, truncate
from bitdecimal.value import Decimal96, InvalidDecimalError, Kind


# Cases carried over from the floor suite.


def test_floor_positive_integer():
    result = floor(Decimal96(7))
    assert result.to_bits()[0] == 7
    assert result.sign == 1


def test_floor_negative_integer():
    value = Decimal96(12).with_bit(127, 1)
    result = floor(value)
    assert result.to_bits()[0] == 12
    assert result.sign == -1


def test_floor_positive_non_integer():
    result = floor(Decimal96(2463).with_scale(3))
    assert result.to_bits()[0] == 2
    assert result.sign == 1


def test_floor_negative_non_integer():
    result = floor(Decimal96(2463).with_sign(-1).with_scale(3))
    assert result.to_bits()[0] == 3
    assert result.sign == -1


def test_floor_inf():
    value = Decimal96.infinity()
    result = floor(value)
    assert result == value
    assert result.sign == 1


def test_floor_negative_inf():
    value = Decimal96.infinity().with_sign(-1)
    result = floor(value)
    assert result == value
    assert result.sign == -1


def test_floor_nan():
    with pytest.raises(InvalidDecimalError):
        floor(Decimal96.nan())


def test_floor_negative_exact_fraction_is_unchanged_in_value():
    result = floor(Decimal96(2000, scale=3, negative=True))
    assert (result.mantissa, result.scale, result.negative) == (2, 0, True)


# truncate


def test_truncate_drops_fraction_and_keeps_sign():
    result = truncate(Decimal96(2463, scale=3, negative=True))
    assert (result.mantissa, result.scale, result.negative) == (2, 0, True)


def test_truncate_integer_is_unchanged():
    value = Decimal96(12, negative=True)
    assert truncate(value) == value


def test_truncate_infinity_is_unchanged():
    value = Decimal96.infinity(-1)
    assert truncate(value) == value


def test_truncate_nan_raises():
    with pytest.raises(InvalidDecimalError):
        truncate(Decimal96.nan())


# round_value


@pytest.mark.parametrize(
    "mantissa, scale, expected",
    [(2463, 3, 2), (2500, 3, 3), (2499, 3, 2), (5, 1, 1), (4, 1, 0), (7, 0, 7)],
)
def test_round_half_away_from_zero(mantissa, scale, expected):
    for negative in (False, True):
        result = round_value(Decimal96(mantissa, scale=scale, negative=negative))
        assert result.mantissa == expected
        assert result.scale == 0
        assert result.negative is negative


def test_round_with_scale_above_28_gives_positive_zero():
    result = round_value(Decimal96(123, scale=29, negative=True))
    assert result == Decimal96()


def test_round_nan_raises():
    with pytest.raises(InvalidDecimalError):
        round_value(Decimal96.nan())


# negate


def test_negate_flips_sign_and_keeps_bits():
    value = Decimal96(314, scale=2)
    result = negate(value)
    assert result.to_bits()[:3] == value.to_bits()[:3]
    assert result.to_bits()[3] == value.to_bits()[3] | (1 << 31)


def test_negate_twice_is_identity():
    value = Decimal96(2463, scale=3, negative=True)
    assert negate(negate(value)) == value


def test_negate_infinity():
    result = negate(Decimal96.infinity(1))
    assert result.kind is Kind.INFINITY
    assert result.sign == -1


def test_negate_nan_raises():
    with pytest.raises(InvalidDecimalError):
        negate(Decimal96.nan())


def test_negate_unsigned_zero_raises():
    with pytest.raises(InvalidDecimalError):
        negate(Decimal96())


def test_negate_negative_zero_gives_positive_zero():
    assert negate(Decimal96(negative=True)) == Decimal96()