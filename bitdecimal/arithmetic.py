"""Addition of two decimals with scale alignment and overflow handling."""

from __future__ import annotations

from .scaling import bank_round, normalize_scales
from .value import MAX_MANTISSA, Decimal96, DecimalError, InvalidDecimalError, Kind


class PositiveOverflowError(DecimalError, OverflowError):
    """Raised when a result is too large to represent (towards +infinity)."""


class NegativeOverflowError(DecimalError, OverflowError):
    """Raised when a result is too small to represent (towards -infinity)."""


def _require_finite(*values: Decimal96) -> None:
    for value in values:
        if value.kind is not Kind.FINITE:
            raise InvalidDecimalError(f"cannot add {value.kind.value}")


def _add_magnitudes(first: Decimal96, second: Decimal96) -> Decimal96:
    while first.mantissa + second.mantissa > MAX_MANTISSA:
        if first.scale == 0:
            if first.negative:
                raise NegativeOverflowError("sum is below the smallest decimal")
            raise PositiveOverflowError("sum is above the largest decimal")
        first, second = bank_round(first), bank_round(second)
    return Decimal96(
        mantissa=first.mantissa + second.mantissa,
        scale=first.scale,
        negative=first.negative,
    )


def _subtract_magnitudes(first: Decimal96, second: Decimal96) -> Decimal96:
    if first.mantissa > second.mantissa:
        larger, smaller = first, second
        negative = first.negative
    elif first.mantissa < second.mantissa:
        larger, smaller = second, first
        negative = second.negative
    else:
        return Decimal96(mantissa=0, scale=first.scale, negative=False)
    return Decimal96(
        mantissa=larger.mantissa - smaller.mantissa,
        scale=first.scale,
        negative=negative,
    )


def add(first: Decimal96, second: Decimal96) -> Decimal96:
    """Return ``first + second``.

    Both operands are brought to a common scale first. If the sum of two
    like-signed values does not fit, fractional digits are dropped with
    banker's rounding; when no fractional digit is left, the overflow is
    raised as :class:`PositiveOverflowError` or :class:`NegativeOverflowError`.
    A sum of two opposite values of equal magnitude is positive zero.
    """
    _require_finite(first, second)
    first, second = normalize_scales(first, second)
    if first.negative == second.negative:
        return _add_magnitudes(first, second)
    return _subtract_magnitudes(first, second)