"""Bringing two decimals to a common scale, with banker's rounding."""

from __future__ import annotations

from dataclasses import replace

from .value import MAX_MANTISSA, Decimal96, DecimalError, InvalidDecimalError, Kind

SCALE_LIMIT = 28


def _divide_by_ten(mantissa: int) -> int:
    quotient, remainder = divmod(mantissa, 10)
    if remainder > 5 or (remainder == 5 and quotient % 2 == 1):
        quotient += 1
    return quotient


def _require_finite(*values: Decimal96) -> None:
    for value in values:
        if value.kind is not Kind.FINITE:
            raise InvalidDecimalError(f"cannot rescale {value.kind.value}")


def bank_round(value: Decimal96) -> Decimal96:
    """Drop the last decimal digit, rounding half to even, and lower the scale by one."""
    _require_finite(value)
    if value.scale == 0:
        raise InvalidDecimalError("an integer value has no fractional digit to drop")
    return replace(value, mantissa=_divide_by_ten(value.mantissa), scale=value.scale - 1)


def _lower(mantissa: int, scale: int, target: int) -> int:
    for _ in range(scale - target):
        mantissa = _divide_by_ten(mantissa)
    return mantissa


def _raise_while_fits(mantissa: int, scale: int, target: int) -> tuple[int, int]:
    while scale < target and mantissa * 10 <= MAX_MANTISSA:
        mantissa *= 10
        scale += 1
    return mantissa, scale


def _to_limit(value: Decimal96) -> Decimal96:
    mantissa = _lower(value.mantissa, value.scale, SCALE_LIMIT)
    for _ in range(SCALE_LIMIT - value.scale):
        mantissa *= 10
        if mantissa > MAX_MANTISSA:
            raise DecimalError(
                f"coefficient overflows while raising scale {value.scale} to {SCALE_LIMIT}"
            )
    return replace(value, mantissa=mantissa, scale=SCALE_LIMIT)


def normalize_scales(first: Decimal96, second: Decimal96) -> tuple[Decimal96, Decimal96]:
    """Return both values rewritten with one common scale.

    If either scale exceeds 28, both are brought to scale 28. Otherwise the
    value with the smaller scale is multiplied by ten for as long as its
    coefficient fits, and the other is rounded down to whatever scale that
    reached.
    """
    _require_finite(first, second)
    if first.scale > SCALE_LIMIT or second.scale > SCALE_LIMIT:
        return _to_limit(first), _to_limit(second)

    if first.scale >= second.scale:
        second_mantissa, common = _raise_while_fits(
            second.mantissa, second.scale, first.scale
        )
        first_mantissa = _lower(first.mantissa, first.scale, common)
    else:
        first_mantissa, common = _raise_while_fits(
            first.mantissa, first.scale, second.scale
        )
        second_mantissa = _lower(second.mantissa, second.scale, common)

    return (
        replace(first, mantissa=first_mantissa, scale=common),
        replace(second, mantissa=second_mantissa, scale=common),
    )