"""Sign change and rounding of a decimal to an integer value."""

from __future__ import annotations

from dataclasses import replace

from .arithmetic import add
from .value import Decimal96, InvalidDecimalError, Kind

_ROUND_SCALE_LIMIT = 28


def _reject_nan(value: Decimal96, operation: str) -> None:
    if value.kind is Kind.NAN:
        raise InvalidDecimalError(f"cannot {operation} not-a-number")


def negate(value: Decimal96) -> Decimal96:
    """Return the value with its sign flipped.

    Not-a-number and an unsigned zero of scale 0 are rejected.
    """
    _reject_nan(value, "negate")
    if value.kind is Kind.FINITE and value.is_zero() and not value.negative and value.scale == 0:
        raise InvalidDecimalError("cannot negate an unsigned zero")
    return replace(value, negative=not value.negative)


def truncate(value: Decimal96) -> Decimal96:
    """Drop the fractional digits, keeping the sign. Infinities come back unchanged."""
    _reject_nan(value, "truncate")
    if value.kind is Kind.INFINITY or value.scale == 0:
        return value
    return Decimal96(
        mantissa=value.mantissa // 10**value.scale,
        scale=0,
        negative=value.negative,
    )


def round_value(value: Decimal96) -> Decimal96:
    """Round to the nearest integer, halves away from zero, keeping the sign.

    A value whose scale exceeds 28 rounds to positive zero.
    Infinities come back unchanged.
    """
    _reject_nan(value, "round")
    if value.kind is Kind.INFINITY:
        return value
    if value.scale > _ROUND_SCALE_LIMIT:
        return Decimal96()
    divisor = 10**value.scale
    quotient, remainder = divmod(value.mantissa, divisor)
    if 2 * remainder >= divisor and remainder:
        quotient += 1
    return Decimal96(mantissa=quotient, scale=0, negative=value.negative)


def floor(value: Decimal96) -> Decimal96:
    """Round towards negative infinity. Infinities come back unchanged."""
    _reject_nan(value, "floor")
    if value.kind is Kind.INFINITY:
        return value
    result = truncate(value)
    exact = result.mantissa * 10**value.scale == value.mantissa
    if value.negative and not exact:
        result = add(result, Decimal96(1, negative=True))
    return result