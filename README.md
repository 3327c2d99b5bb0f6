# bitdecimal

`bitdecimal` provides `Decimal96`, an immutable decimal number. It is laid out
as four 32-bit words. Three of them hold a 96-bit unsigned coefficient and
the fourth holds flags. The flags word carries a scale, which is the power of
ten the coefficient is divided by, and a sign bit. Besides finite values, a
`Decimal96` can be an infinity or not-a-number. The package offers addition
and the usual rounding operations on top of this type.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## The value type: `bitdecimal.value`

A `Decimal96` has four fields:

- `mantissa`, an integer from 0 to 2**96 - 1.
- `scale`, from 0 to 255.
- `negative`, a boolean.
- `kind`, one of `Kind.FINITE`, `Kind.INFINITY` or `Kind.NAN`.

The `sign` property gives -1 for a negative value and 1 otherwise.

```python
from bitdecimal.value import Decimal96

x = Decimal96.from_bits([2463, 0, 0, 0]).with_scale(3)    # 2.463
y = x.with_sign(-1)                                        # -2.463
print(y.to_bits())       # (2463, 0, 0, 2147680256), i.e. flags 0x80030000
print(y.get_bit(127))    # 1: the sign bit
```

`from_bits(words)` reads four words, least significant first. In the flags
word, the scale is bits 16–23 and the sign is bit 31. `to_bits()` does the
reverse, for finite values only.

These methods return a new value:

- `with_bit(index, value)` sets or clears one bit of the 128-bit layout.
- `with_scale(scale)` replaces the scale and keeps the sign.
- `with_sign(sign)` makes the value positive (1) or negative (-1).

`get_bit(index)` reads one bit of the layout. `with_bit` and `get_bit` take
an index from 0 to 127. Any other index raises `IndexError`.

`Decimal96.infinity(sign)` and `Decimal96.nan()` build the special values.
`is_zero()` is true for a finite value whose coefficient is zero, whatever its
sign.

An invalid value or argument raises `InvalidDecimalError`. That covers a
coefficient or scale out of range, a sign other than ±1, and asking for the
bits of an infinity or NaN. `InvalidDecimalError` is a subclass of both
`DecimalError` and `ValueError`.

## Scaling: `bitdecimal.scaling`

- `bank_round(value)` drops the last decimal digit, rounding half to even,
  and lowers the scale by one. A value of scale 0 is rejected.
- `normalize_scales(first, second)` returns both values rewritten on one
  common scale, as follows:
  - If either scale is above 28, both values are brought to scale 28.
    `DecimalError` is raised if a coefficient overflows on the way up.
  - Otherwise the value with the smaller scale is multiplied by ten while its
    coefficient still fits. The other value is then rounded (half to even)
    down to the scale that was reached.

## Addition: `bitdecimal.arithmetic`

```python
from bitdecimal.arithmetic import add

total = add(a, b)
```

`add` first brings both operands to a common scale. If two values with the
same sign add up to more than 96 bits, fractional digits are dropped with
banker's rounding. If no fractional digit is left to drop, `add` raises:

- `PositiveOverflowError` when the sum overflows towards plus infinity.
- `NegativeOverflowError` when it overflows towards minus infinity.

Both exceptions derive from `DecimalError` and `OverflowError`. Opposite
values of equal magnitude sum to positive zero. If either operand is an
infinity or NaN, `InvalidDecimalError` is raised.

## Rounding: `bitdecimal.rounding`

- `negate(value)` flips the sign, and works on infinities too. It rejects
  NaN, and it rejects an unsigned zero of scale 0.
- `truncate(value)` drops the fractional digits and keeps the sign.
- `round_value(value)` rounds to the nearest integer, with halves going away
  from zero. A value whose scale is above 28 rounds to positive zero.
- `floor(value)` rounds towards minus infinity. For example, -2.463 becomes
  -3.

`truncate`, `round_value` and `floor` return an infinity unchanged. All four
functions raise `InvalidDecimalError` for NaN.

## What it does not do

Addition is the only arithmetic operation. The package has none of these:

- subtraction, multiplication, division or remainder;
- comparison functions;
- conversion to or from `int`, `float` or strings.

It also has no command-line interface.