"""The 128-bit decimal value: a 96-bit coefficient, a decimal scale and a sign."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Iterable

WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1
MANTISSA_BITS = 96
TOTAL_BITS = 128
MAX_MANTISSA = (1 << MANTISSA_BITS) - 1
MAX_SCALE = 255

_SCALE_SHIFT = 16
_SIGN_SHIFT = 31


class DecimalError(Exception):
    """Base class for errors raised by this package."""


class InvalidDecimalError(DecimalError, ValueError):
    """Raised when a value or an argument cannot form a valid decimal."""


class Kind(enum.Enum):
    """What a decimal holds: an ordinary number, an infinity or not-a-number."""

    FINITE = "finite"
    INFINITY = "infinity"
    NAN = "nan"


@dataclass(frozen=True)
class Decimal96:
    """An immutable decimal worth ``(-1) ** negative * mantissa / 10 ** scale``."""

    mantissa: int = 0
    scale: int = 0
    negative: bool = False
    kind: Kind = Kind.FINITE

    def __post_init__(self) -> None:
        if not 0 <= self.mantissa <= MAX_MANTISSA:
            raise InvalidDecimalError(
                f"mantissa {self.mantissa} does not fit in {MANTISSA_BITS} bits"
            )
        if not 0 <= self.scale <= MAX_SCALE:
            raise InvalidDecimalError(f"scale {self.scale} is out of range")

    @property
    def sign(self) -> int:
        """-1 for a negative value, 1 otherwise."""
        return -1 if self.negative else 1

    @classmethod
    def from_bits(cls, bits: Iterable[int]) -> Decimal96:
        """Build a value from four 32-bit words, least significant first."""
        words = [word & WORD_MASK for word in bits]
        if len(words) != 4:
            raise InvalidDecimalError(f"expected 4 words, got {len(words)}")
        low, middle, high, flags = words
        mantissa = low | (middle << WORD_BITS) | (high << (2 * WORD_BITS))
        return cls(
            mantissa=mantissa,
            scale=(flags >> _SCALE_SHIFT) & 0xFF,
            negative=bool((flags >> _SIGN_SHIFT) & 1),
        )

    def to_bits(self) -> tuple[int, int, int, int]:
        """Return the four 32-bit words of a finite value."""
        if self.kind is not Kind.FINITE:
            raise InvalidDecimalError(f"{self.kind.value} has no bit layout")
        flags = (self.scale << _SCALE_SHIFT) | (int(self.negative) << _SIGN_SHIFT)
        return (
            self.mantissa & WORD_MASK,
            (self.mantissa >> WORD_BITS) & WORD_MASK,
            (self.mantissa >> (2 * WORD_BITS)) & WORD_MASK,
            flags,
        )

    @classmethod
    def infinity(cls, sign: int = 1) -> Decimal96:
        """Return positive (sign 1) or negative (sign -1) infinity."""
        if sign not in (1, -1):
            raise InvalidDecimalError(f"sign must be 1 or -1, not {sign}")
        return cls(negative=sign == -1, kind=Kind.INFINITY)

    @classmethod
    def nan(cls) -> Decimal96:
        """Return not-a-number."""
        return cls(kind=Kind.NAN)

    def _as_int(self) -> int:
        return sum(word << (WORD_BITS * n) for n, word in enumerate(self.to_bits()))

    @staticmethod
    def _check_index(index: int) -> None:
        if not 0 <= index < TOTAL_BITS:
            raise IndexError(f"bit index {index} is outside 0..{TOTAL_BITS - 1}")

    def get_bit(self, index: int) -> int:
        """Return bit ``index`` (0..127) of the 128-bit layout."""
        self._check_index(index)
        return (self._as_int() >> index) & 1

    def with_bit(self, index: int, value: int) -> Decimal96:
        """Return a copy with bit ``index`` of the 128-bit layout set or cleared."""
        self._check_index(index)
        raw = self._as_int()
        raw = raw | (1 << index) if value else raw & ~(1 << index)
        return Decimal96.from_bits((raw >> (WORD_BITS * n)) & WORD_MASK for n in range(4))

    def with_scale(self, scale: int) -> Decimal96:
        """Return a copy with the decimal scale replaced; the sign is kept."""
        if scale < 0:
            raise InvalidDecimalError(f"scale must not be negative, got {scale}")
        return replace(self, scale=scale)

    def with_sign(self, sign: int) -> Decimal96:
        """Return a copy made positive (sign 1) or negative (sign -1)."""
        if sign not in (1, -1):
            raise InvalidDecimalError(f"sign must be 1 or -1, not {sign}")
        return replace(self, negative=sign == -1)

    def is_zero(self) -> bool:
        """True for a finite value whose coefficient is zero, whatever its sign."""
        return self.kind is Kind.FINITE and self.mantissa == 0