"""Numeric type descriptors for the fixed-width kinds rangerand produces.

Python integers are unbounded, so the fixed-width integer and float kinds
are described here as enums that carry their limits.  Values are always
plain ``int`` / ``float`` / :class:`~decimal.Decimal`; the descriptor only
decides which values are legal and how wide the raw entropy words are.
"""

from __future__ import annotations

import decimal
import struct
import sys
from enum import Enum

# Integer types narrower than this draw through a word of this width.
MIN_WORD_BITS = 32

# Fixed-point decimal: 96-bit unsigned mantissa, base-10 scale 0..28.
DECIMAL_MANTISSA_BITS = 96
DECIMAL_MAX = decimal.Decimal(2**DECIMAL_MANTISSA_BITS - 1)
DECIMAL_MIN = decimal.Decimal(-(2**DECIMAL_MANTISSA_BITS - 1))
DECIMAL_SCALE = 28
DECIMAL_CONTEXT = decimal.Context(
    prec=29,
    rounding=decimal.ROUND_HALF_EVEN,
    Emax=decimal.MAX_EMAX,
    Emin=decimal.MIN_EMIN,
)

FLOAT32_MAX = struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]


_INTEGER_LAYOUT: dict[str, tuple[int, bool]] = {
    "int8": (8, True),
    "int16": (16, True),
    "int32": (32, True),
    "int64": (64, True),
    "uint8": (8, False),
    "uint16": (16, False),
    "uint32": (32, False),
    "uint64": (64, False),
}


class IntegerType(str, Enum):
    """Fixed-width two's-complement or unsigned integer kind."""

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"

    @property
    def bits(self) -> int:
        return _INTEGER_LAYOUT[self.value][0]

    @property
    def signed(self) -> bool:
        return _INTEGER_LAYOUT[self.value][1]

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def word_bits(self) -> int:
        """Width of the raw unsigned words drawn for this type."""
        return max(self.bits, MIN_WORD_BITS)

    def contains(self, value: int) -> bool:
        """Return ``True`` if *value* is representable in this type."""
        return self.min_value <= value <= self.max_value

    def reinterpret(self, word: int) -> int:
        """Reinterpret an unsigned word of :attr:`bits` width as this type."""
        word &= (1 << self.bits) - 1
        if self.signed and word > self.max_value:
            word -= 1 << self.bits
        return word


class FloatType(str, Enum):
    """IEEE 754 binary floating-point kind."""

    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def max_value(self) -> float:
        return FLOAT32_MAX if self is FloatType.FLOAT32 else sys.float_info.max

    def coerce(self, value: float) -> float:
        """Round *value* to the nearest value of this kind.

        Finite values beyond the binary32 range saturate to
        ``+/-FLOAT32_MAX``; non-finite values pass through.
        """
        if self is FloatType.FLOAT64:
            return float(value)
        if value != value or value in (float("inf"), float("-inf")):
            return value
        try:
            return struct.unpack("<f", struct.pack("<f", value))[0]
        except OverflowError:
            return FLOAT32_MAX if value > 0 else -FLOAT32_MAX

    def at_least(self, value: float) -> float:
        """Return the smallest value of this kind that is ``>= value``."""
        rounded = self.coerce(value)
        if self is FloatType.FLOAT32 and rounded < value:
            return _float32_step(rounded, up=True)
        return rounded

    def at_most(self, value: float) -> float:
        """Return the largest value of this kind that is ``<= value``."""
        rounded = self.coerce(value)
        if self is FloatType.FLOAT32 and rounded > value:
            return _float32_step(rounded, up=False)
        return rounded


def _float32_step(value: float, up: bool) -> float:
    """Return the binary32 neighbour of *value* toward +inf or -inf."""
    if value == 0.0:
        smallest = struct.unpack("<f", struct.pack("<I", 1))[0]
        return smallest if up else -smallest
    (bits,) = struct.unpack("<I", struct.pack("<f", value))
    # Sign-magnitude: moving away from zero increments the raw bits.
    bits += 1 if (value > 0) == up else -1
    return struct.unpack("<f", struct.pack("<I", bits))[0]
