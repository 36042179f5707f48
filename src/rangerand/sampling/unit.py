"""Unit-interval samplers at double and fixed-point decimal precision.

Double samples sit on the 53-bit grid ``k / 2**53``.  The plain draw is
``k`` in ``[0, 2**53)``; an inclusive upper end extends the grid by one
step (``[0, 1 + EPSILON)``) so that exactly ``1.0`` can come out, and an
exclusive lower end starts the grid at ``k = 1``.

Decimal samples build a 96-bit mantissa at scale 28 whose maximum sits
just above 1 and are then clamped into ``[0, 1]``.
"""

from __future__ import annotations

from decimal import Decimal

from rangerand.numeric import DECIMAL_CONTEXT, DECIMAL_SCALE
from rangerand.sources.base import EntropySource

from .integers import sample_span

DOUBLE_BITS = 53
DOUBLE_MASK = (1 << DOUBLE_BITS) - 1
DOUBLE_GRID = float(1 << DOUBLE_BITS)
# Gap between 1.0 and the largest plain sample (1 - 2**-53).
EPSILON = 1.0 / DOUBLE_GRID

# High 32 bits of 10**28; with scale 28 the largest mantissa is just over 1.
DECIMAL_HI_MAX = 542101086
DECIMAL_EXPONENT = -DECIMAL_SCALE

_DECIMAL_ONE = Decimal(1)
_DECIMAL_ZERO = Decimal(0)


def unit_double(
    source: EntropySource,
    low_inclusive: bool = True,
    high_inclusive: bool = False,
) -> float:
    """Return a double on the 53-bit grid between 0 and 1.

    ``low_inclusive`` / ``high_inclusive`` choose whether ``0.0`` and
    ``1.0`` can be returned.
    """
    if low_inclusive and not high_inclusive:
        return (source.next_word(64) & DOUBLE_MASK) / DOUBLE_GRID

    start = 0 if low_inclusive else 1
    stop = (1 << DOUBLE_BITS) + (1 if high_inclusive else 0)
    return (start + sample_span(source, stop - start, 64)) / DOUBLE_GRID


def unit_decimal(source: EntropySource, high_inclusive: bool = True) -> Decimal:
    """Return a scale-28 decimal in ``[0, 1]`` (``[0, 1)`` if not *high_inclusive*).

    The mantissa's low and mid words are raw 32-bit draws; the high word
    is uniform over ``[0, DECIMAL_HI_MAX]``.  Draws landing above 1 are
    clamped to exactly 1, or redrawn when 1 itself is excluded.
    """
    while True:
        low = source.next_word(32)
        mid = source.next_word(32)
        high = sample_span(source, DECIMAL_HI_MAX + 1, 32)
        mantissa = (high << 64) | (mid << 32) | low
        value = Decimal(mantissa).scaleb(DECIMAL_EXPONENT, context=DECIMAL_CONTEXT)

        if value >= _DECIMAL_ONE:
            if high_inclusive:
                return _DECIMAL_ONE
            continue
        return max(value, _DECIMAL_ZERO)
