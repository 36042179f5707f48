"""Uniform fixed-point decimal sampling over arbitrary bounds."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from rangerand.errors import InvalidRangeError
from rangerand.numeric import DECIMAL_CONTEXT
from rangerand.sources.base import EntropySource

from .boundaries import check_decimal_bounds
from .unit import unit_decimal


def blend_decimal(lo: Decimal, hi: Decimal, v: Decimal) -> Decimal:
    """``hi*v + lo*(1 - v)`` in 29-digit arithmetic, clamped to the bounds."""
    ctx = DECIMAL_CONTEXT
    result = ctx.add(ctx.multiply(hi, v), ctx.multiply(lo, ctx.subtract(1, v)))
    return min(max(result, min(lo, hi)), max(lo, hi))


def sample_decimal(
    source: EntropySource,
    minimum: Decimal | int | str,
    maximum: Decimal | int | str,
    min_inclusive: bool = True,
    max_inclusive: bool = True,
) -> Decimal:
    """Return a decimal within the requested bounds.

    Raises
    ------
    InvalidRangeError
        If a bound is not a decimal, is non-finite or exceeds the 96-bit
        mantissa, or the bounds do not describe a non-empty range.
    """
    try:
        lo, hi = Decimal(minimum), Decimal(maximum)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidRangeError(
            minimum, maximum, min_inclusive, max_inclusive,
            message=f"Bounds [{minimum!r}] and [{maximum!r}] are not decimals",
        ) from exc
    check_decimal_bounds(lo, hi, min_inclusive, max_inclusive)

    if lo == hi:
        return lo

    while True:
        v = unit_decimal(source, high_inclusive=max_inclusive)
        result = blend_decimal(lo, hi, v)
        if (result == lo and not min_inclusive) or (result == hi and not max_inclusive):
            continue
        return result
