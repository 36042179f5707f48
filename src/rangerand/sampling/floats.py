"""Uniform float sampling over arbitrary bounds.

A unit sample ``v`` is blended as ``hi*v + lo*(1 - v)``.  Unlike
``lo + (hi - lo)*v`` this never overflows when the bounds have opposite
signs and huge magnitudes, and it returns each bound exactly at
``v == 0`` / ``v == 1``.
"""

from __future__ import annotations

import logging

from rangerand.numeric import FloatType
from rangerand.policy import FloatingPointAdjustmentPolicy
from rangerand.sources.base import EntropySource

from .boundaries import check_float_bounds, round_inward
from .unit import unit_double

logger = logging.getLogger(__name__)


def blend(lo: float, hi: float, v: float) -> float:
    """Affinely interpolate between *lo* and *hi*, clamped to their span."""
    result = hi * v + lo * (1.0 - v)
    return min(max(result, min(lo, hi)), max(lo, hi))


def adjust_bounds(
    minimum: float, maximum: float, policy: FloatingPointAdjustmentPolicy
) -> tuple[float, float]:
    """Run both bounds through *policy*, logging any substitution."""
    lo, hi = policy.adjust(minimum), policy.adjust(maximum)
    if lo != minimum or hi != maximum:
        logger.debug(
            "Adjusted non-finite bounds (%r, %r) -> (%r, %r)", minimum, maximum, lo, hi
        )
    return lo, hi


def sample_float(
    source: EntropySource,
    minimum: float,
    maximum: float,
    min_inclusive: bool,
    max_inclusive: bool,
    policy: FloatingPointAdjustmentPolicy,
    float_type: FloatType = FloatType.FLOAT64,
) -> float:
    """Return a float of *float_type* within the requested bounds.

    Non-finite bounds are replaced through *policy* first.  Bounds are then
    rounded inward to *float_type*, so results never leave the requested
    range.  When rounding lands a result on an excluded bound the draw is
    repeated.

    Raises
    ------
    InvalidRangeError
        If the adjusted bounds do not describe a non-empty range.
    """
    lo, hi = adjust_bounds(float(minimum), float(maximum), policy)
    lo, hi, min_inclusive, max_inclusive = round_inward(
        lo, hi, min_inclusive, max_inclusive, float_type
    )
    check_float_bounds(lo, hi, min_inclusive, max_inclusive, float_type)

    if lo == hi:
        return lo

    while True:
        v = unit_double(source, min_inclusive, max_inclusive)
        result = float_type.coerce(blend(lo, hi, v))
        result = min(max(result, lo), hi)
        if (result == lo and not min_inclusive) or (result == hi and not max_inclusive):
            continue
        return result
