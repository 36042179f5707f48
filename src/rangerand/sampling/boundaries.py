"""Boundary normalisation -- every inclusivity mode becomes ``[lo, hi)``.

Integers are shifted by one unit per exclusive/inclusive end.  Floats and
decimals cannot be shifted that way, so they are only validated here; the
mappers handle their inclusivity while sampling.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from rangerand.errors import InvalidRangeError
from rangerand.numeric import DECIMAL_CONTEXT, DECIMAL_MAX, FloatType, IntegerType


@dataclass(frozen=True)
class CanonicalRange:
    """Half-open integer range ``[lo, hi)``.

    ``hi`` may be one past the type's maximum; Python integers do not
    overflow, so the shift is always exact.
    """

    lo: int
    hi: int

    @property
    def span(self) -> int:
        return self.hi - self.lo

    @property
    def is_degenerate(self) -> bool:
        """True when the range holds exactly one value."""
        return self.span == 1


def check_order(
    minimum, maximum, min_inclusive: bool, max_inclusive: bool
) -> None:
    """Raise :class:`InvalidRangeError` if the bounds are out of order.

    Inclusive-inclusive ranges allow ``minimum == maximum``; any exclusive
    end requires ``minimum < maximum``.
    """
    if min_inclusive and max_inclusive:
        if minimum > maximum:
            raise InvalidRangeError(minimum, maximum, min_inclusive, max_inclusive)
    elif minimum >= maximum:
        raise InvalidRangeError(minimum, maximum, min_inclusive, max_inclusive)


def normalize_integer(
    minimum: int,
    maximum: int,
    min_inclusive: bool = True,
    max_inclusive: bool = True,
    int_type: IntegerType = IntegerType.INT32,
) -> CanonicalRange:
    """Validate integer bounds and return the canonical ``[lo, hi)`` range."""
    for bound in (minimum, maximum):
        if isinstance(bound, bool) or not isinstance(bound, int):
            raise InvalidRangeError(
                minimum, maximum, min_inclusive, max_inclusive,
                message=f"Integer bounds required, got {bound!r}",
            )
        if not int_type.contains(bound):
            raise InvalidRangeError(
                minimum, maximum, min_inclusive, max_inclusive,
                message=(
                    f"Bound [{bound}] is outside the {int_type.value} range "
                    f"[{int_type.min_value}, {int_type.max_value}]"
                ),
            )

    check_order(minimum, maximum, min_inclusive, max_inclusive)

    lo = minimum if min_inclusive else minimum + 1
    hi = maximum + 1 if max_inclusive else maximum
    if hi <= lo:
        raise InvalidRangeError(
            minimum, maximum, min_inclusive, max_inclusive,
            message=f"No integer lies strictly between [{minimum}] and [{maximum}].",
        )
    return CanonicalRange(lo, hi)


def round_inward(
    minimum: float,
    maximum: float,
    min_inclusive: bool,
    max_inclusive: bool,
    float_type: FloatType = FloatType.FLOAT64,
) -> tuple[float, float, bool, bool]:
    """Round both bounds toward the interior to values of *float_type*.

    A bound that moves now sits strictly inside the caller's range and so
    becomes inclusive.

    Raises
    ------
    InvalidRangeError
        If the bounds are out of order, or no value of *float_type* lies
        within them.
    """
    check_order(minimum, maximum, min_inclusive, max_inclusive)
    lo, hi = float_type.at_least(minimum), float_type.at_most(maximum)
    if lo != minimum:
        min_inclusive = True
    if hi != maximum:
        max_inclusive = True
    if lo > hi or (lo == hi and not (min_inclusive and max_inclusive)):
        raise InvalidRangeError(
            minimum, maximum, min_inclusive, max_inclusive,
            message=(
                f"No {float_type.value} lies between [{minimum}] and [{maximum}]."
            ),
        )
    return lo, hi, min_inclusive, max_inclusive


def check_float_bounds(
    minimum: float,
    maximum: float,
    min_inclusive: bool,
    max_inclusive: bool,
    float_type: FloatType = FloatType.FLOAT64,
) -> None:
    """Validate finite float bounds (after policy adjustment)."""
    check_order(minimum, maximum, min_inclusive, max_inclusive)
    if not (min_inclusive or max_inclusive):
        # Adjacent values of the kind leave nothing to return.
        midpoint = float_type.coerce(minimum / 2 + maximum / 2)
        if not minimum < midpoint < maximum:
            raise InvalidRangeError(
                minimum, maximum, min_inclusive, max_inclusive,
                message=(
                    f"No {float_type.value} lies strictly between "
                    f"[{minimum}] and [{maximum}]."
                ),
            )


def check_decimal_bounds(
    minimum: Decimal, maximum: Decimal, min_inclusive: bool, max_inclusive: bool
) -> None:
    """Validate decimal bounds: finite, within the 96-bit mantissa, ordered."""
    for bound in (minimum, maximum):
        if not bound.is_finite() or bound.copy_abs() > DECIMAL_MAX:
            raise InvalidRangeError(
                minimum, maximum, min_inclusive, max_inclusive,
                message=f"Bound [{bound}] is not a representable decimal",
            )
    check_order(minimum, maximum, min_inclusive, max_inclusive)
    if not (min_inclusive or max_inclusive):
        midpoint = DECIMAL_CONTEXT.divide(DECIMAL_CONTEXT.add(minimum, maximum), 2)
        if not minimum < midpoint < maximum:
            raise InvalidRangeError(
                minimum, maximum, min_inclusive, max_inclusive,
                message=(
                    f"No decimal lies strictly between [{minimum}] and [{maximum}]."
                ),
            )
