"""Range mappers -- raw entropy to uniform values in caller-specified bounds."""

from .boundaries import (
    CanonicalRange,
    check_decimal_bounds,
    check_float_bounds,
    normalize_integer,
    round_inward,
)
from .decimals import sample_decimal
from .floats import sample_float
from .integers import sample_integer, sample_span
from .unit import unit_decimal, unit_double

__all__ = [
    # boundaries
    "CanonicalRange",
    "normalize_integer",
    "check_float_bounds",
    "check_decimal_bounds",
    "round_inward",
    # mappers
    "sample_integer",
    "sample_span",
    "sample_float",
    "sample_decimal",
    # unit interval
    "unit_double",
    "unit_decimal",
]
