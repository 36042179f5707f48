"""Floating-point adjustment policy -- finite stand-ins for non-finite bounds.

The float range mapper blends its two bounds arithmetically, which is
meaningless for ``inf`` and ``nan``.  A policy decides which finite value
replaces each of them before the blend runs.
"""

from __future__ import annotations

import math
import sys

from pydantic import BaseModel, ConfigDict, field_validator


class FloatingPointAdjustmentPolicy(BaseModel):
    """Immutable rules for replacing non-finite range bounds.

    Instances are frozen; "updating" a policy means building a new one,
    e.g. ``policy.model_copy(update={"nan_sub": 1.0})``.
    """

    model_config = ConfigDict(frozen=True)

    adjust_errors: bool = True
    """If ``True`` each non-finite value has its own substitute; otherwise
    every non-finite value becomes :attr:`default_return`."""

    default_return: float = 0.0
    """Substitute for any non-finite value when ``adjust_errors`` is off."""

    positive_infinity_sub: float = sys.float_info.max
    negative_infinity_sub: float = -sys.float_info.max
    nan_sub: float = 0.0

    @field_validator(
        "default_return",
        "positive_infinity_sub",
        "negative_infinity_sub",
        "nan_sub",
    )
    @classmethod
    def _validate_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("Substitute values must be finite")
        return v

    def adjust(self, value: float) -> float:
        """Return *value* unchanged if finite, else its configured substitute."""
        if math.isfinite(value):
            return value
        if not self.adjust_errors:
            return self.default_return
        if math.isnan(value):
            return self.nan_sub
        return self.positive_infinity_sub if value > 0 else self.negative_infinity_sub
