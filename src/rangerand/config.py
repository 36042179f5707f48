"""Process configuration read from the environment (``RANGERAND_*``)."""

from __future__ import annotations

import sys

from pydantic_settings import BaseSettings, SettingsConfigDict

from rangerand.policy import FloatingPointAdjustmentPolicy
from rangerand.sources import SourceKind


class Settings(BaseSettings):
    """Defaults for the process-wide :class:`~rangerand.context.RandomContext`."""

    model_config = SettingsConfigDict(env_prefix="RANGERAND_")

    # Sources
    default_source: SourceKind = SourceKind.SUBTRACTIVE
    fast_seed: int | None = None
    subtractive_seed: int | None = None

    # Floating-point adjustment policy
    adjust_errors: bool = True
    default_return: float = 0.0
    positive_infinity_sub: float = sys.float_info.max
    negative_infinity_sub: float = -sys.float_info.max
    nan_sub: float = 0.0

    def adjustment_policy(self) -> FloatingPointAdjustmentPolicy:
        """Build the initial adjustment policy from these settings."""
        return FloatingPointAdjustmentPolicy(
            adjust_errors=self.adjust_errors,
            default_return=self.default_return,
            positive_infinity_sub=self.positive_infinity_sub,
            negative_infinity_sub=self.negative_infinity_sub,
            nan_sub=self.nan_sub,
        )
