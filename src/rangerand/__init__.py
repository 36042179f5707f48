"""rangerand -- bias-free uniform sampling over arbitrary numeric ranges."""

from .api import (
    default_context,
    get_adjustment_policy,
    random_bytes,
    random_decimal,
    random_float,
    random_integer,
    random_integers,
    reseed,
    reset_default_context,
    set_adjustment_policy,
)
from .config import Settings
from .context import RandomContext
from .errors import (
    ErrorCode,
    InvalidPolicyError,
    InvalidRangeError,
    RangeRandomError,
    SourceError,
    SourceUnavailableError,
)
from .numeric import FloatType, IntegerType
from .policy import FloatingPointAdjustmentPolicy
from .sources import (
    EntropySource,
    FastSource,
    SourceKind,
    SubtractiveSource,
    SystemSource,
)

__all__ = [
    # api
    "default_context",
    "reset_default_context",
    "random_integer",
    "random_integers",
    "random_float",
    "random_decimal",
    "random_bytes",
    "reseed",
    "get_adjustment_policy",
    "set_adjustment_policy",
    # context / config
    "RandomContext",
    "Settings",
    "FloatingPointAdjustmentPolicy",
    # numeric kinds
    "IntegerType",
    "FloatType",
    # sources
    "EntropySource",
    "SourceKind",
    "FastSource",
    "SubtractiveSource",
    "SystemSource",
    # errors
    "ErrorCode",
    "RangeRandomError",
    "SourceError",
    "SourceUnavailableError",
    "InvalidRangeError",
    "InvalidPolicyError",
]
