"""Module-level entry points backed by a lazily built default context.

Every sampling function takes the entropy source first: either an
:class:`EntropySource` instance or a :class:`SourceKind` naming one of the
default context's sources.  ``None`` is rejected rather than silently
replaced by a default.
"""

from __future__ import annotations

from decimal import Decimal

from rangerand.config import Settings
from rangerand.context import RandomContext, SourceLike
from rangerand.errors import SourceUnavailableError
from rangerand.numeric import FloatType, IntegerType
from rangerand.policy import FloatingPointAdjustmentPolicy
from rangerand.sources import SourceKind

_default_context: RandomContext | None = None


def default_context() -> RandomContext:
    """Return the process-wide context, building it from :class:`Settings` once."""
    global _default_context
    if _default_context is None:
        _default_context = RandomContext(settings=Settings())
    return _default_context


def reset_default_context(context: RandomContext | None = None) -> None:
    """Replace the process-wide context (``None`` rebuilds it on next use)."""
    global _default_context
    _default_context = context


def _require(source: SourceLike | None) -> SourceLike:
    if source is None:
        raise SourceUnavailableError("No entropy source was supplied")
    return source


def random_integer(
    source: SourceLike,
    minimum: int,
    maximum: int,
    min_inclusive: bool = True,
    max_inclusive: bool = True,
    int_type: IntegerType = IntegerType.INT32,
) -> int:
    """Return a uniform integer of *int_type* between *minimum* and *maximum*.

    A range holding a single value returns it without drawing entropy.

    Raises
    ------
    SourceUnavailableError
        If *source* is missing or unknown.
    InvalidRangeError
        If the bounds are out of order for the requested inclusivity, the
        range is empty, or a bound does not fit *int_type*.
    """
    return default_context().random_integer(
        minimum, maximum, min_inclusive, max_inclusive, int_type,
        source=_require(source),
    )


def random_integers(
    source: SourceLike,
    size: int,
    minimum: int,
    maximum: int,
    min_inclusive: bool = True,
    max_inclusive: bool = True,
    int_type: IntegerType = IntegerType.INT32,
) -> list[int]:
    """Return a list of *size* uniform integers from the same range."""
    return default_context().random_integers(
        size, minimum, maximum, min_inclusive, max_inclusive, int_type,
        source=_require(source),
    )


def random_float(
    source: SourceLike,
    minimum: float,
    maximum: float,
    min_inclusive: bool = True,
    max_inclusive: bool = True,
    float_type: FloatType = FloatType.FLOAT64,
    policy: FloatingPointAdjustmentPolicy | None = None,
) -> float:
    """Return a uniform float between *minimum* and *maximum*.

    Non-finite bounds are replaced through *policy*, or through the default
    context's live policy when *policy* is ``None``.
    """
    return default_context().random_float(
        minimum, maximum, min_inclusive, max_inclusive, float_type, policy,
        source=_require(source),
    )


def random_decimal(
    source: SourceLike,
    minimum: Decimal | int | str,
    maximum: Decimal | int | str,
    min_inclusive: bool = True,
    max_inclusive: bool = True,
) -> Decimal:
    """Return a uniform decimal between *minimum* and *maximum*."""
    return default_context().random_decimal(
        minimum, maximum, min_inclusive, max_inclusive, source=_require(source)
    )


def random_bytes(source: SourceLike, count: int) -> bytes:
    """Return *count* random bytes from *source*."""
    return default_context().random_bytes(count, source=_require(source))


def reseed(kind: SourceKind | str, seed: int | None = None) -> None:
    """Reseed one of the default context's sources."""
    default_context().reseed(kind, seed)


def get_adjustment_policy() -> FloatingPointAdjustmentPolicy:
    """Return a copy of the default context's live adjustment policy."""
    return default_context().adjustment_policy


def set_adjustment_policy(policy: FloatingPointAdjustmentPolicy) -> None:
    """Install a copy of *policy* in the default context.

    Raises
    ------
    InvalidPolicyError
        If *policy* is ``None`` or not a policy.
    """
    default_context().set_adjustment_policy(policy)
