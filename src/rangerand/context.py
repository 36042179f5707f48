"""Random context -- the entropy sources and adjustment policy a caller owns.

A :class:`RandomContext` replaces process-wide generator singletons: each
holds one source per :class:`SourceKind` plus the live
:class:`FloatingPointAdjustmentPolicy`.  Tests build their own context (or
pass a source directly) instead of touching global state.

A context is not thread-safe.  Callers sharing one across threads must
serialise access themselves.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Mapping

from rangerand.config import Settings
from rangerand.errors import InvalidPolicyError, SourceUnavailableError
from rangerand.numeric import FloatType, IntegerType
from rangerand.policy import FloatingPointAdjustmentPolicy
from rangerand.sampling import (
    normalize_integer,
    sample_decimal,
    sample_float,
    sample_integer,
)
from rangerand.sources import (
    EntropySource,
    FastSource,
    SourceKind,
    SubtractiveSource,
    SystemSource,
)

logger = logging.getLogger(__name__)

SourceLike = EntropySource | SourceKind | str


def resolve_source(
    source: SourceLike | None, sources: Mapping[SourceKind, EntropySource]
) -> EntropySource:
    """Turn a source handle into a concrete :class:`EntropySource`.

    Raises
    ------
    SourceUnavailableError
        If *source* is ``None``, an unknown kind, or not a source at all.
    """
    if isinstance(source, EntropySource):
        return source
    if source is None:
        raise SourceUnavailableError("No entropy source was supplied")
    try:
        kind = SourceKind(source)
    except ValueError:
        raise SourceUnavailableError(f"Unknown entropy source: {source!r}") from None
    try:
        return sources[kind]
    except KeyError:
        raise SourceUnavailableError(
            f"Entropy source {kind.value!r} is not available"
        ) from None


def build_sources(settings: Settings) -> dict[SourceKind, EntropySource]:
    """Create one source of each kind, seeded from *settings*."""
    return {
        SourceKind.FAST: FastSource(settings.fast_seed),
        SourceKind.SUBTRACTIVE: SubtractiveSource(settings.subtractive_seed),
        SourceKind.SYSTEM: SystemSource(),
    }


class RandomContext:
    """Entropy sources plus the floating-point adjustment policy.

    Parameters
    ----------
    sources:
        Sources by kind.  Defaults to one of each built-in kind.
    policy:
        Initial adjustment policy.  Defaults to the one described by
        *settings*.
    settings:
        Configuration; read from the environment if omitted.
    """

    def __init__(
        self,
        sources: Mapping[SourceKind, EntropySource] | None = None,
        policy: FloatingPointAdjustmentPolicy | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings if settings is not None else Settings()
        self._sources: dict[SourceKind, EntropySource] = (
            dict(sources) if sources is not None else build_sources(self._settings)
        )
        if policy is None:
            policy = self._settings.adjustment_policy()
        self._policy = policy.model_copy()
        self._default_kind = self._settings.default_source

    # -- sources -------------------------------------------------------------

    @property
    def default_kind(self) -> SourceKind:
        return self._default_kind

    def source(self, source: SourceLike | None = None) -> EntropySource:
        """Resolve *source* (the configured default if ``None``)."""
        return resolve_source(
            self._default_kind if source is None else source, self._sources
        )

    def reseed(self, kind: SourceKind | str, seed: int | None = None) -> None:
        """Reseed the source registered for *kind*.

        Draws already returned are unaffected; only later draws change.
        Sources that are not seedable are left untouched.
        """
        source = resolve_source(kind, self._sources)
        if not source.seedable:
            logger.info("Source %r is not seedable; reseed(%r) ignored", source, seed)
            return
        source.reseed(seed)

    # -- adjustment policy ---------------------------------------------------

    @property
    def adjustment_policy(self) -> FloatingPointAdjustmentPolicy:
        """A copy of the live policy."""
        return self._policy.model_copy()

    def set_adjustment_policy(self, policy: FloatingPointAdjustmentPolicy) -> None:
        """Install a copy of *policy* as the live policy."""
        if not isinstance(policy, FloatingPointAdjustmentPolicy):
            raise InvalidPolicyError(
                f"A FloatingPointAdjustmentPolicy is required, got {policy!r}"
            )
        self._policy = policy.model_copy()
        logger.info("Installed adjustment policy %r", self._policy)

    # -- sampling ------------------------------------------------------------

    def random_integer(
        self,
        minimum: int,
        maximum: int,
        min_inclusive: bool = True,
        max_inclusive: bool = True,
        int_type: IntegerType = IntegerType.INT32,
        source: SourceLike | None = None,
    ) -> int:
        resolved = self.source(source)
        canonical = normalize_integer(
            minimum, maximum, min_inclusive, max_inclusive, int_type
        )
        if canonical.is_degenerate:
            return canonical.lo
        return sample_integer(resolved, canonical, int_type)

    def random_integers(
        self,
        size: int,
        minimum: int,
        maximum: int,
        min_inclusive: bool = True,
        max_inclusive: bool = True,
        int_type: IntegerType = IntegerType.INT32,
        source: SourceLike | None = None,
    ) -> list[int]:
        """Return *size* independent draws from the same range."""
        if size <= 0:
            raise ValueError(f"size must be > 0, got {size}")
        resolved = self.source(source)
        canonical = normalize_integer(
            minimum, maximum, min_inclusive, max_inclusive, int_type
        )
        if canonical.is_degenerate:
            return [canonical.lo] * size
        return [sample_integer(resolved, canonical, int_type) for _ in range(size)]

    def random_float(
        self,
        minimum: float,
        maximum: float,
        min_inclusive: bool = True,
        max_inclusive: bool = True,
        float_type: FloatType = FloatType.FLOAT64,
        policy: FloatingPointAdjustmentPolicy | None = None,
        source: SourceLike | None = None,
    ) -> float:
        """Draw a float; *policy* overrides the live policy for this call."""
        if policy is not None and not isinstance(policy, FloatingPointAdjustmentPolicy):
            raise InvalidPolicyError(
                f"A FloatingPointAdjustmentPolicy is required, got {policy!r}"
            )
        return sample_float(
            self.source(source),
            minimum,
            maximum,
            min_inclusive,
            max_inclusive,
            self._policy if policy is None else policy,
            float_type,
        )

    def random_decimal(
        self,
        minimum: Decimal | int | str,
        maximum: Decimal | int | str,
        min_inclusive: bool = True,
        max_inclusive: bool = True,
        source: SourceLike | None = None,
    ) -> Decimal:
        return sample_decimal(
            self.source(source), minimum, maximum, min_inclusive, max_inclusive
        )

    def random_bytes(self, count: int, source: SourceLike | None = None) -> bytes:
        return self.source(source).random_bytes(count)

    def __repr__(self) -> str:
        kinds = ", ".join(kind.value for kind in self._sources)
        return f"RandomContext(sources=[{kinds}], default={self._default_kind.value})"
