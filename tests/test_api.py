"""Tests for the module-level API and its process-wide default context."""

from __future__ import annotations

import math
from collections import Counter
from decimal import Decimal

import pytest

import rangerand
from rangerand import (
    FloatingPointAdjustmentPolicy,
    InvalidPolicyError,
    InvalidRangeError,
    RandomContext,
    SourceKind,
    SourceUnavailableError,
)
from tests.conftest import CountingSource


# ---------------------------------------------------------------------------
# Source handling
# ---------------------------------------------------------------------------

class TestSourceArgument:
    @pytest.mark.parametrize(
        "call",
        [
            lambda: rangerand.random_integer(None, 0, 10),
            lambda: rangerand.random_integers(None, 3, 0, 10),
            lambda: rangerand.random_float(None, 0.0, 1.0),
            lambda: rangerand.random_decimal(None, 0, 1),
            lambda: rangerand.random_bytes(None, 4),
        ],
    )
    def test_none_source_rejected(self, call) -> None:
        with pytest.raises(SourceUnavailableError):
            call()

    def test_none_source_rejected_for_single_value_range(self) -> None:
        with pytest.raises(SourceUnavailableError):
            rangerand.random_integer(None, 3, 3)

    def test_unknown_kind(self) -> None:
        with pytest.raises(SourceUnavailableError):
            rangerand.random_integer("quantum", 0, 10)

    def test_explicit_instance(self) -> None:
        source = CountingSource()
        value = rangerand.random_integer(source, 0, 10)
        assert 0 <= value <= 10
        assert source.draws >= 1

    @pytest.mark.parametrize("kind", list(SourceKind))
    def test_every_kind(self, kind: SourceKind) -> None:
        for _ in range(50):
            assert -3 <= rangerand.random_integer(kind, -3, 3) <= 3

    def test_default_context_is_shared(self) -> None:
        assert rangerand.default_context() is rangerand.default_context()

    def test_reset_default_context(self) -> None:
        custom = RandomContext(sources={SourceKind.FAST: CountingSource()})
        rangerand.reset_default_context(custom)
        assert rangerand.default_context() is custom
        with pytest.raises(SourceUnavailableError):
            rangerand.random_integer(SourceKind.SYSTEM, 0, 10)


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------

class TestRandomInteger:
    def test_uniform_small_range(self) -> None:
        n = 100_000
        counts = Counter(
            rangerand.random_integer(SourceKind.FAST, -5, 5) for _ in range(n)
        )
        assert set(counts) == set(range(-5, 6))
        expected = n / 11
        sd = math.sqrt(n * (1 / 11) * (10 / 11))
        for v in range(-5, 6):
            assert abs(counts[v] - expected) < 4 * sd
        chi2 = sum((counts[v] - expected) ** 2 / expected for v in range(-5, 6))
        # 99.99th percentile of chi-squared with 10 degrees of freedom.
        assert chi2 < 35.56

    def test_exclusive_bounds(self) -> None:
        values = {
            rangerand.random_integer(SourceKind.SUBTRACTIVE, 0, 4, False, False)
            for _ in range(500)
        }
        assert values == {1, 2, 3}

    def test_inverted_bounds(self) -> None:
        with pytest.raises(InvalidRangeError):
            rangerand.random_integer(SourceKind.FAST, 10, 1)

    def test_random_integers(self) -> None:
        values = rangerand.random_integers(SourceKind.FAST, 20, 1, 3)
        assert len(values) == 20
        assert all(1 <= v <= 3 for v in values)

    def test_random_integers_requires_positive_size(self) -> None:
        with pytest.raises(ValueError):
            rangerand.random_integers(SourceKind.FAST, 0, 1, 3)


# ---------------------------------------------------------------------------
# Floats, decimals and bytes
# ---------------------------------------------------------------------------

class TestRandomFloat:
    def test_equal_bounds(self) -> None:
        assert rangerand.random_float(SourceKind.FAST, 10.0, 10.0) == 10.0

    def test_infinite_bound_with_installed_policy(self) -> None:
        rangerand.set_adjustment_policy(
            FloatingPointAdjustmentPolicy(positive_infinity_sub=1000.0)
        )
        for _ in range(500):
            assert 0.0 <= rangerand.random_float(SourceKind.FAST, 0.0, math.inf) <= 1000.0

    def test_per_call_policy(self) -> None:
        policy = FloatingPointAdjustmentPolicy(nan_sub=2.0)
        for _ in range(100):
            v = rangerand.random_float(SourceKind.FAST, 1.0, math.nan, policy=policy)
            assert 1.0 <= v <= 2.0


class TestRandomDecimal:
    def test_within_bounds(self) -> None:
        for _ in range(200):
            v = rangerand.random_decimal(SourceKind.FAST, Decimal("-0.5"), Decimal("0.5"))
            assert Decimal("-0.5") <= v <= Decimal("0.5")


class TestRandomBytes:
    @pytest.mark.parametrize("kind", list(SourceKind))
    def test_length(self, kind: SourceKind) -> None:
        assert len(rangerand.random_bytes(kind, 33)) == 33

    def test_zero(self) -> None:
        assert rangerand.random_bytes(SourceKind.SYSTEM, 0) == b""

    def test_negative(self) -> None:
        with pytest.raises(ValueError):
            rangerand.random_bytes(SourceKind.FAST, -1)


# ---------------------------------------------------------------------------
# Reseeding and policy
# ---------------------------------------------------------------------------

class TestReseed:
    def test_replays_fast(self) -> None:
        rangerand.reseed(SourceKind.FAST, 123)
        first = rangerand.random_integers(SourceKind.FAST, 10, 0, 1000)
        rangerand.reseed(SourceKind.FAST, 123)
        assert rangerand.random_integers(SourceKind.FAST, 10, 0, 1000) == first

    def test_system_is_noop(self) -> None:
        rangerand.reseed(SourceKind.SYSTEM, 123)
        assert len(rangerand.random_bytes(SourceKind.SYSTEM, 4)) == 4


class TestPolicyAccessors:
    def test_get_returns_copy(self) -> None:
        policy = rangerand.get_adjustment_policy()
        assert policy == FloatingPointAdjustmentPolicy()
        assert policy is not rangerand.get_adjustment_policy()

    def test_set_then_get(self) -> None:
        policy = FloatingPointAdjustmentPolicy(default_return=1.5, adjust_errors=False)
        rangerand.set_adjustment_policy(policy)
        assert rangerand.get_adjustment_policy() == policy

    def test_set_none(self) -> None:
        with pytest.raises(InvalidPolicyError):
            rangerand.set_adjustment_policy(None)
