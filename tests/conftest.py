"""Shared fixtures and test doubles for rangerand tests."""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from rangerand import RandomContext, Settings, reset_default_context
from rangerand.sources import EntropySource, FastSource, SourceKind


class ScriptedSource(EntropySource):
    """Returns pre-scripted words, in order, and counts every draw.

    Words are masked to the requested width.  Running out of script is a
    test bug and raises ``AssertionError``.
    """

    def __init__(self, words: Iterable[int] = ()) -> None:
        self._words = list(words)
        self.draws: list[int] = []
        """Width of every word drawn so far."""

    def fill(self, buffer: bytearray) -> None:
        word = self.next_word(8 * len(buffer)) if len(buffer) in (1, 2, 4, 8) else 0
        buffer[:] = word.to_bytes(len(buffer), "little")

    def next_word(self, width: int) -> int:
        assert self._words, "ScriptedSource ran out of words"
        self.draws.append(width)
        return self._words.pop(0) & ((1 << width) - 1)

    def reseed(self, seed: int | None = None) -> None:
        pass


class CountingSource(EntropySource):
    """Wraps a seeded FastSource and counts raw word draws."""

    def __init__(self, seed: int = 42) -> None:
        self._inner = FastSource(seed)
        self.draws = 0

    def fill(self, buffer: bytearray) -> None:
        self.draws += 1
        self._inner.fill(buffer)

    def next_word(self, width: int) -> int:
        self.draws += 1
        return self._inner.next_word(width)

    def reseed(self, seed: int | None = None) -> None:
        self._inner.reseed(seed)


@pytest.fixture
def fast() -> FastSource:
    return FastSource(1234)


@pytest.fixture
def counting() -> CountingSource:
    return CountingSource(99)


@pytest.fixture
def context() -> RandomContext:
    """A context with fixed seeds, independent of the environment."""
    return RandomContext(
        settings=Settings(
            default_source=SourceKind.FAST, fast_seed=7, subtractive_seed=7
        )
    )


@pytest.fixture(autouse=True)
def _isolate_default_context(monkeypatch: pytest.MonkeyPatch):
    """Give every test a fresh, deterministic process-wide context."""
    for name in ("RANGERAND_DEFAULT_SOURCE", "RANGERAND_FAST_SEED"):
        monkeypatch.delenv(name, raising=False)
    reset_default_context(
        RandomContext(settings=Settings(fast_seed=2024, subtractive_seed=2024))
    )
    yield
    reset_default_context()
