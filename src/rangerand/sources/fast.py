"""Fast, non-cryptographic entropy source backed by the Mersenne Twister."""

from __future__ import annotations

import logging
import random

from .base import WORD_WIDTHS, EntropySource

logger = logging.getLogger(__name__)


class FastSource(EntropySource):
    """Seedable PRNG wrapping :class:`random.Random`.

    Parameters
    ----------
    seed:
        Integer seed.  ``None`` seeds from the operating system.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int | None:
        """Return the seed this source was last initialised with."""
        return self._seed

    def fill(self, buffer: bytearray) -> None:
        if buffer:
            buffer[:] = self._rng.getrandbits(len(buffer) * 8).to_bytes(
                len(buffer), "little"
            )

    def next_word(self, width: int) -> int:
        if width not in WORD_WIDTHS:
            raise ValueError(f"Unsupported word width: {width!r}")
        return self._rng.getrandbits(width)

    def reseed(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng.seed(seed)
        logger.info("Reseeded %s with seed=%r", type(self).__name__, seed)

    def __repr__(self) -> str:
        return f"FastSource(seed={self._seed})"
