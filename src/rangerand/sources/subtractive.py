"""Knuth's subtractive generator (Numerical Recipes ``ran3``).

This is the lagged-subtraction scheme that classic runtime ``Random``
classes are built on, with one change: the second table index starts at
31 as Knuth specifies, not at 21.
"""

from __future__ import annotations

import logging
import secrets

from .base import EntropySource

logger = logging.getLogger(__name__)

MBIG = 2**31 - 1
MSEED = 161803398
TABLE_SIZE = 56
LAG = 31

_TO_UNIT = 1.0 / MBIG


class SubtractiveSource(EntropySource):
    """Seedable subtractive PRNG producing integers in ``[0, MBIG)``.

    Parameters
    ----------
    seed:
        Integer seed; only its absolute value (mod ``MBIG``) matters.
        ``None`` draws a seed from the operating system.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._table = [0] * TABLE_SIZE
        self._inext = 0
        self._inextp = LAG
        self._seed: int | None = None
        self._initialise(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    # -- seeding -------------------------------------------------------------

    def _initialise(self, seed: int | None) -> None:
        self._seed = seed
        if seed is None:
            seed = secrets.randbits(31)

        table = self._table
        last = TABLE_SIZE - 1
        mj = (MSEED - abs(seed) % MBIG) % MBIG
        table[last] = mj
        mk = 1
        for i in range(1, last):
            ii = (21 * i) % last
            table[ii] = mk
            mk = mj - mk
            if mk < 0:
                mk += MBIG
            mj = table[ii]

        # Warm up the table.
        for _ in range(4):
            for k in range(1, TABLE_SIZE):
                value = table[k] - table[1 + (k + 30) % last]
                if value < 0:
                    value += MBIG
                table[k] = value

        self._inext = 0
        self._inextp = LAG

    def reseed(self, seed: int | None = None) -> None:
        self._initialise(seed)
        logger.info("Reseeded %s with seed=%r", type(self).__name__, seed)

    # -- sampling ------------------------------------------------------------

    def next_int(self) -> int:
        """Return the next raw sample, ``0 <= n < MBIG``."""
        self._inext += 1
        if self._inext >= TABLE_SIZE:
            self._inext = 1
        self._inextp += 1
        if self._inextp >= TABLE_SIZE:
            self._inextp = 1

        value = self._table[self._inext] - self._table[self._inextp]
        if value == MBIG:
            value -= 1
        if value < 0:
            value += MBIG

        self._table[self._inext] = value
        return value

    def next_double(self) -> float:
        """Return a float in ``[0.0, 1.0)`` with 31 bits of resolution."""
        return self.next_int() * _TO_UNIT

    def fill(self, buffer: bytearray) -> None:
        for i in range(len(buffer)):
            buffer[i] = self.next_int() % 256

    def __repr__(self) -> str:
        return f"SubtractiveSource(seed={self._seed})"
