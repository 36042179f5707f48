"""Entropy source backed by the operating system CSPRNG."""

from __future__ import annotations

import logging
import secrets

from rangerand.errors import SourceError

from .base import EntropySource

logger = logging.getLogger(__name__)


class SystemSource(EntropySource):
    """Draws bytes from :func:`secrets.token_bytes`.

    The OS generator cannot be seeded; :meth:`reseed` is accepted and
    ignored so all sources share one interface.
    """

    seedable = False

    def fill(self, buffer: bytearray) -> None:
        if not buffer:
            return
        try:
            buffer[:] = secrets.token_bytes(len(buffer))
        except OSError as exc:
            logger.warning("OS entropy source failed: %s", exc)
            raise SourceError(f"OS entropy source failed: {exc}") from exc

    def reseed(self, seed: int | None = None) -> None:
        logger.debug("Ignoring reseed(%r) on %s", seed, type(self).__name__)
