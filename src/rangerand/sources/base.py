"""The capability every entropy source implements.

A source only has to fill byte buffers; fixed-width unsigned words are
derived from that by default.  Sources keep no locks -- callers sharing a
source between threads must serialise access themselves.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

WORD_WIDTHS = (8, 16, 32, 64)


class EntropySource(ABC):
    """Opaque producer of random bits."""

    seedable: bool = True

    @abstractmethod
    def fill(self, buffer: bytearray) -> None:
        """Fill *buffer* in place with random bytes.

        Raises
        ------
        SourceError
            If the underlying generator cannot produce data.
        """

    @abstractmethod
    def reseed(self, seed: int | None = None) -> None:
        """Restart the generator from *seed* (a fresh seed if ``None``)."""

    def next_word(self, width: int) -> int:
        """Return an unsigned integer of *width* bits (8, 16, 32 or 64)."""
        if width not in WORD_WIDTHS:
            raise ValueError(f"Unsupported word width: {width!r}")
        buffer = bytearray(width // 8)
        self.fill(buffer)
        return int.from_bytes(buffer, "little")

    def random_bytes(self, count: int) -> bytes:
        """Return *count* random bytes."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        buffer = bytearray(count)
        if count:
            self.fill(buffer)
        return bytes(buffer)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
