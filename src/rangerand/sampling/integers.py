"""Uniform integer sampling over a canonical ``[lo, hi)`` range.

Modulo bias is removed by rejection: raw words at or above the largest
multiple of the span that fits in the word are discarded and redrawn.
The accepted region is always more than half of the word space, so the
expected number of draws is below 2.
"""

from __future__ import annotations

from rangerand.numeric import IntegerType
from rangerand.sources.base import EntropySource

from .boundaries import CanonicalRange


def rejection_threshold(span: int, word_bits: int) -> int:
    """Return the exclusive upper limit of accepted raw words.

    ``threshold = UMAX - (UMAX mod span)`` is a multiple of *span*, so every
    residue ``v mod span`` is hit by exactly ``threshold // span`` words.
    """
    umax = (1 << word_bits) - 1
    return umax - (umax % span)


def sample_span(source: EntropySource, span: int, word_bits: int) -> int:
    """Return a uniform integer in ``[0, span)`` from *word_bits*-wide words.

    *span* may equal ``2**word_bits``, in which case one raw word is used
    as-is.
    """
    if span == 1:
        return 0
    if span == 1 << word_bits:
        return source.next_word(word_bits)

    threshold = rejection_threshold(span, word_bits)
    while True:
        v = source.next_word(word_bits)
        if v < threshold:
            return v % span


def sample_integer(
    source: EntropySource,
    canonical: CanonicalRange,
    int_type: IntegerType = IntegerType.INT32,
) -> int:
    """Return a uniform integer of *int_type* in ``[canonical.lo, canonical.hi)``.

    Types narrower than 32 bits draw through 32-bit words; the span is
    computed on unbounded integers so ranges touching the type's extremes
    never overflow.
    """
    if canonical.is_degenerate:
        return canonical.lo
    if canonical.span == 1 << int_type.bits == 1 << int_type.word_bits:
        # Whole 32/64-bit span: the raw word already is the answer.
        return int_type.reinterpret(source.next_word(int_type.word_bits))
    return canonical.lo + sample_span(source, canonical.span, int_type.word_bits)
