"""Entropy sources -- interchangeable producers of raw random bits."""

from enum import Enum

from .base import WORD_WIDTHS, EntropySource
from .fast import FastSource
from .subtractive import SubtractiveSource
from .system import SystemSource


class SourceKind(str, Enum):
    """Names the built-in entropy backends."""

    FAST = "fast"
    SUBTRACTIVE = "subtractive"
    SYSTEM = "system"


__all__ = [
    "WORD_WIDTHS",
    "EntropySource",
    "FastSource",
    "SourceKind",
    "SubtractiveSource",
    "SystemSource",
]
