"""Exception hierarchy for range sampling.

Every error carries an :class:`ErrorCode` so callers can branch on the
failure category without string matching.  Nothing here is retried
internally -- retry policy belongs to the caller.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Failure categories reported by rangerand."""

    SOURCE_ERROR = "SOURCE_ERROR"
    SOURCE_UNAVAILABLE = "SOURCE_UNAVAILABLE"
    INVALID_RANGE = "INVALID_RANGE"
    INVALID_POLICY = "INVALID_POLICY"


class RangeRandomError(Exception):
    """Base class for all rangerand errors."""

    code: ErrorCode = ErrorCode.SOURCE_ERROR


class SourceError(RangeRandomError):
    """An entropy source failed to produce random data."""

    code = ErrorCode.SOURCE_ERROR


class SourceUnavailableError(SourceError):
    """No usable entropy source was supplied or registered."""

    code = ErrorCode.SOURCE_UNAVAILABLE


class InvalidRangeError(RangeRandomError, ValueError):
    """The requested bounds do not describe a non-empty range.

    Parameters
    ----------
    minimum, maximum:
        The bounds exactly as the caller passed them.
    min_inclusive, max_inclusive:
        Inclusivity of each bound.
    message:
        Overrides the generated ordering message (used for bounds that do
        not fit the numeric type at all).
    """

    code = ErrorCode.INVALID_RANGE

    def __init__(
        self,
        minimum: Any,
        maximum: Any,
        min_inclusive: bool = True,
        max_inclusive: bool = True,
        message: str | None = None,
    ) -> None:
        self.minimum = minimum
        self.maximum = maximum
        self.min_inclusive = min_inclusive
        self.max_inclusive = max_inclusive
        super().__init__(
            message
            or _ordering_message(minimum, maximum, min_inclusive, max_inclusive)
        )


class InvalidPolicyError(RangeRandomError, ValueError):
    """A floating-point adjustment policy was required but not supplied."""

    code = ErrorCode.INVALID_POLICY


def _describe(inclusive: bool) -> str:
    return "inclusive" if inclusive else "exclusive"


def _ordering_message(
    minimum: Any, maximum: Any, min_inclusive: bool, max_inclusive: bool
) -> str:
    # Equality is only allowed when both ends are inclusive.
    allowed_equal = min_inclusive and max_inclusive
    return (
        f"Given minimum [{minimum}] ({_describe(min_inclusive)}) was greater than "
        f"{'' if allowed_equal else 'or equal to '}"
        f"given maximum [{maximum}] ({_describe(max_inclusive)})."
    )
