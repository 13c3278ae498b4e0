from __future__ import annotations

from enum import Enum


class SegmentKind(str, Enum):
    """Classification of a slice of worked time."""

    REGULAR = "REGULAR"
    OVERTIME = "OVERTIME"


class PayFailure(str, Enum):
    """Failure kinds returned by ``compute_pay`` instead of raising."""

    INVALID_TIME_FORMAT = "INVALID_TIME_FORMAT"
    INVALID_RATE = "INVALID_RATE"
    ZERO_OR_NEGATIVE_DURATION = "ZERO_OR_NEGATIVE_DURATION"
    NO_WORKABLE_TIME = "NO_WORKABLE_TIME"
