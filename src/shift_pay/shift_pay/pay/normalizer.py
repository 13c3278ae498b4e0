from __future__ import annotations

from ..core.constants import MINUTES_PER_DAY
from ..core.exceptions import ZeroOrNegativeDuration
from .model import ShiftInterval, TimeOfDay


def normalize_shift(start: TimeOfDay, end: TimeOfDay) -> ShiftInterval:
    """Turn a start/end clock pair into a positive minute interval.

    An end that is not strictly after the start is read as next day, so
    ``start == end`` becomes a full 24 hour shift.
    """
    start_min = start.minutes
    end_min = end.minutes
    if end_min <= start_min:
        end_min += MINUTES_PER_DAY

    if end_min - start_min <= 0:
        raise ZeroOrNegativeDuration(f"Shift {start}-{end} has no duration")
    return ShiftInterval(start=start_min, end=end_min)
