"""Split a shift interval into regular and overtime time.

Each calendar day the shift touches has its own overtime boundary at
``OVERTIME_START``. Time before the boundary is regular, time from the
boundary to the next midnight is overtime.
"""
from __future__ import annotations

from ..core.constants import MINUTES_PER_DAY, OVERTIME_START
from ..core.enums import SegmentKind
from .model import Segment, ShiftInterval


def iter_segments(interval: ShiftInterval):
    cursor = interval.start
    end = interval.end
    while cursor < end:
        day_start = (cursor // MINUTES_PER_DAY) * MINUTES_PER_DAY
        boundary = day_start + OVERTIME_START
        if cursor < boundary:
            seg_end = min(end, boundary)
            kind = SegmentKind.REGULAR
        else:
            seg_end = min(end, day_start + MINUTES_PER_DAY)
            kind = SegmentKind.OVERTIME
        yield Segment(kind=kind, start=cursor, end=seg_end)
        cursor = seg_end


def segment_shift(interval: ShiftInterval) -> tuple[int, int, tuple[Segment, ...]]:
    """Return ``(regular_minutes, overtime_minutes, segments)``."""
    segments = tuple(iter_segments(interval))
    regular = sum(s.minutes for s in segments if s.kind == SegmentKind.REGULAR)
    overtime = sum(s.minutes for s in segments if s.kind == SegmentKind.OVERTIME)
    return regular, overtime, segments
