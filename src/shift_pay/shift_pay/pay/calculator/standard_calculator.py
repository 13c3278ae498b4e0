from __future__ import annotations

from ...core.constants import LUNCH_MINUTES, MINUTES_PER_HOUR, OVERTIME_MULTIPLIER
from ...core.exceptions import NoWorkableTime
from ..model import PaySummary, ShiftInterval
from ..segmentation import segment_shift
from .base import PayCalculator


def deduct_lunch(regular: int, overtime: int, lunch_minutes: int = LUNCH_MINUTES) -> tuple[int, int]:
    """Take the break out of regular time first, then overtime. Never below 0."""
    remaining = min(lunch_minutes, regular + overtime)
    from_regular = min(remaining, regular)
    regular -= from_regular
    remaining -= from_regular
    overtime -= min(remaining, overtime)
    return regular, overtime


class StandardPayCalculator(PayCalculator):
    """Standard rule: fixed 15:30 overtime boundary, 30 min lunch, 1.5x overtime."""

    def summarize(self, interval: ShiftInterval, hourly_rate: float) -> PaySummary:
        regular, overtime, segments = segment_shift(interval)
        regular, overtime = deduct_lunch(regular, overtime)
        if regular + overtime <= 0:
            raise NoWorkableTime(
                f"Shift of {interval.duration} min is fully consumed by the {LUNCH_MINUTES} min lunch break"
            )

        regular_hours = regular / MINUTES_PER_HOUR
        overtime_hours = overtime / MINUTES_PER_HOUR
        total_pay = regular_hours * hourly_rate + overtime_hours * hourly_rate * OVERTIME_MULTIPLIER
        return PaySummary(
            regular_minutes=regular,
            overtime_minutes=overtime,
            hourly_rate=hourly_rate,
            total_pay=total_pay,
            segments=segments,
        )
