from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import MINUTES_PER_HOUR
from ..core.enums import PayFailure, SegmentKind


@dataclass(frozen=True)
class TimeOfDay:
    """Wall-clock time with minute precision. Built by ``parse_time``."""

    hour: int
    minute: int

    @property
    def minutes(self) -> int:
        return self.hour * MINUTES_PER_HOUR + self.minute

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass(frozen=True)
class ShiftInterval:
    """Half-open ``[start, end)`` in minutes since the start day's midnight.

    ``end`` may go past 1439 when the shift runs into the next day.
    """

    start: int
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Segment:
    kind: SegmentKind
    start: int
    end: int

    @property
    def minutes(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class PaySummary:
    regular_minutes: int
    overtime_minutes: int
    hourly_rate: float
    total_pay: float
    segments: tuple[Segment, ...] = ()

    @property
    def regular_hours(self) -> float:
        return self.regular_minutes / MINUTES_PER_HOUR

    @property
    def overtime_hours(self) -> float:
        return self.overtime_minutes / MINUTES_PER_HOUR

    @property
    def total_hours(self) -> float:
        return (self.regular_minutes + self.overtime_minutes) / MINUTES_PER_HOUR


@dataclass(frozen=True)
class PayResult:
    """Outcome of ``compute_pay``: exactly one of summary/failure is set."""

    summary: Optional[PaySummary] = None
    failure: Optional[PayFailure] = None
    message: str = ""

    @classmethod
    def success(cls, summary: PaySummary) -> "PayResult":
        return cls(summary=summary)

    @classmethod
    def error(cls, failure: PayFailure, message: str) -> "PayResult":
        return cls(failure=failure, message=message)

    @property
    def ok(self) -> bool:
        return self.summary is not None
