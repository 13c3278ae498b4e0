from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class ShiftEntry:
    """One recorded shift on a calendar day, times kept as entered."""

    entry_id: int
    work_date: date
    start: str
    end: str
    hourly_rate: float
    note: Optional[str] = None
