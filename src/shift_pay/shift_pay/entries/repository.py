from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import ShiftEntry


class ShiftEntryRepository(Protocol):
    def add(
        self,
        *,
        work_date: date,
        start: str,
        end: str,
        hourly_rate: float,
        note: Optional[str] = None,
    ) -> ShiftEntry:
        raise NotImplementedError

    def delete(self, entry_id: int) -> bool:
        raise NotImplementedError

    def get_by_id(self, entry_id: int) -> Optional[ShiftEntry]:
        raise NotImplementedError

    def get_for_date(self, work_date: date) -> Sequence[ShiftEntry]:
        raise NotImplementedError

    def get_between(self, *, start_date: date, end_date: date) -> Sequence[ShiftEntry]:
        """Entries with ``start_date <= work_date <= end_date``, oldest first."""

        raise NotImplementedError

    def all(self) -> Sequence[ShiftEntry]:
        raise NotImplementedError
