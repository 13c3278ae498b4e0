from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from .model import ShiftEntry


class InMemoryShiftEntryRepository:
    """Entries kept in a dict keyed by work date."""

    def __init__(self, entries: Iterable[ShiftEntry] = ()):
        self._by_date: dict[date, list[ShiftEntry]] = {}
        self._id = 0
        for e in entries:
            self._by_date.setdefault(e.work_date, []).append(e)
            self._id = max(self._id, e.entry_id)

    def add(
        self,
        *,
        work_date: date,
        start: str,
        end: str,
        hourly_rate: float,
        note: Optional[str] = None,
    ) -> ShiftEntry:
        self._id += 1
        entry = ShiftEntry(
            entry_id=self._id,
            work_date=work_date,
            start=start,
            end=end,
            hourly_rate=float(hourly_rate),
            note=note,
        )
        self._by_date.setdefault(work_date, []).append(entry)
        return entry

    def delete(self, entry_id: int) -> bool:
        for work_date, items in list(self._by_date.items()):
            kept = [e for e in items if e.entry_id != entry_id]
            if len(kept) != len(items):
                if kept:
                    self._by_date[work_date] = kept
                else:
                    del self._by_date[work_date]
                return True
        return False

    def get_by_id(self, entry_id: int) -> Optional[ShiftEntry]:
        for e in self.all():
            if e.entry_id == entry_id:
                return e
        return None

    def get_for_date(self, work_date: date) -> Sequence[ShiftEntry]:
        return list(self._by_date.get(work_date, []))

    def get_between(self, *, start_date: date, end_date: date) -> Sequence[ShiftEntry]:
        return [e for e in self.all() if start_date <= e.work_date <= end_date]

    def all(self) -> Sequence[ShiftEntry]:
        items = [e for entries in self._by_date.values() for e in entries]
        items.sort(key=lambda e: (e.work_date, e.entry_id))
        return items
