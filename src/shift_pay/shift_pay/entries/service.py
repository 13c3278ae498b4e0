from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import ValidationError
from ..pay.service import Rate, compute_pay
from .model import ShiftEntry
from .repository import ShiftEntryRepository

logger = logging.getLogger(__name__)


class ShiftEntryService:
    def __init__(self, entries: ShiftEntryRepository):
        self._entries = entries

    def add_entry(
        self,
        *,
        work_date: date,
        start: str,
        end: str,
        hourly_rate: Rate,
        note: Optional[str] = None,
    ) -> ShiftEntry:
        """Store a shift after checking it produces a pay summary."""
        start = require_non_empty(start, "start")
        end = require_non_empty(end, "end")
        note = optional_text(note, "note")

        result = compute_pay(start, end, hourly_rate)
        if not result.ok:
            raise ValidationError(result.message)

        entry = self._entries.add(
            work_date=work_date,
            start=start,
            end=end,
            hourly_rate=result.summary.hourly_rate,
            note=note,
        )
        logger.info("stored shift entry %s on %s (%s-%s)", entry.entry_id, work_date, start, end)
        return entry

    def remove_entry(self, entry_id: int) -> None:
        if not self._entries.delete(entry_id):
            raise ValidationError(f"Shift entry {entry_id} does not exist")
        logger.info("deleted shift entry %s", entry_id)

    def entries_for_day(self, work_date: date) -> Sequence[ShiftEntry]:
        return self._entries.get_for_date(work_date)
