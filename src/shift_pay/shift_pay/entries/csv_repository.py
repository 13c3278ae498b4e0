from __future__ import annotations

import csv
import logging
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import ValidationError
from .memory_repository import InMemoryShiftEntryRepository
from .model import ShiftEntry

logger = logging.getLogger(__name__)

FIELDNAMES = ["entry_id", "work_date", "start", "end", "hourly_rate", "note"]


def _row_to_entry(row: dict, line_no: int) -> ShiftEntry:
    try:
        return ShiftEntry(
            entry_id=int(row["entry_id"]),
            work_date=parse_iso_date(row["work_date"]),
            start=row["start"],
            end=row["end"],
            hourly_rate=float(row["hourly_rate"]),
            note=row.get("note") or None,
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"Malformed entries CSV row {line_no}: {e}") from e


def _entry_to_row(entry: ShiftEntry) -> dict:
    return {
        "entry_id": entry.entry_id,
        "work_date": entry.work_date.strftime("%Y-%m-%d"),
        "start": entry.start,
        "end": entry.end,
        "hourly_rate": entry.hourly_rate,
        "note": entry.note or "",
    }


class CsvShiftEntryRepository:
    """Entries persisted to a CSV file.

    The whole file is read once on construction and rewritten after every
    mutation; lookups are served from memory.
    """

    def __init__(self, path: Path | str):
        self._path = Path(path)
        self._mem = InMemoryShiftEntryRepository(self._load())

    def _load(self) -> list[ShiftEntry]:
        if not self._path.exists():
            return []
        with self._path.open("r", newline="", encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            # line 1 is the header
            entries = [_row_to_entry(row, i) for i, row in enumerate(reader, start=2)]
        seen: set[int] = set()
        for e in entries:
            if e.entry_id in seen:
                raise ValidationError(f"Duplicate entry_id {e.entry_id} in {self._path}")
            seen.add(e.entry_id)
        logger.info("loaded %d shift entries from %s", len(entries), self._path)
        return entries

    def _flush(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        with tmp.open("w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
            writer.writeheader()
            for e in self._mem.all():
                writer.writerow(_entry_to_row(e))
        tmp.replace(self._path)

    def add(
        self,
        *,
        work_date: date,
        start: str,
        end: str,
        hourly_rate: float,
        note: Optional[str] = None,
    ) -> ShiftEntry:
        entry = self._mem.add(work_date=work_date, start=start, end=end, hourly_rate=hourly_rate, note=note)
        self._flush()
        return entry

    def delete(self, entry_id: int) -> bool:
        deleted = self._mem.delete(entry_id)
        if deleted:
            self._flush()
        return deleted

    def get_by_id(self, entry_id: int) -> Optional[ShiftEntry]:
        return self._mem.get_by_id(entry_id)

    def get_for_date(self, work_date: date) -> Sequence[ShiftEntry]:
        return self._mem.get_for_date(work_date)

    def get_between(self, *, start_date: date, end_date: date) -> Sequence[ShiftEntry]:
        return self._mem.get_between(start_date=start_date, end_date=end_date)

    def all(self) -> Sequence[ShiftEntry]:
        return self._mem.all()
