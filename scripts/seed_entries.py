"""Seed a few demo shift entries for the current month."""

from __future__ import annotations

import importlib
from datetime import date

from config import get_settings_module

from src.shift_pay.shift_pay.container import build_container

DEMO_SHIFTS = [
    (1, "08:00", "15:30"),
    (2, "14:00", "17:00"),
    (3, "22:00", "06:00"),
    (4, "07:00", "19:00"),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        entries_csv_path=settings.ENTRIES_CSV_PATH,
        default_hourly_rate=settings.DEFAULT_HOURLY_RATE,
    )
    today = date.today()
    rate = settings.DEFAULT_HOURLY_RATE or 20.0
    for day, start, end in DEMO_SHIFTS:
        entry = container.entry_service.add_entry(
            work_date=today.replace(day=day), start=start, end=end, hourly_rate=rate, note="demo"
        )
        print(f"OK: entry {entry.entry_id} {entry.work_date} {start}-{end}")


if __name__ == "__main__":
    main()
