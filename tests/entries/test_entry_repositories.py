from datetime import date

import pytest

from src.shift_pay.shift_pay.core.exceptions import ValidationError
from src.shift_pay.shift_pay.entries.csv_repository import CsvShiftEntryRepository
from src.shift_pay.shift_pay.entries.memory_repository import InMemoryShiftEntryRepository


def test_memory_repo_keeps_several_entries_per_day(work_date):
    repo = InMemoryShiftEntryRepository()
    first = repo.add(work_date=work_date, start="06:00", end="10:00", hourly_rate=10)
    second = repo.add(work_date=work_date, start="18:00", end="22:00", hourly_rate=12)

    assert [e.entry_id for e in repo.get_for_date(work_date)] == [first.entry_id, second.entry_id]
    assert repo.get_for_date(date(2026, 1, 6)) == []


def test_memory_repo_delete(work_date):
    repo = InMemoryShiftEntryRepository()
    e = repo.add(work_date=work_date, start="06:00", end="10:00", hourly_rate=10)

    assert repo.delete(e.entry_id) is True
    assert repo.delete(e.entry_id) is False
    assert repo.all() == []


def test_memory_repo_get_between_is_inclusive_and_sorted():
    repo = InMemoryShiftEntryRepository()
    repo.add(work_date=date(2026, 2, 1), start="08:00", end="12:00", hourly_rate=10)
    repo.add(work_date=date(2026, 1, 31), start="08:00", end="12:00", hourly_rate=10)
    repo.add(work_date=date(2026, 1, 1), start="08:00", end="12:00", hourly_rate=10)
    repo.add(work_date=date(2025, 12, 31), start="08:00", end="12:00", hourly_rate=10)

    items = repo.get_between(start_date=date(2026, 1, 1), end_date=date(2026, 1, 31))
    assert [e.work_date for e in items] == [date(2026, 1, 1), date(2026, 1, 31)]


def test_csv_repo_persists_across_instances(tmp_path, work_date):
    path = tmp_path / "entries.csv"
    repo = CsvShiftEntryRepository(path)
    kept = repo.add(work_date=work_date, start="08:00", end="17:00", hourly_rate=20, note="site A")
    dropped = repo.add(work_date=work_date, start="18:00", end="19:00", hourly_rate=20)
    repo.delete(dropped.entry_id)

    reloaded = CsvShiftEntryRepository(path)
    assert reloaded.all() == [kept]
    assert path.read_text(encoding="utf-8").splitlines()[0] == "entry_id,work_date,start,end,hourly_rate,note"

    nxt = reloaded.add(work_date=work_date, start="06:00", end="07:00", hourly_rate=20)
    assert nxt.entry_id > kept.entry_id


def test_csv_repo_missing_file_starts_empty(tmp_path):
    assert CsvShiftEntryRepository(tmp_path / "nope.csv").all() == []


def test_csv_repo_rejects_malformed_rows(tmp_path):
    path = tmp_path / "entries.csv"
    path.write_text("entry_id,work_date,start,end,hourly_rate,note\n1,05/01/2026,08:00,17:00,20,\n", encoding="utf-8")

    with pytest.raises(ValidationError):
        CsvShiftEntryRepository(path)


def test_csv_repo_rejects_duplicate_ids(tmp_path):
    path = tmp_path / "entries.csv"
    path.write_text(
        "entry_id,work_date,start,end,hourly_rate,note\n"
        "1,2026-01-05,08:00,17:00,20,\n"
        "1,2026-01-06,08:00,12:00,20,\n",
        encoding="utf-8",
    )

    with pytest.raises(ValidationError):
        CsvShiftEntryRepository(path)
