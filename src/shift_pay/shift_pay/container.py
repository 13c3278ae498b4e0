from __future__ import annotations

from dataclasses import dataclass

from .entries.csv_repository import CsvShiftEntryRepository
from .entries.memory_repository import InMemoryShiftEntryRepository
from .entries.repository import ShiftEntryRepository
from .entries.service import ShiftEntryService
from .payroll.service import PayrollReportService


@dataclass(frozen=True)
class Container:
    entries_repo: ShiftEntryRepository

    entry_service: ShiftEntryService
    payroll_report_service: PayrollReportService

    default_hourly_rate: float


def build_container(*, entries_csv_path: str = "", default_hourly_rate: float = 0.0) -> Container:
    if entries_csv_path:
        entries_repo: ShiftEntryRepository = CsvShiftEntryRepository(entries_csv_path)
    else:
        entries_repo = InMemoryShiftEntryRepository()

    return Container(
        entries_repo=entries_repo,
        entry_service=ShiftEntryService(entries_repo),
        payroll_report_service=PayrollReportService(entries_repo),
        default_hourly_rate=float(default_hourly_rate),
    )
