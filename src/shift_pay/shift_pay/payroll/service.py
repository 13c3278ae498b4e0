from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.validators import require_date_range
from ..entries.repository import ShiftEntryRepository
from ..pay.service import compute_pay


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]
    totals: dict


def _money(value: float) -> float:
    return round(value, 2)


def _hours(value: float) -> float:
    return round(value, 2)


class PayrollReportService:
    """Aggregates per-shift pay into per-day, per-month and period totals."""

    def __init__(self, entries: ShiftEntryRepository):
        self._entries = entries

    def build_pay_report(self, *, start: date, end: date) -> ReportData:
        require_date_range(start, end)
        entries = self._entries.get_between(start_date=start, end_date=end)

        out_rows: list[dict] = []
        daily: dict[date, dict] = {}
        monthly: dict[str, dict] = {}
        grand = {"regular_hours": 0.0, "overtime_hours": 0.0, "total_pay": 0.0, "shifts": 0}

        for e in entries:
            result = compute_pay(e.start, e.end, e.hourly_rate)
            row = {
                "entry_id": e.entry_id,
                "work_date": e.work_date.strftime("%Y-%m-%d"),
                "start": e.start,
                "end": e.end,
                "hourly_rate": e.hourly_rate,
                "regular_hours": 0.0,
                "overtime_hours": 0.0,
                "total_pay": 0.0,
                "status": "OK",
                "note": e.note or "",
            }
            if not result.ok:
                # Listed, but left out of the totals.
                row["status"] = result.failure.value
                out_rows.append(row)
                continue

            s = result.summary
            row["regular_hours"] = _hours(s.regular_hours)
            row["overtime_hours"] = _hours(s.overtime_hours)
            row["total_pay"] = _money(s.total_pay)
            out_rows.append(row)

            month_key = e.work_date.strftime("%Y-%m")
            for bucket in (
                daily.setdefault(e.work_date, _empty_bucket()),
                monthly.setdefault(month_key, _empty_bucket()),
                grand,
            ):
                bucket["regular_hours"] += s.regular_hours
                bucket["overtime_hours"] += s.overtime_hours
                bucket["total_pay"] += s.total_pay
                bucket["shifts"] += 1

        summary = [
            {"work_date": d.strftime("%Y-%m-%d"), **_present(b)}
            for d, b in sorted(daily.items())
        ]
        totals = _present(grand)
        totals["monthly"] = [{"month": m, **_present(b)} for m, b in sorted(monthly.items())]
        return ReportData(rows=out_rows, summary=summary, totals=totals)


def _empty_bucket() -> dict:
    return {"regular_hours": 0.0, "overtime_hours": 0.0, "total_pay": 0.0, "shifts": 0}


def _present(bucket: dict) -> dict:
    return {
        "regular_hours": _hours(bucket["regular_hours"]),
        "overtime_hours": _hours(bucket["overtime_hours"]),
        "total_pay": _money(bucket["total_pay"]),
        "shifts": bucket["shifts"],
    }
