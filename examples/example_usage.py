"""Example: call the pay calculator and the report service without Flask.

Controllers are a thin layer; the rules live in the pay and payroll modules.
"""

from datetime import date

from src.shift_pay.shift_pay.container import build_container
from src.shift_pay.shift_pay.pay.service import compute_pay


def main():
    for start, end in [("08:00", "15:30"), ("14:00", "17:00"), ("23:00", "01:00"), ("09:00", "09:15")]:
        result = compute_pay(start, end, 20)
        if result.ok:
            s = result.summary
            print(f"{start}-{end}: regular={s.regular_hours:.2f}h overtime={s.overtime_hours:.2f}h pay={s.total_pay:.2f}")
        else:
            print(f"{start}-{end}: {result.failure.value} ({result.message})")

    container = build_container(default_hourly_rate=20)
    container.entry_service.add_entry(work_date=date(2026, 1, 5), start="08:00", end="17:00", hourly_rate=20)
    container.entry_service.add_entry(work_date=date(2026, 1, 6), start="22:00", end="06:00", hourly_rate=25)
    report = container.payroll_report_service.build_pay_report(start=date(2026, 1, 1), end=date(2026, 1, 31))
    print(report.totals)


if __name__ == "__main__":
    main()
