from __future__ import annotations

import csv
import io
from datetime import date

from flask import Flask, jsonify, request

from ..common.responses import json_error
from ..common.validators import require_date
from ..container import Container
from ..core.exceptions import ValidationError

REPORT_CSV_FIELDS = [
    "work_date",
    "entry_id",
    "start",
    "end",
    "hourly_rate",
    "regular_hours",
    "overtime_hours",
    "total_pay",
    "status",
    "note",
]


def register(app: Flask, container: Container) -> None:
    def _report_range() -> tuple[date, date]:
        """Defaults to the current month up to today."""
        today = date.today()
        start_s = request.args.get("start") or today.replace(day=1).strftime("%Y-%m-%d")
        end_s = request.args.get("end") or today.strftime("%Y-%m-%d")
        return require_date(start_s, "start"), require_date(end_s, "end")

    def _write_report_csv(*, data, filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=REPORT_CSV_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for row in data.rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/report", methods=["GET"], endpoint="api_report")
    def api_report():
        try:
            start, end = _report_range()
            data = container.payroll_report_service.build_pay_report(start=start, end=end)
        except ValidationError as e:
            return json_error(str(e))
        return jsonify(
            {
                "success": True,
                "start": start.strftime("%Y-%m-%d"),
                "end": end.strftime("%Y-%m-%d"),
                "rows": data.rows,
                "summary": data.summary,
                "totals": data.totals,
            }
        )

    @app.route("/api/report.csv", methods=["GET"], endpoint="api_report_csv")
    def api_report_csv():
        try:
            start, end = _report_range()
            data = container.payroll_report_service.build_pay_report(start=start, end=end)
        except ValidationError as e:
            return json_error(str(e))

        filename = f"shift_pay_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        return _write_report_csv(data=data, filename=filename)
