from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_minutes
from ..common.responses import json_error
from ..container import Container
from .model import PaySummary
from .service import compute_pay


def summary_json(summary: PaySummary) -> dict:
    return {
        "regular_minutes": summary.regular_minutes,
        "overtime_minutes": summary.overtime_minutes,
        "regular_hours": summary.regular_hours,
        "overtime_hours": summary.overtime_hours,
        "hourly_rate": summary.hourly_rate,
        "total_pay": summary.total_pay,
        "segments": [
            {
                "kind": s.kind.value,
                "start": format_minutes(s.start),
                "end": format_minutes(s.end),
                "minutes": s.minutes,
            }
            for s in summary.segments
        ],
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/pay", methods=["GET"], endpoint="api_pay")
    def api_pay():
        """Compute pay for one shift: ?start=HH:MM&end=HH:MM&rate=N"""
        start = request.args.get("start", "")
        end = request.args.get("end", "")
        rate = request.args.get("rate", container.default_hourly_rate)

        result = compute_pay(start, end, rate)
        if not result.ok:
            return json_error(result.message, error=result.failure.value)
        return jsonify({"success": True, "summary": summary_json(result.summary)})
