from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import json_error
from ..common.validators import require_date
from ..container import Container
from ..core.exceptions import ValidationError
from .model import ShiftEntry


def entry_json(entry: ShiftEntry) -> dict:
    return {
        "entry_id": entry.entry_id,
        "work_date": entry.work_date.strftime("%Y-%m-%d"),
        "start": entry.start,
        "end": entry.end,
        "hourly_rate": entry.hourly_rate,
        "note": entry.note,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/entries", methods=["POST"], endpoint="api_add_entry")
    def api_add_entry():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return json_error("JSON object body required")
        try:
            entry = container.entry_service.add_entry(
                work_date=require_date(data.get("work_date"), "work_date"),
                start=data.get("start", ""),
                end=data.get("end", ""),
                hourly_rate=data.get("hourly_rate", container.default_hourly_rate),
                note=data.get("note"),
            )
        except ValidationError as e:
            return json_error(str(e))
        return jsonify({"success": True, "entry": entry_json(entry)}), 201

    @app.route("/api/entries", methods=["GET"], endpoint="api_list_entries")
    def api_list_entries():
        try:
            work_date = require_date(request.args.get("date"), "date")
        except ValidationError as e:
            return json_error(str(e))
        entries = container.entry_service.entries_for_day(work_date)
        return jsonify({"success": True, "entries": [entry_json(e) for e in entries]})

    @app.route("/api/entries/<int:entry_id>", methods=["DELETE"], endpoint="api_delete_entry")
    def api_delete_entry(entry_id: int):
        try:
            container.entry_service.remove_entry(entry_id)
        except ValidationError as e:
            return json_error(str(e), error="NOT_FOUND", status=404)
        return jsonify({"success": True})
