from __future__ import annotations

from flask import jsonify


def json_error(message: str, *, error: str = "VALIDATION_ERROR", status: int = 400):
    """Uniform JSON error body used by every API endpoint."""
    return jsonify({"success": False, "error": error, "message": message}), status
