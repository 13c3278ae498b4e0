from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_date(value: Optional[str], field_name: str) -> date:
    value = require_non_empty(value, field_name)
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD") from None


def require_date_range(start: date, end: date) -> None:
    if end < start:
        raise ValidationError("end date must not be before start date")


def optional_text(value: Optional[str], field_name: str) -> Optional[str]:
    """Strip a free-text field; blank becomes None."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value.strip() or None
