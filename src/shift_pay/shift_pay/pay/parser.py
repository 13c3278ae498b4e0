from __future__ import annotations

import logging

from ..core.exceptions import InvalidTimeFormat
from .model import TimeOfDay

logger = logging.getLogger(__name__)


def _parse_part(value: str, text: str) -> int:
    # str.isdigit() accepts things like "²"; only plain ASCII digits are times.
    if not value or not (value.isascii() and value.isdigit()):
        logger.debug("rejected time %r: non-numeric part %r", text, value)
        raise InvalidTimeFormat(f"Invalid time '{text}': expected HH:MM")
    return int(value)


def parse_time(text: str) -> TimeOfDay:
    """Parse ``HH:MM`` into a TimeOfDay.

    Splits on the first colon. Hour must be below 24 and minute below 60.
    """
    if not isinstance(text, str):
        raise InvalidTimeFormat(f"Invalid time {text!r}: expected HH:MM")

    raw = text.strip()
    hour_s, sep, minute_s = raw.partition(":")
    if not sep:
        logger.debug("rejected time %r: missing ':'", text)
        raise InvalidTimeFormat(f"Invalid time '{text}': expected HH:MM")

    hour = _parse_part(hour_s, text)
    minute = _parse_part(minute_s, text)

    if hour >= 24:
        raise InvalidTimeFormat(f"Invalid time '{text}': hour must be 0-23")
    if minute >= 60:
        raise InvalidTimeFormat(f"Invalid time '{text}': minute must be 0-59")
    return TimeOfDay(hour=hour, minute=minute)
