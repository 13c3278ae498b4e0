from __future__ import annotations

from datetime import date, datetime

from ..core.constants import MINUTES_PER_DAY


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def format_minutes(minutes: int) -> str:
    """Minutes since a reference midnight as HH:MM, with ``+1d`` past midnight."""
    days, rest = divmod(minutes, MINUTES_PER_DAY)
    text = f"{rest // 60:02d}:{rest % 60:02d}"
    return f"{text}+{days}d" if days else text
