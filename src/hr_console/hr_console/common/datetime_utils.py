from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value[:10], "%Y-%m-%d").date()


def format_iso_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def today_in(tz_name: str = "UTC") -> date:
    """Today's calendar date in the canonical timezone.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(ZoneInfo(tz_name)).date()


def short_label(value: date) -> str:
    """'Oct 9' style axis label."""
    return f"{value.strftime('%b')} {value.day}"


def long_label(value: date) -> str:
    """'Oct 9, 2026' style label used in history tables."""
    return f"{value.strftime('%b')} {value.day}, {value.year}"


def day_name(value: date) -> str:
    return value.strftime("%A")
