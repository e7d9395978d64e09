from __future__ import annotations

import re
from datetime import date, timedelta
from typing import List

SCAN_DAYS = 15

_START_RE = re.compile(r"^(\d{4})(\d{2})(\d{2})$")


def add_days(day: date, days: int) -> date:
    """Return *day* shifted by *days* calendar days."""
    return day + timedelta(days=days)


def scan_dates(start: date, days: int = SCAN_DAYS) -> List[date]:
    """Return the consecutive departure dates searched for *start*."""
    return [add_days(start, i) for i in range(days)]


def parse_start_date(value: str) -> date:
    """Parse an 8-digit ``YYYYMMDD`` string.

    Raises ``ValueError`` for anything else, including impossible dates such
    as ``20240230``.
    """
    match = _START_RE.match(value.strip())
    if not match:
        raise ValueError(f"expected an 8-digit YYYYMMDD date, got {value!r}")
    year, month, day = (int(part) for part in match.groups())
    return date(year, month, day)


def format_api_date(day: date) -> str:
    return day.strftime("%Y%m%d")


__all__ = [
    "SCAN_DAYS",
    "add_days",
    "scan_dates",
    "parse_start_date",
    "format_api_date",
]
