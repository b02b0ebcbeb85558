from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Optional

from ..core.constants import STORAGE_DATE_FORMAT, STORAGE_TIME_FORMAT

# Visit dates are free-form text written by different clients over time.
_DATE_FORMATS = (
    "%Y-%m-%d",
    "%m/%d/%Y",
    # day-first locales; only reached when month-first fails
    "%d/%m/%Y",
    "%d.%m.%Y",
    "%Y/%m/%d",
    "%d %B %Y",
    "%B %d, %Y",
)

_TIME_RE = re.compile(r"^\s*(\d{1,2})(?::(\d{1,2}))?(?::(\d{1,2}))?\s*([AaPp]\.?[Mm]\.?)?\s*$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_visit_date(value: Optional[str]) -> Optional[date]:
    """Best-effort parse of a stored visit date; None when unrecognised."""
    if not value or not value.strip():
        return None
    text = value.strip()
    # ISO timestamps ("2026-10-19T08:00:00Z") carry the date in the first 10 chars.
    if len(text) > 10 and text[4:5] == "-" and text[10:11] in ("T", " "):
        text = text[:10]
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def parse_hour(value: Optional[str]) -> Optional[int]:
    """Hour of day (0-23) from a 24h or 12h time string, None if malformed."""
    if not value:
        return None
    m = _TIME_RE.match(value)
    if not m:
        return None

    hour = int(m.group(1))
    meridiem = (m.group(4) or "").replace(".", "").lower()
    if meridiem:
        if not 1 <= hour <= 12:
            return None
        hour = hour % 12 + (12 if meridiem == "pm" else 0)
    if not 0 <= hour <= 23:
        return None
    return hour


def parse_clock(value: str) -> time:
    """Parse an HH:MM setting such as the auto sign-out trigger."""
    return datetime.strptime(value.strip(), "%H:%M").time()


def format_date(value: datetime | date) -> str:
    return value.strftime(STORAGE_DATE_FORMAT)


def format_time(value: datetime) -> str:
    return value.strftime(STORAGE_TIME_FORMAT)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
