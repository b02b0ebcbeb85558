from __future__ import annotations

from enum import Enum


class VisitStatus(str, Enum):
    """Lifecycle state derived from a visitor's time-in/time-out."""

    SCHEDULED = "scheduled"
    CHECKED_IN = "checked-in"
    CHECKED_OUT = "checked-out"


class StatusFilter(str, Enum):
    """Status selector used by search and the admin log."""

    ALL = "all"
    SCHEDULED = "scheduled"
    CHECKED_IN = "checked-in"
    CHECKED_OUT = "checked-out"

    def matches(self, status: VisitStatus) -> bool:
        if self is StatusFilter.ALL:
            return True
        return self.value == status.value


class DateRange(str, Enum):
    """Date window selector for the admin log."""

    ALL = "all"
    TODAY = "today"
    LAST_7_DAYS = "7days"
    LAST_30_DAYS = "30days"

    @property
    def days(self) -> int | None:
        return {
            DateRange.TODAY: 0,
            DateRange.LAST_7_DAYS: 7,
            DateRange.LAST_30_DAYS: 30,
        }.get(self)
