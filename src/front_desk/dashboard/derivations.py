"""Pure derivations behind the admin dashboard (filters, charts, counters)."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, List, Sequence, Tuple

from ..common.datetime_utils import parse_hour, parse_visit_date
from ..core.enums import DateRange, StatusFilter, VisitStatus
from ..visitors.model import Visitor


@dataclass(frozen=True)
class DashboardSummary:
    total: int
    today: int
    checked_in: int


def matches_text(visitor: Visitor, search: str) -> bool:
    needle = search.strip().lower()
    if not needle:
        return True
    haystacks = (visitor.full_name, visitor.company or "")
    return any(needle in h.lower() for h in haystacks)


def in_date_range(visitor: Visitor, date_range: DateRange, today: date) -> bool:
    if date_range is DateRange.ALL:
        return True
    visit_date = parse_visit_date(visitor.date)
    if visit_date is None:
        return False
    # N-day ranges cover N calendar days ending today.
    start = today - timedelta(days=max((date_range.days or 0) - 1, 0))
    return start <= visit_date <= today


def filter_visitors(
    visitors: Iterable[Visitor],
    *,
    search: str = "",
    status: StatusFilter = StatusFilter.ALL,
    date_range: DateRange = DateRange.ALL,
    today: date,
) -> List[Visitor]:
    """Visible subset: text AND status AND date range must all match."""
    return [
        v
        for v in visitors
        if matches_text(v, search) and status.matches(v.status) and in_date_range(v, date_range, today)
    ]


def daily_counts(visitors: Iterable[Visitor]) -> List[Tuple[str, int]]:
    counts: Counter[date] = Counter()
    for v in visitors:
        d = parse_visit_date(v.date)
        if d is not None:
            counts[d] += 1
    return [(d.isoformat(), counts[d]) for d in sorted(counts)]


def hourly_counts(visitors: Iterable[Visitor]) -> List[int]:
    buckets = [0] * 24
    for v in visitors:
        hour = parse_hour(v.time_in)
        if hour is not None:
            buckets[hour] += 1
    return buckets


def summarize(visitors: Sequence[Visitor], *, today: date) -> DashboardSummary:
    return DashboardSummary(
        total=len(visitors),
        today=sum(1 for v in visitors if parse_visit_date(v.date) == today),
        checked_in=sum(1 for v in visitors if v.status is VisitStatus.CHECKED_IN),
    )
