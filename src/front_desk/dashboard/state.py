"""Dashboard state and the pure reducers that update it.

Every change goes through a reducer returning a new ``DashboardState``;
``build_view`` recomputes the derived data from scratch.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Iterable, List, Tuple

from ..core.enums import DateRange, StatusFilter
from ..visitors.model import Visitor
from .derivations import DashboardSummary, daily_counts, filter_visitors, hourly_counts, summarize


@dataclass(frozen=True)
class DashboardState:
    visitors: Tuple[Visitor, ...] = ()
    search: str = ""
    status_filter: StatusFilter = StatusFilter.ALL
    date_range: DateRange = DateRange.ALL


@dataclass(frozen=True)
class DashboardView:
    visible: List[Visitor]
    daily: List[Tuple[str, int]]
    hourly: List[int]
    summary: DashboardSummary
    hour_labels: List[str] = field(default_factory=lambda: [f"{h}:00" for h in range(24)])


def _newest_first(visitors: Iterable[Visitor]) -> Tuple[Visitor, ...]:
    return tuple(sorted(visitors, key=lambda v: v.id, reverse=True))


def load_visitors(state: DashboardState, visitors: Iterable[Visitor]) -> DashboardState:
    return replace(state, visitors=_newest_first(visitors))


def visitor_saved(state: DashboardState, visitor: Visitor) -> DashboardState:
    """Insert a new record or replace the one with the same id.

    For callers that keep a ``DashboardState`` across mutations (a client
    polling ``/api/dashboard``); the server-rendered page reloads from
    ``VisitorService.list`` on every request instead.
    """
    others = [v for v in state.visitors if v.id != visitor.id]
    return replace(state, visitors=_newest_first([*others, visitor]))


def visitor_removed(state: DashboardState, visitor_id: int) -> DashboardState:
    """Drop the record with ``visitor_id``; see ``visitor_saved``."""
    return replace(state, visitors=tuple(v for v in state.visitors if v.id != visitor_id))


def set_search(state: DashboardState, search: str) -> DashboardState:
    return replace(state, search=search or "")


def set_status_filter(state: DashboardState, status: StatusFilter) -> DashboardState:
    return replace(state, status_filter=status)


def set_date_range(state: DashboardState, date_range: DateRange) -> DashboardState:
    return replace(state, date_range=date_range)


def build_view(state: DashboardState, *, today: date) -> DashboardView:
    visible = filter_visitors(
        state.visitors,
        search=state.search,
        status=state.status_filter,
        date_range=state.date_range,
        today=today,
    )
    return DashboardView(
        visible=visible,
        daily=daily_counts(visible),
        hourly=hourly_counts(visible),
        summary=summarize(state.visitors, today=today),
    )
