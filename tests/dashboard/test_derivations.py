from __future__ import annotations

from datetime import date

from front_desk.core.enums import DateRange, StatusFilter
from front_desk.dashboard.derivations import daily_counts, filter_visitors, hourly_counts, summarize
from front_desk.visitors.model import Visitor

TODAY = date(2026, 2, 10)


def _v(id, name="Ann", surname="Lee", company="Acme", date="2026-02-10", time_in="09:00:00", time_out=None):
    return Visitor(id=id, name=name, surname=surname, company=company, date=date, time_in=time_in, time_out=time_out)


def test_filter_is_conjunctive():
    in_acme = _v(1)
    out_acme = _v(2, time_out="10:00:00")
    in_other = _v(3, name="Bob", surname="Stone", company="Globex")

    visible = filter_visitors(
        [in_acme, out_acme, in_other], search="acme", status=StatusFilter.CHECKED_IN, today=TODAY
    )

    assert visible == [in_acme]


def test_text_search_covers_full_name_and_company():
    rows = [_v(1, name="Ann", surname="Lee", company=None), _v(2, name="Bob", surname="Stone", company="Annex")]

    assert [v.id for v in filter_visitors(rows, search="ANN LEE", today=TODAY)] == [1]
    assert [v.id for v in filter_visitors(rows, search="annex", today=TODAY)] == [2]
    assert len(filter_visitors(rows, search="  ", today=TODAY)) == 2


def test_scheduled_visitors_stay_in_the_log():
    scheduled = _v(1, time_in=None)

    assert filter_visitors([scheduled], today=TODAY) == [scheduled]
    assert filter_visitors([scheduled], status=StatusFilter.CHECKED_IN, today=TODAY) == []
    assert filter_visitors([scheduled], status=StatusFilter.SCHEDULED, today=TODAY) == [scheduled]


def test_date_ranges():
    rows = [
        _v(1, date="2026-02-10"),
        _v(2, date="02/05/2026"),
        _v(3, date="2026-01-20"),
        _v(4, date="2025-12-01"),
        _v(5, date="2026-02-11"),
        _v(6, date="someday"),
    ]

    def ids(date_range):
        return [v.id for v in filter_visitors(rows, date_range=date_range, today=TODAY)]

    assert ids(DateRange.TODAY) == [1]
    assert ids(DateRange.LAST_7_DAYS) == [1, 2]
    assert ids(DateRange.LAST_30_DAYS) == [1, 2, 3]
    assert ids(DateRange.ALL) == [1, 2, 3, 4, 5, 6]


def test_daily_counts_sorted_chronologically():
    rows = [_v(1, date="2026-02-10"), _v(2, date="02/09/2026"), _v(3, date="2026-02-10"), _v(4, date="")]

    assert daily_counts(rows) == [("2026-02-09", 1), ("2026-02-10", 2)]


def test_hourly_counts_skip_malformed_times():
    rows = [
        _v(1, time_in="09:15:00"),
        _v(2, time_in="9:59"),
        _v(3, time_in="2:05:33 PM"),
        _v(4, time_in="12:10:00 AM"),
        _v(5, time_in="noon"),
        _v(6, time_in="25:00"),
        _v(7, time_in=None),
    ]

    counts = hourly_counts(rows)

    assert len(counts) == 24
    assert counts[9] == 2
    assert counts[14] == 1
    assert counts[0] == 1
    assert sum(counts) == 4


def test_summary_counts():
    rows = [
        _v(1),
        _v(2, time_out="12:00:00"),
        _v(3, date="2026-02-01"),
        _v(4, time_in=None),
    ]

    summary = summarize(rows, today=TODAY)

    assert summary.total == 4
    assert summary.today == 3
    assert summary.checked_in == 2


def test_date_range_boundaries_cover_n_calendar_days():
    rows = [
        _v(1, date="2026-02-04"),
        _v(2, date="2026-02-03"),
        _v(3, date="2026-01-12"),
        _v(4, date="2026-01-11"),
    ]

    def ids(date_range):
        return [v.id for v in filter_visitors(rows, date_range=date_range, today=TODAY)]

    assert ids(DateRange.LAST_7_DAYS) == [1]
    assert ids(DateRange.LAST_30_DAYS) == [1, 2, 3]


def test_seven_day_range_over_consecutive_days():
    rows = [_v(i, date=f"2026-02-{i:02d}") for i in range(1, 11)]

    visible = filter_visitors(rows, date_range=DateRange.LAST_7_DAYS, today=TODAY)

    assert [v.date for v in visible] == [f"2026-02-{d:02d}" for d in range(4, 11)]
