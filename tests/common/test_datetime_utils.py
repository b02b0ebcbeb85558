from datetime import date, time

import pytest

from front_desk.common.datetime_utils import parse_clock, parse_hour, parse_visit_date


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2026-02-02", date(2026, 2, 2)),
        ("2/2/2026", date(2026, 2, 2)),
        ("12/31/2025", date(2025, 12, 31)),
        ("31.12.2025", date(2025, 12, 31)),
        ("19/10/2026", date(2026, 10, 19)),
        ("05/02/2026", date(2026, 5, 2)),
        ("2026-02-02T08:00:00.000Z", date(2026, 2, 2)),
        ("", None),
        (None, None),
        ("tomorrow", None),
    ],
)
def test_parse_visit_date(raw, expected):
    assert parse_visit_date(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("00:15:00", 0),
        ("23:59", 23),
        ("12:00:00 PM", 12),
        ("12:30 am", 0),
        ("7:45:10 p.m.", 19),
        ("13:00 PM", None),
        ("24:00", None),
        ("abc", None),
        (None, None),
    ],
)
def test_parse_hour(raw, expected):
    assert parse_hour(raw) == expected


def test_parse_clock():
    assert parse_clock(" 15:45 ") == time(15, 45)
    with pytest.raises(ValueError):
        parse_clock("3.45pm")
