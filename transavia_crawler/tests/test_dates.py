from datetime import date

import pytest

from transavia_crawler.dates import (
    SCAN_DAYS,
    add_days,
    format_api_date,
    parse_start_date,
    scan_dates,
)


def test_add_days_crosses_month_and_year():
    assert add_days(date(2024, 1, 31), 1) == date(2024, 2, 1)
    assert add_days(date(2023, 12, 25), 10) == date(2024, 1, 4)
    assert add_days(date(2024, 2, 28), 1) == date(2024, 2, 29)


def test_scan_dates_cover_fifteen_consecutive_days():
    start = date(2024, 6, 1)
    days = scan_dates(start)
    assert len(days) == SCAN_DAYS == 15
    for i, day in enumerate(days):
        assert (day - start).days == i
    assert [format_api_date(d) for d in days][:2] == ["20240601", "20240602"]
    assert format_api_date(days[-1]) == "20240615"


def test_parse_start_date():
    assert parse_start_date("20240601") == date(2024, 6, 1)


@pytest.mark.parametrize("value", ["2024-06-01", "2024061", "20240230", "abcdefgh", ""])
def test_parse_start_date_rejects_bad_values(value):
    with pytest.raises(ValueError):
        parse_start_date(value)
