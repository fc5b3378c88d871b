from datetime import date

import pytest

from license_manager.utils.dates import add_months, format_date, today_in


def test_add_months_same_day():
    assert add_months(date(2026, 1, 15), 4) == date(2026, 5, 15)


def test_add_months_crosses_year():
    assert add_months(date(2026, 10, 18), 4) == date(2027, 2, 18)


def test_add_months_clamps_to_month_end():
    assert add_months(date(2026, 10, 31), 4) == date(2027, 2, 28)
    assert add_months(date(2027, 10, 31), 4) == date(2028, 2, 29)


def test_format_date():
    assert format_date(date(2026, 3, 7)) == "2026-03-07"
    assert format_date(None) == "N/A"


def test_add_months_leap_day():
    assert add_months(date(2028, 2, 29), 12) == date(2029, 2, 28)


def test_today_in_follows_the_zone():
    ahead = today_in("Pacific/Kiritimati")  # UTC+14
    behind = today_in("Etc/GMT+12")  # UTC-12
    assert (ahead - behind).days in (1, 2)


def test_today_in_rejects_unknown_zone():
    with pytest.raises(ValueError):
        today_in("Mars/Olympus_Mons")
