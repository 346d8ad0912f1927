# tests/test_utils.py
from datetime import date, datetime

import pytest

from shippy.utils.date_helper import days_until, display_date, next_salary_date_after
from shippy.utils.parse_utils import money, parse_float


@pytest.mark.parametrize("today, expected", [
    (date(2025, 8, 31), date(2025, 9, 25)),
    (date(2025, 12, 3), date(2026, 1, 25)),
    (date(2026, 1, 30), date(2026, 2, 25)),
])
def test_next_salary_date_after(today, expected):
    assert next_salary_date_after(today) == expected


def test_days_until_rounds_up():
    assert days_until(date(2026, 10, 21), datetime(2026, 10, 19, 23, 0)) == 2
    assert days_until(date(2026, 10, 19), datetime(2026, 10, 19, 0, 0)) == 0
    assert days_until(date(2026, 10, 10), datetime(2026, 10, 19, 0, 0)) == -9


def test_display_date():
    assert display_date(date(2025, 8, 5)) == "Aug 5, 2025"


def test_parse_float():
    assert parse_float("599.5") == 599.5
    assert parse_float("x") == 0.0


def test_money():
    assert money(170000) == "₹170,000"
    assert money(599.5) == "₹599.50"
