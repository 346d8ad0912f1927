# utils/date_helper.py
import math
from datetime import date, datetime, time

SALARY_DAY = 25


def next_salary_date_after(today: date) -> date:
    """
    Payday in the month after ``today``'s month.
    e.g. 2025-08-31 → 2025-09-25, 2025-12-03 → 2026-01-25
    """
    if today.month == 12:
        return date(today.year + 1, 1, SALARY_DAY)
    return date(today.year, today.month + 1, SALARY_DAY)


def days_until(target: date, now: datetime) -> int:
    """Whole days from ``now`` to midnight of ``target``, rounded up (0 or less once due)."""
    delta = datetime.combine(target, time.min) - now
    return math.ceil(delta.total_seconds() / 86400)


def display_date(d: date) -> str:
    # "Aug 25, 2025"
    return f"{d.strftime('%b')} {d.day}, {d.year}"


def display_clock(now: datetime) -> str:
    # "Mon, Oct 19, 3:04:05 PM"
    hour = now.hour % 12 or 12
    return f"{now.strftime('%a, %b')} {now.day}, {hour}:{now.strftime('%M:%S %p')}"
