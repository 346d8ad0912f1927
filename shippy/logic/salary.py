# logic/salary.py
from __future__ import annotations
import dataclasses
import logging
import math
from datetime import date, datetime
from typing import Callable, Optional

from shippy.data.seed import SALARY_HISTORY, default_salary
from shippy.data.store import SALARY_KEY, RecordStore
from shippy.models.salary import EDITABLE_FIELDS, SalaryState
from shippy.utils.date_helper import days_until, next_salary_date_after

logger = logging.getLogger(__name__)

MONTH_LENGTH = 30
AVERAGE_OVER_MONTHS = 5


def round_half_up(value: float) -> int:
    # .5 goes up, never to the even neighbour
    return math.floor(value + 0.5)


class SalaryController:
    """
    Salary singleton: load (seed + payday roll-over), single-field inline editing,
    and the figures derived from the wall clock on every read.
    """

    def __init__(self, store: RecordStore, clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self.clock = clock
        today = self.today()
        raw = store.load(SALARY_KEY, default=default_salary(today))
        self.state = SalaryState.from_dict(raw)

        # Payday passed → move to the 25th of next month before first render
        if today > self.state.next_salary_date:
            new_date = next_salary_date_after(today)
            logger.info("next salary date %s passed, moved to %s",
                        self.state.next_salary_date, new_date)
            self._save(dataclasses.replace(self.state, next_salary_date=new_date))

        self.editing_field: Optional[str] = None
        self._buffer = None

    def today(self) -> date:
        return self.clock().date()

    def _save(self, state: SalaryState):
        self.store.save(SALARY_KEY, state.to_dict())
        self.state = state

    # ---------- inline editing ----------
    def edit(self, field: str):
        """Start editing ``field``. Any value staged for another field is dropped."""
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"not an editable salary field: {field!r}")
        self.editing_field = field
        self._buffer = getattr(self.state, field)

    def stage(self, value):
        if self.editing_field is not None:
            self._buffer = value

    @property
    def staged_value(self):
        return self._buffer

    def commit(self, field: Optional[str] = None) -> bool:
        field = field or self.editing_field
        if field is None or field != self.editing_field:
            return False
        value = self._buffer
        if field == "next_salary_date" and isinstance(value, str):
            value = date.fromisoformat(value)
        self._save(dataclasses.replace(self.state, **{field: value, "last_update": self.today()}))
        self.cancel()
        return True

    def cancel(self):
        self.editing_field = None
        self._buffer = None

    # ---------- derived (recomputed on every call) ----------
    def days_until_next_salary(self) -> int:
        return days_until(self.state.next_salary_date, self.clock())

    def monthly_progress(self) -> int:
        days = max(self.days_until_next_salary(), 0)
        return round_half_up((MONTH_LENGTH - days) / MONTH_LENGTH * 100)

    def average_monthly(self) -> int:
        return round_half_up(self.state.total_earnings / AVERAGE_OVER_MONTHS)

    @staticmethod
    def history() -> list:
        return list(SALARY_HISTORY)
