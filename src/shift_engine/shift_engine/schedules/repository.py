from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import TimeRange


class ScheduleRepository(Protocol):
    def find_time_range(self, *, employee_id: int, work_date: date) -> Optional[TimeRange]:
        """Scheduled time range for the employee on that date, or None on days off."""

        raise NotImplementedError
