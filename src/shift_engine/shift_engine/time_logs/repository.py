from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import TimeLog


class TimeLogRepository(Protocol):
    """Read-only source of time logs.

    Note (DIP): the work shift service depends on this interface, never on a concrete store.
    """

    def list_by_employee_and_entry_range(
        self,
        *,
        employee_id: int,
        start: datetime,
        end: datetime,
    ) -> Sequence[TimeLog]:
        """Logs with ``start <= entry_time < end``, ascending by entry time."""

        raise NotImplementedError
