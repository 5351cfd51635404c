from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from ..common.datetime_utils import describe_duration, format_hhmm
from ..core.enums import ShiftKind
from ..employees.model import Employee
from ..time_logs.model import TimeLog


@dataclass(frozen=True)
class WorkShift:
    """Time logs and derived totals of one employee on one calendar date.

    ``time_logs`` are the raw selected logs in input order, open or reversed
    ones included; the totals only account for closed, well-formed logs.
    """

    employee: Employee
    date: date
    time_logs: tuple[TimeLog, ...] = ()
    total_work_time: timedelta = timedelta(0)
    total_pause_time: timedelta = timedelta(0)
    kind: ShiftKind = ShiftKind.UNSCHEDULED

    @classmethod
    def empty(cls, employee: Employee, day: date, kind: ShiftKind = ShiftKind.UNSCHEDULED) -> WorkShift:
        return cls(employee=employee, date=day, kind=kind)

    @property
    def is_empty(self) -> bool:
        return not self.time_logs

    def summary(self) -> dict:
        """Flat row for reports and API mappers."""
        work = describe_duration(self.total_work_time)
        pause = describe_duration(self.total_pause_time)
        return {
            "employee_id": self.employee.employee_id,
            "full_name": self.employee.full_name,
            "date": self.date.strftime("%Y-%m-%d"),
            "kind": self.kind.value,
            "time_log_ids": [log.time_log_id for log in self.time_logs],
            "worked_hours": format_hhmm(self.total_work_time),
            "paused_hours": format_hhmm(self.total_pause_time),
            "total_work_time": {"hours": work.hours, "minutes": work.minutes, "seconds": work.seconds, "iso8601": work.iso8601},
            "total_pause_time": {"hours": pause.hours, "minutes": pause.minutes, "seconds": pause.seconds, "iso8601": pause.iso8601},
        }

    def __str__(self) -> str:
        return f"WorkShift [employee={self.employee.full_name}, date={self.date.isoformat()}]"
