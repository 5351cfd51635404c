"""Example: compose a week of shifts through the service layer.

The in-memory sources stand in for the real time-log and schedule stores.
"""

from datetime import date, datetime, time, timedelta, timezone

from src.shift_engine.shift_engine.employees.model import Employee, Worksite
from src.shift_engine.shift_engine.main import create_engine
from src.shift_engine.shift_engine.schedules.model import TimeRange
from src.shift_engine.shift_engine.time_logs.model import TimeLog

MONDAY = date(2024, 10, 7)


class DemoTimeLogs:
    def __init__(self):
        self._logs = []
        for offset in range(5):
            day = MONDAY + timedelta(days=offset)
            for start, end in ((time(7, 55), time(13, 30)), (time(14, 15), time(17, 5))):
                self._logs.append(
                    TimeLog(
                        time_log_id=len(self._logs) + 1,
                        employee_id=1,
                        entry_time=datetime.combine(day, start, tzinfo=timezone.utc),
                        exit_time=datetime.combine(day, end, tzinfo=timezone.utc),
                    )
                )

    def list_by_employee_and_entry_range(self, *, employee_id, start, end):
        return [log for log in self._logs if log.employee_id == employee_id and start <= log.entry_time < end]


class DemoSchedules:
    def find_time_range(self, *, employee_id, work_date):
        if work_date.weekday() < 5:
            return TimeRange(time(8, 0), time(17, 0))
        return None


def main():
    container = create_engine(time_logs=DemoTimeLogs(), schedules=DemoSchedules())
    employee = Employee(employee_id=1, full_name="Demo")
    worksite = Worksite(worksite_id=1, name="HQ", time_zone="UTC")

    for shift in container.work_shift_service.find_work_shifts(employee, worksite, MONDAY, MONDAY + timedelta(days=6)):
        print(shift.summary())


if __name__ == "__main__":
    main()
