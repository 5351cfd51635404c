from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import start_of_day
from ..common.validators import require_not_none
from ..core.constants import TIME_LOG_LOOKAHEAD_DAYS, TIME_LOG_LOOKBEHIND_DAYS
from ..core.exceptions import ValidationError
from ..employees.model import Employee, Worksite
from ..schedules.repository import ScheduleRepository
from ..time_logs.model import TimeLog
from ..time_logs.repository import TimeLogRepository
from .composer import WorkShiftComposer
from .model import WorkShift
from .policy import ShiftPolicy
from .resolver import ShiftInferenceStrategyResolver

logger = logging.getLogger(__name__)


class WorkShiftService:
    def __init__(
        self,
        time_logs: TimeLogRepository,
        schedules: ScheduleRepository,
        *,
        policy: Optional[ShiftPolicy] = None,
        resolver: Optional[ShiftInferenceStrategyResolver] = None,
    ):
        self._time_logs = require_not_none(time_logs, "time_logs")
        self._schedules = require_not_none(schedules, "schedules")
        self._policy = policy or ShiftPolicy.default()
        self._resolver = resolver or ShiftInferenceStrategyResolver()

    @property
    def policy(self) -> ShiftPolicy:
        return self._policy

    def find_work_shift(self, employee: Employee, worksite: Worksite, day: date) -> WorkShift:
        """Fetch the logs around ``day`` and compose its shift.

        Logs are loaded from one day before to two days after the local start of
        ``day`` so overnight shifts and wide margins still see every candidate.
        """
        require_not_none(employee, "employee")
        require_not_none(worksite, "worksite")
        require_not_none(day, "date")

        midnight = start_of_day(day, worksite.zone)
        start = midnight - timedelta(days=TIME_LOG_LOOKBEHIND_DAYS)
        end = midnight + timedelta(days=TIME_LOG_LOOKAHEAD_DAYS)
        logger.debug("Querying time logs for employee %s in [%s, %s)", employee.employee_id, start, end)

        logs = self._time_logs.list_by_employee_and_entry_range(
            employee_id=employee.employee_id,
            start=start,
            end=end,
        )
        return self.build_work_shift(employee, worksite, day, logs)

    def build_work_shift(
        self,
        employee: Employee,
        worksite: Worksite,
        day: date,
        ordered_logs: Sequence[TimeLog],
    ) -> WorkShift:
        require_not_none(employee, "employee")
        require_not_none(worksite, "worksite")
        require_not_none(day, "date")
        require_not_none(ordered_logs, "ordered_logs")

        time_range = self._schedules.find_time_range(employee_id=employee.employee_id, work_date=day)
        strategy = self._resolver.resolve(time_range, worksite.zone, self._policy)
        logger.debug(
            "Building work shift for employee %s at worksite %s on %s (strategy=%s, range=%s)",
            employee.employee_id,
            worksite.worksite_id,
            day,
            strategy.kind.value,
            time_range,
        )
        return WorkShiftComposer(strategy).compose(employee, day, ordered_logs)

    def find_work_shifts(self, employee: Employee, worksite: Worksite, start: date, end: date) -> list[WorkShift]:
        """One shift per date in ``[start, end]``; days without logs yield empty shifts."""
        require_not_none(start, "start")
        require_not_none(end, "end")
        if end < start:
            raise ValidationError("end must not be before start")

        shifts: list[WorkShift] = []
        day = start
        while day <= end:
            shifts.append(self.find_work_shift(employee, worksite, day))
            day += timedelta(days=1)
        return shifts
