from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

from ..common.validators import require_not_none
from ..employees.model import Employee
from ..time_logs.model import TimeLog
from .interval import TimeInterval
from .intervals import TimeIntervals
from .model import WorkShift
from .strategies.base import ShiftInferenceStrategy

logger = logging.getLogger(__name__)


class WorkShiftComposer:
    def __init__(self, strategy: ShiftInferenceStrategy):
        self._strategy = require_not_none(strategy, "strategy")

    def compose(self, employee: Employee, day: date, ordered_logs: Sequence[TimeLog]) -> WorkShift:
        require_not_none(employee, "employee")
        require_not_none(day, "date")
        require_not_none(ordered_logs, "ordered_logs")

        selected = self._strategy.infer(day, ordered_logs)
        if not selected:
            logger.debug("No logs selected for %s on %s", employee.employee_id, day)
            return WorkShift.empty(employee, day, self._strategy.kind)

        intervals = TimeIntervals.of(_to_intervals(selected))
        shift = WorkShift(
            employee=employee,
            date=day,
            time_logs=tuple(selected),
            total_work_time=intervals.total_covered_duration(),
            total_pause_time=intervals.total_gap_duration(),
            kind=self._strategy.kind,
        )
        logger.debug(
            "Composed %s: logs=%d work=%s pause=%s",
            shift,
            len(shift.time_logs),
            shift.total_work_time,
            shift.total_pause_time,
        )
        return shift


def _to_intervals(logs: Sequence[TimeLog]) -> list[TimeInterval]:
    # Open or reversed logs cannot form a closed interval yet; skip them.
    intervals: list[TimeInterval] = []
    for log in logs:
        if log.work_duration is None:
            continue
        intervals.append(TimeInterval(log.entry_time, log.exit_time))
    return intervals
