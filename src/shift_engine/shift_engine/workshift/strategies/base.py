from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import date, datetime, timezone
from typing import Iterable, Optional

from ...common.validators import require_not_none
from ...core.enums import ShiftKind
from ...time_logs.model import TimeLog, chronological
from ..interval import TimeInterval

logger = logging.getLogger(__name__)

_FAR_FUTURE = datetime.max.replace(tzinfo=timezone.utc)


class ShiftInferenceStrategy(ABC):
    """Strategy Pattern: decide which time logs belong to the shift of a date.

    The variant set is closed: ScheduledShiftStrategy and
    UnscheduledShiftStrategy, picked by ShiftInferenceStrategyResolver.
    """

    kind: ShiftKind

    @abstractmethod
    def infer(self, day: date, ordered_logs: Iterable[TimeLog]) -> list[TimeLog]:
        """Return the sub-sequence of ``ordered_logs`` that forms the shift.

        ``ordered_logs`` must be ascending by entry time; the scan stops early
        once no later log can belong to the shift.
        """
        raise NotImplementedError


def check_infer_arguments(day: Optional[date], ordered_logs: Optional[Iterable[TimeLog]]) -> None:
    require_not_none(day, "date")
    require_not_none(ordered_logs, "ordered_logs")


def select_overlapping(window: TimeInterval, ordered_logs: Iterable[TimeLog]) -> list[TimeLog]:
    """Logs overlapping ``window``, in input order.

    Ordering is checked as logs are consumed, so nothing after the first log
    starting at or past the window end is read. Open logs (no exit time) extend
    indefinitely and are selected whenever they start before the window ends.
    Reversed logs (exit before entry) are judged by their entry instant alone.
    """
    selected: list[TimeLog] = []
    for log in chronological(ordered_logs):
        if window.ends_at_or_before(log.entry_time):
            logger.debug("Stop scanning at log %s: entry %s >= window end %s", log.time_log_id, log.entry_time, window.end)
            break
        if window.overlaps(_selection_interval(log)):
            selected.append(log)
    return selected


def _selection_interval(log: TimeLog) -> TimeInterval:
    if not log.is_closed:
        return TimeInterval(log.entry_time, _FAR_FUTURE)
    if log.exit_time < log.entry_time:
        return TimeInterval(log.entry_time, log.entry_time)
    return TimeInterval(log.entry_time, log.exit_time)
