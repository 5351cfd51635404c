from __future__ import annotations

import logging
from datetime import date, tzinfo
from typing import Iterable

from ...common.validators import require_not_none
from ...core.enums import ShiftKind
from ...schedules.model import TimeRange
from ...time_logs.model import TimeLog
from ..policy import ShiftPolicy
from ..window import ShiftWindow
from .base import ShiftInferenceStrategy, check_infer_arguments, select_overlapping

logger = logging.getLogger(__name__)


class ScheduledShiftStrategy(ShiftInferenceStrategy):
    """Working day: select logs overlapping the scheduled window plus the policy margin."""

    kind = ShiftKind.SCHEDULED

    def __init__(self, policy: ShiftPolicy, time_range: TimeRange, zone: tzinfo):
        self._policy = require_not_none(policy, "policy")
        self._time_range = require_not_none(time_range, "time_range")
        self._zone = require_not_none(zone, "time_zone")

    @property
    def time_range(self) -> TimeRange:
        return self._time_range

    def infer(self, day: date, ordered_logs: Iterable[TimeLog]) -> list[TimeLog]:
        check_infer_arguments(day, ordered_logs)

        window = ShiftWindow.scheduled(day, self._time_range, self._zone)
        expanded = window.expanded_by(self._policy.selection_margin)
        logger.debug("Scheduled window for %s: %s expanded to %s", day, window.interval, expanded)

        return select_overlapping(expanded, ordered_logs)
