from __future__ import annotations

import logging
from datetime import date, tzinfo
from typing import Iterable

from ...common.validators import require_not_none
from ...core.enums import ShiftKind
from ...time_logs.model import TimeLog
from ..policy import ShiftPolicy
from ..window import ShiftWindow
from .base import ShiftInferenceStrategy, check_infer_arguments, select_overlapping

logger = logging.getLogger(__name__)


class UnscheduledShiftStrategy(ShiftInferenceStrategy):
    """Day off / weekend: the calendar day itself, widened by the policy margin, is the window."""

    kind = ShiftKind.UNSCHEDULED

    def __init__(self, policy: ShiftPolicy, zone: tzinfo):
        self._policy = require_not_none(policy, "policy")
        self._zone = require_not_none(zone, "time_zone")

    def infer(self, day: date, ordered_logs: Iterable[TimeLog]) -> list[TimeLog]:
        check_infer_arguments(day, ordered_logs)

        window = ShiftWindow.calendar_day(day, self._zone)
        expanded = window.expanded_by(self._policy.selection_margin)
        logger.debug("Calendar-day window for %s: %s expanded to %s", day, window.interval, expanded)

        return select_overlapping(expanded, ordered_logs)
