from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from ..common.validators import require_not_none
from ..schedules.model import TimeRange
from .policy import ShiftPolicy
from .strategies.base import ShiftInferenceStrategy
from .strategies.scheduled_strategy import ScheduledShiftStrategy
from .strategies.unscheduled_strategy import UnscheduledShiftStrategy


@dataclass
class ShiftInferenceStrategyResolver:
    """Factory Pattern: choose the inference strategy for a date.

    A scheduled time range selects ScheduledShiftStrategy; ``None`` (no schedule
    that day) selects UnscheduledShiftStrategy.
    """

    def resolve(
        self,
        time_range: Optional[TimeRange],
        zone: tzinfo,
        policy: ShiftPolicy,
    ) -> ShiftInferenceStrategy:
        require_not_none(zone, "time_zone")
        require_not_none(policy, "policy")

        if time_range is None:
            return UnscheduledShiftStrategy(policy, zone)
        return ScheduledShiftStrategy(policy, time_range, zone)
