from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .schedules.repository import ScheduleRepository
from .time_logs.repository import TimeLogRepository
from .workshift.policy import ShiftPolicy
from .workshift.resolver import ShiftInferenceStrategyResolver
from .workshift.service import WorkShiftService


@dataclass(frozen=True)
class Container:
    time_logs_repo: TimeLogRepository
    schedules_repo: ScheduleRepository

    policy: ShiftPolicy
    resolver: ShiftInferenceStrategyResolver
    work_shift_service: WorkShiftService


def build_container(*, time_logs: TimeLogRepository, schedules: ScheduleRepository, settings: Any) -> Container:
    policy = ShiftPolicy.from_settings(settings)
    resolver = ShiftInferenceStrategyResolver()
    work_shift_service = WorkShiftService(
        time_logs,
        schedules,
        policy=policy,
        resolver=resolver,
    )

    return Container(
        time_logs_repo=time_logs,
        schedules_repo=schedules,
        policy=policy,
        resolver=resolver,
        work_shift_service=work_shift_service,
    )
