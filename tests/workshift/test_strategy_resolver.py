from datetime import time, timezone

import pytest

from src.shift_engine.shift_engine.core.exceptions import NullArgumentError
from src.shift_engine.shift_engine.schedules.model import TimeRange
from src.shift_engine.shift_engine.workshift.policy import ShiftPolicy
from src.shift_engine.shift_engine.workshift.resolver import ShiftInferenceStrategyResolver
from src.shift_engine.shift_engine.workshift.strategies.scheduled_strategy import ScheduledShiftStrategy
from src.shift_engine.shift_engine.workshift.strategies.unscheduled_strategy import UnscheduledShiftStrategy


def test_resolver_picks_scheduled_when_range_present():
    time_range = TimeRange(start_time=time(8, 0), end_time=time(17, 0))

    resolver = ShiftInferenceStrategyResolver()
    strategy = resolver.resolve(time_range, timezone.utc, ShiftPolicy.default())

    assert isinstance(strategy, ScheduledShiftStrategy)
    assert strategy.time_range == time_range


def test_resolver_picks_unscheduled_without_range():
    resolver = ShiftInferenceStrategyResolver()
    strategy = resolver.resolve(None, timezone.utc, ShiftPolicy.default())

    assert isinstance(strategy, UnscheduledShiftStrategy)


def test_resolver_requires_zone_and_policy():
    resolver = ShiftInferenceStrategyResolver()

    with pytest.raises(NullArgumentError):
        resolver.resolve(None, None, ShiftPolicy.default())
    with pytest.raises(NullArgumentError):
        resolver.resolve(TimeRange(time(8, 0), time(17, 0)), timezone.utc, None)
