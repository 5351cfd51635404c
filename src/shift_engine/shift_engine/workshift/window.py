from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta, tzinfo

from ..common.datetime_utils import local_to_instant, start_of_day
from ..common.validators import require_not_none
from ..schedules.model import TimeRange
from .interval import TimeInterval


@dataclass(frozen=True)
class ShiftWindow:
    """Absolute span of a shift anchored to one calendar date in one time zone."""

    interval: TimeInterval

    @classmethod
    def scheduled(cls, day: date, time_range: TimeRange, zone: tzinfo) -> ShiftWindow:
        """Anchor ``time_range`` to ``day``.

        When the end time is at or before the start time the range crosses
        midnight and its end falls on the following day (22:00-06:00).
        """
        require_not_none(day, "date")
        require_not_none(time_range, "time_range")
        require_not_none(zone, "time_zone")

        start = local_to_instant(day, time_range.start_time, zone)
        end_day = day + timedelta(days=1) if time_range.crosses_midnight else day
        end = local_to_instant(end_day, time_range.end_time, zone)
        return cls(TimeInterval(start, end))

    @classmethod
    def calendar_day(cls, day: date, zone: tzinfo) -> ShiftWindow:
        """Whole local day, midnight to midnight (23h or 25h on DST changes)."""
        require_not_none(day, "date")
        require_not_none(zone, "time_zone")
        return cls(TimeInterval(start_of_day(day, zone), start_of_day(day + timedelta(days=1), zone)))

    def expanded_by(self, margin: timedelta) -> TimeInterval:
        return self.interval.expand_by(margin)
