from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from src.shift_engine.shift_engine.core.exceptions import NullArgumentError
from src.shift_engine.shift_engine.schedules.model import TimeRange
from src.shift_engine.shift_engine.workshift.interval import TimeInterval
from src.shift_engine.shift_engine.workshift.window import ShiftWindow

MADRID = ZoneInfo("Europe/Madrid")


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def test_daytime_range_is_anchored_to_the_date():
    window = ShiftWindow.scheduled(date(2024, 10, 10), TimeRange(time(8, 0), time(17, 30)), timezone.utc)

    assert window.interval == TimeInterval(utc(2024, 10, 10, 8, 0), utc(2024, 10, 10, 17, 30))


def test_zone_offset_is_applied():
    window = ShiftWindow.scheduled(date(2024, 1, 15), TimeRange(time(9, 0), time(17, 0)), MADRID)

    # CET is UTC+1 in winter
    assert window.interval == TimeInterval(utc(2024, 1, 15, 8, 0), utc(2024, 1, 15, 16, 0))


def test_overnight_range_ends_next_day():
    window = ShiftWindow.scheduled(date(2024, 10, 10), TimeRange(time(22, 0), time(6, 0)), timezone.utc)

    assert window.interval == TimeInterval(utc(2024, 10, 10, 22, 0), utc(2024, 10, 11, 6, 0))
    assert window.interval.duration() == timedelta(hours=8)


def test_overnight_range_across_spring_forward_is_shorter():
    # 2024-03-31 02:00 CET -> 03:00 CEST
    window = ShiftWindow.scheduled(date(2024, 3, 30), TimeRange(time(22, 0), time(6, 0)), MADRID)

    assert window.interval.start == utc(2024, 3, 30, 21, 0)
    assert window.interval.end == utc(2024, 3, 31, 4, 0)
    assert window.interval.duration() == timedelta(hours=7)


def test_nonexistent_local_start_moves_forward():
    window = ShiftWindow.scheduled(date(2024, 3, 31), TimeRange(time(2, 30), time(10, 0)), MADRID)

    # 02:30 does not exist that day; it resolves to 03:30 CEST
    assert window.interval.start == utc(2024, 3, 31, 1, 30)
    assert window.interval.end == utc(2024, 3, 31, 8, 0)


def test_calendar_day_spans_local_midnight_to_midnight():
    window = ShiftWindow.calendar_day(date(2024, 1, 15), MADRID)

    assert window.interval == TimeInterval(utc(2024, 1, 14, 23, 0), utc(2024, 1, 15, 23, 0))


def test_calendar_day_follows_dst_rules():
    assert ShiftWindow.calendar_day(date(2024, 3, 31), MADRID).interval.duration() == timedelta(hours=23)
    assert ShiftWindow.calendar_day(date(2024, 10, 27), MADRID).interval.duration() == timedelta(hours=25)


def test_expanded_by_margin():
    window = ShiftWindow.scheduled(date(2024, 10, 10), TimeRange(time(8, 0), time(17, 30)), timezone.utc)

    assert window.expanded_by(timedelta(minutes=15)) == TimeInterval(utc(2024, 10, 10, 7, 45), utc(2024, 10, 10, 17, 45))


def test_missing_arguments_are_rejected():
    with pytest.raises(NullArgumentError):
        ShiftWindow.scheduled(date(2024, 10, 10), None, timezone.utc)
    with pytest.raises(NullArgumentError):
        ShiftWindow.scheduled(date(2024, 10, 10), TimeRange(time(8, 0), time(9, 0)), None)
    with pytest.raises(NullArgumentError):
        ShiftWindow.calendar_day(None, timezone.utc)
