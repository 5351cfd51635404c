from datetime import datetime, timedelta, timezone
from itertools import permutations

import pytest

from src.shift_engine.shift_engine.core.exceptions import NullArgumentError
from src.shift_engine.shift_engine.workshift.interval import TimeInterval
from src.shift_engine.shift_engine.workshift.intervals import TimeIntervals


def span(start: str, end: str) -> TimeInterval:
    sh, sm = map(int, start.split(":"))
    eh, em = map(int, end.split(":"))
    return TimeInterval(
        datetime(2025, 1, 1, sh, sm, tzinfo=timezone.utc),
        datetime(2025, 1, 1, eh, em, tzinfo=timezone.utc),
    )


def test_empty_input_has_zero_totals():
    intervals = TimeIntervals.of([])

    assert len(intervals) == 0
    assert intervals.total_covered_duration() == timedelta(0)
    assert intervals.total_gap_duration() == timedelta(0)


def test_none_input_is_rejected():
    with pytest.raises(NullArgumentError):
        TimeIntervals.of(None)


def test_single_interval_has_no_gap():
    intervals = TimeIntervals.of([span("10:00", "11:00")])

    assert intervals.total_covered_duration() == timedelta(hours=1)
    assert intervals.total_gap_duration() == timedelta(0)


def test_overlapping_intervals_merge():
    intervals = TimeIntervals.of([span("10:00", "11:00"), span("10:30", "12:00")])

    assert intervals.intervals == (span("10:00", "12:00"),)
    assert intervals.total_covered_duration() == timedelta(hours=2)
    assert intervals.total_gap_duration() == timedelta(0)


def test_touching_intervals_merge():
    intervals = TimeIntervals.of([span("10:00", "11:00"), span("11:00", "12:00")])

    assert len(intervals) == 1
    assert intervals.total_covered_duration() == timedelta(hours=2)
    assert intervals.total_gap_duration() == timedelta(0)


def test_disjoint_intervals_report_gap():
    intervals = TimeIntervals.of([span("08:00", "09:00"), span("10:30", "11:30")])

    assert intervals.total_covered_duration() == timedelta(hours=2)
    assert intervals.total_gap_duration() == timedelta(hours=1, minutes=30)


def test_unordered_input_is_normalized():
    intervals = TimeIntervals.of([span("12:00", "13:00"), span("10:00", "11:00")])

    assert intervals.intervals == (span("10:00", "11:00"), span("12:00", "13:00"))
    assert intervals.total_covered_duration() == timedelta(hours=2)
    assert intervals.total_gap_duration() == timedelta(hours=1)


def test_gaps_add_up_across_several_intervals():
    intervals = TimeIntervals.of([span("08:00", "09:00"), span("10:00", "11:00"), span("12:30", "13:00")])

    assert intervals.total_gap_duration() == timedelta(minutes=150)
    assert intervals.total_covered_duration() == timedelta(hours=2, minutes=30)


def test_totals_do_not_depend_on_input_order():
    items = [span("08:00", "10:00"), span("09:30", "11:00"), span("13:00", "14:00"), span("14:00", "15:00")]
    expected = (timedelta(hours=5), timedelta(hours=2))

    for ordering in permutations(items):
        intervals = TimeIntervals.of(ordering)
        assert (intervals.total_covered_duration(), intervals.total_gap_duration()) == expected


def test_duplicates_and_contained_intervals_are_absorbed():
    base = [span("08:00", "12:00"), span("13:00", "17:00")]
    noisy = base + [span("08:00", "12:00"), span("09:00", "10:00"), span("13:00", "17:00"), span("16:59", "17:00")]

    assert TimeIntervals.of(noisy) == TimeIntervals.of(base)
    assert TimeIntervals.of(noisy).total_covered_duration() == timedelta(hours=8)
    assert TimeIntervals.of(noisy).total_gap_duration() == timedelta(hours=1)


def test_normalized_intervals_are_disjoint_and_ascending():
    intervals = TimeIntervals.of(
        [span("15:00", "16:00"), span("08:00", "09:00"), span("08:30", "10:00"), span("10:00", "10:15")]
    )

    ordered = list(intervals)
    for current, following in zip(ordered, ordered[1:]):
        assert current.end < following.start
