from __future__ import annotations

from datetime import timedelta
from typing import Iterable, Iterator, Optional

from ..common.validators import require_not_none
from .interval import TimeInterval


class TimeIntervals:
    """Normalized timeline: sorted, mutually disjoint and non-touching intervals.

    Build it with :meth:`of`; the input may be unordered, overlapping or contain
    duplicates. Totals only depend on the union of the input, so they do not
    change under permutation or duplication of entries.
    """

    __slots__ = ("_intervals",)

    def __init__(self, intervals: tuple[TimeInterval, ...]):
        self._intervals = intervals

    @classmethod
    def of(cls, intervals: Optional[Iterable[TimeInterval]]) -> TimeIntervals:
        require_not_none(intervals, "intervals")
        return cls(_merge(intervals))

    @property
    def intervals(self) -> tuple[TimeInterval, ...]:
        return self._intervals

    def total_covered_duration(self) -> timedelta:
        return sum((i.duration() for i in self._intervals), timedelta(0))

    def total_gap_duration(self) -> timedelta:
        """Sum of the gaps between consecutive intervals; zero with fewer than two."""
        total = timedelta(0)
        for current, following in zip(self._intervals, self._intervals[1:]):
            total += following.start - current.end
        return total

    def __iter__(self) -> Iterator[TimeInterval]:
        return iter(self._intervals)

    def __len__(self) -> int:
        return len(self._intervals)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeIntervals):
            return NotImplemented
        return self._intervals == other._intervals

    def __hash__(self) -> int:
        return hash(self._intervals)

    def __repr__(self) -> str:
        return f"TimeIntervals({', '.join(str(i) for i in self._intervals)})"


def _merge(intervals: Iterable[TimeInterval]) -> tuple[TimeInterval, ...]:
    ordered = sorted(intervals, key=lambda i: i.start)
    if not ordered:
        return ()

    merged: list[TimeInterval] = []
    current = ordered[0]
    for following in ordered[1:]:
        if current.overlaps_or_touches(following):
            current = current.merge_with(following)
        else:
            merged.append(current)
            current = following
    merged.append(current)
    return tuple(merged)
