from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ..common.datetime_utils import to_instant
from ..common.validators import require_not_none
from ..core.exceptions import DisjointIntervalsError, InvalidIntervalError


@dataclass(frozen=True)
class TimeInterval:
    """Half-open span ``[start, end)`` between two absolute instants.

    Both instants are stored in UTC. A zero-length interval (``start == end``)
    is valid; ``end < start`` raises InvalidIntervalError.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        start = to_instant(require_not_none(self.start, "start"))
        end = to_instant(require_not_none(self.end, "end"))
        if end < start:
            raise InvalidIntervalError(f"end ({end.isoformat()}) must not be before start ({start.isoformat()})")
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    def overlaps(self, other: TimeInterval) -> bool:
        """True if both intervals share an instant. Touching is not overlapping."""
        require_not_none(other, "other")
        return self.start < other.end and other.start < self.end

    def touches(self, other: TimeInterval) -> bool:
        """True if one interval ends exactly where the other starts."""
        require_not_none(other, "other")
        return self.end == other.start or other.end == self.start

    def overlaps_or_touches(self, other: TimeInterval) -> bool:
        return self.overlaps(other) or self.touches(other)

    def merge_with(self, other: TimeInterval) -> TimeInterval:
        """Span from the earliest start to the latest end of both intervals.

        Raises DisjointIntervalsError when the intervals neither overlap nor touch.
        """
        require_not_none(other, "other")
        if not self.overlaps_or_touches(other):
            raise DisjointIntervalsError(f"Intervals do not overlap or touch: {self} and {other}")
        return TimeInterval(min(self.start, other.start), max(self.end, other.end))

    def intersect(self, other: TimeInterval) -> Optional[TimeInterval]:
        """Overlapping part of both intervals, or None when they do not overlap."""
        require_not_none(other, "other")
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        if end <= start:
            return None
        return TimeInterval(start, end)

    def expand_by(self, margin: timedelta) -> TimeInterval:
        require_not_none(margin, "margin")
        return TimeInterval(self.start - margin, self.end + margin)

    def ends_at_or_before(self, instant: datetime) -> bool:
        return self.end <= to_instant(instant)

    def starts_at_or_after(self, instant: datetime) -> bool:
        return self.start >= to_instant(instant)

    def contains(self, instant: datetime) -> bool:
        moment = to_instant(instant)
        return self.start <= moment < self.end

    def duration(self) -> timedelta:
        return self.end - self.start

    def __str__(self) -> str:
        return f"[{self.start.isoformat()}, {self.end.isoformat()})"
