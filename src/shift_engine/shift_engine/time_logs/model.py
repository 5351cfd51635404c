from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Iterator, Optional

from ..common.validators import require_aware
from ..core.exceptions import TimeLogChronologyError


@dataclass(frozen=True)
class TimeLog:
    """Domain entity: a clock-in / clock-out record.

    ``exit_time`` is None while the employee is still clocked in.
    """

    time_log_id: int
    employee_id: int
    entry_time: datetime
    exit_time: Optional[datetime] = None
    worksite_id: Optional[int] = None

    def __post_init__(self) -> None:
        require_aware(self.entry_time, "entry_time")
        if self.exit_time is not None:
            require_aware(self.exit_time, "exit_time")

    @property
    def is_closed(self) -> bool:
        return self.exit_time is not None

    @property
    def work_duration(self) -> Optional[timedelta]:
        if self.exit_time is None or self.exit_time < self.entry_time:
            return None
        return self.exit_time - self.entry_time


def chronological(logs: Iterable[TimeLog]) -> Iterator[TimeLog]:
    """Yield ``logs`` lazily, raising TimeLogChronologyError at the first one
    whose entry time is earlier than the previous entry.
    """
    previous: Optional[TimeLog] = None
    for log in logs:
        if previous is not None and log.entry_time < previous.entry_time:
            raise TimeLogChronologyError(
                f"Time logs must be ordered by entry time: "
                f"{previous.time_log_id} ({previous.entry_time.isoformat()}) comes before "
                f"{log.time_log_id} ({log.entry_time.isoformat()})"
            )
        previous = log
        yield log
