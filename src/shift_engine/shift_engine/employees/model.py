from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from zoneinfo import ZoneInfo

from ..core.constants import DEFAULT_TIME_ZONE


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: plain data object; loading employees is the caller's concern.
    """

    employee_id: int
    full_name: str
    email: Optional[str] = None


@dataclass(frozen=True)
class Worksite:
    """Domain entity: Worksite, the source of an employee's time zone."""

    worksite_id: int
    name: str
    time_zone: str = DEFAULT_TIME_ZONE

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.time_zone)
