from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo

from .validators import require_aware, require_not_none


def to_instant(value: datetime) -> datetime:
    """Normalize an aware datetime to UTC.

    Note: arithmetic between two datetimes sharing a ZoneInfo is wall-clock
    arithmetic, so instants are always compared and subtracted in UTC.
    """
    return require_aware(value, "instant").astimezone(timezone.utc)


def local_to_instant(day: date, clock_time: time, zone: tzinfo) -> datetime:
    """Resolve a wall-clock date/time in ``zone`` to an absolute UTC instant.

    Nonexistent local times (DST gap) resolve forward by the gap length and
    ambiguous ones (DST overlap) pick the earlier offset, following zone rules.
    """
    local = datetime.combine(day, clock_time).replace(tzinfo=zone, fold=0)
    return local.astimezone(timezone.utc)


def start_of_day(day: date, zone: tzinfo) -> datetime:
    return local_to_instant(day, time(0, 0), zone)


@dataclass(frozen=True)
class DurationParts:
    hours: int
    minutes: int
    seconds: int
    iso8601: str


def describe_duration(value: timedelta) -> DurationParts:
    """Split a duration into hours/minutes/seconds plus an ISO-8601 form (PT8H45M)."""
    require_not_none(value, "duration")
    total = int(value.total_seconds())
    sign = "-" if total < 0 else ""
    hours, rest = divmod(abs(total), 3600)
    minutes, seconds = divmod(rest, 60)

    iso = "PT"
    if hours:
        iso += f"{hours}H"
    if minutes:
        iso += f"{minutes}M"
    if seconds or iso == "PT":
        iso += f"{seconds}S"
    if sign:
        iso = "-" + iso
        hours, minutes, seconds = -hours, -minutes, -seconds
    return DurationParts(hours=hours, minutes=minutes, seconds=seconds, iso8601=iso)


def format_hhmm(value: timedelta) -> str:
    minutes = int(value.total_seconds() // 60)
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
