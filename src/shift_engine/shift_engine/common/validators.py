from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional, TypeVar

from ..core.exceptions import NullArgumentError, ValidationError

T = TypeVar("T")


def require_not_none(value: Optional[T], field_name: str) -> T:
    if value is None:
        raise NullArgumentError(f"{field_name} must not be None")
    return value


def require_aware(value: datetime, field_name: str) -> datetime:
    require_not_none(value, field_name)
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValidationError(f"{field_name} must be timezone-aware")
    return value


def require_non_negative(value: timedelta, field_name: str) -> timedelta:
    require_not_none(value, field_name)
    if value < timedelta(0):
        raise ValidationError(f"{field_name} must not be negative")
    return value
