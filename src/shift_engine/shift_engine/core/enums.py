from __future__ import annotations

from enum import Enum


class ShiftKind(str, Enum):
    """How the logs of a shift were selected."""

    SCHEDULED = "SCHEDULED"
    UNSCHEDULED = "UNSCHEDULED"
