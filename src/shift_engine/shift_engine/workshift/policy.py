from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from ..common.validators import require_non_negative
from ..core.constants import DEFAULT_SELECTION_MARGIN_MINUTES


@dataclass(frozen=True)
class ShiftPolicy:
    """Selection rules shared by every inference strategy.

    ``selection_margin`` is the slack added symmetrically before and after the
    shift window when deciding which logs belong to it.
    """

    selection_margin: timedelta

    def __post_init__(self) -> None:
        require_non_negative(self.selection_margin, "selection_margin")

    @classmethod
    def default(cls) -> ShiftPolicy:
        return cls(selection_margin=timedelta(minutes=DEFAULT_SELECTION_MARGIN_MINUTES))

    @classmethod
    def from_settings(cls, settings: Any) -> ShiftPolicy:
        minutes = int(getattr(settings, "SELECTION_MARGIN_MINUTES", DEFAULT_SELECTION_MARGIN_MINUTES))
        return cls(selection_margin=timedelta(minutes=minutes))
