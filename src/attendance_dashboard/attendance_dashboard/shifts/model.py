from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import LateToleranceField


@dataclass(frozen=True)
class Shift:
    """Shift definition as read from the shifts sheet.

    ``start_time``/``end_time`` are canonical ``HH:MM`` when the sheet value
    could be parsed, otherwise the original text.
    """

    shift_code: str
    shift_name: str
    start_time: str
    end_time: str
    grace_period: int = 0
    late_threshold: Optional[int] = None

    def tolerance_minutes(self, field: LateToleranceField = LateToleranceField.GRACE_PERIOD) -> int:
        if field == LateToleranceField.LATE_THRESHOLD:
            return int(self.late_threshold or 0)
        return int(self.grace_period or 0)
