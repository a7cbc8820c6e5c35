from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ...shifts.model import Shift
from .base import AttendanceStrategy, StatusDecision


class NormalStrategy(AttendanceStrategy):
    """Clock-in within the shift start plus tolerance."""

    def decide_checkin(self, *, clock_in_time: str, shift: Optional[Shift], tolerance_minutes: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ON_TIME)
