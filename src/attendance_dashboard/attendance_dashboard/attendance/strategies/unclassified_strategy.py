from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ...shifts.model import Shift
from .base import AttendanceStrategy, StatusDecision


class UnclassifiedStrategy(AttendanceStrategy):
    """No shift to compare against, or a clock-in we could not read."""

    def decide_checkin(self, *, clock_in_time: str, shift: Optional[Shift], tolerance_minutes: int) -> StatusDecision:
        if shift is None:
            return StatusDecision(status=AttendanceStatus.UNCLASSIFIED, note="no shift defined")
        return StatusDecision(status=AttendanceStatus.UNCLASSIFIED, note=f"unreadable time {clock_in_time!r}")
