from __future__ import annotations

from typing import Optional

from ...common.datetime_utils import time_to_minutes
from ...core.enums import AttendanceStatus
from ...shifts.model import Shift
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late clock-in."""

    def decide_checkin(self, *, clock_in_time: str, shift: Optional[Shift], tolerance_minutes: int) -> StatusDecision:
        note = None
        start = time_to_minutes(shift.start_time) if shift else None
        clock_in = time_to_minutes(clock_in_time)
        if start is not None and clock_in is not None:
            note = f"{clock_in - start} min after {shift.start_time}"
        return StatusDecision(status=AttendanceStatus.LATE, note=note)
