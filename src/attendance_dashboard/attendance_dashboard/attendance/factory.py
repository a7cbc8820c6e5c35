from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import time_to_minutes
from ..core.constants import NO_TIME
from ..shifts.model import Shift
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy
from .strategies.unclassified_strategy import UnclassifiedStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_checkin(self, *, clock_in_time: str, shift: Optional[Shift], tolerance_minutes: int) -> AttendanceStrategy:
        if not shift:
            return UnclassifiedStrategy()

        if not clock_in_time or clock_in_time == NO_TIME:
            return AbsentStrategy()

        clock_in = time_to_minutes(clock_in_time)
        shift_start = time_to_minutes(shift.start_time)
        if clock_in is None or shift_start is None:
            return UnclassifiedStrategy()

        if clock_in > shift_start + tolerance_minutes:
            return LateStrategy()
        return NormalStrategy()
