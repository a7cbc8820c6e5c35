from __future__ import annotations

from typing import Optional

from ..core.enums import AttendanceStatus, LateToleranceField
from ..shifts.model import Shift
from .factory import AttendanceStrategyFactory
from .strategies.base import StatusDecision

_default_factory = AttendanceStrategyFactory()


def decide(
    clock_in_time: str,
    shift: Optional[Shift],
    tolerance_field: LateToleranceField = LateToleranceField.GRACE_PERIOD,
    *,
    factory: Optional[AttendanceStrategyFactory] = None,
) -> StatusDecision:
    factory = factory or _default_factory
    tolerance = shift.tolerance_minutes(tolerance_field) if shift else 0
    strategy = factory.for_checkin(clock_in_time=clock_in_time, shift=shift, tolerance_minutes=tolerance)
    return strategy.decide_checkin(clock_in_time=clock_in_time, shift=shift, tolerance_minutes=tolerance)


def classify(
    clock_in_time: str,
    shift: Optional[Shift],
    tolerance_field: LateToleranceField = LateToleranceField.GRACE_PERIOD,
) -> AttendanceStatus:
    """Late iff the clock-in is after shift start + tolerance (in minutes)."""

    return decide(clock_in_time, shift, tolerance_field).status


STATUS_LABELS = {
    AttendanceStatus.ON_TIME: "ไม่สาย",
    AttendanceStatus.LATE: "สาย",
    AttendanceStatus.ABSENT: "ขาด",
    AttendanceStatus.UNCLASSIFIED: "ไม่ระบุ",
}


def status_label(status: AttendanceStatus) -> str:
    return STATUS_LABELS.get(status, status.value)
