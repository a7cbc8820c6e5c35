from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Lateness classification attached to every attendance record."""

    ON_TIME = "On-time"
    LATE = "Late"
    ABSENT = "Absent"
    UNCLASSIFIED = "Unclassified"


class LateToleranceField(str, Enum):
    """Which shift column holds the late tolerance for a deployment."""

    GRACE_PERIOD = "grace_period"
    LATE_THRESHOLD = "late_threshold"


class ReportMode(str, Enum):
    """Rows only for existing logs, or the full expected roster for a day."""

    LOGS = "logs"
    ROSTER = "roster"
