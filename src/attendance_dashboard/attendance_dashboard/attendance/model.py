from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Read-model for one row of the attendance table (rebuilt per query)."""

    staff_id: str
    site_id: str
    name: str
    shift_code: str
    date_start: str
    start_time: str
    date_end: str
    end_time: str
    status: AttendanceStatus
    has_valid_date: bool = True
    note: Optional[str] = None


@dataclass(frozen=True)
class AttendanceFilter:
    """Filter board state. Empty values mean "no constraint"."""

    start_date: str = ""
    end_date: str = ""
    site_id: str = ""
    staff_id: str = ""

    @property
    def has_date_bounds(self) -> bool:
        return bool(self.start_date or self.end_date)


@dataclass(frozen=True)
class Summary:
    total: int = 0
    on_time: int = 0
    late: int = 0
    absent: int = 0
    unclassified: int = 0

    @property
    def on_time_rate(self) -> int:
        """On-time share in whole percent."""
        if not self.total:
            return 0
        return round(self.on_time * 100 / self.total)


@dataclass(frozen=True)
class AttendanceView:
    records: list[AttendanceRecord]
    summary: Summary
    by_site: dict[str, Summary]
    shift_code: Optional[str] = None


@dataclass(frozen=True)
class DailyViews:
    today: list[AttendanceRecord] = field(default_factory=list)
    yesterday: list[AttendanceRecord] = field(default_factory=list)
