"""Locate the staff id, date and time columns of a log row.

Log exports drift between deployments (extra or missing leading columns), but
everything after the clock-in time keeps the same relative layout. The time
column is therefore found by content and used as the anchor for the rest.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Collection

from ..common.cells import RawRow
from ..core.constants import STAFF_ID_SCAN_CELLS


@dataclass(frozen=True)
class LogColumns:
    staff_idx: int
    date_idx: int
    time_idx: int

    # Offsets from the time column.
    @property
    def clock_in_lat_idx(self) -> int:
        return self.time_idx + 1

    @property
    def clock_in_long_idx(self) -> int:
        return self.time_idx + 2

    @property
    def date_clock_out_idx(self) -> int:
        return self.time_idx + 3

    @property
    def clock_out_time_idx(self) -> int:
        return self.time_idx + 4

    @property
    def clock_out_lat_idx(self) -> int:
        return self.time_idx + 5

    @property
    def clock_out_long_idx(self) -> int:
        return self.time_idx + 6

    @property
    def site_idx(self) -> int:
        return self.time_idx + 7

    @property
    def working_hours_idx(self) -> int:
        return self.time_idx + 8


def looks_like_date(value: str) -> bool:
    return "/" in value or ("-" in value and len(value) >= 8)


def looks_like_time(value: str) -> bool:
    return ":" in value and len(value) <= 8


def discover_log_columns(row: RawRow, known_staff_ids: Collection[str]) -> LogColumns:
    texts = row.texts()

    staff_idx = 0
    for i, value in enumerate(texts[:STAFF_ID_SCAN_CELLS]):
        if value and value in known_staff_ids:
            staff_idx = i
            break

    date_idx = -1
    time_idx = -1
    for i, value in enumerate(texts):
        if date_idx < 0 and looks_like_date(value):
            date_idx = i
        if time_idx < 0 and looks_like_time(value):
            time_idx = i

    if date_idx < 0:
        date_idx = staff_idx + 2
    if time_idx < 0:
        time_idx = staff_idx + 3

    return LogColumns(staff_idx=staff_idx, date_idx=date_idx, time_idx=time_idx)
