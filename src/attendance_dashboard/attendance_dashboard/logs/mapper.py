from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional

from ..common.cells import RawRow
from ..common.datetime_utils import normalize_date, normalize_time
from ..core.constants import INVALID_STAFF_IDS, MIN_ROW_CELLS
from ..employees.model import Employee
from .columns import discover_log_columns
from .model import GeoPoint, LogEntry

logger = logging.getLogger(__name__)


def map_log_row(row: RawRow, employee_index: Mapping[str, Employee]) -> Optional[LogEntry]:
    """Map one log row, locating its variable columns by content.

    Name and site fall back to the roster when the log leaves them blank.
    Returns None for rows that cannot be attributed to a staff member.
    """

    if len(row) < MIN_ROW_CELLS:
        return None

    cols = discover_log_columns(row, employee_index.keys())
    staff_id = row.text(cols.staff_idx)
    if staff_id.lower() in INVALID_STAFF_IDS:
        return None

    employee = employee_index.get(staff_id)
    name = row.text(cols.staff_idx + 1) or (employee.name if employee else "")
    site_id = row.text(cols.site_idx) or (employee.site_id if employee else "")

    date_in = normalize_date(row.text(cols.date_idx))
    time_in = normalize_time(row.text(cols.time_idx))
    time_out = normalize_time(row.text(cols.clock_out_time_idx))

    return LogEntry(
        staff_id=staff_id,
        name=name,
        date_clock_in=date_in.value,
        clock_in_time=time_in.value,
        clock_in_location=GeoPoint(row.text(cols.clock_in_lat_idx), row.text(cols.clock_in_long_idx)),
        date_clock_out=normalize_date(row.text(cols.date_clock_out_idx)).value,
        clock_out_time=time_out.value,
        clock_out_location=GeoPoint(row.text(cols.clock_out_lat_idx), row.text(cols.clock_out_long_idx)),
        site_id=site_id,
        working_hours=row.text(cols.working_hours_idx),
        has_valid_date=date_in.ok,
    )


def map_log_rows(rows: Iterable[RawRow], employee_index: Mapping[str, Employee]) -> list[LogEntry]:
    logs: list[LogEntry] = []
    dropped = 0
    for row in rows:
        entry = map_log_row(row, employee_index)
        if entry is None:
            dropped += 1
            continue
        logs.append(entry)
    if dropped:
        logger.debug("logs: dropped %d row(s) without a usable staff id", dropped)
    invalid_dates = sum(1 for e in logs if not e.has_valid_date)
    if invalid_dates:
        logger.info("logs: %d row(s) have an unreadable clock-in date", invalid_dates)
    return logs
