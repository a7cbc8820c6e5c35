"""Filtering and aggregation over attendance records.

Everything here is a pure function of its arguments; the reference day for
"today"/"yesterday" views is always passed in.
"""

from __future__ import annotations

from collections import Counter
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from ..core.constants import NO_TIME
from ..core.enums import AttendanceStatus, LateToleranceField
from ..employees.model import Employee
from ..logs.model import LogEntry
from ..shifts.model import Shift
from .classifier import decide
from .model import AttendanceFilter, AttendanceRecord, DailyViews, Summary


def to_record(
    log: LogEntry,
    shift: Optional[Shift],
    tolerance_field: LateToleranceField = LateToleranceField.GRACE_PERIOD,
) -> AttendanceRecord:
    decision = decide(log.clock_in_time, shift, tolerance_field)
    return AttendanceRecord(
        staff_id=log.staff_id,
        site_id=log.site_id,
        name=log.name,
        shift_code=shift.shift_code if shift else "",
        date_start=log.date_clock_in,
        start_time=log.clock_in_time,
        date_end=log.date_clock_out,
        end_time=log.clock_out_time,
        status=decision.status,
        has_valid_date=log.has_valid_date,
        note=decision.note,
    )


def build_records(
    logs: Iterable[LogEntry],
    shift: Optional[Shift],
    tolerance_field: LateToleranceField = LateToleranceField.GRACE_PERIOD,
) -> list[AttendanceRecord]:
    return [to_record(log, shift, tolerance_field) for log in logs]


def _matches_people(record: AttendanceRecord, filters: AttendanceFilter) -> bool:
    if filters.site_id and record.site_id != filters.site_id:
        return False
    if filters.staff_id and record.staff_id != filters.staff_id:
        return False
    return True


def _matches_dates(record: AttendanceRecord, filters: AttendanceFilter) -> bool:
    if not filters.has_date_bounds:
        return True
    if not record.has_valid_date:
        return False
    if filters.start_date and record.date_start < filters.start_date:
        return False
    if filters.end_date and record.date_start > filters.end_date:
        return False
    return True


def filter_records(records: Iterable[AttendanceRecord], filters: AttendanceFilter) -> list[AttendanceRecord]:
    """Inclusive date range plus exact site/staff match; order is preserved."""

    return [r for r in records if _matches_people(r, filters) and _matches_dates(r, filters)]


def sort_records(records: Iterable[AttendanceRecord]) -> list[AttendanceRecord]:
    # HH:MM compares correctly as text.
    return sorted(records, key=lambda r: (r.site_id, r.start_time))


def summarize(records: Iterable[AttendanceRecord]) -> Summary:
    counts = Counter(r.status for r in records)
    return Summary(
        total=sum(counts.values()),
        on_time=counts[AttendanceStatus.ON_TIME],
        late=counts[AttendanceStatus.LATE],
        absent=counts[AttendanceStatus.ABSENT],
        unclassified=counts[AttendanceStatus.UNCLASSIFIED],
    )


def summarize_by_site(records: Iterable[AttendanceRecord]) -> dict[str, Summary]:
    by_site: dict[str, list[AttendanceRecord]] = {}
    for r in records:
        by_site.setdefault(r.site_id, []).append(r)
    return {site_id: summarize(by_site[site_id]) for site_id in sorted(by_site)}


def day_filter(day: date, filters: AttendanceFilter) -> AttendanceFilter:
    iso = day.isoformat()
    return AttendanceFilter(start_date=iso, end_date=iso, site_id=filters.site_id, staff_id=filters.staff_id)


def records_for_day(records: Iterable[AttendanceRecord], day: date, filters: AttendanceFilter) -> list[AttendanceRecord]:
    return sort_records(filter_records(records, day_filter(day, filters)))


def daily_views(records: Sequence[AttendanceRecord], filters: AttendanceFilter, today: date) -> DailyViews:
    return DailyViews(
        today=records_for_day(records, today, filters),
        yesterday=records_for_day(records, today - timedelta(days=1), filters),
    )


def absent_record(employee: Employee, shift: Optional[Shift], day: date) -> AttendanceRecord:
    return AttendanceRecord(
        staff_id=employee.staff_id,
        site_id=employee.site_id,
        name=employee.name,
        shift_code=shift.shift_code if shift else "",
        date_start=day.isoformat(),
        start_time=NO_TIME,
        date_end="",
        end_time=NO_TIME,
        status=AttendanceStatus.ABSENT,
    )


def build_roster(
    employees: Iterable[Employee],
    logs: Iterable[LogEntry],
    shift: Optional[Shift],
    day: date,
    filters: AttendanceFilter,
    tolerance_field: LateToleranceField = LateToleranceField.GRACE_PERIOD,
) -> list[AttendanceRecord]:
    """One row per employee matching the site/staff filters for ``day``.

    Employees with a log that day get their (first) log, everyone else gets a
    synthetic absent row.
    """

    iso = day.isoformat()
    first_log: dict[str, LogEntry] = {}
    for log in logs:
        if log.has_valid_date and log.date_clock_in == iso:
            first_log.setdefault(log.staff_id, log)

    rows: list[AttendanceRecord] = []
    for employee in employees:
        if filters.site_id and employee.site_id != filters.site_id:
            continue
        if filters.staff_id and employee.staff_id != filters.staff_id:
            continue
        log = first_log.get(employee.staff_id)
        if log is None:
            rows.append(absent_record(employee, shift, day))
        else:
            rows.append(to_record(log, shift, tolerance_field))
    return sort_records(rows)

