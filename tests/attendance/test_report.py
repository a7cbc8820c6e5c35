from __future__ import annotations

from datetime import date

from attendance_dashboard.attendance.model import AttendanceFilter, AttendanceRecord
from attendance_dashboard.attendance.report import (
    build_roster,
    daily_views,
    filter_records,
    sort_records,
    summarize,
    summarize_by_site,
)
from attendance_dashboard.core.enums import AttendanceStatus
from attendance_dashboard.employees.model import Employee
from attendance_dashboard.logs.model import GeoPoint, LogEntry
from attendance_dashboard.shifts.model import Shift

SHIFT = Shift(shift_code="SH1", shift_name="Morning", start_time="09:00", end_time="17:00", grace_period=5)


def _rec(staff_id, site_id, day, start, status=AttendanceStatus.ON_TIME, valid=True):
    return AttendanceRecord(
        staff_id=staff_id,
        site_id=site_id,
        name=staff_id,
        shift_code="SH1",
        date_start=day,
        start_time=start,
        date_end=day,
        end_time="18:00",
        status=status,
        has_valid_date=valid,
    )


def _log(staff_id, site_id, day, start):
    return LogEntry(
        staff_id=staff_id,
        name=staff_id,
        date_clock_in=day,
        clock_in_time=start,
        clock_in_location=GeoPoint(),
        date_clock_out=day,
        clock_out_time="18:00",
        clock_out_location=GeoPoint(),
        site_id=site_id,
        working_hours="",
    )


RECORDS = [
    _rec("S1", "A", "2024-03-20", "09:00"),
    _rec("S2", "B", "2024-03-21", "08:50"),
    _rec("S3", "A", "2024-03-22", "09:30", AttendanceStatus.LATE),
    _rec("S4", "B", "2024-03-22", "08:10"),
    _rec("S5", "A", "bad date", "08:00", valid=False),
]


def test_site_filter_keeps_order():
    out = filter_records(RECORDS, AttendanceFilter(site_id="A"))

    assert [r.staff_id for r in out] == ["S1", "S3", "S5"]


def test_staff_filter_is_exact_match():
    assert [r.staff_id for r in filter_records(RECORDS, AttendanceFilter(staff_id="S2"))] == ["S2"]
    assert filter_records(RECORDS, AttendanceFilter(staff_id="S")) == []


def test_date_range_is_inclusive_and_drops_invalid_dates():
    out = filter_records(RECORDS, AttendanceFilter(start_date="2024-03-21", end_date="2024-03-22"))

    assert [r.staff_id for r in out] == ["S2", "S3", "S4"]


def test_open_ended_range():
    out = filter_records(RECORDS, AttendanceFilter(start_date="2024-03-22"))

    assert [r.staff_id for r in out] == ["S3", "S4"]


def test_show_all_keeps_invalid_dates():
    assert len(filter_records(RECORDS, AttendanceFilter())) == len(RECORDS)


def test_sort_by_site_then_start_time():
    out = sort_records(RECORDS)

    assert [(r.site_id, r.start_time) for r in out] == [
        ("A", "08:00"),
        ("A", "09:00"),
        ("A", "09:30"),
        ("B", "08:10"),
        ("B", "08:50"),
    ]


def test_summaries():
    total = summarize(RECORDS)
    by_site = summarize_by_site(RECORDS)

    assert (total.total, total.on_time, total.late) == (5, 4, 1)
    assert total.on_time_rate == 80
    assert list(by_site) == ["A", "B"]
    assert (by_site["A"].total, by_site["A"].late, by_site["A"].on_time) == (3, 1, 2)
    assert summarize([]).on_time_rate == 0


def test_daily_views_use_given_reference_day():
    views = daily_views(RECORDS, AttendanceFilter(), today=date(2024, 3, 22))

    assert [r.staff_id for r in views.today] == ["S3", "S4"]
    assert [r.staff_id for r in views.yesterday] == ["S2"]


def test_daily_views_respect_site_filter():
    views = daily_views(RECORDS, AttendanceFilter(site_id="B"), today=date(2024, 3, 22))

    assert [r.staff_id for r in views.today] == ["S4"]


def test_roster_fills_absent_employees():
    employees = [
        Employee("L1", "S1", "Alice", "A", "staff", "Ops"),
        Employee("L2", "S2", "Bob", "A", "staff", "Ops"),
        Employee("L3", "S3", "Cara", "B", "staff", "Ops"),
    ]
    logs = [
        _log("S1", "A", "2024-03-22", "09:07"),
        _log("S1", "A", "2024-03-22", "10:00"),
        _log("S2", "A", "2024-03-21", "08:00"),
    ]

    rows = build_roster(employees, logs, SHIFT, date(2024, 3, 22), AttendanceFilter(site_id="A"))

    assert [(r.staff_id, r.start_time, r.status) for r in rows] == [
        ("S2", "-", AttendanceStatus.ABSENT),
        ("S1", "09:07", AttendanceStatus.LATE),
    ]
    assert rows[0].date_start == "2024-03-22"
    assert rows[0].shift_code == "SH1"
