from __future__ import annotations

from attendance_dashboard.common.cells import RawRow
from attendance_dashboard.logs.columns import LogColumns, discover_log_columns


def _row(*cells):
    return RawRow.from_values(cells)


def test_standard_layout():
    row = _row("S1", "Alice", "2024-03-22", "09:15", "13.75", "100.50", "2024-03-22", "18:01", "13.75", "100.50", "A", "8")

    cols = discover_log_columns(row, {"S1"})

    assert cols == LogColumns(staff_idx=0, date_idx=2, time_idx=3)
    assert cols.site_idx == 10
    assert cols.working_hours_idx == 11


def test_extra_leading_column_shifts_everything():
    row = _row("R17", "S1", "Alice", "22/03/2024", "9:15", "13.75", "100.50", "22/03/2024", "18:01", "", "", "B", "8")

    cols = discover_log_columns(row, {"S1"})

    assert (cols.staff_idx, cols.date_idx, cols.time_idx) == (1, 3, 4)
    assert row.text(cols.site_idx) == "B"


def test_unknown_staff_defaults_to_first_column():
    row = _row("S9", "Zed", "2024-03-22", "09:15")

    assert discover_log_columns(row, {"S1"}).staff_idx == 0


def test_staff_id_only_searched_in_first_five_cells():
    row = _row("x", "x", "x", "x", "x", "S1", "2024-03-22", "09:15")

    cols = discover_log_columns(row, {"S1"})

    assert cols.staff_idx == 0
    assert (cols.date_idx, cols.time_idx) == (6, 7)


def test_falls_back_to_offsets_from_staff_column():
    row = _row("R1", "S1", "Alice", "", "", "")

    cols = discover_log_columns(row, {"S1"})

    assert (cols.date_idx, cols.time_idx) == (3, 4)


def test_first_match_wins_and_is_not_reassigned():
    row = _row("S1", "Alice", "22/03/2024", "09:15", "x", "x", "23/03/2024", "18:00")

    cols = discover_log_columns(row, {"S1"})

    assert (cols.date_idx, cols.time_idx) == (2, 3)


def test_long_datetime_cells_are_not_time_shaped():
    # Raw Apps Script export: both cells carry a full ISO timestamp.
    row = _row("S1", "Alice", "2024-03-22T00:00:00.000Z", "1899-12-30T02:15:00.000Z")

    cols = discover_log_columns(row, {"S1"})

    assert cols.date_idx == 2
    assert cols.time_idx == 3
