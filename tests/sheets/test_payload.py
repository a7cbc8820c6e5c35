from __future__ import annotations

import pytest

from attendance_dashboard.core.exceptions import PayloadError
from attendance_dashboard.sheets.payload import decode_body, parse_payload

HEADER_LOGS = ["Staff ID", "Name", "Date", "Time", "Lat", "Long", "Date Out", "Time Out", "Lat Out", "Long Out", "Site", "Hours"]


def _payload(**overrides):
    data = {
        "logs": [HEADER_LOGS, ["S1", "Alice", "2024-03-22", "09:15", "", "", "", "", "", "", "A", "8"]],
        "employees": [["Line", "Staff", "Name", "Site", "Role", "Position"], ["L1", "S1", "Alice", "A", "staff", "Operation Manager"]],
        "shifts": [["Code", "Name", "Start", "End", "Grace", "Late"], ["SH1", "Morning", "09:00", "17:00", "5", ""]],
    }
    data.update(overrides)
    return data


def test_parse_payload_discards_header_rows():
    snapshot = parse_payload(_payload())

    assert snapshot.counts() == {"logs": 1, "employees": 1, "shifts": 1}
    assert snapshot.logs[0].staff_id == "S1"


def test_bad_rows_do_not_abort_the_cycle():
    data = _payload()
    data["logs"] += [["x"], ["", "ghost", "2024-03-22", "09:00"], "not-a-row"]

    snapshot = parse_payload(data)

    assert len(snapshot.logs) == 1


def test_missing_table_names_the_table():
    data = _payload()
    del data["shifts"]

    with pytest.raises(PayloadError, match="'shifts'"):
        parse_payload(data)


def test_misnamed_table_is_reported():
    data = _payload()
    data["Employees"] = data.pop("employees")

    with pytest.raises(PayloadError, match="found 'Employees'"):
        parse_payload(data)


def test_table_must_be_a_list():
    with pytest.raises(PayloadError, match="must be a list"):
        parse_payload(_payload(logs={"rows": []}))


def test_payload_must_be_an_object():
    with pytest.raises(PayloadError):
        parse_payload([["header"]])


def test_upstream_error_object():
    with pytest.raises(PayloadError, match="reported an error"):
        parse_payload({"error": "Sheet not found"})


def test_decode_body_rejects_html():
    with pytest.raises(PayloadError) as exc:
        decode_body("<!DOCTYPE html><html>Sign in</html>")

    assert exc.value.code == "INVALID_JSON"


def test_no_shifts_still_parses():
    snapshot = parse_payload(_payload(shifts=[["Code"]]))

    assert snapshot.shifts == ()


def test_overflowing_date_cell_keeps_other_rows():
    data = _payload()
    data["logs"] = [
        ["h"],
        ["S1", "A", "1/1/99999999999999999999", "09:00"],
        ["S2", "B", "2024-03-22", "09:00"],
    ]

    snapshot = parse_payload(data)

    assert [log.staff_id for log in snapshot.logs] == ["S1", "S2"]
    assert not snapshot.logs[0].has_valid_date
    assert snapshot.logs[1].date_clock_in == "2024-03-22"
