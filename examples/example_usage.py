"""Example: run the normalization pipeline on a saved payload (no Flask, no network).

Usage: python examples/example_usage.py snapshots/sheets_20240322_090000.json
"""

import json
import sys
from pathlib import Path

from attendance_dashboard.attendance.model import AttendanceFilter
from attendance_dashboard.attendance.service import AttendanceService
from attendance_dashboard.sheets.payload import parse_payload
from attendance_dashboard.sheets.snapshot import SnapshotStore


def main():
    payload = json.loads(Path(sys.argv[1]).read_text(encoding="utf-8"))
    store = SnapshotStore(parse_payload(payload))
    service = AttendanceService(store)

    view = service.query(AttendanceFilter())
    print(view.summary)
    for site_id, summary in view.by_site.items():
        print(f"{site_id}: {summary.on_time}/{summary.total} on time ({summary.on_time_rate}%)")


if __name__ == "__main__":
    main()
