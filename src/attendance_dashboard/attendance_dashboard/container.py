from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.service import AttendanceService
from .common.validators import require_choice
from .core.constants import DEFAULT_SHEETS_TIMEOUT_SECONDS
from .core.enums import LateToleranceField
from .employees.service import DirectoryService
from .sheets.client import SheetsClient, SheetsConfig
from .sheets.service import PayloadSource, SnapshotService
from .sheets.snapshot import SnapshotStore


@dataclass(frozen=True)
class Container:
    sheets_client: PayloadSource
    store: SnapshotStore

    snapshot_service: SnapshotService
    attendance_service: AttendanceService
    directory_service: DirectoryService


def build_container(*, sheets_config: dict, source: Optional[PayloadSource] = None) -> Container:
    config = SheetsConfig(
        url=str(sheets_config.get("url") or ""),
        timeout_seconds=float(sheets_config.get("timeout_seconds") or DEFAULT_SHEETS_TIMEOUT_SECONDS),
    )
    tolerance_field = require_choice(
        sheets_config.get("late_tolerance_field"),
        LateToleranceField,
        "LATE_TOLERANCE_FIELD",
        LateToleranceField.GRACE_PERIOD,
    )

    sheets_client = source or SheetsClient(config)
    store = SnapshotStore()

    snapshot_service = SnapshotService(sheets_client, store)
    attendance_service = AttendanceService(store, tolerance_field=tolerance_field)
    directory_service = DirectoryService(store)

    return Container(
        sheets_client=sheets_client,
        store=store,
        snapshot_service=snapshot_service,
        attendance_service=attendance_service,
        directory_service=directory_service,
    )
