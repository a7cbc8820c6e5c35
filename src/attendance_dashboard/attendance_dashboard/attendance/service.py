from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..core.enums import LateToleranceField, ReportMode
from ..shifts.model import Shift
from ..sheets.snapshot import Snapshot, SnapshotStore
from . import report
from .model import AttendanceFilter, AttendanceRecord, AttendanceView, DailyViews


class AttendanceService:
    """Use case: attendance tables and summaries over the current snapshot.

    Every log is classified against one reference shift (the first row of the
    shifts sheet); employees are not assigned to shifts individually.
    """

    def __init__(
        self,
        store: SnapshotStore,
        *,
        tolerance_field: LateToleranceField = LateToleranceField.GRACE_PERIOD,
        clock: Callable = now_local,
    ):
        self._store = store
        self._tolerance_field = tolerance_field
        self._clock = clock

    @staticmethod
    def reference_shift(snapshot: Snapshot) -> Optional[Shift]:
        return snapshot.shifts[0] if snapshot.shifts else None

    def today(self) -> date:
        return self._clock().date()

    def records(self, snapshot: Optional[Snapshot] = None) -> list[AttendanceRecord]:
        snapshot = snapshot or self._store.current()
        return report.build_records(snapshot.logs, self.reference_shift(snapshot), self._tolerance_field)

    def query(
        self,
        filters: AttendanceFilter,
        *,
        mode: ReportMode = ReportMode.LOGS,
        day: Optional[date] = None,
    ) -> AttendanceView:
        snapshot = self._store.current()
        shift = self.reference_shift(snapshot)

        if mode == ReportMode.ROSTER:
            rows = report.build_roster(
                snapshot.employees,
                snapshot.logs,
                shift,
                day or self.today(),
                filters,
                self._tolerance_field,
            )
        else:
            rows = report.sort_records(report.filter_records(self.records(snapshot), filters))

        return AttendanceView(
            records=rows,
            summary=report.summarize(rows),
            by_site=report.summarize_by_site(rows),
            shift_code=shift.shift_code if shift else None,
        )

    def daily(self, filters: AttendanceFilter, *, today: Optional[date] = None) -> DailyViews:
        return report.daily_views(self.records(), filters, today or self.today())
