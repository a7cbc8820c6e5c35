from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..employees.model import Employee
from ..logs.model import LogEntry
from ..shifts.model import Shift

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Normalized tables from one fetch cycle."""

    logs: tuple[LogEntry, ...] = ()
    employees: tuple[Employee, ...] = ()
    shifts: tuple[Shift, ...] = ()
    fetched_at: datetime = field(default_factory=now_local)

    def counts(self) -> dict:
        return {"logs": len(self.logs), "employees": len(self.employees), "shifts": len(self.shifts)}


class SnapshotStore:
    """Holds the current snapshot; each refresh replaces it as a whole.

    Note: refreshes are not coordinated. If two run at once, whichever
    finishes last wins.
    """

    def __init__(self, initial: Optional[Snapshot] = None):
        self._current = initial

    @property
    def loaded(self) -> bool:
        return self._current is not None

    def current(self) -> Snapshot:
        return self._current if self._current is not None else Snapshot()

    def replace(self, snapshot: Snapshot) -> None:
        self._current = snapshot
        logger.info(
            "snapshot replaced: logs=%d employees=%d shifts=%d",
            len(snapshot.logs),
            len(snapshot.employees),
            len(snapshot.shifts),
        )
