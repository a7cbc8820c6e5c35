from __future__ import annotations

from dataclasses import dataclass

from ..sheets.snapshot import SnapshotStore


@dataclass(frozen=True)
class StaffOption:
    staff_id: str
    name: str


@dataclass(frozen=True)
class FilterOptions:
    sites: list[str]
    staff: list[StaffOption]


class DirectoryService:
    """Use case: choices for the site/staff filter board."""

    def __init__(self, store: SnapshotStore):
        self._store = store

    def filter_options(self) -> FilterOptions:
        snapshot = self._store.current()

        sites = {e.site_id for e in snapshot.employees if e.site_id}
        sites.update(log.site_id for log in snapshot.logs if log.site_id)

        staff = [StaffOption(staff_id=e.staff_id, name=e.name) for e in snapshot.employees]
        staff.sort(key=lambda s: s.staff_id)
        return FilterOptions(sites=sorted(sites), staff=staff)
