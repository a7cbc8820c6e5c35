from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..common.cells import RawRow
from ..core.constants import MIN_ROW_CELLS
from .model import Employee

logger = logging.getLogger(__name__)


def map_employee_row(row: RawRow) -> Optional[Employee]:
    """Columns: line_id, staff_id, name, site_id, role_type, position."""

    if len(row) < MIN_ROW_CELLS:
        return None

    staff_id = row.text(1)
    if not staff_id:
        return None

    return Employee(
        line_id=row.text(0),
        staff_id=staff_id,
        name=row.text(2),
        site_id=row.text(3),
        role_type=row.text(4),
        position=row.text(5),
    )


def map_employee_rows(rows: Iterable[RawRow]) -> list[Employee]:
    employees: list[Employee] = []
    dropped = 0
    for row in rows:
        employee = map_employee_row(row)
        if employee is None:
            dropped += 1
            continue
        employees.append(employee)
    if dropped:
        logger.debug("employees: dropped %d row(s) without a staff id", dropped)
    return employees


def index_by_staff_id(employees: Iterable[Employee]) -> dict[str, Employee]:
    """First row wins when a staff id is repeated."""

    index: dict[str, Employee] = {}
    for e in employees:
        index.setdefault(e.staff_id, e)
    return index
