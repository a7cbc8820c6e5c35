from __future__ import annotations

import json
import logging
from typing import Any, Optional

from ..common.cells import rows_from_table
from ..common.datetime_utils import now_local
from ..core.constants import INVALID_JSON_EXCERPT
from ..core.exceptions import PayloadError
from ..employees.mapper import index_by_staff_id, map_employee_rows
from ..logs.mapper import map_log_rows
from ..shifts.mapper import map_shift_rows
from .snapshot import Snapshot

logger = logging.getLogger(__name__)

TABLES = ("logs", "employees", "shifts")


def decode_body(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        raise PayloadError(text[:INVALID_JSON_EXCERPT], code="INVALID_JSON") from None


def _misnamed(key: str, data: dict) -> Optional[str]:
    for candidate in data:
        if isinstance(candidate, str) and candidate.strip().lower() == key:
            return candidate
    return None


def _table(data: dict, key: str) -> list:
    if key not in data:
        close = _misnamed(key, data)
        if close is not None:
            raise PayloadError(f"table '{key}' is missing (found '{close}', check the sheet name)")
        found = ", ".join(sorted(str(k) for k in data)) or "none"
        raise PayloadError(f"table '{key}' is missing (tables found: {found})")
    table = data[key]
    if not isinstance(table, list):
        raise PayloadError(f"table '{key}' must be a list of rows, got {type(table).__name__}")
    return table


def parse_payload(data: Any) -> Snapshot:
    """Validate the ``{logs, employees, shifts}`` payload and normalize every table.

    Shape problems abort the whole cycle with PayloadError; bad rows inside a
    table are dropped one by one.
    """

    if not isinstance(data, dict):
        raise PayloadError(f"payload must be a JSON object, got {type(data).__name__}")
    if "error" in data and not all(k in data for k in TABLES):
        raise PayloadError(f"data source reported an error: {data.get('error')}")

    tables = {key: _table(data, key) for key in TABLES}

    employees = map_employee_rows(rows_from_table(tables["employees"]))
    shifts = map_shift_rows(rows_from_table(tables["shifts"]))
    logs = map_log_rows(rows_from_table(tables["logs"]), index_by_staff_id(employees))

    if not shifts:
        logger.warning("no shift definitions found; attendance will be unclassified")

    return Snapshot(
        logs=tuple(logs),
        employees=tuple(employees),
        shifts=tuple(shifts),
        fetched_at=now_local(),
    )
