from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..common.cells import RawRow
from ..common.datetime_utils import is_canonical_time, normalize_time
from ..core.constants import MIN_ROW_CELLS
from .model import Shift

logger = logging.getLogger(__name__)


def map_shift_row(row: RawRow) -> Optional[Shift]:
    """Columns: shift_code, shift_name, start_time, end_time, grace_period, late_threshold."""

    if len(row) < MIN_ROW_CELLS:
        return None

    return Shift(
        shift_code=row.text(0),
        shift_name=row.text(1),
        start_time=normalize_time(row.text(2)).value,
        end_time=normalize_time(row.text(3)).value,
        grace_period=row.integer(4, default=0),
        late_threshold=row.optional_integer(5),
    )


def map_shift_rows(rows: Iterable[RawRow]) -> list[Shift]:
    shifts = [s for s in (map_shift_row(r) for r in rows) if s is not None]
    for s in shifts:
        if not is_canonical_time(s.start_time):
            logger.warning("shift %s has an unreadable start time %r", s.shift_code, s.start_time)
    return shifts
