from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence, Union

Cell = Union[str, int, float, bool, None]

_LEADING_INT = re.compile(r"^[+-]?\d+")


def cell_text(value: Any) -> str:
    """Stringify a cell the way the sheet shows it, or return ``""``.

    - ``None`` -> ``""``
    - ``True``/``False`` -> ``"true"``/``"false"``
    - integral floats -> integer text (``8.0`` -> ``"8"``)
    """

    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def leading_int(value: Any) -> Optional[int]:
    """Parse the leading integer of a cell (``"10 min"`` -> 10), None if there is none."""

    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value else None
    m = _LEADING_INT.match(str(value).strip())
    if not m:
        return None
    return int(m.group(0))


@dataclass(frozen=True)
class RawRow:
    """One spreadsheet row with typed, bounds-safe accessors.

    Mappers only read cells through ``text``/``integer``/``optional_integer`` so
    no untyped value leaks past the mapping boundary.
    """

    cells: tuple[Cell, ...]

    @classmethod
    def from_values(cls, values: Iterable[Any]) -> "RawRow":
        return cls(tuple(_coerce(v) for v in values))

    def __len__(self) -> int:
        return len(self.cells)

    def text(self, index: int) -> str:
        if index < 0 or index >= len(self.cells):
            return ""
        return cell_text(self.cells[index])

    def integer(self, index: int, default: int = 0) -> int:
        value = self.optional_integer(index)
        return default if value is None else value

    def optional_integer(self, index: int) -> Optional[int]:
        if index < 0 or index >= len(self.cells):
            return None
        return leading_int(self.cells[index])

    def texts(self) -> list[str]:
        return [cell_text(c) for c in self.cells]


def _coerce(value: Any) -> Cell:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    # Nested lists/objects are not valid cells; keep their text form.
    return str(value)


def rows_from_table(table: Sequence[Any]) -> list[RawRow]:
    """Convert a table (header row first) into RawRows, skipping the header and non-list rows."""

    out: list[RawRow] = []
    for raw in list(table)[1:]:
        if not isinstance(raw, (list, tuple)):
            continue
        out.append(RawRow.from_values(raw))
    return out
