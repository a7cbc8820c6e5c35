from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from dateutil import parser as dateparser

from ..core.constants import BUDDHIST_ERA_MIN_YEAR, BUDDHIST_ERA_OFFSET, TWO_DIGIT_YEAR_BASE

_CLOCK = re.compile(r"^(\d{1,2}):(\d{1,2})(?::(\d{1,2}))?")
_MERIDIEM = re.compile(r"\b[ap]\.?m\.?\b", re.IGNORECASE)
_CANONICAL_TIME = re.compile(r"^\d{2}:\d{2}$")
_FOUR_DIGITS = re.compile(r"\b\d{4}\b")


@dataclass(frozen=True)
class Normalized:
    """Result of normalizing a sheet value.

    ``value`` is the canonical text when ``ok`` is True, otherwise the original
    (trimmed) input.
    """

    value: str
    ok: bool

    def __str__(self) -> str:
        return self.value


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def is_canonical_time(value: str) -> bool:
    return bool(_CANONICAL_TIME.match(value or ""))


def time_to_minutes(value: str) -> Optional[int]:
    """``"HH:MM"`` -> minutes since midnight, None for anything else."""

    if not is_canonical_time(value):
        return None
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def _clock_text(value: str) -> Optional[str]:
    m = _CLOCK.match(value)
    if not m:
        return None
    hours, minutes = int(m.group(1)), int(m.group(2))
    if hours > 23 or minutes > 59:
        return None
    return f"{hours:02d}:{minutes:02d}"


def normalize_time(raw: object) -> Normalized:
    """Normalize a clock value to ``HH:MM``.

    Accepts ``H:MM[:SS]``, a date-time with a ``T`` or space separator
    (``2024-03-22T14:30:00``), or anything ``dateutil`` understands
    (``9:05 PM``). Never raises.
    """

    text = "" if raw is None else str(raw).strip()
    if not text:
        return Normalized("", False)

    if _CLOCK.fullmatch(text):
        clock = _clock_text(text)
        if clock:
            return Normalized(clock, True)

    for sep in ("T", " "):
        if sep not in text:
            continue
        tail = text.split(sep, 1)[1].strip()
        if _MERIDIEM.search(tail):
            # 12-hour clocks go through dateutil below.
            break
        clock = _clock_text(tail)
        if clock:
            return Normalized(clock, True)

    try:
        parsed = dateparser.parse(text)
    except (ValueError, OverflowError):
        return Normalized(text, False)
    return Normalized(parsed.strftime("%H:%M"), True)


def _from_buddhist_era(year: int) -> int:
    if year < 100:
        year += TWO_DIGIT_YEAR_BASE
    if year > BUDDHIST_ERA_MIN_YEAR:
        year -= BUDDHIST_ERA_OFFSET
    return year


def _date_part(text: str) -> str:
    # "2024-03-22T00:00:00.000Z" / "22/03/2567 08:59" -> keep the date part only.
    return re.split(r"[T\s]", text, maxsplit=1)[0]


def _gregorian_years(text: str) -> str:
    # Leap days are checked against the year dateutil sees, so convert first.
    return _FOUR_DIGITS.sub(lambda m: str(_from_buddhist_era(int(m.group(0)))), text)


def _generic_date(text: str) -> Optional[str]:
    try:
        parsed = dateparser.parse(_gregorian_years(text), dayfirst=True)
    except (ValueError, OverflowError):
        return None
    year = _from_buddhist_era(parsed.year)
    try:
        return parsed.date().replace(year=year).isoformat()
    except ValueError:
        return None


def normalize_date(raw: object, reference_year: Optional[int] = None) -> Normalized:
    """Normalize a sheet date to ``YYYY-MM-DD``.

    Rules:
    - ``YYYY/MM/DD`` or ``YYYY-MM-DD`` when the first part has 4 digits,
      otherwise ``DD/MM/YYYY`` (``-`` works too).
    - Two-digit years are 20xx; years after 2500 are Buddhist Era (-543).
    - ``DD/MM`` needs ``reference_year``.
    - Without a separator, fall back to ``dateutil`` (day first).

    Never raises: on failure the original text comes back with ``ok=False``.
    """

    text = "" if raw is None else str(raw).strip()
    if not text:
        return Normalized("", False)

    head = _date_part(text)
    sep = "/" if "/" in head else "-" if "-" in head else None
    if sep is None:
        generic = _generic_date(text)
        return Normalized(generic, True) if generic else Normalized(text, False)

    parts = [p.strip() for p in head.split(sep)]
    if len(parts) == 2 and reference_year is not None:
        parts.append(str(reference_year))
    if len(parts) != 3:
        return Normalized(text, False)

    if len(parts[0]) == 4:
        year_s, month_s, day_s = parts
    else:
        day_s, month_s, year_s = parts

    try:
        year = _from_buddhist_era(int(year_s))
        value = date(year, int(month_s), int(day_s))
    except (ValueError, OverflowError):
        return Normalized(text, False)
    return Normalized(value.isoformat(), True)
