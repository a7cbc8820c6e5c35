from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    """Latitude/longitude exactly as exported (not parsed)."""

    lat: str = ""
    long: str = ""


@dataclass(frozen=True)
class LogEntry:
    """One clock-in/clock-out row from the log sheet.

    ``date_clock_in`` is ``YYYY-MM-DD`` when ``has_valid_date`` is True,
    otherwise the text found in the sheet.
    """

    staff_id: str
    name: str
    date_clock_in: str
    clock_in_time: str
    clock_in_location: GeoPoint
    date_clock_out: str
    clock_out_time: str
    clock_out_location: GeoPoint
    site_id: str
    working_hours: str
    has_valid_date: bool = True
