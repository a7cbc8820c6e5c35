from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Roster row: one staff member and the site they belong to."""

    line_id: str
    staff_id: str
    name: str
    site_id: str
    role_type: str
    position: str
