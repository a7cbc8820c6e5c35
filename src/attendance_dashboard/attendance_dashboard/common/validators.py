from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional, Type, TypeVar

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

E = TypeVar("E", bound=Enum)


def optional_text(value: Optional[str]) -> str:
    return (value or "").strip()


def optional_iso_date(value: Optional[str], field_name: str) -> Optional[date]:
    """Empty -> None, otherwise the value must be YYYY-MM-DD."""

    value = optional_text(value)
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date, got {value!r}") from None


def require_choice(value: Optional[str], enum_cls: Type[E], field_name: str, default: E) -> E:
    value = optional_text(value)
    if not value:
        return default
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}") from None
