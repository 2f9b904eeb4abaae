from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def try_parse_iso_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return parse_iso_date(str(value)[:10])
    except ValueError:
        return None


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def to_iso(value: Any) -> str:
    """Normalize a DATE column (date, datetime or str) into YYYY-MM-DD."""

    if value is None:
        return ""
    if isinstance(value, (date, datetime)):
        return value.strftime("%Y-%m-%d")
    return str(value)
