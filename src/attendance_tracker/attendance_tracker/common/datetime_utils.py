from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from ..core.exceptions import ValidationError

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date.

    Only the zero-padded form is accepted; ``2025-1-5`` raises ValueError.
    """
    if not _ISO_DATE.fullmatch(value):
        raise ValueError(f"not a YYYY-MM-DD date: {value!r}")
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_optional_date(value: Optional[str], field_name: str = "date") -> Optional[date]:
    """Parse an optional filter date; blank means no filter."""
    if value is None or not value.strip():
        return None
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be in YYYY-MM-DD format", fields=[field_name]) from None


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now().date()
