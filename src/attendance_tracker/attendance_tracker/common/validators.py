from __future__ import annotations

from typing import Any, Optional


def clean_text(value: Any) -> Optional[str]:
    """Return the trimmed string, or None when the value is missing or blank."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None
