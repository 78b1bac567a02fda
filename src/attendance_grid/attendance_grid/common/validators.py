from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")


def optional_int(value: Optional[str], field_name: str) -> Optional[int]:
    if value is None or not str(value).strip():
        return None
    return require_int(str(value).strip(), field_name)

