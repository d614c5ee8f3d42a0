from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value)


def require_non_empty_list(value: Any, message: str) -> list:
    if not isinstance(value, list) or not value:
        raise ValidationError(message)
    return value
