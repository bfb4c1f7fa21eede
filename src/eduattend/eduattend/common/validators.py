from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_object(value: Any, what: str) -> dict:
    if not isinstance(value, dict):
        raise ValidationError(f"{what} must be a JSON object")
    return value


def require_list(value: Any, what: str) -> list:
    if not isinstance(value, list):
        raise ValidationError(f"{what} must be a JSON array")
    return value


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)
