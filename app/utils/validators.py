"""Validators."""

from typing import Any


def is_blank(value: Any) -> bool:
    """True for None, empty strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def require(value: Any, message: str) -> Any:
    """Raise ``ValueError(message)`` when a required value is blank."""
    if is_blank(value):
        raise ValueError(message)
    return value
