"""Required-field checks shared by the repositories."""

from __future__ import annotations

from courseapi.store.exceptions import ValidationError


def is_blank(value: str | None) -> bool:
    """True for None, empty or whitespace-only strings."""
    return value is None or not str(value).strip()


def require(message: str, *values: str | None) -> None:
    """Raise ValidationError with message if any value is blank."""
    if any(is_blank(value) for value in values):
        raise ValidationError(message)
