"""Date parsing for query parameters."""

from datetime import date, datetime, timezone
from typing import Optional

from core.exceptions import ValidationError


def parse_date(value: Optional[str], field: str, required: bool = False) -> Optional[date]:
    """Parse a `YYYY-MM-DD` string, raising `ValidationError` when malformed.

    Args:
        value: Raw query value; empty means absent.
        field: Parameter name reported in the error.
        required: Whether an absent value is an error.
    """
    if value is None or not value.strip():
        if required:
            raise ValidationError(f"{field} is required. Please use yyyy-MM-dd format.", field=field)
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise ValidationError("Invalid date format. Please use yyyy-MM-dd format.", field=field)


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, the form stored in DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def utc_today() -> date:
    """Current calendar day in UTC."""
    return datetime.now(timezone.utc).date()
