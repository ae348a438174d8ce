"""Domain normalization helpers."""

from collections.abc import Iterable, Mapping
from datetime import date, datetime, time, timezone

from src.domain.constants import OTHER_CATEGORY


def normalize_category(category) -> str:
    """Normalize a category key.

    Args:
        category: Raw category value from a record.

    Returns:
        str: Stripped category key, ``Other`` when missing or blank.
    """
    if category is None:
        return OTHER_CATEGORY
    cleaned = str(category).strip()
    return cleaned or OTHER_CATEGORY


def normalize_type(value) -> str | None:
    """Normalize a transaction type to lower case."""
    if not isinstance(value, str):
        return None
    cleaned = value.strip().lower()
    return cleaned or None


def coerce_datetime(value, *, end_of_day: bool = False) -> datetime | None:
    """Normalize date-like values to naive datetimes.

    Aware datetimes are converted to UTC before the timezone is dropped so
    that every comparison happens between naive values.

    Args:
        value: datetime, date or ISO-8601 string.
        end_of_day: Expand date-only inputs to the last instant of the day.

    Returns:
        datetime | None: Parsed value, or None when it cannot be parsed.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        bound = time.max if end_of_day else time.min
        return datetime.combine(value, bound)
    elif isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            return None
        if end_of_day and len(raw) == 10:
            parsed = datetime.combine(parsed.date(), time.max)
    else:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def record_field(record, name: str, default=None):
    """Read a field from a record object or a plain mapping."""
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def coerce_count(value) -> int:
    """Return a non-negative integer count, zero when unreadable."""
    try:
        return max(int(value), 0)
    except (TypeError, ValueError, OverflowError):
        return 0


def as_list(items) -> list:
    """Return a shallow list copy of an iterable, empty for anything else."""
    if items is None or isinstance(items, (str, bytes)):
        return []
    if not isinstance(items, Iterable):
        return []
    return list(items)


__all__ = [
    "normalize_category",
    "normalize_type",
    "coerce_datetime",
    "record_field",
    "coerce_count",
    "as_list",
]
