"""Calendar windows used to slice transaction sets."""

import calendar
import logging
from collections.abc import Iterable
from datetime import date, datetime, time, timedelta
from logging import Logger

from src.domain.constants import (
    LAST_30_DAYS,
    LAST_3_MONTHS,
    LAST_6_MONTHS,
    LAST_MONTH,
    LAST_WEEK,
    MONTHLY,
    THIS_MONTH,
    THIS_QUARTER,
    THIS_WEEK,
    THIS_YEAR,
    TODAY,
    WEEKLY,
    YEARLY,
)
from src.domain.models import DateRange, Transaction
from src.domain.services.normalization import (
    as_list,
    coerce_datetime,
    record_field,
)

_LOGGER = logging.getLogger(__name__)


def resolve_reference(reference_date) -> datetime:
    """Return the reference instant, falling back to now when unparseable."""
    resolved = coerce_datetime(reference_date)
    return resolved if resolved is not None else datetime.now()


def start_of_day(value: datetime) -> datetime:
    return datetime.combine(value.date(), time.min)


def end_of_day(value: datetime) -> datetime:
    return datetime.combine(value.date(), time.max)


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Return the (year, month) pair ``delta`` months away."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_label(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def get_month_range(reference_date, months_ago: int = 0) -> DateRange:
    """Return the calendar month ``months_ago`` months before the reference.

    Args:
        reference_date: Instant inside the current month.
        months_ago: Number of months to step back (0 is the current month).

    Returns:
        DateRange: First day 00:00 through last day 23:59:59.999999.
    """
    reference = resolve_reference(reference_date)
    year, month = shift_month(reference.year, reference.month, -months_ago)
    last_day = calendar.monthrange(year, month)[1]
    return DateRange(
        start=datetime(year, month, 1),
        end=datetime.combine(date(year, month, last_day), time.max),
    )


def get_fiscal_year_range(reference_date, start_month: int = 1) -> DateRange:
    """Return the twelve-month fiscal year containing the reference date."""
    reference = resolve_reference(reference_date)
    if not 1 <= start_month <= 12:
        start_month = 1
    year = reference.year if reference.month >= start_month else reference.year - 1
    end_year, end_month = shift_month(year, start_month, 11)
    last_day = calendar.monthrange(end_year, end_month)[1]
    return DateRange(
        start=datetime(year, start_month, 1),
        end=datetime.combine(date(end_year, end_month, last_day), time.max),
    )


def get_date_range(
    period: str,
    reference_date,
    *,
    logger: Logger | None = None,
) -> DateRange:
    """Return the inclusive window for a named period.

    Weeks start on Sunday. ``last30Days`` covers the reference day and the
    29 days before it. Unknown periods degrade to the reference day.

    Args:
        period: One of the names in ``DATE_RANGE_PERIODS``.
        reference_date: Instant the window is computed from.
        logger: Logger used for warnings.

    Returns:
        DateRange: Window with inclusive start and end.
    """
    reference = resolve_reference(reference_date)
    today = DateRange(start=start_of_day(reference), end=end_of_day(reference))

    if period == TODAY:
        return today
    if period in (THIS_WEEK, LAST_WEEK):
        days_since_sunday = (reference.weekday() + 1) % 7
        start = today.start - timedelta(days=days_since_sunday)
        if period == LAST_WEEK:
            start -= timedelta(days=7)
        return DateRange(start=start, end=end_of_day(start + timedelta(days=6)))
    if period == THIS_MONTH:
        return get_month_range(reference, 0)
    if period == LAST_MONTH:
        return get_month_range(reference, 1)
    if period == LAST_30_DAYS:
        return DateRange(start=today.start - timedelta(days=29), end=today.end)
    if period == THIS_QUARTER:
        first_month = (reference.month - 1) // 3 * 3 + 1
        end_year, end_month = shift_month(reference.year, first_month, 2)
        return DateRange(
            start=datetime(reference.year, first_month, 1),
            end=get_month_range(datetime(end_year, end_month, 1)).end,
        )
    if period in (LAST_3_MONTHS, LAST_6_MONTHS):
        months = 3 if period == LAST_3_MONTHS else 6
        return DateRange(
            start=get_month_range(reference, months).start,
            end=today.end,
        )
    if period == THIS_YEAR:
        return DateRange(
            start=datetime(reference.year, 1, 1),
            end=datetime.combine(date(reference.year, 12, 31), time.max),
        )

    (logger or _LOGGER).warning(
        f"Unknown date range period '{period}', using the reference day"
    )
    return today


def is_within_range(value, date_range: DateRange) -> bool:
    """Return True when a date-like value falls inside the window."""
    instant = coerce_datetime(value)
    if instant is None:
        return False
    return date_range.start <= instant <= date_range.end


def filter_by_range(
    transactions: Iterable[Transaction] | None,
    date_range: DateRange,
) -> list[Transaction]:
    """Return the transactions dated inside the window, in input order."""
    return [
        transaction
        for transaction in as_list(transactions)
        if is_within_range(record_field(transaction, "date"), date_range)
    ]


def get_fiscal_periods(transactions: Iterable[Transaction] | None) -> list[str]:
    """Return the distinct ``YYYY-MM`` months present, newest first."""
    labels = set()
    for transaction in as_list(transactions):
        instant = coerce_datetime(record_field(transaction, "date"))
        if instant is not None:
            labels.add(month_label(instant.year, instant.month))
    return sorted(labels, reverse=True)


def calculate_budget_end_date(start_date, period: str) -> date | None:
    """Return the last day covered by a budget starting on ``start_date``.

    Args:
        start_date: First day of the budget.
        period: weekly, monthly or yearly.

    Returns:
        date | None: Inclusive end day, None for unknown periods or dates.
    """
    start = coerce_datetime(start_date)
    if start is None:
        return None
    first = start.date()
    if period == WEEKLY:
        return first + timedelta(days=6)
    if period == MONTHLY:
        months = 1
    elif period == YEARLY:
        months = 12
    else:
        return None
    year, month = shift_month(first.year, first.month, months)
    day = min(first.day, calendar.monthrange(year, month)[1])
    return date(year, month, day) - timedelta(days=1)


__all__ = [
    "resolve_reference",
    "start_of_day",
    "end_of_day",
    "shift_month",
    "month_label",
    "get_month_range",
    "get_fiscal_year_range",
    "get_date_range",
    "is_within_range",
    "filter_by_range",
    "get_fiscal_periods",
    "calculate_budget_end_date",
]
