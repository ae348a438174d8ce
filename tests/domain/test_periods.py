"""Tests for calendar windows."""

from datetime import date, datetime, time
from unittest.mock import MagicMock

import pytest

from src.domain.models import DateRange, Transaction
from src.domain.services.periods import (
    calculate_budget_end_date,
    filter_by_range,
    get_date_range,
    get_fiscal_periods,
    get_fiscal_year_range,
    get_month_range,
    is_within_range,
    resolve_reference,
    shift_month,
)

# Wednesday.
REFERENCE = datetime(2024, 3, 13, 15, 30)


def _end(day: date) -> datetime:
    return datetime.combine(day, time.max)


@pytest.mark.parametrize(
    ("period", "start", "end"),
    [
        ("today", datetime(2024, 3, 13), _end(date(2024, 3, 13))),
        ("thisWeek", datetime(2024, 3, 10), _end(date(2024, 3, 16))),
        ("lastWeek", datetime(2024, 3, 3), _end(date(2024, 3, 9))),
        ("thisMonth", datetime(2024, 3, 1), _end(date(2024, 3, 31))),
        ("lastMonth", datetime(2024, 2, 1), _end(date(2024, 2, 29))),
        ("last30Days", datetime(2024, 2, 13), _end(date(2024, 3, 13))),
        ("thisQuarter", datetime(2024, 1, 1), _end(date(2024, 3, 31))),
        ("last3Months", datetime(2023, 12, 1), _end(date(2024, 3, 13))),
        ("last6Months", datetime(2023, 9, 1), _end(date(2024, 3, 13))),
        ("thisYear", datetime(2024, 1, 1), _end(date(2024, 12, 31))),
    ],
)
def test_get_date_range_named_periods(period, start, end) -> None:
    """Each named period should map to its inclusive window."""
    window = get_date_range(period, REFERENCE)

    assert window == DateRange(start=start, end=end)


def test_get_date_range_week_starting_on_sunday() -> None:
    """A Sunday reference starts its own week."""
    window = get_date_range("thisWeek", datetime(2024, 3, 10, 8, 0))

    assert window.start == datetime(2024, 3, 10)


def test_get_date_range_unknown_period_logs_and_uses_day() -> None:
    """Unknown names degrade to the reference day with a warning."""
    logger = MagicMock()

    window = get_date_range("fortnight", REFERENCE, logger=logger)

    assert window == get_date_range("today", REFERENCE)
    logger.warning.assert_called_once()
    assert "fortnight" in logger.warning.call_args[0][0]


def test_last_month_rolls_over_the_year() -> None:
    """January references look back into December of the prior year."""
    window = get_date_range("lastMonth", datetime(2024, 1, 15))

    assert window.start == datetime(2023, 12, 1)
    assert window.end == _end(date(2023, 12, 31))


def test_get_month_range_steps_back_from_month_end() -> None:
    """Stepping back from the 31st should not overflow short months."""
    window = get_month_range(datetime(2024, 3, 31), months_ago=1)

    assert window.start == datetime(2024, 2, 1)
    assert window.end == _end(date(2024, 2, 29))


def test_shift_month_wraps_years() -> None:
    assert shift_month(2024, 1, -1) == (2023, 12)
    assert shift_month(2023, 12, 1) == (2024, 1)
    assert shift_month(2024, 3, -27) == (2021, 12)


def test_get_fiscal_year_range_with_april_start() -> None:
    """Fiscal years starting in April span two calendar years."""
    window = get_fiscal_year_range(REFERENCE, start_month=4)

    assert window.start == datetime(2023, 4, 1)
    assert window.end == _end(date(2024, 3, 31))


def test_get_fiscal_year_range_invalid_start_uses_january() -> None:
    window = get_fiscal_year_range(REFERENCE, start_month=13)

    assert window.start == datetime(2024, 1, 1)
    assert window.end == _end(date(2024, 12, 31))


def test_is_within_range_parses_strings_and_rejects_garbage() -> None:
    """ISO strings with a Z suffix compare as UTC; invalid dates are out."""
    window = get_date_range("today", REFERENCE)

    assert is_within_range("2024-03-13T10:00:00Z", window)
    assert is_within_range(date(2024, 3, 13), window)
    assert not is_within_range("2024-03-14T00:00:00", window)
    assert not is_within_range("not-a-date", window)
    assert not is_within_range(None, window)


def test_filter_by_range_keeps_input_order() -> None:
    """Filtering should preserve order and skip undated records."""
    transactions = [
        Transaction("3", "expense", 1, "Food", datetime(2024, 3, 20)),
        Transaction("1", "expense", 1, "Food", datetime(2024, 2, 1)),
        Transaction("2", "expense", 1, "Food", datetime(2024, 3, 2)),
        Transaction("4", "expense", 1, "Food", None),
    ]

    result = filter_by_range(transactions, get_date_range("thisMonth", REFERENCE))

    assert [transaction.id for transaction in result] == ["3", "2"]


def test_get_fiscal_periods_lists_distinct_months_newest_first() -> None:
    transactions = [
        {"date": "2024-01-05"},
        {"date": datetime(2023, 12, 31)},
        {"date": "2024-01-20T10:00:00"},
        {"date": "garbage"},
    ]

    assert get_fiscal_periods(transactions) == ["2024-01", "2023-12"]


@pytest.mark.parametrize(
    ("period", "expected"),
    [
        ("weekly", date(2024, 3, 7)),
        ("monthly", date(2024, 3, 31)),
        ("yearly", date(2025, 2, 28)),
        ("daily", None),
    ],
)
def test_calculate_budget_end_date(period, expected) -> None:
    assert calculate_budget_end_date(date(2024, 3, 1), period) == expected


def test_calculate_budget_end_date_rejects_invalid_start() -> None:
    assert calculate_budget_end_date("soon", "monthly") is None


def test_resolve_reference_keeps_valid_and_replaces_invalid() -> None:
    assert resolve_reference("2024-03-13") == datetime(2024, 3, 13)
    assert isinstance(resolve_reference("garbage"), datetime)
