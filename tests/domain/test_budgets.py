"""Tests for budget progress, alerts and efficiency."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.models import Budget, Transaction
from src.domain.services.budgets import (
    ALERT_APPROACHING_LIMIT,
    ALERT_OVERSPENT,
    SEVERITY_HIGH,
    SEVERITY_MEDIUM,
    build_budget_alerts,
    calculate_budget_efficiency,
    calculate_budget_progress,
    get_budget_status,
)


def _budget(
    category: str = "Food",
    amount: str = "200",
    *,
    budget_id: str | None = None,
    is_active: bool = True,
) -> Budget:
    return Budget(
        id=budget_id or category.lower(),
        category=category,
        budget_amount=Decimal(amount),
        period="monthly",
        start_date=date(2024, 3, 1),
        end_date=date(2024, 3, 31),
        is_active=is_active,
    )


def _expense(
    amount: str,
    category: str = "Food",
    when: datetime = datetime(2024, 3, 10),
    kind: str = "expense",
) -> Transaction:
    return Transaction(
        id=f"{category}-{amount}-{when:%m%d}",
        type=kind,
        amount=Decimal(amount),
        category=category,
        date=when,
    )


def test_progress_within_budget() -> None:
    """Spending 105 of 200 is 52.5% and normal."""
    progress = calculate_budget_progress(_budget(), [_expense("105")])

    assert progress.spent == Decimal("105.00")
    assert progress.remaining == Decimal("95.00")
    assert progress.percentage == Decimal("52.50")
    assert progress.status == "normal"
    assert progress.is_exceeded is False
    assert progress.is_near_limit is False


def test_progress_over_budget() -> None:
    """Spending 220 of 200 is exceeded with nothing remaining."""
    progress = calculate_budget_progress(_budget(), [_expense("220")])

    assert progress.percentage == Decimal("110.00")
    assert progress.remaining == Decimal("0.00")
    assert progress.status == "exceeded"
    assert progress.is_exceeded is True
    assert progress.is_near_limit is True


def test_progress_at_exactly_the_cap_is_exceeded() -> None:
    progress = calculate_budget_progress(_budget(), [_expense("200")])

    assert progress.percentage == Decimal("100.00")
    assert progress.status == "exceeded"
    assert progress.is_exceeded is True


def test_progress_only_counts_matching_expenses_in_window() -> None:
    """Other categories, income and dates outside the window are skipped."""
    transactions = [
        _expense("10"),
        _expense("20", when=datetime(2024, 3, 31, 18, 0)),
        _expense("40", category="Rent"),
        _expense("80", kind="income"),
        _expense("160", when=datetime(2024, 2, 29, 23, 0)),
        _expense("320", when=datetime(2024, 4, 1)),
    ]

    progress = calculate_budget_progress(_budget(), transactions)

    assert progress.spent == Decimal("30.00")


@pytest.mark.parametrize(
    ("spent", "status"),
    [
        ("119.98", "normal"),
        ("120", "caution"),
        ("160", "warning"),
        ("180", "critical"),
        ("199.98", "critical"),
    ],
)
def test_progress_status_thresholds(spent, status) -> None:
    progress = calculate_budget_progress(_budget(), [_expense(spent)])

    assert progress.status == status


@pytest.mark.parametrize(
    "spent",
    ["0", "50", "159.99", "160", "199.99", "200", "250"],
)
def test_progress_flags_agree_with_status(spent) -> None:
    """is_exceeded follows the status and is_near_limit the percentage."""
    progress = calculate_budget_progress(_budget(), [_expense(spent)])

    assert progress.is_exceeded == (progress.status == "exceeded")
    assert progress.is_near_limit == (progress.percentage >= 80)
    assert progress.percentage >= 0
    assert progress.remaining >= 0


def test_progress_with_zero_cap_reports_zero_percent() -> None:
    progress = calculate_budget_progress(_budget(amount="0"), [_expense("50")])

    assert progress.percentage == Decimal("0")
    assert progress.status == "normal"
    assert progress.remaining == Decimal("0")


def test_progress_with_invalid_window_logs_warning() -> None:
    """Budgets without a readable window spend nothing."""
    logger = MagicMock()
    budget = Budget(
        id="broken",
        category="Food",
        budget_amount=Decimal("100"),
        period="monthly",
        start_date="someday",
        end_date=date(2024, 3, 31),
    )

    progress = calculate_budget_progress(budget, [_expense("50")], logger=logger)

    assert progress.spent == Decimal("0")
    logger.warning.assert_called_once()
    assert "broken" in logger.warning.call_args[0][0]


def test_get_budget_status_boundaries() -> None:
    assert get_budget_status(Decimal("99.99")) == "critical"
    assert get_budget_status(100) == "exceeded"
    assert get_budget_status("59.99") == "normal"
    assert get_budget_status("abc") == "normal"


def test_alerts_are_sorted_and_skip_inactive_budgets() -> None:
    budgets = [
        _budget("Books", "100"),
        _budget("Fun", "100"),
        _budget("Food", "200"),
        _budget("Rent", "100"),
        _budget("Travel", "100", is_active=False),
    ]
    transactions = [
        _expense("10", "Books"),
        _expense("85", "Fun"),
        _expense("220", "Food"),
        _expense("96", "Rent"),
        _expense("500", "Travel"),
    ]

    alerts = build_budget_alerts(budgets, transactions)

    assert [(a.category, a.alert_type, a.severity) for a in alerts] == [
        ("Food", ALERT_OVERSPENT, SEVERITY_HIGH),
        ("Rent", ALERT_APPROACHING_LIMIT, SEVERITY_HIGH),
        ("Fun", ALERT_APPROACHING_LIMIT, SEVERITY_MEDIUM),
    ]
    assert alerts[0].percentage == Decimal("110.00")
    assert alerts[0].remaining == Decimal("0.00")
    assert alerts[1].budget_id == "rent"


def test_alerts_honor_custom_thresholds() -> None:
    alerts = build_budget_alerts(
        [_budget("Fun", "100")],
        [_expense("55", "Fun")],
        approaching=Decimal("50"),
        high=Decimal("60"),
    )

    assert [(a.alert_type, a.severity) for a in alerts] == [
        (ALERT_APPROACHING_LIMIT, SEVERITY_MEDIUM),
    ]


def test_efficiency_penalizes_overspending() -> None:
    """110% scores 90, 50% scores 50; the average rates as good."""
    budgets = [_budget("Rent", "100"), _budget("Food", "200")]
    transactions = [_expense("50", "Rent"), _expense("220", "Food")]

    efficiency = calculate_budget_efficiency(budgets, transactions)

    assert efficiency.score == Decimal("70.00")
    assert efficiency.rating == "good"
    assert [item.category for item in efficiency.details] == ["Food", "Rent"]
    assert efficiency.details[0].efficiency == Decimal("90.00")
    assert efficiency.details[0].utilization == Decimal("110.00")


def test_efficiency_never_goes_negative() -> None:
    efficiency = calculate_budget_efficiency(
        [_budget("Food", "100")],
        [_expense("250", "Food")],
    )

    assert efficiency.score == Decimal("0")
    assert efficiency.rating == "poor"


def test_efficiency_of_no_budgets_is_zero() -> None:
    efficiency = calculate_budget_efficiency([], [])

    assert efficiency.score == Decimal("0")
    assert efficiency.details == []
