"""Repeat engine calls agree and leave their inputs unchanged."""

from copy import deepcopy
from datetime import date, datetime
from decimal import Decimal

import pytest

from src.domain.models import Budget, Goal, Transaction
from src.domain.services import (
    build_budget_alerts,
    calculate_balance,
    calculate_budget_efficiency,
    calculate_budget_progress,
    calculate_cash_flow,
    calculate_category_trends,
    calculate_compound_interest,
    calculate_expense_velocity,
    calculate_financial_health_score,
    calculate_goal_progress,
    calculate_income_stability,
    calculate_monthly_summary,
    calculate_percentage_change,
    calculate_period_comparison,
    calculate_projections,
    calculate_spending_by_category,
    calculate_statistics,
    calculate_trends,
    get_date_range,
    get_fiscal_periods,
)

REFERENCE = datetime(2024, 4, 15, 12, 0)


def _transactions() -> list:
    return [
        Transaction("1", "income", Decimal("3000"), "Salary", datetime(2024, 2, 1)),
        {
            "id": "2",
            "type": "Expense",
            "amount": "120.335",
            "category": " Food ",
            "date": "2024-03-05T10:00:00Z",
        },
        Transaction("3", "expense", Decimal("900"), "Rent", datetime(2024, 3, 1)),
        {
            "id": "4",
            "type": "income",
            "amount": 2500,
            "category": None,
            "date": datetime(2024, 4, 2),
        },
        Transaction("5", "expense", Decimal("80.10"), "Food", datetime(2024, 4, 9)),
    ]


def _budgets() -> list:
    return [
        Budget(
            id="food",
            category="Food",
            budget_amount=Decimal("100"),
            period="monthly",
            start_date=date(2024, 4, 1),
            end_date=date(2024, 4, 30),
        ),
        {
            "id": "rent",
            "category": "Rent",
            "budget_amount": "850",
            "start_date": "2024-03-01",
            "end_date": "2024-03-31",
            "is_active": True,
        },
    ]


ENGINE_CALLS = {
    "balance": lambda txs, budgets: calculate_balance(txs),
    "breakdown": lambda txs, budgets: calculate_spending_by_category(txs),
    "budget_progress": lambda txs, budgets: calculate_budget_progress(
        budgets[0], txs
    ),
    "budget_alerts": lambda txs, budgets: build_budget_alerts(budgets, txs),
    "budget_efficiency": lambda txs, budgets: calculate_budget_efficiency(
        budgets, txs
    ),
    "trends": lambda txs, budgets: calculate_trends(
        txs, 3, reference_date=REFERENCE
    ),
    "monthly_summary": lambda txs, budgets: calculate_monthly_summary(
        txs, 2024, 3
    ),
    "category_trends": lambda txs, budgets: calculate_category_trends(
        txs, "Food", 3, reference_date=REFERENCE
    ),
    "income_stability": lambda txs, budgets: calculate_income_stability(
        txs, reference_date=REFERENCE
    ),
    "expense_velocity": lambda txs, budgets: calculate_expense_velocity(
        txs, reference_date=REFERENCE
    ),
    "cash_flow": lambda txs, budgets: calculate_cash_flow(
        txs, "last3Months", reference_date=REFERENCE
    ),
    "health": lambda txs, budgets: calculate_financial_health_score(
        txs, budgets
    ),
    "projections": lambda txs, budgets: calculate_projections(
        txs, reference_date=REFERENCE
    ),
    "fiscal_periods": lambda txs, budgets: get_fiscal_periods(txs),
    "period_comparison": lambda txs, budgets: calculate_period_comparison(
        txs, get_date_range("last30Days", REFERENCE)
    ),
    "statistics": lambda txs, budgets: calculate_statistics(
        [tx["amount"] if isinstance(tx, dict) else tx.amount for tx in txs]
    ),
}


@pytest.mark.parametrize("name", sorted(ENGINE_CALLS))
def test_repeat_calls_return_equal_results(name) -> None:
    call = ENGINE_CALLS[name]

    assert call(_transactions(), _budgets()) == call(
        _transactions(),
        _budgets(),
    )


@pytest.mark.parametrize("name", sorted(ENGINE_CALLS))
def test_inputs_are_left_untouched(name) -> None:
    """Mapping records and list order survive a call unchanged."""
    transactions = _transactions()
    budgets = _budgets()
    transactions_before = deepcopy(transactions)
    budgets_before = deepcopy(budgets)

    ENGINE_CALLS[name](transactions, budgets)
    ENGINE_CALLS[name](transactions, budgets)

    assert transactions == transactions_before
    assert budgets == budgets_before


def test_scalar_helpers_are_deterministic() -> None:
    goal = Goal(id="g", name="Goal", target_amount=Decimal("400"))

    assert calculate_goal_progress(goal, 300) == calculate_goal_progress(
        goal, 300
    )
    assert calculate_compound_interest(100, 3, 2) == (
        calculate_compound_interest(100, 3, 2)
    )
    assert calculate_percentage_change(80, 100) == (
        calculate_percentage_change(80, 100)
    )
    week = get_date_range("thisWeek", REFERENCE)
    assert week == get_date_range("thisWeek", REFERENCE)
    assert week.start == datetime(2024, 4, 14)
