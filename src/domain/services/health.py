"""Composite financial health score."""

from collections.abc import Iterable
from logging import Logger

from src.domain.constants import (
    EMERGENCY_FUND_MONTHS,
    GRADE_THRESHOLDS,
    HEALTH_STATUS_THRESHOLDS,
    MAX_RECOMMENDATIONS,
)
from src.domain.models import Budget, FinancialHealth, Transaction
from src.domain.services.balance import sum_by_type
from src.domain.services.budgets import active_budgets, calculate_budget_progress
from src.domain.services.normalization import as_list
from src.domain.services.statistics import mean
from src.utils.decimal_utils import ZERO, round_number

POSITIVE_BALANCE = "positive_balance"
REGULAR_INCOME = "regular_income"
CONTROLLED_SPENDING = "controlled_spending"
EMERGENCY_FUND = "emergency_fund"
HAS_BUDGETS = "has_budgets"

FACTOR_POINTS = {
    POSITIVE_BALANCE: 20,
    REGULAR_INCOME: 20,
    CONTROLLED_SPENDING: 30,
    EMERGENCY_FUND: 20,
    HAS_BUDGETS: 10,
}

# Ordered by priority; the first MAX_RECOMMENDATIONS missing factors are shown.
RECOMMENDATIONS = (
    (POSITIVE_BALANCE, "Consider reducing expenses or increasing income"),
    (CONTROLLED_SPENDING, "Keep monthly expenses below monthly income"),
    (REGULAR_INCOME, "Record a regular source of income"),
    (HAS_BUDGETS, "Create budgets to track your spending"),
    (
        EMERGENCY_FUND,
        "Build an emergency fund covering 3-6 months of expenses",
    ),
)


def get_financial_grade(score: int) -> str:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return "F"


def get_health_status(score: int) -> str:
    for threshold, status in HEALTH_STATUS_THRESHOLDS:
        if score >= threshold:
            return status
    return "poor"


def calculate_financial_health_score(
    transactions: Iterable[Transaction] | None,
    budgets: Iterable[Budget] | None,
    *,
    period_transactions: Iterable[Transaction] | None = None,
    logger: Logger | None = None,
) -> FinancialHealth:
    """Score financial health from balances and budgets.

    The overall balance comes from ``transactions``. Income, expenses and
    the savings rate come from ``period_transactions``, the window chosen by
    the caller (typically the last full month); it defaults to
    ``transactions``.

    Args:
        transactions: Transactions used for the overall balance and for
            budget utilization.
        budgets: Budgets of the user.
        period_transactions: Transactions of the evaluated period.
        logger: Logger used for warnings.

    Returns:
        FinancialHealth: Score, grade, factors and recommendations.
    """
    items = as_list(transactions)
    overall_income, overall_expenses = sum_by_type(items)
    balance = overall_income - overall_expenses
    if period_transactions is None:
        income, expenses = overall_income, overall_expenses
    else:
        income, expenses = sum_by_type(period_transactions)

    all_budgets = as_list(budgets)
    utilizations = [
        calculate_budget_progress(budget, items, logger=logger).percentage
        for budget in active_budgets(all_budgets)
    ]

    indicators = {
        POSITIVE_BALANCE: balance > 0,
        REGULAR_INCOME: income > 0,
        CONTROLLED_SPENDING: expenses < income,
        EMERGENCY_FUND: balance > expenses * EMERGENCY_FUND_MONTHS,
        HAS_BUDGETS: len(all_budgets) > 0,
    }
    factors = {
        name: FACTOR_POINTS[name] if met else 0
        for name, met in indicators.items()
    }
    score = max(0, min(100, sum(factors.values())))
    recommendations = [
        message
        for name, message in RECOMMENDATIONS
        if not indicators[name]
    ][:MAX_RECOMMENDATIONS]

    return FinancialHealth(
        score=score,
        grade=get_financial_grade(score),
        status=get_health_status(score),
        factors=factors,
        savings_rate=round_number(
            (income - expenses) / income * 100 if income > 0 else ZERO
        ),
        budget_utilization=round_number(mean(utilizations)),
        recommendations=recommendations,
    )


__all__ = [
    "FACTOR_POINTS",
    "RECOMMENDATIONS",
    "get_financial_grade",
    "get_health_status",
    "calculate_financial_health_score",
]
