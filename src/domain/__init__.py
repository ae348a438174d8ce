"""Domain package for business rules and core models."""

from .constants import EXPENSE, INCOME, OTHER_CATEGORY
from .models import (
    BalanceResult,
    Budget,
    BudgetProgress,
    Category,
    CategoryBreakdownEntry,
    FinancialHealth,
    Projection,
    StatisticsResult,
    Transaction,
    TrendPoint,
)
from .services import (
    calculate_balance,
    calculate_budget_progress,
    calculate_financial_health_score,
    calculate_percentage_change,
    calculate_projections,
    calculate_spending_by_category,
    calculate_statistics,
    calculate_trends,
    get_date_range,
)

__all__ = [
    "EXPENSE",
    "INCOME",
    "OTHER_CATEGORY",
    "BalanceResult",
    "Budget",
    "BudgetProgress",
    "Category",
    "CategoryBreakdownEntry",
    "FinancialHealth",
    "Projection",
    "StatisticsResult",
    "Transaction",
    "TrendPoint",
    "calculate_balance",
    "calculate_budget_progress",
    "calculate_financial_health_score",
    "calculate_percentage_change",
    "calculate_projections",
    "calculate_spending_by_category",
    "calculate_statistics",
    "calculate_trends",
    "get_date_range",
]
