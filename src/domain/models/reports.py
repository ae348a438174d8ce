"""Report containers returned by the application use cases."""

from dataclasses import dataclass
from datetime import datetime

from src.domain.models.finance import (
    BalanceResult,
    BudgetAlert,
    BudgetEfficiency,
    BudgetProgress,
    CategoryBreakdownEntry,
    FinancialHealth,
    IncomeStability,
    PeriodComparison,
    Projection,
    TrendPoint,
)
from src.domain.models.records import Budget


@dataclass(frozen=True)
class BudgetReportItem:
    """A budget paired with its computed progress."""

    budget: Budget
    progress: BudgetProgress


@dataclass(frozen=True)
class DashboardSummary:
    """Figures shown on the dashboard landing view."""

    reference_date: datetime
    all_time: BalanceResult
    last_30_days: BalanceResult
    last_full_month: BalanceResult
    category_breakdown: list[CategoryBreakdownEntry]
    budgets: list[BudgetReportItem]
    health: FinancialHealth
    transaction_count: int
    budget_count: int
    last_30_days_comparison: PeriodComparison


@dataclass(frozen=True)
class BudgetReport:
    """Progress, alerts and efficiency for the active budgets."""

    reference_date: datetime
    items: list[BudgetReportItem]
    alerts: list[BudgetAlert]
    efficiency: BudgetEfficiency
    unbudgeted_categories: list[str]


@dataclass(frozen=True)
class TrendReport:
    """Monthly trends with directions and projections."""

    reference_date: datetime
    trends: list[TrendPoint]
    income_direction: str
    expense_direction: str
    income_stability: IncomeStability
    projection: Projection


__all__ = [
    "BudgetReportItem",
    "DashboardSummary",
    "BudgetReport",
    "TrendReport",
]
