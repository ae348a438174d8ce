"""Domain models package."""

from .finance import (
    BalanceResult,
    BudgetAlert,
    BudgetEfficiency,
    BudgetEfficiencyItem,
    BudgetProgress,
    CashFlow,
    CashFlowDay,
    CategoryBreakdownEntry,
    CategoryComparison,
    CategoryTrend,
    CategoryTrendPoint,
    ComparisonChange,
    CompoundInterest,
    DailyAverage,
    DateRange,
    ExpenseVelocity,
    FinancialHealth,
    GoalProgress,
    IncomeStability,
    MonthlyAverages,
    MonthlySummary,
    PeriodChanges,
    PeriodComparison,
    PeriodTotals,
    Projection,
    StatisticsResult,
    TrendPoint,
)
from .records import Budget, Category, Goal, Transaction
from .reports import (
    BudgetReport,
    BudgetReportItem,
    DashboardSummary,
    TrendReport,
)

__all__ = [
    "Transaction",
    "Category",
    "Budget",
    "Goal",
    "DateRange",
    "BalanceResult",
    "CategoryBreakdownEntry",
    "BudgetProgress",
    "BudgetAlert",
    "BudgetEfficiencyItem",
    "BudgetEfficiency",
    "PeriodChanges",
    "TrendPoint",
    "DailyAverage",
    "MonthlySummary",
    "StatisticsResult",
    "CategoryTrendPoint",
    "CategoryTrend",
    "IncomeStability",
    "ExpenseVelocity",
    "CashFlowDay",
    "CashFlow",
    "FinancialHealth",
    "MonthlyAverages",
    "Projection",
    "GoalProgress",
    "CompoundInterest",
    "PeriodTotals",
    "ComparisonChange",
    "CategoryComparison",
    "PeriodComparison",
    "BudgetReportItem",
    "DashboardSummary",
    "BudgetReport",
    "TrendReport",
]
