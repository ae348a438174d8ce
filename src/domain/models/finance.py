"""Domain models for derived financial aggregates."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class DateRange:
    """Inclusive window of instants."""

    start: datetime
    end: datetime


@dataclass(frozen=True)
class BalanceResult:
    """Income, expenses and balance over a transaction set.

    Attributes:
        income: Sum of income amounts.
        expenses: Sum of expense amounts.
        balance: Income minus expenses.
    """

    income: Decimal
    expenses: Decimal
    balance: Decimal


@dataclass(frozen=True)
class CategoryBreakdownEntry:
    """Amount aggregated for a category within one transaction type."""

    category: str
    amount: Decimal
    transaction_count: int
    percentage: Decimal


@dataclass(frozen=True)
class BudgetProgress:
    """Spending measured against one budget.

    Attributes:
        budget_amount: Cap of the budget.
        spent: Expenses of the budget category inside the budget window.
        remaining: Unspent amount, never negative.
        percentage: Spent as a percentage of the cap, may exceed 100.
        status: normal, caution, warning, critical or exceeded.
        is_exceeded: True when the status is exceeded.
        is_near_limit: True when percentage is at least 80.
    """

    budget_amount: Decimal
    spent: Decimal
    remaining: Decimal
    percentage: Decimal
    status: str
    is_exceeded: bool
    is_near_limit: bool


@dataclass(frozen=True)
class BudgetAlert:
    """Alert raised for a budget close to or over its cap."""

    budget_id: str
    category: str
    alert_type: str
    severity: str
    spent: Decimal
    budget_amount: Decimal
    remaining: Decimal
    percentage: Decimal


@dataclass(frozen=True)
class BudgetEfficiencyItem:
    """Efficiency of a single budget."""

    budget_id: str
    category: str
    efficiency: Decimal
    budget_amount: Decimal
    spent: Decimal
    utilization: Decimal


@dataclass(frozen=True)
class BudgetEfficiency:
    """Average efficiency across budgets."""

    score: Decimal
    rating: str
    details: list[BudgetEfficiencyItem]


@dataclass(frozen=True)
class PeriodChanges:
    """Percentage change against the previous period."""

    income: Decimal
    expenses: Decimal
    balance: Decimal


@dataclass(frozen=True)
class TrendPoint:
    """Balance and breakdowns for one calendar month."""

    period_label: str
    start: datetime
    end: datetime
    balance: BalanceResult
    category_breakdown: list[CategoryBreakdownEntry]
    income_breakdown: list[CategoryBreakdownEntry] = field(
        default_factory=list
    )
    transaction_count: int = 0
    changes: PeriodChanges | None = None


@dataclass(frozen=True)
class DailyAverage:
    """Per-day averages over a month."""

    income: Decimal
    expenses: Decimal
    net: Decimal


@dataclass(frozen=True)
class MonthlySummary:
    """Aggregates for a single calendar month."""

    year: int
    month: int
    balance: BalanceResult
    category_breakdown: list[CategoryBreakdownEntry]
    income_breakdown: list[CategoryBreakdownEntry]
    daily_average: DailyAverage
    transaction_count: int


@dataclass(frozen=True)
class StatisticsResult:
    """Descriptive statistics over a numeric sequence."""

    mean: Decimal
    median: Decimal
    mode: Decimal
    variance: Decimal
    standard_deviation: Decimal
    min: Decimal
    max: Decimal
    sum: Decimal
    count: int


@dataclass(frozen=True)
class CategoryTrendPoint:
    """Amount spent in a category during one month."""

    period_label: str
    amount: Decimal
    percentage: Decimal
    transaction_count: int


@dataclass(frozen=True)
class CategoryTrend:
    """Monthly series of one category with its statistics."""

    category: str
    points: list[CategoryTrendPoint]
    statistics: StatisticsResult
    direction: str
    volatility: Decimal


@dataclass(frozen=True)
class IncomeStability:
    """Stability of monthly income over a window."""

    score: Decimal
    direction: str
    monthly_incomes: list[Decimal]
    average_income: Decimal
    income_variability: Decimal


@dataclass(frozen=True)
class ExpenseVelocity:
    """Spending rate over a trailing window of days."""

    days: int
    total_expenses: Decimal
    daily_velocity: Decimal
    weekly_velocity: Decimal
    monthly_velocity: Decimal
    transaction_count: int
    average_transaction_size: Decimal


@dataclass(frozen=True)
class CashFlowDay:
    """Income and expenses booked on one day."""

    day: date
    income: Decimal
    expenses: Decimal
    net_flow: Decimal


@dataclass(frozen=True)
class CashFlow:
    """Daily cash flow over a named window."""

    period: str
    total_income: Decimal
    total_expenses: Decimal
    net_cash_flow: Decimal
    daily: list[CashFlowDay]
    average_daily_income: Decimal
    average_daily_expenses: Decimal


@dataclass(frozen=True)
class FinancialHealth:
    """Composite financial health score.

    Attributes:
        score: Points earned, between 0 and 100.
        grade: Letter grade A to F.
        status: excellent, good, warning or poor.
        factors: Points earned per factor.
        savings_rate: Savings as a percentage of period income.
        budget_utilization: Mean usage percentage of active budgets.
        recommendations: Ordered advice for the missing factors.
    """

    score: int
    grade: str
    status: str
    factors: dict[str, int]
    savings_rate: Decimal
    budget_utilization: Decimal
    recommendations: list[str]


@dataclass(frozen=True)
class MonthlyAverages:
    """Historical monthly averages."""

    income: Decimal
    expenses: Decimal
    savings: Decimal


@dataclass(frozen=True)
class Projection:
    """Linear extrapolation of monthly averages."""

    projected_income: Decimal
    projected_expenses: Decimal
    projected_savings: Decimal
    monthly_averages: MonthlyAverages
    based_on_months: int


@dataclass(frozen=True)
class GoalProgress:
    """Savings measured against a goal target.

    Attributes:
        target_amount: Amount the goal aims for.
        current_amount: Amount saved so far.
        remaining: Amount still missing, never negative.
        percentage: Saved share of the target, one decimal place.
        is_completed: True once the saved amount reaches the target.
        status: completed, near or progress.
    """

    target_amount: Decimal
    current_amount: Decimal
    remaining: Decimal
    percentage: Decimal
    is_completed: bool
    status: str


@dataclass(frozen=True)
class CompoundInterest:
    """Growth of a principal under periodic compounding."""

    principal: Decimal
    final_amount: Decimal
    total_interest: Decimal
    rate: Decimal
    years: Decimal
    compound_frequency: int


@dataclass(frozen=True)
class PeriodTotals:
    """Income and expense totals of one comparison window."""

    start: datetime
    end: datetime
    income: Decimal
    expenses: Decimal
    net: Decimal
    transaction_count: int


@dataclass(frozen=True)
class ComparisonChange:
    """Change of one figure between the previous and the current window."""

    amount: Decimal
    percentage: Decimal
    trend: str


@dataclass(frozen=True)
class CategoryComparison:
    """Expense change of a single category between two windows."""

    category: str
    current_amount: Decimal
    previous_amount: Decimal
    change: ComparisonChange


@dataclass(frozen=True)
class PeriodComparison:
    """A window compared with the window of equal length just before it.

    Attributes:
        current: Totals of the requested window.
        previous: Totals of the preceding window.
        income_change: Income change.
        expense_change: Expense change.
        net_change: Net change, measured against the absolute previous net.
        transaction_count_change: Change in the number of transactions.
        categories: Expense categories of the current window, in breakdown
            order.
    """

    current: PeriodTotals
    previous: PeriodTotals
    income_change: ComparisonChange
    expense_change: ComparisonChange
    net_change: ComparisonChange
    transaction_count_change: ComparisonChange
    categories: list[CategoryComparison]


__all__ = [
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
]
