"""Domain services package: the finance calculation engine."""

from .balance import calculate_balance, sum_by_type
from .breakdown import calculate_spending_by_category, find_category_entry
from .budgets import (
    build_budget_alerts,
    calculate_budget_efficiency,
    calculate_budget_progress,
    get_budget_status,
)
from .comparison import calculate_period_comparison, get_previous_range
from .goals import calculate_compound_interest, calculate_goal_progress
from .health import calculate_financial_health_score, get_financial_grade
from .normalization import coerce_datetime, normalize_category
from .periods import (
    calculate_budget_end_date,
    filter_by_range,
    get_date_range,
    get_fiscal_periods,
    get_fiscal_year_range,
    get_month_range,
    is_within_range,
)
from .projections import calculate_projections
from .statistics import calculate_statistics
from .trends import (
    calculate_cash_flow,
    calculate_category_trends,
    calculate_expense_velocity,
    calculate_income_stability,
    calculate_monthly_summary,
    calculate_percentage_change,
    calculate_trends,
    classify_trend_direction,
)

__all__ = [
    "calculate_balance",
    "sum_by_type",
    "calculate_spending_by_category",
    "find_category_entry",
    "build_budget_alerts",
    "calculate_budget_efficiency",
    "calculate_budget_progress",
    "get_budget_status",
    "calculate_period_comparison",
    "get_previous_range",
    "calculate_compound_interest",
    "calculate_goal_progress",
    "calculate_financial_health_score",
    "get_financial_grade",
    "coerce_datetime",
    "normalize_category",
    "calculate_budget_end_date",
    "filter_by_range",
    "get_date_range",
    "get_fiscal_periods",
    "get_fiscal_year_range",
    "get_month_range",
    "is_within_range",
    "calculate_projections",
    "calculate_statistics",
    "calculate_cash_flow",
    "calculate_category_trends",
    "calculate_expense_velocity",
    "calculate_income_stability",
    "calculate_monthly_summary",
    "calculate_percentage_change",
    "calculate_trends",
    "classify_trend_direction",
]
