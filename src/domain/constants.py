"""Domain constants for the finance engine."""

from decimal import Decimal

INCOME = "income"
EXPENSE = "expense"
TRANSACTION_TYPES = (INCOME, EXPENSE)

OTHER_CATEGORY = "Other"

WEEKLY = "weekly"
MONTHLY = "monthly"
YEARLY = "yearly"
BUDGET_PERIODS = (WEEKLY, MONTHLY, YEARLY)

# Named windows understood by get_date_range.
TODAY = "today"
THIS_WEEK = "thisWeek"
LAST_WEEK = "lastWeek"
THIS_MONTH = "thisMonth"
LAST_MONTH = "lastMonth"
LAST_30_DAYS = "last30Days"
THIS_QUARTER = "thisQuarter"
LAST_3_MONTHS = "last3Months"
LAST_6_MONTHS = "last6Months"
THIS_YEAR = "thisYear"
DATE_RANGE_PERIODS = (
    TODAY,
    THIS_WEEK,
    LAST_WEEK,
    THIS_MONTH,
    LAST_MONTH,
    LAST_30_DAYS,
    THIS_QUARTER,
    LAST_3_MONTHS,
    LAST_6_MONTHS,
    THIS_YEAR,
)

STATUS_NORMAL = "normal"
STATUS_CAUTION = "caution"
STATUS_WARNING = "warning"
STATUS_CRITICAL = "critical"
STATUS_EXCEEDED = "exceeded"

# Checked in order, first match wins.
BUDGET_STATUS_THRESHOLDS = (
    (Decimal("100"), STATUS_EXCEEDED),
    (Decimal("90"), STATUS_CRITICAL),
    (Decimal("80"), STATUS_WARNING),
    (Decimal("60"), STATUS_CAUTION),
)
NEAR_LIMIT_PERCENTAGE = Decimal("80")
EXCEEDED_PERCENTAGE = Decimal("100")

INCREASING = "increasing"
DECREASING = "decreasing"
STABLE = "stable"
INSUFFICIENT_DATA = "insufficient_data"
TREND_TOLERANCE = Decimal("0.1")

GRADE_THRESHOLDS = (
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
)
HEALTH_STATUS_THRESHOLDS = (
    (80, "excellent"),
    (60, "good"),
    (40, "warning"),
)
EMERGENCY_FUND_MONTHS = Decimal("3")
MAX_RECOMMENDATIONS = 3

GOAL_COMPLETED = "completed"
GOAL_NEAR = "near"
GOAL_IN_PROGRESS = "progress"
GOAL_NEAR_PERCENTAGE = Decimal("75")
DEFAULT_COMPOUND_FREQUENCY = 12

UP = "up"
DOWN = "down"
# Relative changes below this many percent read as stable.
COMPARISON_TOLERANCE = Decimal("5")


__all__ = [
    "INCOME",
    "EXPENSE",
    "TRANSACTION_TYPES",
    "OTHER_CATEGORY",
    "WEEKLY",
    "MONTHLY",
    "YEARLY",
    "BUDGET_PERIODS",
    "TODAY",
    "THIS_WEEK",
    "LAST_WEEK",
    "THIS_MONTH",
    "LAST_MONTH",
    "LAST_30_DAYS",
    "THIS_QUARTER",
    "LAST_3_MONTHS",
    "LAST_6_MONTHS",
    "THIS_YEAR",
    "DATE_RANGE_PERIODS",
    "STATUS_NORMAL",
    "STATUS_CAUTION",
    "STATUS_WARNING",
    "STATUS_CRITICAL",
    "STATUS_EXCEEDED",
    "BUDGET_STATUS_THRESHOLDS",
    "NEAR_LIMIT_PERCENTAGE",
    "EXCEEDED_PERCENTAGE",
    "INCREASING",
    "DECREASING",
    "STABLE",
    "INSUFFICIENT_DATA",
    "TREND_TOLERANCE",
    "GRADE_THRESHOLDS",
    "HEALTH_STATUS_THRESHOLDS",
    "EMERGENCY_FUND_MONTHS",
    "MAX_RECOMMENDATIONS",
    "GOAL_COMPLETED",
    "GOAL_NEAR",
    "GOAL_IN_PROGRESS",
    "GOAL_NEAR_PERCENTAGE",
    "DEFAULT_COMPOUND_FREQUENCY",
    "UP",
    "DOWN",
    "COMPARISON_TOLERANCE",
]
