"""Budget progress, alerts and efficiency."""

import logging
from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    BUDGET_STATUS_THRESHOLDS,
    EXCEEDED_PERCENTAGE,
    EXPENSE,
    NEAR_LIMIT_PERCENTAGE,
    STATUS_EXCEEDED,
    STATUS_NORMAL,
)
from src.domain.models import (
    Budget,
    BudgetAlert,
    BudgetEfficiency,
    BudgetEfficiencyItem,
    BudgetProgress,
    DateRange,
    Transaction,
)
from src.domain.services.normalization import (
    as_list,
    coerce_datetime,
    normalize_category,
    normalize_type,
    record_field,
)
from src.utils.decimal_utils import (
    ZERO,
    coerce_decimal,
    round_currency,
    round_number,
)

_LOGGER = logging.getLogger(__name__)

ALERT_OVERSPENT = "overspent"
ALERT_APPROACHING_LIMIT = "approaching_limit"
SEVERITY_HIGH = "high"
SEVERITY_MEDIUM = "medium"


def get_budget_status(percentage) -> str:
    """Classify a usage percentage; the first matching threshold wins."""
    value = coerce_decimal(percentage)
    for threshold, status in BUDGET_STATUS_THRESHOLDS:
        if value >= threshold:
            return status
    return STATUS_NORMAL


def budget_window(
    budget: Budget,
    logger: Logger | None = None,
) -> DateRange | None:
    """Return the inclusive window of a budget, None when unusable."""
    start = coerce_datetime(record_field(budget, "start_date"))
    end = coerce_datetime(record_field(budget, "end_date"), end_of_day=True)
    if start is None or end is None:
        (logger or _LOGGER).warning(
            f"Budget {record_field(budget, 'id')} has an invalid date window"
        )
        return None
    return DateRange(start=start, end=end)


def calculate_budget_progress(
    budget: Budget,
    transactions: Iterable[Transaction] | None,
    *,
    logger: Logger | None = None,
) -> BudgetProgress:
    """Measure the expenses of a budget category against its cap.

    Status and both flags are derived from the reported percentage, so
    ``is_exceeded`` matches the ``exceeded`` status and ``is_near_limit``
    matches ``percentage >= 80``.

    Args:
        budget: Budget to evaluate.
        transactions: Transactions snapshot.
        logger: Logger used for warnings.

    Returns:
        BudgetProgress: Spent, remaining, percentage and status.
    """
    budget_amount = coerce_decimal(record_field(budget, "budget_amount"))
    category = normalize_category(record_field(budget, "category"))
    window = budget_window(budget, logger)

    spent = ZERO
    if window is not None:
        for transaction in as_list(transactions):
            if normalize_type(record_field(transaction, "type")) != EXPENSE:
                continue
            if normalize_category(record_field(transaction, "category")) != category:
                continue
            instant = coerce_datetime(record_field(transaction, "date"))
            if instant is None or not window.start <= instant <= window.end:
                continue
            spent += coerce_decimal(record_field(transaction, "amount"))

    if budget_amount > 0:
        percentage = round_number(spent / budget_amount * 100)
    else:
        percentage = round_number(ZERO)
    remaining = max(ZERO, budget_amount - spent)

    return BudgetProgress(
        budget_amount=round_currency(budget_amount),
        spent=round_currency(spent),
        remaining=round_currency(remaining),
        percentage=percentage,
        status=get_budget_status(percentage),
        is_exceeded=percentage >= EXCEEDED_PERCENTAGE,
        is_near_limit=percentage >= NEAR_LIMIT_PERCENTAGE,
    )


def active_budgets(budgets: Iterable[Budget] | None) -> list[Budget]:
    return [
        budget
        for budget in as_list(budgets)
        if record_field(budget, "is_active", True)
    ]


def build_budget_alerts(
    budgets: Iterable[Budget] | None,
    transactions: Iterable[Transaction] | None,
    *,
    approaching: Decimal = NEAR_LIMIT_PERCENTAGE,
    high: Decimal = Decimal("95"),
    logger: Logger | None = None,
) -> list[BudgetAlert]:
    """Return alerts for active budgets near or over their cap.

    Args:
        budgets: Budgets to inspect; inactive ones are skipped.
        transactions: Transactions snapshot.
        approaching: Percentage raising a medium alert.
        high: Percentage raising a high alert.
        logger: Logger used for warnings.

    Returns:
        list[BudgetAlert]: Alerts sorted by percentage descending.
    """
    alerts: list[BudgetAlert] = []
    for budget in active_budgets(budgets):
        progress = calculate_budget_progress(budget, transactions, logger=logger)
        if progress.status == STATUS_EXCEEDED:
            alert_type, severity = ALERT_OVERSPENT, SEVERITY_HIGH
        elif progress.percentage >= high:
            alert_type, severity = ALERT_APPROACHING_LIMIT, SEVERITY_HIGH
        elif progress.percentage >= approaching:
            alert_type, severity = ALERT_APPROACHING_LIMIT, SEVERITY_MEDIUM
        else:
            continue
        alerts.append(
            BudgetAlert(
                budget_id=str(record_field(budget, "id", "")),
                category=normalize_category(record_field(budget, "category")),
                alert_type=alert_type,
                severity=severity,
                spent=progress.spent,
                budget_amount=progress.budget_amount,
                remaining=progress.remaining,
                percentage=progress.percentage,
            )
        )
    return sorted(
        alerts,
        key=lambda alert: (-alert.percentage, alert.category, alert.budget_id),
    )


def calculate_budget_efficiency(
    budgets: Iterable[Budget] | None,
    transactions: Iterable[Transaction] | None,
    *,
    logger: Logger | None = None,
) -> BudgetEfficiency:
    """Score how closely spending tracks each budget.

    Spending exactly the cap scores 100; each point over the cap costs one
    point of efficiency.
    """
    details: list[BudgetEfficiencyItem] = []
    for budget in as_list(budgets):
        progress = calculate_budget_progress(budget, transactions, logger=logger)
        if progress.percentage <= 100:
            efficiency = progress.percentage
        else:
            efficiency = max(ZERO, 200 - progress.percentage)
        details.append(
            BudgetEfficiencyItem(
                budget_id=str(record_field(budget, "id", "")),
                category=normalize_category(record_field(budget, "category")),
                efficiency=round_number(efficiency),
                budget_amount=progress.budget_amount,
                spent=progress.spent,
                utilization=progress.percentage,
            )
        )

    if details:
        score = round_number(
            sum((item.efficiency for item in details), ZERO) / len(details)
        )
    else:
        score = round_number(ZERO)
    return BudgetEfficiency(
        score=score,
        rating=_efficiency_rating(score),
        details=sorted(
            details,
            key=lambda item: (-item.efficiency, item.category, item.budget_id),
        ),
    )


def _efficiency_rating(score: Decimal) -> str:
    if score >= 80:
        return "excellent"
    if score >= 60:
        return "good"
    if score >= 40:
        return "fair"
    return "poor"


__all__ = [
    "ALERT_OVERSPENT",
    "ALERT_APPROACHING_LIMIT",
    "SEVERITY_HIGH",
    "SEVERITY_MEDIUM",
    "get_budget_status",
    "budget_window",
    "calculate_budget_progress",
    "active_budgets",
    "build_budget_alerts",
    "calculate_budget_efficiency",
]
