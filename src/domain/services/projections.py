"""Naive linear projections from historical monthly averages.

Known limitation: the model multiplies a flat monthly average by the number
of months ahead. It ignores seasonality, growth and one-off transactions.
"""

from collections.abc import Iterable
from datetime import datetime

from src.domain.models import MonthlyAverages, Projection, Transaction
from src.domain.services.balance import sum_by_type
from src.domain.services.normalization import (
    as_list,
    coerce_count,
    coerce_datetime,
    record_field,
)
from src.domain.services.periods import (
    filter_by_range,
    get_month_range,
    resolve_reference,
)
from src.utils.decimal_utils import ZERO, round_currency


def _earliest_month(transactions: list[Transaction]) -> datetime | None:
    dates = [
        instant
        for instant in (
            coerce_datetime(record_field(transaction, "date"))
            for transaction in transactions
        )
        if instant is not None
    ]
    if not dates:
        return None
    earliest = min(dates)
    return datetime(earliest.year, earliest.month, 1)


def calculate_projections(
    transactions: Iterable[Transaction] | None,
    months: int = 12,
    *,
    reference_date,
    history_months: int = 3,
) -> Projection:
    """Extrapolate average monthly income, expenses and savings.

    Averages use up to ``history_months`` full calendar months before the
    month of ``reference_date``. Months earlier than the first month with
    data are not counted; ``based_on_months`` reports how many were used.

    Args:
        transactions: Transactions snapshot.
        months: Number of months to project.
        reference_date: Instant inside the current, incomplete month.
        history_months: Maximum number of full months to average.

    Returns:
        Projection: Projected totals and the monthly averages behind them.
    """
    items = as_list(transactions)
    reference = resolve_reference(reference_date)
    first_month = _earliest_month(items)

    income_total = ZERO
    expense_total = ZERO
    used = 0
    if first_month is not None:
        for months_ago in range(1, coerce_count(history_months) + 1):
            window = get_month_range(reference, months_ago)
            if window.start < first_month:
                break
            income, expenses = sum_by_type(filter_by_range(items, window))
            income_total += income
            expense_total += expenses
            used += 1

    average_income = income_total / used if used else ZERO
    average_expenses = expense_total / used if used else ZERO
    average_savings = average_income - average_expenses
    horizon = coerce_count(months)

    return Projection(
        projected_income=round_currency(average_income * horizon),
        projected_expenses=round_currency(average_expenses * horizon),
        projected_savings=round_currency(average_savings * horizon),
        monthly_averages=MonthlyAverages(
            income=round_currency(average_income),
            expenses=round_currency(average_expenses),
            savings=round_currency(average_savings),
        ),
        based_on_months=used,
    )


__all__ = ["calculate_projections"]
