"""Comparison of a window with the window of equal length before it."""

from collections.abc import Iterable
from datetime import timedelta
from decimal import Decimal

from src.domain.constants import (
    COMPARISON_TOLERANCE,
    DOWN,
    EXPENSE,
    INCOME,
    STABLE,
    UP,
)
from src.domain.models import (
    CategoryComparison,
    ComparisonChange,
    DateRange,
    PeriodComparison,
    PeriodTotals,
    Transaction,
)
from src.domain.services.balance import calculate_balance
from src.domain.services.breakdown import (
    calculate_spending_by_category,
    find_category_entry,
)
from src.domain.services.normalization import (
    as_list,
    normalize_type,
    record_field,
)
from src.domain.services.periods import (
    end_of_day,
    filter_by_range,
    start_of_day,
)
from src.domain.services.trends import calculate_percentage_change
from src.utils.decimal_utils import ZERO, round_currency


def get_previous_range(date_range: DateRange) -> DateRange:
    """Return the window covering the same number of days just before.

    The previous window ends on the day before ``date_range`` starts.
    """
    start = start_of_day(date_range.start)
    days = max((date_range.end.date() - start.date()).days, 0)
    return DateRange(
        start=start - timedelta(days=days + 1),
        end=end_of_day(start - timedelta(days=1)),
    )


def comparison_trend(percentage: Decimal) -> str:
    """Classify a percentage change as up, down or stable."""
    if abs(percentage) < COMPARISON_TOLERANCE:
        return STABLE
    return UP if percentage > 0 else DOWN


def _change(previous, current, amount: Decimal) -> ComparisonChange:
    percentage = calculate_percentage_change(previous, current)
    return ComparisonChange(
        amount=amount,
        percentage=percentage,
        trend=comparison_trend(percentage),
    )


def _totals(
    transactions: list[Transaction],
    date_range: DateRange,
) -> tuple[PeriodTotals, list[Transaction]]:
    selected = [
        transaction
        for transaction in filter_by_range(transactions, date_range)
        if normalize_type(record_field(transaction, "type"))
        in (INCOME, EXPENSE)
    ]
    balance = calculate_balance(selected)
    totals = PeriodTotals(
        start=date_range.start,
        end=date_range.end,
        income=balance.income,
        expenses=balance.expenses,
        net=balance.balance,
        transaction_count=len(selected),
    )
    return totals, selected


def calculate_period_comparison(
    transactions: Iterable[Transaction] | None,
    date_range: DateRange,
) -> PeriodComparison:
    """Compare a window with the preceding window of equal length.

    Percentages follow ``calculate_percentage_change``, so a figure that
    appears from a zero base reads as +100 and the net change is measured
    against the absolute previous net. Changes below 5% read as stable.

    Args:
        transactions: Transactions snapshot.
        date_range: Current window. The previous window spans the same
            number of calendar days.

    Returns:
        PeriodComparison: Totals of both windows, the changes and the
        expense categories of the current window.
    """
    items = as_list(transactions)
    current, current_items = _totals(items, date_range)
    previous, previous_items = _totals(items, get_previous_range(date_range))

    previous_entries = calculate_spending_by_category(previous_items, EXPENSE)
    categories = []
    for entry in calculate_spending_by_category(current_items, EXPENSE):
        before = find_category_entry(previous_entries, entry.category)
        previous_amount = before.amount if before else round_currency(ZERO)
        categories.append(
            CategoryComparison(
                category=entry.category,
                current_amount=entry.amount,
                previous_amount=previous_amount,
                change=_change(
                    previous_amount,
                    entry.amount,
                    round_currency(entry.amount - previous_amount),
                ),
            )
        )

    count_delta = current.transaction_count - previous.transaction_count
    return PeriodComparison(
        current=current,
        previous=previous,
        income_change=_change(
            previous.income,
            current.income,
            round_currency(current.income - previous.income),
        ),
        expense_change=_change(
            previous.expenses,
            current.expenses,
            round_currency(current.expenses - previous.expenses),
        ),
        net_change=_change(
            previous.net,
            current.net,
            round_currency(current.net - previous.net),
        ),
        transaction_count_change=_change(
            previous.transaction_count,
            current.transaction_count,
            Decimal(count_delta),
        ),
        categories=categories,
    )


__all__ = [
    "get_previous_range",
    "comparison_trend",
    "calculate_period_comparison",
]
