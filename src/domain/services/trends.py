"""Monthly trend series and derived directions."""

import calendar
from collections.abc import Iterable
from datetime import date, datetime, timedelta
from decimal import Decimal

from src.domain.constants import (
    DECREASING,
    EXPENSE,
    INCOME,
    INCREASING,
    INSUFFICIENT_DATA,
    STABLE,
    TREND_TOLERANCE,
)
from src.domain.models import (
    CashFlow,
    CashFlowDay,
    CategoryTrend,
    CategoryTrendPoint,
    DailyAverage,
    DateRange,
    ExpenseVelocity,
    IncomeStability,
    MonthlySummary,
    PeriodChanges,
    Transaction,
    TrendPoint,
)
from src.domain.services.balance import calculate_balance
from src.domain.services.breakdown import (
    calculate_spending_by_category,
    find_category_entry,
)
from src.domain.services.normalization import (
    as_list,
    coerce_count,
    coerce_datetime,
    normalize_type,
    record_field,
)
from src.domain.services.periods import (
    end_of_day,
    filter_by_range,
    get_date_range,
    get_month_range,
    month_label,
    resolve_reference,
    shift_month,
    start_of_day,
)
from src.domain.services.statistics import calculate_statistics, mean
from src.utils.decimal_utils import (
    ZERO,
    coerce_decimal,
    round_currency,
    round_number,
)


def calculate_percentage_change(old_value, new_value) -> Decimal:
    """Return the change from ``old_value`` to ``new_value`` in percent.

    The change is measured against ``abs(old_value)`` so that a move from a
    negative balance towards zero reads as an increase. From a zero base the
    result is 0 when the new value is also zero, otherwise +100 or -100
    depending on the sign of the new value.
    """
    old = coerce_decimal(old_value)
    new = coerce_decimal(new_value)
    if old == 0:
        if new > 0:
            return round_number(100)
        if new < 0:
            return round_number(-100)
        return round_number(ZERO)
    return round_number((new - old) / abs(old) * 100)


def _direction(before: Decimal, after: Decimal) -> str:
    threshold = abs(before) * TREND_TOLERANCE
    if after - before > threshold:
        return INCREASING
    if after - before < -threshold:
        return DECREASING
    return STABLE


def classify_trend_direction(values: Iterable | None) -> str:
    """Compare the mean of the second half of a series with the first half.

    Args:
        values: Series ordered oldest first.

    Returns:
        str: ``increasing`` above +10%, ``decreasing`` below -10%,
        ``stable`` otherwise or when fewer than two values are given.
    """
    numbers = [coerce_decimal(value) for value in as_list(values)]
    if len(numbers) < 2:
        return STABLE
    half = len(numbers) // 2
    return _direction(mean(numbers[:half]), mean(numbers[half:]))


def calculate_monthly_summary(
    transactions: Iterable[Transaction] | None,
    year: int,
    month: int,
) -> MonthlySummary:
    """Aggregate one calendar month.

    Args:
        transactions: Transactions snapshot.
        year: Calendar year.
        month: Calendar month, 1 to 12 (other values roll over years).

    Returns:
        MonthlySummary: Balance, breakdowns and per-day averages.
    """
    year, month = shift_month(int(year), 1, int(month) - 1)
    window = get_month_range(datetime(year, month, 1))
    selected = filter_by_range(transactions, window)
    balance = calculate_balance(selected)
    days = calendar.monthrange(year, month)[1]
    return MonthlySummary(
        year=year,
        month=month,
        balance=balance,
        category_breakdown=calculate_spending_by_category(selected, EXPENSE),
        income_breakdown=calculate_spending_by_category(selected, INCOME),
        daily_average=DailyAverage(
            income=round_currency(balance.income / days),
            expenses=round_currency(balance.expenses / days),
            net=round_currency(balance.balance / days),
        ),
        transaction_count=len(selected),
    )


def calculate_trends(
    transactions: Iterable[Transaction] | None,
    periods: int = 6,
    *,
    reference_date,
) -> list[TrendPoint]:
    """Build one point per month for the last ``periods`` months.

    The series ends with the month containing ``reference_date`` and is
    ordered oldest first. Months without transactions yield zeroed points.

    Args:
        transactions: Transactions snapshot.
        periods: Number of months in the series.
        reference_date: Instant inside the most recent month.

    Returns:
        list[TrendPoint]: Exactly ``periods`` points (none when periods < 1).
    """
    reference = resolve_reference(reference_date)
    items = as_list(transactions)
    points: list[TrendPoint] = []
    previous: TrendPoint | None = None
    for offset in range(coerce_count(periods) - 1, -1, -1):
        year, month = shift_month(reference.year, reference.month, -offset)
        summary = calculate_monthly_summary(items, year, month)
        window = get_month_range(datetime(year, month, 1))
        changes = None
        if previous is not None:
            changes = PeriodChanges(
                income=calculate_percentage_change(
                    previous.balance.income, summary.balance.income
                ),
                expenses=calculate_percentage_change(
                    previous.balance.expenses, summary.balance.expenses
                ),
                balance=calculate_percentage_change(
                    previous.balance.balance, summary.balance.balance
                ),
            )
        point = TrendPoint(
            period_label=month_label(year, month),
            start=window.start,
            end=window.end,
            balance=summary.balance,
            category_breakdown=summary.category_breakdown,
            income_breakdown=summary.income_breakdown,
            transaction_count=summary.transaction_count,
            changes=changes,
        )
        points.append(point)
        previous = point
    return points


def calculate_category_trends(
    transactions: Iterable[Transaction] | None,
    category: str,
    periods: int = 6,
    *,
    reference_date,
) -> CategoryTrend:
    """Follow the monthly expenses of one category.

    Volatility is the coefficient of variation of the monthly amounts.
    """
    trends = calculate_trends(
        transactions,
        periods,
        reference_date=reference_date,
    )
    points: list[CategoryTrendPoint] = []
    for trend in trends:
        entry = find_category_entry(trend.category_breakdown, category)
        points.append(
            CategoryTrendPoint(
                period_label=trend.period_label,
                amount=entry.amount if entry else round_currency(ZERO),
                percentage=entry.percentage if entry else round_number(ZERO),
                transaction_count=entry.transaction_count if entry else 0,
            )
        )
    amounts = [point.amount for point in points]
    statistics = calculate_statistics(amounts)
    divisor = statistics.mean if statistics.mean != 0 else Decimal("1")
    return CategoryTrend(
        category=category,
        points=points,
        statistics=statistics,
        direction=classify_trend_direction(amounts),
        volatility=round_number(statistics.standard_deviation / divisor),
    )


def calculate_income_stability(
    transactions: Iterable[Transaction] | None,
    months: int = 6,
    *,
    reference_date,
) -> IncomeStability:
    """Score the regularity of monthly income.

    The score is ``100 - cv * 100`` floored at 0, where ``cv`` is the
    coefficient of variation of monthly income. The direction compares the
    last three months with the first three.
    """
    income_only = [
        transaction
        for transaction in as_list(transactions)
        if normalize_type(record_field(transaction, "type")) == INCOME
    ]
    trends = calculate_trends(income_only, months, reference_date=reference_date)
    if len(trends) < 2:
        zero = round_number(ZERO)
        return IncomeStability(
            score=zero,
            direction=INSUFFICIENT_DATA,
            monthly_incomes=[],
            average_income=zero,
            income_variability=zero,
        )

    incomes = [trend.balance.income for trend in trends]
    statistics = calculate_statistics(incomes)
    if statistics.mean > 0:
        variation = statistics.standard_deviation / statistics.mean
    else:
        variation = Decimal("1")
    return IncomeStability(
        score=round_number(max(ZERO, 100 - variation * 100)),
        direction=_direction(mean(incomes[:3]), mean(incomes[-3:])),
        monthly_incomes=incomes,
        average_income=round_currency(statistics.mean),
        income_variability=round_currency(statistics.standard_deviation),
    )


def calculate_expense_velocity(
    transactions: Iterable[Transaction] | None,
    days: int = 30,
    *,
    reference_date,
) -> ExpenseVelocity:
    """Measure the spending rate over the trailing ``days`` days.

    The window ends with the reference day and includes it.
    """
    span = coerce_count(days)
    reference = resolve_reference(reference_date)
    expenses = ZERO
    count = 0
    if span:
        window = DateRange(
            start=start_of_day(reference) - timedelta(days=span - 1),
            end=end_of_day(reference),
        )
        for transaction in filter_by_range(transactions, window):
            if normalize_type(record_field(transaction, "type")) != EXPENSE:
                continue
            expenses += coerce_decimal(record_field(transaction, "amount"))
            count += 1
    daily = expenses / span if span else ZERO
    return ExpenseVelocity(
        days=span,
        total_expenses=round_currency(expenses),
        daily_velocity=round_currency(daily),
        weekly_velocity=round_currency(daily * 7),
        monthly_velocity=round_currency(daily * 30),
        transaction_count=count,
        average_transaction_size=round_currency(
            expenses / count if count else ZERO
        ),
    )


def calculate_cash_flow(
    transactions: Iterable[Transaction] | None,
    period: str,
    *,
    reference_date,
) -> CashFlow:
    """Return daily income, expenses and net flow over a named window.

    Averages are taken over the days that have at least one transaction.
    """
    window = get_date_range(period, reference_date)
    totals: dict[date, list[Decimal]] = {}
    for transaction in filter_by_range(transactions, window):
        kind = normalize_type(record_field(transaction, "type"))
        if kind not in (INCOME, EXPENSE):
            continue
        day = coerce_datetime(record_field(transaction, "date")).date()
        amounts = totals.setdefault(day, [ZERO, ZERO])
        amount = coerce_decimal(record_field(transaction, "amount"))
        if kind == INCOME:
            amounts[0] += amount
        else:
            amounts[1] += amount

    daily = [
        CashFlowDay(
            day=day,
            income=round_currency(income),
            expenses=round_currency(expenses),
            net_flow=round_currency(income - expenses),
        )
        for day, (income, expenses) in sorted(totals.items())
    ]
    total_income = sum((amounts[0] for amounts in totals.values()), ZERO)
    total_expenses = sum((amounts[1] for amounts in totals.values()), ZERO)
    active_days = len(daily)
    return CashFlow(
        period=period,
        total_income=round_currency(total_income),
        total_expenses=round_currency(total_expenses),
        net_cash_flow=round_currency(total_income - total_expenses),
        daily=daily,
        average_daily_income=round_currency(
            total_income / active_days if active_days else ZERO
        ),
        average_daily_expenses=round_currency(
            total_expenses / active_days if active_days else ZERO
        ),
    )


__all__ = [
    "calculate_percentage_change",
    "classify_trend_direction",
    "calculate_monthly_summary",
    "calculate_trends",
    "calculate_category_trends",
    "calculate_income_stability",
    "calculate_expense_velocity",
    "calculate_cash_flow",
]
