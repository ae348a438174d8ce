"""CLI adapter printing the finance dashboard, budgets and trends.

This module wires the report use cases to the SQLAlchemy repository and
provides the ``finance-report`` command-line entry point.
"""

import os
from datetime import date, datetime, time

from src.application.use_cases.get_budget_report import GetBudgetReportUseCase
from src.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)
from src.application.use_cases.get_trend_report import GetTrendReportUseCase
from src.domain.services import (
    calculate_balance,
    filter_by_range,
    get_fiscal_year_range,
)
from src.infrastructure.container import (
    build_finance_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _format_balance(label: str, balance) -> str:
    return (
        f"{label}: income={balance.income}, expenses={balance.expenses}, "
        f"balance={balance.balance}"
    )


def main() -> None:
    """Run the report use cases and print their results."""
    logger = get_app_logger()
    usage_logger = get_usage_logger()
    settings = build_settings()

    parsed = _parse_date(os.getenv("REPORT_REFERENCE_DATE"), logger)
    if parsed is None:
        reference = datetime.now()
    else:
        reference = datetime.combine(parsed, time.max)

    try:
        repository = build_finance_repository()
        dashboard = GetDashboardSummaryUseCase(
            repository,
            logger=logger,
        ).execute(reference)
        budget_report = GetBudgetReportUseCase(
            repository,
            logger=logger,
        ).execute(reference)
        trend_report = GetTrendReportUseCase(
            repository,
            logger=logger,
            periods=settings.trend_periods,
            projection_months=settings.projection_months,
        ).execute(reference)
        fiscal_year = get_fiscal_year_range(
            reference,
            settings.fiscal_year_start,
        )
        fiscal_balance = calculate_balance(
            filter_by_range(
                repository.fetch_transactions(
                    fiscal_year.start.date(),
                    fiscal_year.end.date(),
                ),
                fiscal_year,
            )
        )
    except RuntimeError as exc:
        logger.error(f"Finance report failed: {exc}")
        return

    usage_logger.info(
        f"finance-report run for {reference.date().isoformat()} "
        f"({dashboard.transaction_count} transactions)"
    )

    print(
        f"Finance report (currency={settings.currency}, "
        f"reference={reference.date().isoformat()})"
    )
    print(_format_balance("All time", dashboard.all_time))
    print(_format_balance("Last 30 days", dashboard.last_30_days))
    comparison = dashboard.last_30_days_comparison
    print(
        "  vs previous 30 days: "
        f"income {comparison.income_change.trend} "
        f"({comparison.income_change.percentage}%), "
        f"expenses {comparison.expense_change.trend} "
        f"({comparison.expense_change.percentage}%)"
    )
    print(_format_balance("Last month", dashboard.last_full_month))
    print(
        _format_balance(
            f"Fiscal year from {fiscal_year.start.date().isoformat()}",
            fiscal_balance,
        )
    )
    health = dashboard.health
    print(
        f"Health: score={health.score}, grade={health.grade}, "
        f"status={health.status}, savings_rate={health.savings_rate}%"
    )
    for recommendation in health.recommendations:
        print(f"  - {recommendation}")

    print("Spending by category:")
    for entry in dashboard.category_breakdown:
        print(
            f"  {entry.category}: {entry.amount} ({entry.percentage}%, "
            f"{entry.transaction_count} transactions)"
        )

    print(
        f"Budgets: efficiency={budget_report.efficiency.score} "
        f"({budget_report.efficiency.rating})"
    )
    for item in budget_report.items:
        progress = item.progress
        print(
            f"  {item.budget.category}: {progress.spent}/"
            f"{progress.budget_amount} ({progress.percentage}%, "
            f"{progress.status})"
        )
    for alert in budget_report.alerts:
        print(
            f"  ! {alert.category}: {alert.alert_type} "
            f"({alert.severity}, {alert.percentage}%)"
        )
    if budget_report.unbudgeted_categories:
        print(
            "  Without budget: "
            + ", ".join(budget_report.unbudgeted_categories)
        )

    print(
        f"Trends: income={trend_report.income_direction}, "
        f"expenses={trend_report.expense_direction}, "
        f"income_stability={trend_report.income_stability.score}"
    )
    for point in trend_report.trends:
        print(_format_balance(f"  {point.period_label}", point.balance))
    projection = trend_report.projection
    print(
        f"Projection ({settings.projection_months} months, based on "
        f"{projection.based_on_months}): income={projection.projected_income}, "
        f"expenses={projection.projected_expenses}, "
        f"savings={projection.projected_savings}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
