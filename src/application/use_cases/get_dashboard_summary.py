"""Use case to compute the dashboard summary from a records snapshot."""

from datetime import datetime

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.constants import EXPENSE, LAST_30_DAYS, LAST_MONTH
from src.domain.models import BudgetReportItem, DashboardSummary
from src.domain.services import (
    calculate_balance,
    calculate_budget_progress,
    calculate_financial_health_score,
    calculate_period_comparison,
    calculate_spending_by_category,
    filter_by_range,
    get_date_range,
)
from src.domain.services.budgets import active_budgets
from src.infrastructure.logging.logger import get_app_logger


class GetDashboardSummaryUseCase:
    """Compute balances, budget progress and health for the dashboard."""

    def __init__(
        self,
        finance_repository: FinanceRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            finance_repository: Port providing transactions and budgets.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._finance_repository = finance_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        reference_date: datetime | None = None,
    ) -> DashboardSummary:
        """Return the dashboard summary as of the reference date.

        Args:
            reference_date: Instant the rolling windows end at; now when
                omitted.

        Returns:
            DashboardSummary: All-time, last-30-days and last-month figures
            with budget progress and the health score.
        """
        reference = reference_date or datetime.now()
        transactions = self._finance_repository.fetch_transactions()
        budgets = self._finance_repository.fetch_budgets()
        self._logger.info(
            f"Loaded {len(transactions)} transactions and "
            f"{len(budgets)} budgets for the dashboard"
        )

        last_30_days_range = get_date_range(
            LAST_30_DAYS,
            reference,
            logger=self._logger,
        )
        last_30_days = filter_by_range(transactions, last_30_days_range)
        last_full_month = filter_by_range(
            transactions,
            get_date_range(LAST_MONTH, reference, logger=self._logger),
        )

        items = [
            BudgetReportItem(
                budget=budget,
                progress=calculate_budget_progress(
                    budget,
                    transactions,
                    logger=self._logger,
                ),
            )
            for budget in active_budgets(budgets)
        ]
        health = calculate_financial_health_score(
            transactions,
            budgets,
            period_transactions=last_full_month,
            logger=self._logger,
        )
        all_time = calculate_balance(transactions)

        self._logger.info(
            f"Dashboard computed: balance={all_time.balance}, "
            f"health_score={health.score}, grade={health.grade}"
        )
        return DashboardSummary(
            reference_date=reference,
            all_time=all_time,
            last_30_days=calculate_balance(last_30_days),
            last_full_month=calculate_balance(last_full_month),
            category_breakdown=calculate_spending_by_category(
                transactions,
                EXPENSE,
            ),
            budgets=items,
            health=health,
            transaction_count=len(transactions),
            budget_count=len(budgets),
            last_30_days_comparison=calculate_period_comparison(
                transactions,
                last_30_days_range,
            ),
        )


__all__ = ["GetDashboardSummaryUseCase", "DashboardSummary"]
