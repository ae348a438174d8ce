"""Use case to report on active budgets."""

from datetime import datetime
from decimal import Decimal

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.constants import EXPENSE, NEAR_LIMIT_PERCENTAGE
from src.domain.models import BudgetReport, BudgetReportItem
from src.domain.services import (
    build_budget_alerts,
    calculate_budget_efficiency,
    calculate_budget_progress,
    normalize_category,
)
from src.domain.services.budgets import active_budgets
from src.infrastructure.logging.logger import get_app_logger


class GetBudgetReportUseCase:
    """Compute progress, alerts and efficiency of active budgets."""

    def __init__(
        self,
        finance_repository: FinanceRepositoryPort,
        logger=None,
        approaching_threshold: Decimal = NEAR_LIMIT_PERCENTAGE,
        high_threshold: Decimal = Decimal("95"),
    ) -> None:
        """Initialize the use case.

        Args:
            finance_repository: Port providing budgets and transactions.
            logger: Optional logger compatible with logging.Logger-like API.
            approaching_threshold: Usage percentage raising medium alerts.
            high_threshold: Usage percentage raising high alerts.
        """
        self._finance_repository = finance_repository
        self._logger = logger or get_app_logger()
        self._approaching_threshold = approaching_threshold
        self._high_threshold = high_threshold

    def execute(self, reference_date: datetime | None = None) -> BudgetReport:
        """Return the budget report.

        Args:
            reference_date: Instant stamped on the report; now when omitted.

        Returns:
            BudgetReport: Per-budget progress, alerts, efficiency and the
            expense categories without an active budget.
        """
        reference = reference_date or datetime.now()
        budgets = active_budgets(
            self._finance_repository.fetch_budgets(active_only=True)
        )
        transactions = self._finance_repository.fetch_transactions()
        categories = self._finance_repository.fetch_categories(EXPENSE)
        self._logger.info(
            f"Budget report on {len(budgets)} active budgets and "
            f"{len(transactions)} transactions"
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
            for budget in budgets
        ]
        alerts = build_budget_alerts(
            budgets,
            transactions,
            approaching=self._approaching_threshold,
            high=self._high_threshold,
            logger=self._logger,
        )
        if alerts:
            self._logger.warning(
                f"{len(alerts)} budget alerts raised: "
                + ", ".join(alert.category for alert in alerts)
            )

        budgeted = {normalize_category(budget.category) for budget in budgets}
        unbudgeted = sorted(
            {normalize_category(category.name) for category in categories}
            - budgeted
        )

        return BudgetReport(
            reference_date=reference,
            items=items,
            alerts=alerts,
            efficiency=calculate_budget_efficiency(
                budgets,
                transactions,
                logger=self._logger,
            ),
            unbudgeted_categories=unbudgeted,
        )


__all__ = ["GetBudgetReportUseCase", "BudgetReport"]
