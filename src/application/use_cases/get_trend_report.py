"""Use case to compute monthly trends and projections."""

from datetime import datetime

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.models import TrendReport
from src.domain.services import (
    calculate_income_stability,
    calculate_projections,
    calculate_trends,
    classify_trend_direction,
)
from src.infrastructure.logging.logger import get_app_logger


class GetTrendReportUseCase:
    """Compute the monthly trend series, directions and projections."""

    def __init__(
        self,
        finance_repository: FinanceRepositoryPort,
        logger=None,
        periods: int = 6,
        projection_months: int = 12,
    ) -> None:
        """Initialize the use case.

        Args:
            finance_repository: Port providing transactions.
            logger: Optional logger compatible with logging.Logger-like API.
            periods: Number of months in the trend series.
            projection_months: Number of months to project ahead.
        """
        self._finance_repository = finance_repository
        self._logger = logger or get_app_logger()
        self._periods = periods
        self._projection_months = projection_months

    def execute(self, reference_date: datetime | None = None) -> TrendReport:
        """Return trends ending with the month of the reference date.

        Args:
            reference_date: Instant inside the latest month; now when
                omitted.

        Returns:
            TrendReport: Monthly points, directions, income stability and
            projections.
        """
        reference = reference_date or datetime.now()
        transactions = self._finance_repository.fetch_transactions()
        trends = calculate_trends(
            transactions,
            self._periods,
            reference_date=reference,
        )
        income_direction = classify_trend_direction(
            [point.balance.income for point in trends]
        )
        expense_direction = classify_trend_direction(
            [point.balance.expenses for point in trends]
        )
        projection = calculate_projections(
            transactions,
            self._projection_months,
            reference_date=reference,
        )
        self._logger.info(
            f"Trends computed over {len(trends)} months: "
            f"income={income_direction}, expenses={expense_direction}, "
            f"projection based on {projection.based_on_months} months"
        )
        return TrendReport(
            reference_date=reference,
            trends=trends,
            income_direction=income_direction,
            expense_direction=expense_direction,
            income_stability=calculate_income_stability(
                transactions,
                self._periods,
                reference_date=reference,
            ),
            projection=projection,
        )


__all__ = ["GetTrendReportUseCase", "TrendReport"]
