"""Tests for the GetBudgetReportUseCase."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_budget_report import GetBudgetReportUseCase
from src.domain.models import Budget, Category, Transaction


def _budget(category: str, amount: str, *, is_active: bool = True) -> Budget:
    return Budget(
        id=category.lower(),
        category=category,
        budget_amount=Decimal(amount),
        period="monthly",
        start_date=date(2024, 3, 1),
        end_date=date(2024, 3, 31),
        is_active=is_active,
    )


def _expense(category: str, amount: str) -> Transaction:
    return Transaction(
        id=f"{category}-{amount}",
        type="expense",
        amount=Decimal(amount),
        category=category,
        date=datetime(2024, 3, 5),
    )


def _build_repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_budgets.return_value = [
        _budget("Food", "200"),
        _budget("Rent", "1000"),
        _budget("Travel", "100", is_active=False),
    ]
    repository.fetch_transactions.return_value = [
        _expense("Food", "220"),
        _expense("Rent", "850"),
        _expense("Travel", "400"),
    ]
    repository.fetch_categories.return_value = [
        Category(id="1", name="Food"),
        Category(id="2", name="Rent"),
        Category(id="3", name="Travel"),
        Category(id="4", name="Gifts"),
    ]
    return repository


def test_execute_reports_progress_alerts_and_efficiency() -> None:
    repository = _build_repository()
    logger = MagicMock()
    use_case = GetBudgetReportUseCase(repository, logger=logger)

    report = use_case.execute(datetime(2024, 3, 20))

    assert report.reference_date == datetime(2024, 3, 20)
    assert [item.budget.category for item in report.items] == ["Food", "Rent"]
    assert [item.progress.status for item in report.items] == [
        "exceeded",
        "warning",
    ]
    assert [(a.category, a.alert_type, a.severity) for a in report.alerts] == [
        ("Food", "overspent", "high"),
        ("Rent", "approaching_limit", "medium"),
    ]
    assert report.efficiency.score == Decimal("87.50")
    assert report.efficiency.rating == "excellent"
    assert report.unbudgeted_categories == ["Gifts", "Travel"]

    repository.fetch_budgets.assert_called_once_with(active_only=True)
    repository.fetch_categories.assert_called_once_with("expense")
    logger.warning.assert_called_once()


def test_custom_high_threshold_escalates_alert() -> None:
    repository = _build_repository()
    use_case = GetBudgetReportUseCase(
        repository,
        logger=MagicMock(),
        high_threshold=Decimal("85"),
    )

    report = use_case.execute(datetime(2024, 3, 20))

    assert report.alerts[1].severity == "high"


def test_no_alerts_means_no_warning() -> None:
    repository = _build_repository()
    repository.fetch_transactions.return_value = []
    logger = MagicMock()

    report = GetBudgetReportUseCase(repository, logger=logger).execute(
        datetime(2024, 3, 20)
    )

    assert report.alerts == []
    assert report.efficiency.score == Decimal("0")
    logger.warning.assert_not_called()
