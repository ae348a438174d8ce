"""Application use cases package."""

from .get_budget_report import BudgetReport, GetBudgetReportUseCase
from .get_dashboard_summary import (
    DashboardSummary,
    GetDashboardSummaryUseCase,
)
from .get_trend_report import GetTrendReportUseCase, TrendReport

__all__ = [
    "GetDashboardSummaryUseCase",
    "DashboardSummary",
    "GetBudgetReportUseCase",
    "BudgetReport",
    "GetTrendReportUseCase",
    "TrendReport",
]
