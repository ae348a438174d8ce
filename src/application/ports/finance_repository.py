"""Port for reading finance records."""

from datetime import date
from typing import Protocol

from src.domain.models import Budget, Category, Transaction


class FinanceRepositoryPort(Protocol):
    """Port exposing read access to transactions, budgets and categories.

    Implementations return fully materialized lists and translate any
    storage-specific field names into the canonical record fields.
    """

    def fetch_transactions(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Transaction]:
        """Return transactions dated within the optional bounds."""

    def fetch_budgets(self, active_only: bool = False) -> list[Budget]:
        """Return budgets, optionally only the active ones."""

    def fetch_categories(
        self,
        category_type: str | None = None,
    ) -> list[Category]:
        """Return categories, optionally of a single type."""


__all__ = ["FinanceRepositoryPort"]
