"""SQLAlchemy-backed repository for transactions, budgets and categories."""

from datetime import date, datetime, time

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.models import Budget, Category, Transaction
from src.domain.services.normalization import normalize_category
from src.utils.decimal_utils import coerce_decimal

# Legacy rows reference categories by id; the name wins when the join finds
# one, otherwise the raw id is kept as the grouping key.
_TRANSACTIONS_QUERY = """
    SELECT t.id, t.type, t.amount, t.date, t.description,
           COALESCE(c.name, CAST(t.category_id AS VARCHAR)) AS category
    FROM transactions t
    LEFT JOIN categories c ON c.id = t.category_id
"""

_BUDGETS_QUERY = """
    SELECT b.id, b.budget_amount, b.period, b.start_date, b.end_date,
           b.is_active,
           COALESCE(c.name, CAST(b.category_id AS VARCHAR)) AS category
    FROM budgets b
    LEFT JOIN categories c ON c.id = b.category_id
"""


class SqlAlchemyFinanceRepository(FinanceRepositoryPort):
    """Repository backed by SQLAlchemy for finance records."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_transactions(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Transaction]:
        """Return transactions dated within the optional bounds.

        Args:
            start_date: Optional first day to include.
            end_date: Optional last day to include.

        Returns:
            list[Transaction]: Transactions ordered by date.
        """
        clauses = []
        params = {}
        if start_date is not None:
            clauses.append("t.date >= :start_date")
            params["start_date"] = _day_start(start_date)
        if end_date is not None:
            clauses.append("t.date <= :end_date")
            params["end_date"] = _day_end(end_date)
        sql = _TRANSACTIONS_QUERY
        if clauses:
            sql += " WHERE " + " AND ".join(clauses)
        query = text(sql + " ORDER BY t.date, t.id")

        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [
            Transaction(
                id=str(row.id),
                type=str(row.type or "").strip().lower(),
                amount=coerce_decimal(row.amount),
                category=normalize_category(row.category),
                date=row.date,
                description=row.description or "",
            )
            for row in rows
        ]

    def fetch_budgets(self, active_only: bool = False) -> list[Budget]:
        """Return budgets, optionally only the active ones."""
        sql = _BUDGETS_QUERY
        if active_only:
            sql += " WHERE b.is_active = :is_active"
        query = text(sql + " ORDER BY b.start_date, b.id")
        params = {"is_active": True} if active_only else {}

        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [
            Budget(
                id=str(row.id),
                category=normalize_category(row.category),
                budget_amount=coerce_decimal(row.budget_amount),
                period=row.period,
                start_date=row.start_date,
                end_date=row.end_date,
                is_active=row.is_active is None or bool(row.is_active),
            )
            for row in rows
        ]

    def fetch_categories(
        self,
        category_type: str | None = None,
    ) -> list[Category]:
        """Return categories, optionally of a single type."""
        sql = "SELECT id, name, type FROM categories"
        params = {}
        if category_type is not None:
            sql += " WHERE type = :category_type"
            params["category_type"] = category_type
        query = text(sql + " ORDER BY name")

        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [
            Category(
                id=str(row.id),
                name=normalize_category(row.name),
                type=row.type,
            )
            for row in rows
        ]


def _day_start(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def _day_end(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.max)


__all__ = ["SqlAlchemyFinanceRepository"]
