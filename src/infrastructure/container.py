"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_repository import FinanceRepositoryPort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.finance_repository import SqlAlchemyFinanceRepository
from src.infrastructure.settings import FinanceSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_finance_repository(
    db_port: DatabaseEnginePort | None = None,
) -> FinanceRepositoryPort:
    """Return the finance records repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyFinanceRepository(resolved_db)


def build_settings() -> FinanceSettings:
    """Return report settings read from the environment."""
    return FinanceSettings.from_env()


__all__ = [
    "build_database_adapter",
    "build_finance_repository",
    "build_settings",
]
