"""Domain records consumed by the finance engine."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from src.domain.constants import EXPENSE, MONTHLY, OTHER_CATEGORY
from src.utils.decimal_utils import coerce_decimal

DateLike = datetime | date | str | None


@dataclass(frozen=True)
class Transaction:
    """A single money movement.

    Attributes:
        id: Opaque identifier.
        type: ``income`` or ``expense``; the amount sign is implied by it.
        amount: Non-negative amount in currency units.
        category: Opaque grouping key (identifier or display name).
        date: Timestamp of the movement.
        description: Free text, unused by calculations.
    """

    id: str
    type: str
    amount: Decimal
    category: str
    date: DateLike
    description: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping) -> "Transaction":
        """Build a transaction from a plain mapping, ignoring extra keys."""
        return cls(
            id=str(data.get("id") or ""),
            type=str(data.get("type") or ""),
            amount=coerce_decimal(data.get("amount")),
            category=str(data.get("category") or OTHER_CATEGORY),
            date=data.get("date"),
            description=str(data.get("description") or ""),
        )


@dataclass(frozen=True)
class Category:
    """A named grouping of transactions of one type."""

    id: str
    name: str
    type: str = EXPENSE

    @classmethod
    def from_mapping(cls, data: Mapping) -> "Category":
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or OTHER_CATEGORY),
            type=str(data.get("type") or EXPENSE),
        )


@dataclass(frozen=True)
class Budget:
    """A spending cap for one category over one period.

    Spent, remaining and percentage are derived from transactions at read
    time and are not part of the record.
    """

    id: str
    category: str
    budget_amount: Decimal
    period: str
    start_date: DateLike
    end_date: DateLike
    is_active: bool = True

    @classmethod
    def from_mapping(cls, data: Mapping) -> "Budget":
        is_active = data.get("is_active")
        return cls(
            id=str(data.get("id") or ""),
            category=str(data.get("category") or OTHER_CATEGORY),
            budget_amount=coerce_decimal(data.get("budget_amount")),
            period=str(data.get("period") or MONTHLY),
            start_date=data.get("start_date"),
            end_date=data.get("end_date"),
            is_active=True if is_active is None else bool(is_active),
        )


@dataclass(frozen=True)
class Goal:
    """A savings target, optionally with a date to reach it by."""

    id: str
    name: str
    target_amount: Decimal
    target_date: DateLike = None

    @classmethod
    def from_mapping(cls, data: Mapping) -> "Goal":
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            target_amount=coerce_decimal(data.get("target_amount")),
            target_date=data.get("target_date"),
        )


__all__ = ["DateLike", "Transaction", "Category", "Budget", "Goal"]
