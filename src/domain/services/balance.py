"""Balance aggregation over transaction sets."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import EXPENSE, INCOME
from src.domain.models import BalanceResult, Transaction
from src.domain.services.normalization import (
    as_list,
    normalize_type,
    record_field,
)
from src.utils.decimal_utils import ZERO, coerce_decimal, round_currency


def sum_by_type(
    transactions: Iterable[Transaction] | None,
) -> tuple[Decimal, Decimal]:
    """Return unrounded income and expense totals.

    Args:
        transactions: Transactions to aggregate.

    Returns:
        tuple[Decimal, Decimal]: Income total and expense total.
    """
    income = ZERO
    expenses = ZERO
    for transaction in as_list(transactions):
        kind = normalize_type(record_field(transaction, "type"))
        amount = coerce_decimal(record_field(transaction, "amount"))
        if kind == INCOME:
            income += amount
        elif kind == EXPENSE:
            expenses += amount
    return income, expenses


def calculate_balance(
    transactions: Iterable[Transaction] | None,
) -> BalanceResult:
    """Sum income and expenses and derive the balance.

    Rounding to cents happens once, after every addition.

    Args:
        transactions: Transactions to aggregate.

    Returns:
        BalanceResult: Income, expenses and balance; zeros for empty input.
    """
    income, expenses = sum_by_type(transactions)
    return BalanceResult(
        income=round_currency(income),
        expenses=round_currency(expenses),
        balance=round_currency(income - expenses),
    )


__all__ = ["sum_by_type", "calculate_balance"]
