"""Category breakdown of transaction sets."""

from collections.abc import Iterable
from decimal import MAX_PREC, Decimal, localcontext

from src.domain.constants import EXPENSE
from src.domain.models import CategoryBreakdownEntry, Transaction
from src.domain.services.normalization import (
    as_list,
    normalize_category,
    normalize_type,
    record_field,
)
from src.utils.decimal_utils import (
    ZERO,
    coerce_decimal,
    round_currency,
    round_number,
)


def calculate_spending_by_category(
    transactions: Iterable[Transaction] | None,
    type: str = EXPENSE,
) -> list[CategoryBreakdownEntry]:
    """Group transactions of one type by category.

    Args:
        transactions: Transactions to group; the input is not modified.
        type: Transaction type to keep (``income`` or ``expense``).

    Returns:
        list[CategoryBreakdownEntry]: Entries sorted by amount descending,
        then category name ascending.
    """
    wanted = normalize_type(type)
    totals: dict[str, Decimal] = {}
    counts: dict[str, int] = {}
    for transaction in as_list(transactions):
        if normalize_type(record_field(transaction, "type")) != wanted:
            continue
        category = normalize_category(record_field(transaction, "category"))
        amount = coerce_decimal(record_field(transaction, "amount"))
        totals[category] = totals.get(category, ZERO) + amount
        counts[category] = counts.get(category, 0) + 1

    grand_total = sum(totals.values(), ZERO)
    amounts = _reconciled_amounts(totals, grand_total)
    entries = [
        CategoryBreakdownEntry(
            category=category,
            amount=amounts[category],
            transaction_count=counts[category],
            percentage=(
                round_number(amount / grand_total * 100)
                if grand_total != 0
                else round_number(ZERO)
            ),
        )
        for category, amount in totals.items()
    ]
    return sorted(entries, key=lambda entry: (-entry.amount, entry.category))


def _reconciled_amounts(
    totals: dict[str, Decimal],
    grand_total: Decimal,
) -> dict[str, Decimal]:
    """Round each total to cents so the entries add up to the rounded total.

    The cent left over by rounding entries one by one goes to the largest
    category. Percentages are not reconciled and may add up to 99.99 or
    100.01.
    """
    amounts = {
        category: round_currency(amount)
        for category, amount in totals.items()
    }
    if not amounts:
        return amounts
    # Cent sums must stay exact at any magnitude.
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        remainder = round_currency(grand_total) - sum(amounts.values(), ZERO)
        if remainder:
            largest = min(
                totals,
                key=lambda category: (-totals[category], category),
            )
            amounts[largest] += remainder
    return amounts


def find_category_entry(
    entries: Iterable[CategoryBreakdownEntry],
    category: str,
) -> CategoryBreakdownEntry | None:
    """Return the entry for a category, if present."""
    key = normalize_category(category)
    for entry in entries:
        if entry.category == key:
            return entry
    return None


__all__ = ["calculate_spending_by_category", "find_category_entry"]
