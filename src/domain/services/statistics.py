"""Descriptive statistics over numeric sequences."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models import StatisticsResult
from src.domain.services.normalization import as_list
from src.utils.decimal_utils import ZERO, coerce_decimal, round_number


def mean(values: list[Decimal]) -> Decimal:
    """Return the arithmetic mean, zero for an empty list."""
    if not values:
        return ZERO
    return sum(values, ZERO) / len(values)


def calculate_statistics(values: Iterable | None) -> StatisticsResult:
    """Compute mean, median, mode, population variance and extremes.

    Non-numeric values count as zero. The mode is the most frequent value;
    on ties the value seen first in the input wins.

    Args:
        values: Numeric sequence.

    Returns:
        StatisticsResult: Statistics rounded to two places, all zeros for
        empty input.
    """
    numbers = [coerce_decimal(value) for value in as_list(values)]
    if not numbers:
        zero = round_number(ZERO)
        return StatisticsResult(
            mean=zero,
            median=zero,
            mode=zero,
            variance=zero,
            standard_deviation=zero,
            min=zero,
            max=zero,
            sum=zero,
            count=0,
        )

    count = len(numbers)
    total = sum(numbers, ZERO)
    average = total / count

    ordered = sorted(numbers)
    middle = count // 2
    if count % 2 == 0:
        median = (ordered[middle - 1] + ordered[middle]) / 2
    else:
        median = ordered[middle]

    frequency: dict[Decimal, int] = {}
    for number in numbers:
        frequency[number] = frequency.get(number, 0) + 1
    mode = max(frequency, key=frequency.__getitem__)

    variance = sum(((number - average) ** 2 for number in numbers), ZERO) / count

    return StatisticsResult(
        mean=round_number(average),
        median=round_number(median),
        mode=round_number(mode),
        variance=round_number(variance),
        standard_deviation=round_number(variance.sqrt()),
        min=round_number(ordered[0]),
        max=round_number(ordered[-1]),
        sum=round_number(total),
        count=count,
    )


__all__ = ["mean", "calculate_statistics"]
