"""Savings goal progress and compound growth."""

import logging
from decimal import Overflow
from logging import Logger

from src.domain.constants import (
    DEFAULT_COMPOUND_FREQUENCY,
    GOAL_COMPLETED,
    GOAL_IN_PROGRESS,
    GOAL_NEAR,
    GOAL_NEAR_PERCENTAGE,
)
from src.domain.models import CompoundInterest, Goal, GoalProgress
from src.domain.services.normalization import coerce_count, record_field
from src.utils.decimal_utils import (
    ZERO,
    coerce_decimal,
    round_currency,
    round_number,
)

_LOGGER = logging.getLogger(__name__)


def calculate_goal_progress(goal: Goal, current_amount) -> GoalProgress:
    """Measure saved money against a goal target.

    A goal with no positive target reports 0% and counts as completed as
    soon as nothing is missing, so the status is ``completed`` whenever
    ``is_completed`` is true.

    Args:
        goal: Goal record or mapping with a ``target_amount``.
        current_amount: Amount saved towards the goal.

    Returns:
        GoalProgress: Remaining amount, percentage and status.
    """
    target = coerce_decimal(record_field(goal, "target_amount"))
    current = coerce_decimal(current_amount)
    if target > 0:
        percentage = round_number(current / target * 100, 1)
    else:
        percentage = round_number(ZERO, 1)
    is_completed = current >= target

    if is_completed:
        status = GOAL_COMPLETED
    elif percentage >= GOAL_NEAR_PERCENTAGE:
        status = GOAL_NEAR
    else:
        status = GOAL_IN_PROGRESS

    return GoalProgress(
        target_amount=round_currency(target),
        current_amount=round_currency(current),
        remaining=round_currency(max(ZERO, target - current)),
        percentage=percentage,
        is_completed=is_completed,
        status=status,
    )


def calculate_compound_interest(
    principal,
    rate,
    years,
    compound: int = DEFAULT_COMPOUND_FREQUENCY,
    *,
    logger: Logger | None = None,
) -> CompoundInterest:
    """Grow a principal at an annual rate compounded ``compound`` times a year.

    Args:
        principal: Starting amount.
        rate: Annual interest rate in percent.
        years: Duration in years; negative values count as zero.
        compound: Compounding periods per year; values below one count as
            yearly compounding.
        logger: Logger used for warnings.

    Returns:
        CompoundInterest: Final amount and interest earned.
    """
    start = coerce_decimal(principal)
    annual_rate = coerce_decimal(rate)
    duration = max(ZERO, coerce_decimal(years))
    frequency = max(coerce_count(compound), 1)

    # A rate below -100% per period would flip the sign of the base.
    base = max(ZERO, 1 + annual_rate / 100 / frequency)
    periods = frequency * duration
    if periods == 0:
        final = start
    else:
        try:
            final = start * base ** periods
        except Overflow:
            (logger or _LOGGER).warning(
                f"Compound growth of {start} at {annual_rate}% over "
                f"{duration} years overflows; principal kept"
            )
            final = start

    return CompoundInterest(
        principal=round_currency(start),
        final_amount=round_currency(final),
        total_interest=round_currency(final - start),
        rate=round_number(annual_rate),
        years=duration,
        compound_frequency=frequency,
    )


__all__ = [
    "calculate_goal_progress",
    "calculate_compound_interest",
]
