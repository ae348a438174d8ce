"""Settings helpers for the finance reports."""

from dataclasses import dataclass
import os

from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class FinanceSettings:
    """Report settings read from the environment.

    Attributes:
        currency: ISO currency code shown next to amounts.
        trend_periods: Number of months in trend reports.
        projection_months: Number of months projected ahead.
        fiscal_year_start: First month of the fiscal year (1-12).
    """

    currency: str = "USD"
    trend_periods: int = 6
    projection_months: int = 12
    fiscal_year_start: int = 1

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        currency = os.getenv("FINANCE_CURRENCY", "").strip().upper()
        fiscal_year_start = cls._read_int(
            "FINANCE_FISCAL_YEAR_START",
            cls.fiscal_year_start,
            logger,
        )
        if not 1 <= fiscal_year_start <= 12:
            logger.warning(
                f"FINANCE_FISCAL_YEAR_START={fiscal_year_start} is not a "
                "month, using January"
            )
            fiscal_year_start = cls.fiscal_year_start
        return cls(
            currency=currency or cls.currency,
            trend_periods=cls._read_int(
                "FINANCE_TREND_PERIODS",
                cls.trend_periods,
                logger,
            ),
            projection_months=cls._read_int(
                "FINANCE_PROJECTION_MONTHS",
                cls.projection_months,
                logger,
            ),
            fiscal_year_start=fiscal_year_start,
        )

    @staticmethod
    def _read_int(name: str, default: int, logger) -> int:
        """Read a positive integer variable.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}, using {default}")
            return default
        if value < 1:
            logger.warning(f"Invalid {name}={raw!r}, using {default}")
            return default
        return value


__all__ = ["FinanceSettings"]
