"""
Forward projection of investment values.

This module grows the latest known NAV of an investment to a target date,
using the lower of the reference rate and the realized rate.
"""

from datetime import date

from loguru import logger

from src.core.constants import MIN_RATE_RECORDS, PERCENT
from src.core.enums import RateSource
from src.core.exceptions.valuation import (
    InsufficientDataError,
    NegativeGrowthBaseError,
    NonPositiveIntervalError,
    PastTargetDateError,
)
from src.core.protocols import IInvestment
from src.core.types.financial import ONE, ZERO, compound_value, years_between
from src.core.utils.validation import validate_date

from .performance import PerformanceCalculator


class Projector:
    """Projects investment values to future dates.

    The effective rate is conservative: when a realized rate can be computed
    it is compared with the investment's reference rate and the lower one is
    used. When it cannot (too few records, zero-length interval) the
    reference rate is used as is.

    Projections only read the investment and may be called repeatedly.
    """

    def __init__(self, calculator: PerformanceCalculator | None = None) -> None:
        self.calculator = calculator or PerformanceCalculator()

    def effective_rate(self, investment: IInvestment) -> tuple[float, RateSource]:
        """Select the rate used for projection.

        Args:
            investment: Investment to read history and reference rate from

        Returns:
            Tuple of (rate in percent, where it came from)
        """
        reference = investment.reference_rate
        history = investment.nav_history
        if len(history) < MIN_RATE_RECORDS:
            return reference, RateSource.REFERENCE

        try:
            realized = self.calculator.calculate_rate(history)
        except (InsufficientDataError, NonPositiveIntervalError) as e:
            logger.debug(f"Falling back to reference rate for {investment.name}: {e}")
            return reference, RateSource.REFERENCE

        if realized < reference:
            return realized, RateSource.REALIZED
        return reference, RateSource.REFERENCE

    def project(self, investment: IInvestment, target_date: str | date) -> float:
        """Project the investment value at a target date.

        Formula: latest_value * (1 + rate / 100) ** years

        Args:
            investment: Investment to project
            target_date: Projection date (YYYY-MM-DD string or date)

        Returns:
            Projected value

        Raises:
            EmptyHistoryError: If the investment has no NAV
            PastTargetDateError: If target_date is before the latest NAV
            NegativeGrowthBaseError: If the effective rate is below -100
            InvalidDateError: If target_date cannot be parsed
        """
        target = validate_date(target_date, "target_date")
        latest = investment.nav_history.latest()
        rate, source = self.effective_rate(investment)

        years = years_between(latest.date, target)
        if years < ZERO:
            raise PastTargetDateError(target, latest.date)
        if ONE + rate / PERCENT < ZERO:
            raise NegativeGrowthBaseError(rate)

        value = compound_value(latest.value, rate, years)
        logger.debug(
            f"Projected {investment.name} to {target.isoformat()}: "
            f"{value:.2f} at {rate:.4f}% ({source})"
        )
        return value
