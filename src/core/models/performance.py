"""
Realized performance calculations.

This module derives the annualized compound growth rate of an investment
from its first and last NAV observations.
"""

from src.core.constants import MIN_RATE_RECORDS
from src.core.exceptions.valuation import InsufficientDataError, NonPositiveIntervalError
from src.core.protocols import INAVHistory
from src.core.types.financial import ZERO, annualized_rate, years_between


class PerformanceCalculator:
    """Annualized performance rate from a NAV history.

    The rate is geometric: ``((last / first) ** (1 / years) - 1) * 100`` with
    ``years = days / 365.25``, so unequal intervals and multiplicative growth
    are annualized consistently. Intermediate records do not affect it.
    """

    @staticmethod
    def calculate_rate(history: INAVHistory) -> float:
        """Calculate the realized annual rate in percent.

        Args:
            history: Date-ordered NAV history

        Returns:
            Annualized rate in percent

        Raises:
            InsufficientDataError: If fewer than two records exist
            NonPositiveIntervalError: If first and last records share a date
        """
        if len(history) < MIN_RATE_RECORDS:
            raise InsufficientDataError(len(history), MIN_RATE_RECORDS)

        first = history.first()
        last = history.latest()

        years = years_between(first.date, last.date)
        if years <= ZERO:
            raise NonPositiveIntervalError(first.date, last.date)

        return annualized_rate(first.value, last.value, years)
