"""
Main Portfolio class - owns investments and exposes valuation operations.

This module provides the public Portfolio interface by composing the focused
components: NAV history, performance calculation, projection, and
aggregation.
"""

from datetime import date

import pandas as pd

from src.core.constants import MAX_INVESTMENTS_PER_PORTFOLIO
from src.core.exceptions.valuation import (
    DuplicateInvestmentError,
    EmptyHistoryError,
    InsufficientDataError,
    NonPositiveIntervalError,
    ValidationError,
)
from src.core.interfaces.portfolio import IPortfolio
from src.core.types.financial import ZERO
from src.core.utils.decorators import log_operations, require_investment

from .aggregator import PortfolioAggregator, PortfolioValuation
from .investment import Investment
from .nav_record import NAVRecord
from .performance import PerformanceCalculator
from .projector import Projector

SUMMARY_COLUMNS = [
    "name",
    "amount_invested",
    "reference_rate",
    "investment_date",
    "nav_count",
    "latest_date",
    "latest_value",
    "performance_rate",
]


class Portfolio(IPortfolio):
    """Main Portfolio implementation.

    The portfolio is the sole owner of its investments; every operation goes
    through an explicit instance. Investments are added but never removed or
    renamed.

    Thread Safety:
        No locking is done here. add_nav mutates one investment's history and
        must be serialized by the caller; read operations (latest NAV, rates,
        projections, portfolio value) are safe to run concurrently once
        writes have finished.
    """

    def __init__(self) -> None:
        self.investments: dict[str, Investment] = {}
        self._calculator = PerformanceCalculator()
        self._projector = Projector(self._calculator)
        self._aggregator = PortfolioAggregator(self._projector)

    @log_operations
    def add_investment(
        self, name: str, amount: float, reference_rate: float, investment_date: str | date
    ) -> Investment:
        """Add a new investment with an empty NAV history.

        Raises:
            InvalidAmountError: If amount is not positive
            InvalidDateError: If investment_date cannot be parsed
            DuplicateInvestmentError: If the name is already used
            ValidationError: If the portfolio is full
        """
        if name in self.investments:
            raise DuplicateInvestmentError(name)
        if len(self.investments) >= MAX_INVESTMENTS_PER_PORTFOLIO:
            raise ValidationError(
                f"Maximum investments limit reached ({MAX_INVESTMENTS_PER_PORTFOLIO})"
            )

        investment = Investment(name, amount, reference_rate, investment_date)
        self.investments[name] = investment
        return investment

    @log_operations
    @require_investment()
    def add_nav(self, investment_name: str, nav_date: str | date, value: float) -> None:
        """Record a NAV for an investment.

        Raises:
            UnknownInvestmentError: If the investment does not exist
            InvalidValueError: If value is not positive
            InvalidDateError: If nav_date cannot be parsed
        """
        self.investments[investment_name].add_nav(nav_date, value)

    @require_investment()
    def get_investment(self, investment_name: str) -> Investment:
        """Get an investment by name."""
        return self.investments[investment_name]

    @log_operations
    @require_investment()
    def get_latest_nav(self, investment_name: str) -> NAVRecord:
        """Get the latest NAV of an investment.

        Raises:
            UnknownInvestmentError: If the investment does not exist
            EmptyHistoryError: If no NAV has been recorded
        """
        history = self.investments[investment_name].nav_history
        if len(history) == 0:
            raise EmptyHistoryError(investment_name)
        return history.latest()

    @log_operations
    @require_investment()
    def calculate_performance_rate(self, investment_name: str) -> float:
        """Calculate the realized annual rate of an investment in percent.

        Raises:
            UnknownInvestmentError: If the investment does not exist
            InsufficientDataError: If fewer than two NAVs are recorded
            NonPositiveIntervalError: If first and last NAV share a date
        """
        return self._calculator.calculate_rate(self.investments[investment_name].nav_history)

    @log_operations
    @require_investment()
    def project_nav(self, investment_name: str, target_date: str | date) -> float:
        """Project an investment value at target_date.

        Raises:
            UnknownInvestmentError: If the investment does not exist
            EmptyHistoryError: If no NAV has been recorded
            PastTargetDateError: If target_date is before the latest NAV
            InvalidDateError: If target_date cannot be parsed
        """
        investment = self.investments[investment_name]
        if len(investment.nav_history) == 0:
            raise EmptyHistoryError(investment_name)
        return self._projector.project(investment, target_date)

    @log_operations
    def get_portfolio_value(self, target_date: str | date) -> PortfolioValuation:
        """Project every investment at target_date and total the results.

        Raises:
            PortfolioValuationError: On the first investment that fails
            InvalidDateError: If target_date cannot be parsed
        """
        return self._aggregator.value_at(self.investments, target_date)

    def total_invested(self) -> float:
        """Sum of the amounts invested across all investments."""
        return sum((inv.amount_invested for inv in self.investments.values()), ZERO)

    def summary(self) -> pd.DataFrame:
        """Per-investment facts as a DataFrame, one row per investment.

        Latest NAV columns are empty for investments without history and the
        performance rate is empty when it cannot be computed.
        """
        rows = []
        for name, investment in self.investments.items():
            history = investment.nav_history
            latest = history.latest() if len(history) else None
            try:
                rate = self._calculator.calculate_rate(history)
            except (InsufficientDataError, NonPositiveIntervalError):
                rate = None

            rows.append(
                {
                    "name": name,
                    "amount_invested": investment.amount_invested,
                    "reference_rate": investment.reference_rate,
                    "investment_date": investment.investment_date.isoformat(),
                    "nav_count": len(history),
                    "latest_date": latest.iso_date if latest else None,
                    "latest_value": latest.value if latest else None,
                    "performance_rate": rate,
                }
            )

        return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)

    def __len__(self) -> int:
        return len(self.investments)

    def __contains__(self, name: object) -> bool:
        return name in self.investments
