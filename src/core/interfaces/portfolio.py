"""
Portfolio valuation interfaces.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.core.models.aggregator import PortfolioValuation
    from src.core.models.investment import Investment
    from src.core.models.nav_record import NAVRecord


class IPortfolio(ABC):
    """Abstract interface for portfolio valuation."""

    @abstractmethod
    def add_investment(
        self, name: str, amount: float, reference_rate: float, investment_date: str | date
    ) -> "Investment":
        """Add a new investment."""
        pass

    @abstractmethod
    def add_nav(self, investment_name: str, nav_date: str | date, value: float) -> None:
        """Record a NAV for an investment."""
        pass

    @abstractmethod
    def get_latest_nav(self, investment_name: str) -> "NAVRecord":
        """Get the latest NAV of an investment."""
        pass

    @abstractmethod
    def calculate_performance_rate(self, investment_name: str) -> float:
        """Calculate the realized annual rate of an investment."""
        pass

    @abstractmethod
    def project_nav(self, investment_name: str, target_date: str | date) -> float:
        """Project an investment value at a future date."""
        pass

    @abstractmethod
    def get_portfolio_value(self, target_date: str | date) -> "PortfolioValuation":
        """Project every investment and total the results."""
        pass
