"""
Investment domain model.
"""

from datetime import date

from src.core.utils.validation import validate_amount, validate_date, validate_name, validate_rate

from .nav_history import NAVHistory
from .nav_record import NAVRecord
from .performance import PerformanceCalculator


class Investment:
    """A single investment and its NAV history.

    Identity fields (name, amount invested, reference rate, investment date)
    are fixed at creation; the NAV history is the only mutable state.
    """

    def __init__(
        self,
        name: str,
        amount_invested: float,
        reference_rate: float,
        investment_date: str | date,
        nav_history: NAVHistory | None = None,
    ) -> None:
        self._name = validate_name(name)
        self._amount_invested = validate_amount(amount_invested)
        self._reference_rate = validate_rate(reference_rate)
        self._investment_date = validate_date(investment_date, "investment_date")
        self._nav_history = nav_history if nav_history is not None else NAVHistory()

    @property
    def name(self) -> str:
        return self._name

    @property
    def amount_invested(self) -> float:
        return self._amount_invested

    @property
    def reference_rate(self) -> float:
        """Annual rate assumption in percent, used as ceiling and fallback."""
        return self._reference_rate

    @property
    def investment_date(self) -> date:
        return self._investment_date

    @property
    def nav_history(self) -> NAVHistory:
        return self._nav_history

    def add_nav(self, nav_date: str | date, value: float) -> NAVRecord:
        """Record a valuation, keeping history sorted by date."""
        return self._nav_history.append(nav_date, value)

    def performance_rate(self) -> float:
        """Realized annualized rate in percent."""
        return PerformanceCalculator.calculate_rate(self._nav_history)

    def to_dict(self) -> dict:
        """Convert investment to dictionary."""
        return {
            "name": self._name,
            "amount_invested": self._amount_invested,
            "reference_rate": self._reference_rate,
            "investment_date": self._investment_date.isoformat(),
            "nav_history": [record.to_dict() for record in self._nav_history],
        }

    def __repr__(self) -> str:
        return (
            f"Investment(name={self._name!r}, amount_invested={self._amount_invested}, "
            f"reference_rate={self._reference_rate}, navs={len(self._nav_history)})"
        )
