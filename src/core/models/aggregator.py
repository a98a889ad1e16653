"""
Portfolio-wide valuation.

This module applies the projector to every investment of a portfolio and
sums the results. Valuation is all-or-nothing: the first investment that
cannot be projected aborts the whole operation.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

from loguru import logger

from src.core.constants import PERCENT
from src.core.exceptions.valuation import PortfolioValuationError, ValuationException
from src.core.types.financial import ZERO
from src.core.utils.validation import validate_date

from .projector import Projector

if TYPE_CHECKING:
    from .investment import Investment


@dataclass(frozen=True)
class PortfolioValuation:
    """Projected values of every investment at one date."""

    target_date: date
    values: dict[str, float] = field(default_factory=dict)
    total: float = ZERO
    total_invested: float = ZERO

    @property
    def gain(self) -> float:
        """Projected total minus total amount invested."""
        return self.total - self.total_invested

    @property
    def gain_percent(self) -> float:
        """Gain relative to the amount invested, in percent."""
        if self.total_invested <= ZERO:
            return ZERO
        return self.gain / self.total_invested * PERCENT

    def to_dict(self) -> dict:
        """Convert valuation to dictionary."""
        return {
            "target_date": self.target_date.isoformat(),
            "values": dict(self.values),
            "total": self.total,
            "total_invested": self.total_invested,
            "gain": self.gain,
            "gain_percent": self.gain_percent,
        }


class PortfolioAggregator:
    """Values a collection of investments at a target date."""

    def __init__(self, projector: Projector | None = None) -> None:
        self.projector = projector or Projector()

    def value_at(
        self, investments: Mapping[str, "Investment"], target_date: str | date
    ) -> PortfolioValuation:
        """Project every investment and sum the results.

        Args:
            investments: Investments keyed by name
            target_date: Projection date (YYYY-MM-DD string or date)

        Returns:
            Per-investment values and their total

        Raises:
            InvalidDateError: If target_date cannot be parsed
            PortfolioValuationError: On the first investment that fails,
                carrying its name and the original error
        """
        target = validate_date(target_date, "target_date")
        values: dict[str, float] = {}

        for name, investment in investments.items():
            try:
                values[name] = self.projector.project(investment, target)
            except ValuationException as e:
                logger.warning(f"Portfolio valuation stopped at {name}: {e}")
                raise PortfolioValuationError(name, e) from e

        total = sum(values.values(), ZERO)
        total_invested = sum((inv.amount_invested for inv in investments.values()), ZERO)
        return PortfolioValuation(
            target_date=target,
            values=values,
            total=total,
            total_invested=total_invested,
        )
