"""
Unit tests for portfolio-wide valuation.
"""

from datetime import date

import pytest

from src.core.exceptions.valuation import (
    EmptyHistoryError,
    InvalidDateError,
    NegativeGrowthBaseError,
    PastTargetDateError,
    PortfolioValuationError,
)
from src.core.models.aggregator import PortfolioAggregator, PortfolioValuation
from src.core.models.investment import Investment
from src.core.models.projector import Projector


def _investment(name: str, amount: float, rate: float, *navs: tuple[str, float]) -> Investment:
    investment = Investment(name, amount, rate, "2024-01-01")
    for nav_date, value in navs:
        investment.add_nav(nav_date, value)
    return investment


class TestPortfolioAggregator:
    """Test suite for PortfolioAggregator.value_at."""

    def test_should_sum_projected_values(self) -> None:
        """Test total equals the sum of per-investment projections."""
        investments = {
            "A": _investment("A", 1000.0, 8.0, ("2024-01-01", 1000.0)),
            "B": _investment("B", 500.0, 4.0, ("2024-01-01", 500.0), ("2025-01-01", 540.0)),
        }
        projector = Projector()
        x = projector.project(investments["A"], "2027-01-01")
        y = projector.project(investments["B"], "2027-01-01")

        valuation = PortfolioAggregator(projector).value_at(investments, "2027-01-01")

        assert valuation.values == {"A": pytest.approx(x), "B": pytest.approx(y)}
        assert valuation.total == pytest.approx(x + y, abs=1e-9)
        assert valuation.total_invested == 1500.0
        assert valuation.target_date == date(2027, 1, 1)

    def test_should_not_depend_on_iteration_order(self) -> None:
        """Test reversed mapping order gives the same total."""
        a = _investment("A", 1000.0, 8.0, ("2024-01-01", 1000.0))
        b = _investment("B", 500.0, 3.0, ("2024-06-01", 700.0))
        aggregator = PortfolioAggregator()

        forward = aggregator.value_at({"A": a, "B": b}, "2030-01-01")
        backward = aggregator.value_at({"B": b, "A": a}, "2030-01-01")

        assert forward.total == pytest.approx(backward.total, abs=1e-9)

    def test_should_return_empty_valuation_for_no_investments(self) -> None:
        """Test empty portfolio totals zero."""
        valuation = PortfolioAggregator().value_at({}, "2030-01-01")

        assert valuation.values == {}
        assert valuation.total == 0.0
        assert valuation.gain_percent == 0.0

    def test_should_fail_on_first_investment_error(self) -> None:
        """Test failing investment aborts with its name attached."""
        investments = {
            "Empty": _investment("Empty", 100.0, 5.0),
        }

        with pytest.raises(PortfolioValuationError) as exc_info:
            PortfolioAggregator().value_at(investments, "2030-01-01")

        assert exc_info.value.investment_name == "Empty"
        assert isinstance(exc_info.value.error, EmptyHistoryError)
        assert isinstance(exc_info.value.__cause__, EmptyHistoryError)
        assert "Empty" in str(exc_info.value)

    def test_should_fail_when_target_precedes_any_nav(self) -> None:
        """Test a past target date for one investment fails the whole valuation."""
        investments = {
            "Old": _investment("Old", 100.0, 5.0, ("2024-01-01", 100.0)),
            "New": _investment("New", 100.0, 5.0, ("2026-01-01", 120.0)),
        }

        with pytest.raises(PortfolioValuationError) as exc_info:
            PortfolioAggregator().value_at(investments, "2025-01-01")

        assert exc_info.value.investment_name == "New"
        assert isinstance(exc_info.value.error, PastTargetDateError)

    def test_should_name_investment_with_rate_below_minus_hundred_percent(self) -> None:
        """Test a negative growth base is reported as a valuation error for that investment."""
        investments = {
            "Steady": _investment("Steady", 100.0, 5.0, ("2024-01-01", 100.0)),
            "Wipeout": _investment("Wipeout", 100.0, -150.0, ("2024-01-01", 100.0)),
        }

        with pytest.raises(PortfolioValuationError) as exc_info:
            PortfolioAggregator().value_at(investments, "2024-07-01")

        assert exc_info.value.investment_name == "Wipeout"
        assert isinstance(exc_info.value.error, NegativeGrowthBaseError)
        assert isinstance(exc_info.value.__cause__, NegativeGrowthBaseError)

    def test_should_reject_invalid_target_date(self) -> None:
        """Test date parsing happens before any projection."""
        with pytest.raises(InvalidDateError):
            PortfolioAggregator().value_at({}, "2030-13-01")


class TestPortfolioValuation:
    """Test suite for PortfolioValuation."""

    def test_should_compute_gain(self) -> None:
        """Test gain and gain percent."""
        valuation = PortfolioValuation(
            target_date=date(2027, 1, 1),
            values={"A": 1200.0},
            total=1200.0,
            total_invested=1000.0,
        )

        assert valuation.gain == pytest.approx(200.0)
        assert valuation.gain_percent == pytest.approx(20.0)

    def test_should_serialize_to_dict(self) -> None:
        """Test dictionary representation."""
        valuation = PortfolioValuation(
            target_date=date(2027, 1, 1), values={"A": 900.0}, total=900.0, total_invested=1000.0
        )

        data = valuation.to_dict()

        assert data["target_date"] == "2027-01-01"
        assert data["values"] == {"A": 900.0}
        assert data["gain"] == pytest.approx(-100.0)
        assert data["gain_percent"] == pytest.approx(-10.0)
