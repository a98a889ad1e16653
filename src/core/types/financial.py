"""
Financial data types for NAV valuation and projection calculations.

This module provides float-based helpers for compounding and rate math.
Values stay in binary floating point so that results match the documented
formulas exactly; callers compare results with a tolerance.

IMPORTANT PRECISION CONSIDERATIONS:
- Float64 provides ~15-16 significant decimal digits
- Compounding over fractional years uses math.pow, so projected values
  carry ~1e-12 relative error
- NOT suitable for accounting-grade money handling (use Decimal there)
- Always use the provided rounding functions for display precision
"""

import math
from datetime import date

from src.core.constants import DAYS_PER_YEAR, PERCENT

# Display precision (number of decimal places)
PERCENTAGE_DECIMALS = 4  # 4 decimal places for percentages
PRICE_DECIMALS = 2  # 2 decimal places for currency values

# Common financial values as float constants
ZERO = 0.0
ONE = 1.0


def round_price(price: float) -> float:
    """Round a currency value to display precision."""
    return round(price, PRICE_DECIMALS)


def round_percentage(percentage: float) -> float:
    """Round a percentage to display precision."""
    return round(percentage, PERCENTAGE_DECIMALS)


def years_between(start: date, end: date) -> float:
    """Elapsed years between two dates using the 365.25-day convention.

    Negative when ``end`` is before ``start``.

    Examples:
        >>> round(years_between(date(2024, 1, 1), date(2025, 1, 1)), 4)
        1.0021
    """
    return (end - start).days / DAYS_PER_YEAR


def annualized_rate(first_value: float, last_value: float, years: float) -> float:
    """Compound annual growth rate in percent.

    Formula: ((last / first) ** (1 / years) - 1) * 100

    Args:
        first_value: Value at the start of the interval
        last_value: Value at the end of the interval
        years: Positive interval length in years

    Returns:
        Annualized rate in percent

    Raises:
        ValueError: If years or either value is not positive
    """
    if years <= ZERO:
        raise ValueError(f"Years must be positive, got {years}")
    if first_value <= ZERO or last_value <= ZERO:
        raise ValueError(f"Values must be positive, got {first_value} and {last_value}")

    growth = math.pow(last_value / first_value, ONE / years)
    return (growth - ONE) * PERCENT


def compound_value(value: float, rate: float, years: float) -> float:
    """Grow a value at an annual percentage rate for a number of years.

    Formula: value * (1 + rate / 100) ** years

    Examples:
        >>> compound_value(100.0, 0.0, 5.0)
        100.0

    Raises:
        ValueError: If rate is below -100 (negative growth base)
    """
    base = ONE + rate / PERCENT
    if base < ZERO:
        raise ValueError(f"Growth base must not be negative, got {base} for rate {rate}")
    return value * math.pow(base, years)

