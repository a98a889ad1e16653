"""
Core type definitions and utilities.
"""

# Re-export financial utilities for easy access
from .financial import (
    ONE,
    PERCENTAGE_DECIMALS,
    PRICE_DECIMALS,
    ZERO,
    annualized_rate,
    compound_value,
    round_percentage,
    round_price,
    years_between,
)

__all__ = [
    # Utility functions
    "round_price",
    "round_percentage",
    "years_between",
    "annualized_rate",
    "compound_value",
    # Constants
    "PERCENTAGE_DECIMALS",
    "PRICE_DECIMALS",
    "ZERO",
    "ONE",
]
