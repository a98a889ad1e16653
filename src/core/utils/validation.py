"""
Validation utilities for core domain models.

Provides consistent validation across the application.
"""

import math
import re
from datetime import date, datetime
from typing import Any

from src.core.constants import DATE_FORMAT, DATE_PATTERN, MAX_INVESTMENT_NAME_LENGTH
from src.core.exceptions.valuation import (
    InvalidAmountError,
    InvalidDateError,
    InvalidValueError,
    ValidationError,
)

_DATE_RE = re.compile(DATE_PATTERN)


def validate_date(value: Any, param_name: str = "date") -> date:
    """Parse a YYYY-MM-DD string into a date.

    ``datetime.date`` instances are accepted as-is (``datetime`` objects are
    narrowed to their date part). Anything else, including strings in any
    other format, is rejected instead of defaulting to a zero date.

    Args:
        value: Date string or date to validate
        param_name: Parameter name for error messages

    Returns:
        The parsed date

    Raises:
        InvalidDateError: If the value is not a valid calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise InvalidDateError(value, param_name)
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDateError(value, param_name) from e


def validate_amount(amount: float) -> float:
    """Validate an invested amount.

    Raises:
        InvalidAmountError: If amount is not a finite, strictly positive number
    """
    if not isinstance(amount, int | float) or isinstance(amount, bool):
        raise InvalidAmountError(amount)
    if not math.isfinite(amount) or amount <= 0:
        raise InvalidAmountError(amount)
    return float(amount)


def validate_nav_value(value: float) -> float:
    """Validate a NAV value.

    Raises:
        InvalidValueError: If value is not a finite, strictly positive number
    """
    if not isinstance(value, int | float) or isinstance(value, bool):
        raise InvalidValueError(value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidValueError(value)
    return float(value)


def validate_rate(rate: float, param_name: str = "reference_rate") -> float:
    """Validate that a rate is a finite number (any sign).

    Raises:
        ValidationError: If rate is not a finite number
    """
    if not isinstance(rate, int | float) or isinstance(rate, bool):
        raise ValidationError(f"{param_name} must be a number, got {rate!r}")
    if not math.isfinite(rate):
        raise ValidationError(f"{param_name} must be finite, got {rate}")
    return float(rate)


def validate_name(name: Any, param_name: str = "name") -> str:
    """Validate an investment name.

    Raises:
        ValidationError: If name is not a non-empty string within limits
    """
    if not isinstance(name, str) or not name.strip():
        raise ValidationError(f"{param_name} must be a non-empty string, got {name!r}")
    if len(name) > MAX_INVESTMENT_NAME_LENGTH:
        raise ValidationError(
            f"{param_name} too long: {len(name)} > {MAX_INVESTMENT_NAME_LENGTH}"
        )
    return name
