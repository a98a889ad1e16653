"""
Custom exception hierarchy for the valuation engine.

This module defines domain-specific exceptions for better error handling.
"""

from datetime import date


class ValuationException(Exception):
    """Base exception for all valuation-related errors."""

    pass


class ValidationError(ValuationException):
    """Raised when input validation fails."""

    pass


class CalculationError(ValuationException):
    """Raised when mathematical calculations fail."""

    pass


class PortfolioError(ValuationException):
    """Raised when portfolio operations fail."""

    pass


class InvalidAmountError(ValidationError):
    """Raised when an invested amount is not strictly positive."""

    def __init__(self, amount: float):
        self.amount = amount
        super().__init__(f"Amount invested must be positive, got {amount}")


class InvalidValueError(ValidationError):
    """Raised when a NAV value is not strictly positive."""

    def __init__(self, value: float):
        self.value = value
        super().__init__(f"NAV value must be positive, got {value}")


class InvalidDateError(ValidationError):
    """Raised when a date cannot be parsed as YYYY-MM-DD."""

    def __init__(self, value: object, param_name: str = "date"):
        self.value = value
        self.param_name = param_name
        super().__init__(f"Invalid {param_name} {value!r}, expected YYYY-MM-DD")


class UnknownInvestmentError(PortfolioError):
    """Raised when trying to operate on a non-existent investment."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Investment not found: {name}")


class DuplicateInvestmentError(PortfolioError):
    """Raised when adding an investment whose name is already taken."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Investment already exists: {name}")


class PortfolioValuationError(PortfolioError):
    """Raised when one investment of a portfolio cannot be valued."""

    def __init__(self, investment_name: str, error: Exception):
        self.investment_name = investment_name
        self.error = error
        super().__init__(f"Valuation failed for {investment_name}: {error}")


class EmptyHistoryError(CalculationError):
    """Raised when an operation needs at least one NAV record."""

    def __init__(self, name: str | None = None):
        self.name = name
        suffix = f" for {name}" if name else ""
        super().__init__(f"No NAV available{suffix}")


class InsufficientDataError(CalculationError):
    """Raised when fewer than two NAV records are available for a rate."""

    def __init__(self, count: int, required: int = 2):
        self.count = count
        self.required = required
        super().__init__(f"At least {required} NAV records are required, got {count}")


class NonPositiveIntervalError(CalculationError):
    """Raised when the rate interval does not span positive time."""

    def __init__(self, start: date, end: date):
        self.start = start
        self.end = end
        super().__init__(
            f"Time interval must be positive: {start.isoformat()} -> {end.isoformat()}"
        )


class PastTargetDateError(CalculationError):
    """Raised when a projection date precedes the latest NAV."""

    def __init__(self, target: date, latest: date):
        self.target = target
        self.latest = latest
        super().__init__(
            f"Projection date {target.isoformat()} is before latest NAV {latest.isoformat()}"
        )


class NegativeGrowthBaseError(CalculationError):
    """Raised when a rate below -100% would compound a negative base."""

    def __init__(self, rate: float):
        self.rate = rate
        super().__init__(
            f"Rate {rate}% cannot be compounded, growth base 1 + rate/100 is negative"
        )
