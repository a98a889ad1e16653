"""
Pydantic schemas for API request/response models.
"""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from src.core.exceptions.valuation import InvalidDateError
from src.core.utils.validation import validate_date


def _parse_date(v: str | date) -> date:
    """Parse strict YYYY-MM-DD input, surfacing failures as ValueError."""
    try:
        return validate_date(v)
    except InvalidDateError as e:
        raise ValueError(str(e)) from e


class InvestmentRequest(BaseModel):
    """Request model for investment creation."""

    name: str = Field(..., min_length=1, max_length=200, description="Unique investment name")
    amount: float = Field(..., description="Amount invested (must be positive)")
    reference_rate: float = Field(..., description="Reference annual rate in percent")
    investment_date: date = Field(..., description="Investment date (YYYY-MM-DD)")

    @field_validator("investment_date", mode="before")
    @classmethod
    def validate_investment_date(cls, v: str | date) -> date:
        """Only accept YYYY-MM-DD dates."""
        return _parse_date(v)


class NAVRequest(BaseModel):
    """Request model for NAV submission."""

    date: str = Field(..., description="NAV date (YYYY-MM-DD)")
    value: float = Field(..., description="NAV value (must be positive)")


class NAVResponse(BaseModel):
    """Response model for a NAV record."""

    date: date
    value: float


class InvestmentResponse(BaseModel):
    """Response model for investment details."""

    name: str
    amount_invested: float
    reference_rate: float
    investment_date: date
    nav_count: int
    latest_date: date | None = None
    latest_value: float | None = None
    performance_rate: float | None = None


class PerformanceResponse(BaseModel):
    """Response model for a realized performance rate."""

    name: str
    rate: float = Field(..., description="Annualized rate in percent")


class ProjectionResponse(BaseModel):
    """Response model for a single projection."""

    name: str
    date: date
    value: float


class PortfolioValueResponse(BaseModel):
    """Response model for a portfolio valuation."""

    target_date: date
    values: dict[str, float]
    total: float
    total_invested: float
    gain: float
    gain_percent: float


class ErrorResponse(BaseModel):
    """Response model for errors."""

    error: str
    message: str
    details: dict | None = None
