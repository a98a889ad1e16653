"""
Portfolio API endpoints.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query, Request, status

from src.core.exceptions.valuation import CalculationError
from src.core.models.investment import Investment
from src.core.models.portfolio import Portfolio

from ..schemas.api_models import (
    InvestmentRequest,
    InvestmentResponse,
    NAVRequest,
    NAVResponse,
    PerformanceResponse,
    PortfolioValueResponse,
    ProjectionResponse,
)

router = APIRouter()


def get_portfolio(request: Request) -> Portfolio:
    """Portfolio owned by the running application."""
    return request.app.state.portfolio


def _investment_response(investment: Investment) -> InvestmentResponse:
    """Build the response model of one investment."""
    history = investment.nav_history
    latest = history.latest() if len(history) else None
    try:
        rate = investment.performance_rate()
    except CalculationError:
        rate = None

    return InvestmentResponse(
        name=investment.name,
        amount_invested=investment.amount_invested,
        reference_rate=investment.reference_rate,
        investment_date=investment.investment_date,
        nav_count=len(history),
        latest_date=latest.date if latest else None,
        latest_value=latest.value if latest else None,
        performance_rate=rate,
    )


@router.post("/investments", status_code=status.HTTP_201_CREATED)
async def add_investment(
    body: InvestmentRequest, portfolio: Portfolio = Depends(get_portfolio)
) -> InvestmentResponse:
    """Create a new investment with an empty NAV history."""
    investment = portfolio.add_investment(
        body.name, body.amount, body.reference_rate, body.investment_date
    )
    return _investment_response(investment)


@router.get("/investments")
async def list_investments(
    portfolio: Portfolio = Depends(get_portfolio),
) -> list[InvestmentResponse]:
    """Summary of every investment."""
    return [_investment_response(inv) for inv in portfolio.investments.values()]


@router.post("/investments/{name}/navs", status_code=status.HTTP_201_CREATED)
async def add_nav(
    name: str, body: NAVRequest, portfolio: Portfolio = Depends(get_portfolio)
) -> NAVResponse:
    """Record a NAV for an investment."""
    portfolio.add_nav(name, body.date, body.value)
    return NAVResponse(date=date.fromisoformat(body.date), value=body.value)


@router.get("/investments/{name}/navs/latest")
async def get_latest_nav(name: str, portfolio: Portfolio = Depends(get_portfolio)) -> NAVResponse:
    """Latest known NAV of an investment."""
    record = portfolio.get_latest_nav(name)
    return NAVResponse(date=record.date, value=record.value)


@router.get("/investments/{name}/performance")
async def get_performance(
    name: str, portfolio: Portfolio = Depends(get_portfolio)
) -> PerformanceResponse:
    """Realized annualized rate of an investment."""
    return PerformanceResponse(name=name, rate=portfolio.calculate_performance_rate(name))


@router.get("/investments/{name}/projection")
async def get_projection(
    name: str,
    target_date: str = Query(..., alias="date", description="Projection date (YYYY-MM-DD)"),
    portfolio: Portfolio = Depends(get_portfolio),
) -> ProjectionResponse:
    """Projected value of an investment at a date."""
    value = portfolio.project_nav(name, target_date)
    return ProjectionResponse(name=name, date=date.fromisoformat(target_date), value=value)


@router.get("/value")
async def get_portfolio_value(
    target_date: str = Query(..., alias="date", description="Projection date (YYYY-MM-DD)"),
    portfolio: Portfolio = Depends(get_portfolio),
) -> PortfolioValueResponse:
    """Projected value of the whole portfolio at a date."""
    valuation = portfolio.get_portfolio_value(target_date)
    return PortfolioValueResponse(**valuation.to_dict())
