"""
FastAPI main application for the NAV projection service.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from src.core.exceptions.valuation import (
    DuplicateInvestmentError,
    PortfolioValuationError,
    UnknownInvestmentError,
    ValuationException,
)
from src.core.models.portfolio import Portfolio

from .routers import portfolio
from .schemas.api_models import ErrorResponse


def _error_status(exc: ValuationException) -> int:
    """Map a domain error to an HTTP status code."""
    if isinstance(exc, UnknownInvestmentError):
        return 404
    if isinstance(exc, DuplicateInvestmentError):
        return 409
    return 422


def create_app(portfolio_instance: Portfolio | None = None) -> FastAPI:
    """Build the application around one owned portfolio."""
    application = FastAPI(
        title="NAV Projection API",
        version="1.0.0",
        description="API for portfolio NAV history, performance and projections",
    )
    application.state.portfolio = portfolio_instance or Portfolio()

    application.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",  # Development frontend
            "http://localhost:8080",  # Alternative development port
        ],
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "Accept", "Origin"],
    )

    application.include_router(portfolio.router, prefix="/api/portfolio", tags=["portfolio"])

    @application.exception_handler(ValuationException)
    async def valuation_exception_handler(
        request: Request, exc: ValuationException
    ) -> JSONResponse:
        """Render domain errors as ErrorResponse bodies."""
        details = None
        if isinstance(exc, PortfolioValuationError):
            details = {"investment_name": exc.investment_name, "cause": type(exc.error).__name__}

        logger.warning(f"{request.method} {request.url.path} failed: {exc}")
        body = ErrorResponse(error=type(exc).__name__, message=str(exc), details=details)
        return JSONResponse(status_code=_error_status(exc), content=body.model_dump())

    @application.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint returning API information."""
        return {"message": "NAV Projection API", "version": "1.0.0", "status": "running"}

    @application.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


app = create_app()
