"""
Shared fixtures for valuation tests.
"""

from collections.abc import Generator

import pytest
from loguru import logger

from src.core.models.investment import Investment
from src.core.models.portfolio import Portfolio


@pytest.fixture
def investment() -> Investment:
    """Investment with two NAVs one calendar year apart (2024 is a leap year)."""
    inv = Investment("X", 1000.0, 8.0, "2024-01-01")
    inv.add_nav("2024-01-01", 1000.0)
    inv.add_nav("2025-01-01", 1100.0)
    return inv


@pytest.fixture
def portfolio() -> Portfolio:
    """Portfolio with two investments that both have NAV history."""
    p = Portfolio()
    p.add_investment("Action Tech", 5000.0, 8.0, "2024-01-01")
    p.add_investment("Obligation Corp", 3000.0, 4.5, "2024-01-01")
    for nav_date, value in [("2024-01-01", 5000.0), ("2024-07-01", 5300.0), ("2026-01-15", 6200.0)]:
        p.add_nav("Action Tech", nav_date, value)
    for nav_date, value in [("2024-01-01", 3000.0), ("2024-07-01", 3067.0), ("2026-01-15", 3235.0)]:
        p.add_nav("Obligation Corp", nav_date, value)
    return p


@pytest.fixture
def log_records() -> Generator[list[dict], None, None]:
    """Capture loguru records emitted during a test."""
    records: list[dict] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
