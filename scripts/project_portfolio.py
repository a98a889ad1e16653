#!/usr/bin/env python3
"""
Build the demo portfolio and print its projected value at a future date.

Usage:
    python scripts/project_portfolio.py --date 2027-01-15
"""

import argparse
import sys

from loguru import logger

from src.core.exceptions.valuation import ValuationException
from src.core.models.portfolio import Portfolio
from src.core.types.financial import round_percentage, round_price

DEMO_INVESTMENTS = [
    ("Action Tech", 5000.0, 8.0, "2024-01-01"),
    ("Obligation Corp", 3000.0, 4.5, "2024-01-01"),
    ("Fonds Immobilier", 4000.0, 6.0, "2024-01-01"),
]

DEMO_NAVS = {
    "Action Tech": [("2024-01-01", 5000.0), ("2024-07-01", 5300.0), ("2026-01-15", 6200.0)],
    "Obligation Corp": [("2024-01-01", 3000.0), ("2024-07-01", 3067.0), ("2026-01-15", 3235.0)],
    "Fonds Immobilier": [("2024-01-01", 4000.0), ("2024-07-01", 4150.0), ("2026-01-15", 4650.0)],
}


def setup_logging(debug: bool = False):
    """Configure logging with loguru."""
    logger.remove()

    level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
    )


def build_demo_portfolio() -> Portfolio:
    """Create the demo portfolio with its NAV history."""
    portfolio = Portfolio()
    for name, amount, rate, invested_on in DEMO_INVESTMENTS:
        portfolio.add_investment(name, amount, rate, invested_on)
        for nav_date, value in DEMO_NAVS[name]:
            portfolio.add_nav(name, nav_date, value)
    return portfolio


def main():
    parser = argparse.ArgumentParser(
        description="Project the demo portfolio value at a future date",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default projection date
  python scripts/project_portfolio.py

  # Custom date with debug logging
  python scripts/project_portfolio.py --date 2030-01-01 --debug
        """,
    )

    parser.add_argument(
        "--date", type=str, default="2027-01-15", help="Projection date in YYYY-MM-DD format"
    )

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    setup_logging(args.debug)

    portfolio = build_demo_portfolio()
    summary = portfolio.summary()
    print("=== PORTFOLIO SUMMARY ===")
    print(summary.to_string(index=False))

    try:
        valuation = portfolio.get_portfolio_value(args.date)
    except ValuationException as e:
        logger.error(f"Projection failed: {e}")
        return 1

    print(f"\n=== PROJECTION AT {valuation.target_date.isoformat()} ===")
    for name, value in valuation.values.items():
        print(f"{name}: {round_price(value):.2f}")

    print(f"\nTotal portfolio value: {round_price(valuation.total):.2f}")
    print(f"Total invested: {round_price(valuation.total_invested):.2f}")
    print(
        f"Gain/Loss: {round_price(valuation.gain):.2f} "
        f"({round_percentage(valuation.gain_percent):.2f}%)"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
