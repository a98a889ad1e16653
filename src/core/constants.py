"""
Core constants and limits.

Defines system-wide constants and resource limits to prevent abuse
and ensure system stability.
"""

# Date handling
DATE_FORMAT = "%Y-%m-%d"  # Only accepted textual date format
DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"  # Fixed-width ISO calendar date

# Compounding conventions
DAYS_PER_YEAR = 365.25  # Day-count convention for elapsed years
PERCENT = 100.0  # Rates are expressed in percent
MIN_RATE_RECORDS = 2  # Records needed for a realized rate

# Portfolio Limits
MAX_INVESTMENTS_PER_PORTFOLIO = 1000  # Maximum number of investments
MAX_NAV_HISTORY = 100_000  # Maximum NAV records per investment
MAX_INVESTMENT_NAME_LENGTH = 200  # Maximum characters in an investment name
