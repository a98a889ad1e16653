"""
Rate source enumerations.

This module defines where the rate used for a projection came from.
"""

from enum import StrEnum


class RateSource(StrEnum):
    """
    Origin of an effective projection rate.

    REFERENCE is the configured annual assumption of the investment,
    REALIZED is the annualized rate computed from its NAV history.
    """

    REFERENCE = "reference"
    REALIZED = "realized"

    @property
    def is_realized(self) -> bool:
        """Check if the rate was derived from history."""
        return self == self.REALIZED
