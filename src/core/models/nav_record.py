"""
NAV record domain model.
"""

from dataclasses import dataclass
from datetime import date

from src.core.exceptions.valuation import InvalidDateError
from src.core.utils.validation import validate_nav_value


@dataclass(frozen=True)
class NAVRecord:
    """One observed valuation (Net Asset Value) of an investment."""

    date: date
    value: float

    def __post_init__(self) -> None:
        """Validate record data after initialization."""
        if not isinstance(self.date, date):
            raise InvalidDateError(self.date)
        object.__setattr__(self, "value", validate_nav_value(self.value))

    @property
    def iso_date(self) -> str:
        """Date in YYYY-MM-DD form."""
        return self.date.isoformat()

    def to_dict(self) -> dict:
        """Convert record to dictionary."""
        return {"date": self.iso_date, "value": self.value}
