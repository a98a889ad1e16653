"""
NAV history store.

Keeps the observations of one investment ordered by date. Insertion is a
binary search on the date, so the history never needs a full re-sort and
records sharing a date keep their insertion order.
"""

import bisect
from collections.abc import Iterator
from datetime import date

import pandas as pd
from loguru import logger

from src.core.constants import MAX_NAV_HISTORY
from src.core.exceptions.valuation import EmptyHistoryError, ValidationError
from src.core.utils.validation import validate_date, validate_nav_value

from .nav_record import NAVRecord


class NAVHistory:
    """Chronologically ordered NAV records of a single investment.

    Thread Safety:
        append() is the only mutator and is not synchronized. Callers that
        share a history across threads must serialize writers; concurrent
        reads after the last write are safe.
    """

    def __init__(self, records: list[NAVRecord] | None = None) -> None:
        self._records: list[NAVRecord] = []
        for record in records or []:
            self._insert(record)

    def append(self, nav_date: str | date, value: float) -> NAVRecord:
        """Insert a new observation, keeping the history sorted by date.

        Args:
            nav_date: Observation date (YYYY-MM-DD string or date)
            value: Observed NAV, strictly positive

        Returns:
            The inserted record

        Raises:
            InvalidValueError: If value is not positive
            InvalidDateError: If the date cannot be parsed
            ValidationError: If the history is full
        """
        value = validate_nav_value(value)
        record = NAVRecord(date=validate_date(nav_date), value=value)
        self._insert(record)
        return record

    def _insert(self, record: NAVRecord) -> None:
        if len(self._records) >= MAX_NAV_HISTORY:
            raise ValidationError(f"NAV history limit reached ({MAX_NAV_HISTORY})")
        bisect.insort_right(self._records, record, key=lambda r: r.date)
        logger.debug(f"NAV recorded: {record.iso_date} = {record.value}")

    def latest(self) -> NAVRecord:
        """Record with the greatest date.

        Raises:
            EmptyHistoryError: If no record has been added
        """
        if not self._records:
            raise EmptyHistoryError()
        return self._records[-1]

    def first(self) -> NAVRecord:
        """Record with the smallest date.

        Raises:
            EmptyHistoryError: If no record has been added
        """
        if not self._records:
            raise EmptyHistoryError()
        return self._records[0]

    @property
    def records(self) -> tuple[NAVRecord, ...]:
        """Immutable snapshot of the ordered records."""
        return tuple(self._records)

    def to_frame(self) -> pd.DataFrame:
        """History as a DataFrame indexed by date with a ``value`` column."""
        return pd.DataFrame(
            {"value": [r.value for r in self._records]},
            index=pd.DatetimeIndex([pd.Timestamp(r.date) for r in self._records], name="date"),
        )

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[NAVRecord]:
        return iter(self._records)
