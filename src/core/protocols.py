"""
Core type definitions and protocols.

This module defines shared types and protocols to prevent circular dependencies
between domain models while maintaining type safety.
"""

from datetime import date
from typing import Protocol


class INAVRecord(Protocol):
    """Protocol defining the interface for NAV record objects."""

    date: date
    value: float


class INAVHistory(Protocol):
    """Protocol defining the interface for an ordered NAV history.

    Calculators read histories through this protocol so that they do not
    depend on the concrete store.
    """

    def __len__(self) -> int: ...

    def first(self) -> INAVRecord:
        """Chronologically first record."""
        ...

    def latest(self) -> INAVRecord:
        """Chronologically last record."""
        ...


class IInvestment(Protocol):
    """Protocol defining what the projector reads from an investment."""

    @property
    def name(self) -> str: ...

    @property
    def reference_rate(self) -> float: ...

    @property
    def nav_history(self) -> INAVHistory: ...

