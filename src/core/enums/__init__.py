"""
Core enumerations for the valuation engine.

This module provides centralized enumerations for domain concepts
like the origin of a projection rate.
"""

from .rate_sources import RateSource

__all__ = ["RateSource"]
