"""
Core components of presence-interval.

This package contains:
- models: OccupancyStatus, IntervalPolicy and the SENTINEL instant
- clock: UTC clock helpers
- errors: Error taxonomy
- result: Result type returned by every validated operation
- interval: PresenceInterval value and its transition table
"""

from presence_interval.core.models import (
    DEFAULT_POLICY,
    SENTINEL,
    IntervalPolicy,
    OccupancyStatus,
)
from presence_interval.core.clock import add_years, is_utc, utc_now
from presence_interval.core.errors import ErrorCode, PresenceIntervalError
from presence_interval.core.result import Result
from presence_interval.core.interval import TRANSITIONS, PresenceInterval

__all__ = [
    "DEFAULT_POLICY",
    "SENTINEL",
    "IntervalPolicy",
    "OccupancyStatus",
    "add_years",
    "is_utc",
    "utc_now",
    "ErrorCode",
    "PresenceIntervalError",
    "Result",
    "TRANSITIONS",
    "PresenceInterval",
]
