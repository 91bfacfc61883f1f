"""
presence-interval: An immutable, self-validating presence interval.

This library models a single entry/exit cycle:
- Occupancy lifecycle (unoccupied → occupied → completed → unoccupied)
- Validation on construction (invalid intervals cannot exist)
- Rule violations returned as values with stable error codes
- Injectable current instant and time policy
"""

from presence_interval.core.models import (
    DEFAULT_POLICY,
    SENTINEL,
    IntervalPolicy,
    OccupancyStatus,
)
from presence_interval.core.errors import ErrorCode, PresenceIntervalError
from presence_interval.core.result import Result
from presence_interval.core.interval import PresenceInterval

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_POLICY",
    "SENTINEL",
    "IntervalPolicy",
    "OccupancyStatus",
    "ErrorCode",
    "PresenceIntervalError",
    "Result",
    "PresenceInterval",
]
