"""Data models for presence intervals.

This module defines the status tag and the time policy shared by every
presence interval. Like the interval itself, the policy is frozen
(immutable) so it can be shared freely between threads.

Licensed under MIT License
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, UTC
from enum import Enum


# Minimum representable instant, tagged UTC. Means "not set".
SENTINEL = datetime.min.replace(tzinfo=UTC)


class OccupancyStatus(Enum):
    """Lifecycle stage of a presence interval.

    Legal progression is cyclic:
        UNOCCUPIED → OCCUPIED → COMPLETED → UNOCCUPIED
    """

    UNOCCUPIED = "unoccupied"  # No entry recorded
    OCCUPIED = "occupied"  # Entered, not yet exited
    COMPLETED = "completed"  # Entered and exited


@dataclass(frozen=True)
class IntervalPolicy:
    """Time rules applied when an interval is created.

    Attributes:
        grace_window: Tolerance between "now" and a fresh entry instant, and
            the maximum age of the entry when the exit is recorded.
        max_advance_years: How far ahead an entry may be scheduled, in
            calendar years.
    """

    grace_window: timedelta = timedelta(seconds=5)
    max_advance_years: int = 1

    def __post_init__(self) -> None:
        """Reject policies that cannot be applied."""
        if self.grace_window < timedelta(0):
            raise ValueError(f"grace_window must not be negative: {self.grace_window}")
        if self.max_advance_years < 0:
            raise ValueError(
                f"max_advance_years must not be negative: {self.max_advance_years}"
            )


DEFAULT_POLICY = IntervalPolicy()
