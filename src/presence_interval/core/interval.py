"""The presence interval value.

A PresenceInterval records one entry/exit cycle. Instances are frozen and
validated when built, so every interval that exists satisfies the rules:

- both timestamps are UTC-tagged
- UNOCCUPIED ⇔ both timestamps are the SENTINEL
- OCCUPIED ⇒ real entry, unset exit
- COMPLETED ⇒ real entry, exit strictly after entry

Rules that depend on the current instant (grace window, one-year horizon,
stale entry) are applied by create(), which returns a Result instead of
raising. "Updating" an interval always yields a new one.

Licensed under MIT License
"""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Optional

from .clock import add_years, is_utc, utc_now
from .errors import ErrorCode, PresenceIntervalError
from .models import DEFAULT_POLICY, SENTINEL, IntervalPolicy, OccupancyStatus
from .result import Result

_LOGGER = logging.getLogger(__name__)

_EMPTY: Optional["PresenceInterval"] = None
_EMPTY_LOCK = threading.Lock()


@dataclass(frozen=True)
class PresenceInterval:
    """One presence interval (Immutable).

    Attributes:
        entered_at: Entry instant (SENTINEL while unoccupied).
        exited_at: Exit instant (SENTINEL unless completed).
        status: Lifecycle stage.
    """

    entered_at: datetime
    exited_at: datetime
    status: OccupancyStatus

    def __post_init__(self) -> None:
        """Enforce the structural rules on every instance.

        Raises:
            PresenceIntervalError: If the fields describe an impossible interval.
        """
        code = _shape_error(self.entered_at, self.exited_at, self.status)
        if code is not None:
            raise PresenceIntervalError.from_code(code)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "PresenceInterval":
        """Get the canonical unoccupied interval.

        Built on first use and shared for the life of the process.
        """
        global _EMPTY
        if _EMPTY is None:
            with _EMPTY_LOCK:
                if _EMPTY is None:
                    _EMPTY = cls(SENTINEL, SENTINEL, OccupancyStatus.UNOCCUPIED)
                    _LOGGER.debug("Created canonical empty interval")
        return _EMPTY

    @classmethod
    def create(
        cls,
        entered_at: datetime,
        exited_at: datetime,
        status: OccupancyStatus,
        previous_status: OccupancyStatus | None = None,
        *,
        now: datetime | None = None,
        policy: IntervalPolicy | None = None,
    ) -> Result["PresenceInterval"]:
        """Validate the inputs and build an interval.

        Args:
            entered_at: Entry instant (UTC).
            exited_at: Exit instant (UTC).
            status: Requested status.
            previous_status: Status of the interval this one replaces. None
                means a fresh interval, which must enter within the grace
                window of now.
            now: Current instant (defaults to utc_now()).
            policy: Time rules (defaults to DEFAULT_POLICY).

        Returns:
            Result holding the new interval, or the first rule it broke.
        """
        if not (is_utc(entered_at) and is_utc(exited_at)):
            return _reject(ErrorCode.NON_UTC_DATETIME, status)
        if now is not None and not is_utc(now):
            return _reject(ErrorCode.NON_UTC_DATETIME, status)

        if now is None:
            now = utc_now()
        if policy is None:
            policy = DEFAULT_POLICY

        code: ErrorCode | None
        if status is OccupancyStatus.UNOCCUPIED:
            code = None  # sentinel rule enforced on construction
        elif status is OccupancyStatus.OCCUPIED:
            code = _entry_error(entered_at, previous_status, now, policy)
        elif status is OccupancyStatus.COMPLETED:
            code = _exit_error(entered_at, exited_at, previous_status, now, policy)
        else:
            code = ErrorCode.INVALID_STATUS

        if code is not None:
            return _reject(code, status)

        try:
            interval = cls(entered_at, exited_at, status)
        except PresenceIntervalError as err:
            return _reject(err.code, status)
        return Result.ok(interval)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def transition_to(
        self,
        new_status: OccupancyStatus,
        timestamp: datetime,
        *,
        now: datetime | None = None,
        policy: IntervalPolicy | None = None,
    ) -> Result["PresenceInterval"]:
        """Move to the next lifecycle stage.

        Args:
            new_status: Requested status.
            timestamp: Event instant (entry or exit, depending on the step).
            now: Current instant (defaults to utc_now()).
            policy: Time rules (defaults to DEFAULT_POLICY).

        Returns:
            Result holding the new interval, or INVALID_STATUS_TRANSITION when
            the pair is not in TRANSITIONS.
        """
        step = TRANSITIONS.get((self.status, new_status))
        if step is None:
            _LOGGER.debug(
                f"Rejected transition {_name(self.status)} -> {_name(new_status)}"
            )
            return Result.failure(ErrorCode.INVALID_STATUS_TRANSITION)

        entered_at, exited_at, previous_status = step(self, timestamp)
        result = PresenceInterval.create(
            entered_at, exited_at, new_status, previous_status, now=now, policy=policy
        )
        if result:
            _LOGGER.debug(f"Transition {self.status.name} -> {new_status.name}")
        return result

    def update(
        self,
        entered_at: datetime,
        exited_at: datetime,
        status: OccupancyStatus,
        *,
        now: datetime | None = None,
        policy: IntervalPolicy | None = None,
    ) -> Result["PresenceInterval"]:
        """Build a replacement interval, using this interval's status as the
        previous status. This interval is left unchanged."""
        return PresenceInterval.create(
            entered_at, exited_at, status, self.status, now=now, policy=policy
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def duration(self) -> timedelta:
        """Time between entry and exit (zero unless completed)."""
        if self.status is OccupancyStatus.COMPLETED:
            return self.exited_at - self.entered_at
        return timedelta(0)

    @property
    def is_empty(self) -> bool:
        """Check if this equals the canonical empty interval."""
        return self == PresenceInterval.empty()

    def is_active(self, now: datetime | None = None) -> bool:
        """Check if this interval is occupied and its entry has happened.

        Args:
            now: Current instant (defaults to utc_now()).
        """
        if now is None:
            now = utc_now()
        return (
            self.status is OccupancyStatus.OCCUPIED
            and SENTINEL < self.entered_at <= now
        )

    def to_dict(self) -> dict[str, Any]:
        """Summarize for display and logging (unset instants become None)."""
        return {
            "status": self.status.value,
            "entered_at": _iso(self.entered_at),
            "exited_at": _iso(self.exited_at),
            "duration_seconds": self.duration.total_seconds(),
        }

    def __str__(self) -> str:
        if self.status is OccupancyStatus.OCCUPIED:
            return f"Entered at {self.entered_at:%Y-%m-%d %H:%M:%SZ}"
        if self.status is OccupancyStatus.COMPLETED:
            return (
                f"Exited at {self.exited_at:%Y-%m-%d %H:%M:%SZ} "
                f"(duration {format_duration(self.duration)})"
            )
        return "No presence recorded"


# =============================================================================
# Transition table
# =============================================================================

# A step maps (current interval, event timestamp) to the arguments of
# create(): (entered_at, exited_at, previous_status).
TransitionStep = Callable[
    [PresenceInterval, datetime],
    tuple[datetime, datetime, Optional[OccupancyStatus]],
]


def _enter(current: PresenceInterval, timestamp: datetime):
    return timestamp, SENTINEL, None


def _exit(current: PresenceInterval, timestamp: datetime):
    return current.entered_at, timestamp, current.status


def _reset(current: PresenceInterval, timestamp: datetime):
    return SENTINEL, SENTINEL, None


TRANSITIONS: dict[tuple[OccupancyStatus, OccupancyStatus], TransitionStep] = {
    (OccupancyStatus.UNOCCUPIED, OccupancyStatus.OCCUPIED): _enter,
    (OccupancyStatus.OCCUPIED, OccupancyStatus.COMPLETED): _exit,
    (OccupancyStatus.COMPLETED, OccupancyStatus.UNOCCUPIED): _reset,
}


# =============================================================================
# Validation
# =============================================================================


def _shape_error(
    entered_at: Any, exited_at: Any, status: Any
) -> ErrorCode | None:
    """Check the rules that hold regardless of the current instant."""
    if not (is_utc(entered_at) and is_utc(exited_at)):
        return ErrorCode.NON_UTC_DATETIME

    if status is OccupancyStatus.UNOCCUPIED:
        if entered_at != SENTINEL or exited_at != SENTINEL:
            return ErrorCode.INVALID_NONE_STATE
        return None

    if status is OccupancyStatus.OCCUPIED:
        if entered_at == SENTINEL or exited_at != SENTINEL:
            return ErrorCode.INVALID_DATE_RANGE
        return None

    if status is OccupancyStatus.COMPLETED:
        if entered_at == SENTINEL or exited_at <= entered_at:
            return ErrorCode.INVALID_DATE_RANGE
        return None

    return ErrorCode.INVALID_STATUS


def _entry_error(
    entered_at: datetime,
    previous_status: OccupancyStatus | None,
    now: datetime,
    policy: IntervalPolicy,
) -> ErrorCode | None:
    if entered_at > add_years(now, policy.max_advance_years):
        return ErrorCode.FUTURE_CHECK_IN_TOO_FAR

    # Entries carried over from a known previous status were checked when
    # they were first recorded.
    if previous_status is None and entered_at < now - policy.grace_window:
        return ErrorCode.PAST_CHECK_IN_NOT_ALLOWED

    return None


def _exit_error(
    entered_at: datetime,
    exited_at: datetime,
    previous_status: OccupancyStatus | None,
    now: datetime,
    policy: IntervalPolicy,
) -> ErrorCode | None:
    if previous_status is not OccupancyStatus.OCCUPIED:
        return ErrorCode.CHECK_IN_REQUIRED_BEFORE_CHECK_OUT

    if exited_at <= entered_at:
        return ErrorCode.INVALID_DATE_RANGE

    if entered_at > now:
        return ErrorCode.INVALID_STATUS_TRANSITION

    # Bounds the age of the entry at exit time, not the age of the exit.
    if entered_at < now - policy.grace_window:
        return ErrorCode.STALE_CHECK_IN

    return None


# =============================================================================
# Helpers
# =============================================================================


def _reject(code: ErrorCode, status: Any) -> Result[PresenceInterval]:
    _LOGGER.debug(f"Rejected {_name(status)} interval: {code.name}")
    return Result.failure(code)


def _name(status: Any) -> str:
    return status.name if isinstance(status, OccupancyStatus) else repr(status)


def _iso(moment: datetime) -> str | None:
    return None if moment == SENTINEL else moment.isoformat()


def format_duration(duration: timedelta) -> str:
    """Format a duration as HH:MM (hours may exceed 24)."""
    minutes = int(duration.total_seconds()) // 60
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
