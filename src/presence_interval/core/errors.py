"""
Error taxonomy for presence intervals.

Every rule violation maps to exactly one ErrorCode. Errors are terminal:
the requested creation or transition is rejected and no interval exists.
"""

from enum import Enum


class ErrorCode(Enum):
    """Stable identifiers for rule violations."""

    NON_UTC_DATETIME = "non_utc_datetime"
    INVALID_NONE_STATE = "invalid_none_state"
    FUTURE_CHECK_IN_TOO_FAR = "future_check_in_too_far"
    PAST_CHECK_IN_NOT_ALLOWED = "past_check_in_not_allowed"
    CHECK_IN_REQUIRED_BEFORE_CHECK_OUT = "check_in_required_before_check_out"
    INVALID_DATE_RANGE = "invalid_date_range"
    INVALID_STATUS_TRANSITION = "invalid_status_transition"
    STALE_CHECK_IN = "stale_check_in"
    INVALID_STATUS = "invalid_status"


MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.NON_UTC_DATETIME: "All timestamps must be in UTC",
    ErrorCode.INVALID_NONE_STATE: (
        "Unoccupied status requires unset (minimum) entry and exit timestamps"
    ),
    ErrorCode.FUTURE_CHECK_IN_TOO_FAR: "Entry time cannot be more than 1 year in the future",
    ErrorCode.PAST_CHECK_IN_NOT_ALLOWED: (
        "Entry time cannot be more than 5 seconds in the past for new intervals"
    ),
    ErrorCode.CHECK_IN_REQUIRED_BEFORE_CHECK_OUT: "An entry must be recorded before an exit",
    ErrorCode.INVALID_DATE_RANGE: "Exit time must be after entry time",
    ErrorCode.INVALID_STATUS_TRANSITION: "Invalid status transition attempted",
    ErrorCode.STALE_CHECK_IN: "Entry timestamp is too old to record an exit",
    ErrorCode.INVALID_STATUS: "Invalid occupancy status provided",
}


class PresenceIntervalError(Exception):
    """
    A rejected interval creation or transition.

    Attributes:
        code: Machine-checkable identifier
        message: Fixed human-readable description for the code
    """

    def __init__(self, code: ErrorCode, message: str | None = None):
        self.code = code
        self.message = message or MESSAGES[code]
        super().__init__(self.message)

    @classmethod
    def from_code(cls, code: ErrorCode) -> "PresenceIntervalError":
        """Build the error for a code with its standard message."""
        return cls(code)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PresenceIntervalError):
            return NotImplemented
        return self.code == other.code and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.code, self.message))

    def __repr__(self) -> str:
        return f"PresenceIntervalError({self.code.name}: {self.message})"
