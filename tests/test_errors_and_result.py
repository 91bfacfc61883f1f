"""Tests for the error taxonomy and the Result type."""

import pytest
from datetime import datetime, UTC

from presence_interval import (
    SENTINEL,
    ErrorCode,
    OccupancyStatus,
    PresenceInterval,
    PresenceIntervalError,
    Result,
)
from presence_interval.core.errors import MESSAGES


class TestErrorTaxonomy:
    """The nine error codes."""

    def test_closed_set(self):
        """Exactly nine codes exist."""
        assert {code.name for code in ErrorCode} == {
            "NON_UTC_DATETIME",
            "INVALID_NONE_STATE",
            "FUTURE_CHECK_IN_TOO_FAR",
            "PAST_CHECK_IN_NOT_ALLOWED",
            "CHECK_IN_REQUIRED_BEFORE_CHECK_OUT",
            "INVALID_DATE_RANGE",
            "INVALID_STATUS_TRANSITION",
            "STALE_CHECK_IN",
            "INVALID_STATUS",
        }

    def test_identifiers_are_stable_strings(self):
        assert ErrorCode.STALE_CHECK_IN.value == "stale_check_in"
        assert ErrorCode("non_utc_datetime") is ErrorCode.NON_UTC_DATETIME

    @pytest.mark.parametrize("code", list(ErrorCode))
    def test_every_code_has_a_message(self, code):
        """from_code() attaches the fixed message."""
        error = PresenceIntervalError.from_code(code)

        assert error.code is code
        assert error.message == MESSAGES[code]
        assert str(error) == MESSAGES[code]

    def test_errors_compare_by_code(self):
        first = PresenceIntervalError.from_code(ErrorCode.INVALID_DATE_RANGE)
        second = PresenceIntervalError.from_code(ErrorCode.INVALID_DATE_RANGE)

        assert first == second
        assert first != PresenceIntervalError.from_code(ErrorCode.STALE_CHECK_IN)

    def test_is_an_exception(self):
        with pytest.raises(PresenceIntervalError, match="UTC"):
            raise PresenceIntervalError.from_code(ErrorCode.NON_UTC_DATETIME)

    def test_repr_names_the_code(self):
        error = PresenceIntervalError.from_code(ErrorCode.INVALID_STATUS)

        assert "INVALID_STATUS" in repr(error)


class TestResult:
    """Result carries either a value or an error."""

    def test_ok(self):
        result = Result.ok(42)

        assert result
        assert result.is_ok
        assert result.value == 42
        assert result.error is None
        assert result.code is None
        assert result.unwrap() == 42

    def test_failure(self):
        result = Result.failure(ErrorCode.INVALID_DATE_RANGE)

        assert not result
        assert not result.is_ok
        assert result.value is None
        assert result.code == ErrorCode.INVALID_DATE_RANGE

    def test_fail_with_error(self):
        error = PresenceIntervalError.from_code(ErrorCode.STALE_CHECK_IN)

        assert Result.fail(error).error is error

    def test_unwrap_raises_carried_error(self):
        result = Result.failure(ErrorCode.STALE_CHECK_IN)

        with pytest.raises(PresenceIntervalError) as exc_info:
            result.unwrap()

        assert exc_info.value.code == ErrorCode.STALE_CHECK_IN

    def test_then_chains_success(self):
        assert Result.ok(2).then(lambda v: Result.ok(v * 3)).unwrap() == 6

    def test_then_passes_failure_through(self):
        result = Result.failure(ErrorCode.INVALID_STATUS).then(lambda v: Result.ok(v))

        assert result.code == ErrorCode.INVALID_STATUS

    def test_rejection_never_raises(self):
        """Rule violations come back as values."""
        naive = datetime(2025, 1, 15, 12, 0, 0)

        result = PresenceInterval.create(naive, SENTINEL, OccupancyStatus.OCCUPIED)

        assert isinstance(result, Result)
        assert result.code == ErrorCode.NON_UTC_DATETIME

    def test_results_are_frozen(self):
        result = Result.ok(datetime.now(UTC))

        with pytest.raises(AttributeError):
            result.value = None
