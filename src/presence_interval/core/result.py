"""Result of a creation or transition request.

Every operation that can be rejected returns a Result instead of raising,
so callers branch on the outcome explicitly.

Licensed under MIT License
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from .errors import ErrorCode, PresenceIntervalError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or the error that prevented it (Immutable).

    Attributes:
        value: The produced value (None on failure).
        error: The rejection (None on success).
    """

    value: T | None = None
    error: PresenceIntervalError | None = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, error: PresenceIntervalError) -> "Result[T]":
        return cls(error=error)

    @classmethod
    def failure(cls, code: ErrorCode) -> "Result[T]":
        """Create a failed result for an error code."""
        return cls(error=PresenceIntervalError.from_code(code))

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def code(self) -> ErrorCode | None:
        """Error code of a failed result (None on success)."""
        return self.error.code if self.error is not None else None

    def __bool__(self) -> bool:
        return self.is_ok

    def unwrap(self) -> T:
        """Return the value or raise the carried error.

        Raises:
            PresenceIntervalError: If the result is a failure.
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def then(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        """Chain another operation on success; failures pass through."""
        if self.error is not None:
            return Result(error=self.error)
        return fn(self.value)  # type: ignore[arg-type]
