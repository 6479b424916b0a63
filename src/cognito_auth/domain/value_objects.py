from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .exceptions import AuthError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """
    Outcome of one auth operation: either a value or an AuthError.

    Operations without a meaningful response body succeed with `value=None`.
    Use `unwrap()` if you would rather have the error raised.
    """
    value: Optional[T] = None
    error: Optional[AuthError] = None

    def __post_init__(self) -> None:
        if self.error is not None and self.value is not None:
            raise ValueError("Result cannot hold both a value and an error")

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: AuthError) -> "Result[T]":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def unwrap(self) -> Optional[T]:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value


# Raw response body of a single request/response cycle.
Outcome = Result[str]
