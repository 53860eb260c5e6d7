"""
Result channel returned by every fallible operation.

Failures travel upward as ``Err`` values. Only the HTTP boundary unwraps
them, where the framework dispatches on raised exceptions.
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from repobadge.domain.errors import Error

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome holding exactly one Error."""

    error: Error

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the wrapped error for the framework's error handlers."""
        raise self.error


Result = Union[Ok[T], Err]
