"""
Automatic adapters from upstream failure types into the domain taxonomy.

Each upstream exception type is registered exactly once on ``into_error``.
Adapters wrap, they never discard the original exception.
"""

import functools
import json
from typing import Any, Callable, TypeVar

import git
import httpx
from pydantic import ValidationError

from repobadge.domain.errors import (
    BadgeError,
    ClientError,
    Error,
    GitError,
    IoError,
    ParseError,
    SerialError,
)
from repobadge.domain.result import Err, Ok, Result

T = TypeVar("T")


@functools.singledispatch
def into_error(value: Any) -> Error:
    """Adapt a failure produced by a collaborator into an Error.

    Raises:
        TypeError: If ``value`` has no registered adapter.
    """
    raise TypeError(f"No Error adapter registered for {type(value).__name__}")


@into_error.register
def _(value: Error) -> Error:
    return value


@into_error.register
def _(value: str) -> Error:
    return BadgeError(value)


@into_error.register(httpx.HTTPError)
@into_error.register(httpx.InvalidURL)
def _(value: Exception) -> Error:
    return ClientError(value)


@into_error.register
def _(value: git.exc.GitError) -> Error:
    return GitError(value)


@into_error.register
def _(value: OSError) -> Error:
    return IoError(value)


@into_error.register
def _(value: ValueError) -> Error:
    return ParseError(value)


@into_error.register(json.JSONDecodeError)
@into_error.register(UnicodeDecodeError)
@into_error.register(ValidationError)
def _(value: ValueError) -> Error:
    return SerialError(value)


def upstream_errors() -> tuple[type[BaseException], ...]:
    """Return every exception type ``into_error`` knows how to adapt."""
    return tuple(
        cls
        for cls in into_error.registry
        if isinstance(cls, type) and issubclass(cls, BaseException)
    )


def capture(func: Callable[..., T]) -> Callable[..., Result[T]]:
    """Run ``func`` and return its outcome on the Result channel.

    Registered upstream exceptions become ``Err``. Anything else is a bug
    in the caller and propagates unchanged.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Result[T]:
        try:
            return Ok(func(*args, **kwargs))
        except upstream_errors() as exc:
            return Err(into_error(exc))

    return wrapper
