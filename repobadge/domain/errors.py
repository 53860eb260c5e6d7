"""
Error taxonomy for the service.

Every failure a request can end with is exactly one of the variants below.
Wrapping variants keep the upstream exception untouched on ``source``.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from enum import Enum
from typing import ClassVar, final

BRANCH_NOT_FOUND_MESSAGE = "Repo doesn't have master branch"


class ErrorKind(Enum):
    """Closed set of failure variants."""

    BADGE = "Badge"
    CLIENT = "Client"
    GIT = "Git"
    INTERNAL = "Internal"
    IO = "Io"
    PARSE = "Parse"
    SERIAL = "Serial"
    BRANCH_NOT_FOUND = "BranchNotFound"


class Error(Exception):
    """Base error for all service failures.

    ``str(error)`` is the diagnostic form ``<Kind>(<detail>)``. It is meant
    for server-side logs only and never becomes a response body.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, *args: object) -> None:
        if not isinstance(getattr(type(self), "kind", None), ErrorKind):
            raise TypeError(
                f"{type(self).__name__} is not a concrete error variant"
            )
        super().__init__(*args)

    @property
    def detail(self) -> str:
        """Variant-specific text placed between the parentheses."""
        return ""

    def __str__(self) -> str:
        return f"{self.kind.value}({self.detail})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class WrappedError(Error):
    """Error carrying the upstream exception it was adapted from."""

    def __init__(self, source: BaseException) -> None:
        super().__init__(source)
        self.source = source
        self.__cause__ = source

    @property
    def detail(self) -> str:
        return str(self.source)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.source!r})"


@final
class BadgeError(Error):
    """Raised by badge logic when its own validation fails."""

    kind = ErrorKind.BADGE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def detail(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"BadgeError({self.message!r})"


@final
class ClientError(WrappedError):
    """Outbound HTTP call to a dependency failed."""

    kind = ErrorKind.CLIENT


@final
class GitError(WrappedError):
    """Opening, reading or walking a repository failed."""

    kind = ErrorKind.GIT


@final
class InternalError(Error):
    """Unspecified internal failure."""

    kind = ErrorKind.INTERNAL


@final
class IoError(WrappedError):
    """Local filesystem access failed."""

    kind = ErrorKind.IO


@final
class ParseError(WrappedError):
    """A numeric string could not be parsed."""

    kind = ErrorKind.PARSE


@final
class SerialError(WrappedError):
    """JSON encoding or decoding failed."""

    kind = ErrorKind.SERIAL


@final
class BranchNotFoundError(Error):
    """Raised when the queried repository has no primary branch."""

    kind = ErrorKind.BRANCH_NOT_FOUND

    @property
    def detail(self) -> str:
        return BRANCH_NOT_FOUND_MESSAGE
