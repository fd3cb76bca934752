"""Exception types raised while generating or committing template files."""

from __future__ import annotations

from enum import Enum
from typing import Sequence


class ErrorKind(str, Enum):
    """Coarse classification of a failure."""

    DIRECTORY_EXISTS = "directory_exists"
    PERMISSION_DENIED = "permission_denied"
    IO_FAILURE = "io_failure"
    SUBPROCESS_FAILURE = "subprocess_failure"


def kind_for(exc: BaseException) -> ErrorKind:
    """Map an underlying exception onto an :class:`ErrorKind`."""

    if isinstance(exc, FileExistsError):
        return ErrorKind.DIRECTORY_EXISTS
    if isinstance(exc, PermissionError):
        return ErrorKind.PERMISSION_DENIED
    return ErrorKind.IO_FAILURE


class GotemplateError(RuntimeError):
    """Base class for every error surfaced by gotemplate."""

    def __init__(self, message: str, *, kind: ErrorKind = ErrorKind.IO_FAILURE) -> None:
        super().__init__(message)
        self.kind = kind


class BundleError(GotemplateError):
    """Raised for an invalid bundle path or a lookup of an unknown entry."""


class MaterializeError(GotemplateError):
    """Raised when a step of project generation fails.

    ``phase`` names the step that failed, for example
    ``"creating project directory"``. The original exception is chained as
    ``__cause__``.
    """

    def __init__(self, phase: str, cause: BaseException) -> None:
        super().__init__(f"{phase}: {cause}", kind=kind_for(cause))
        self.phase = phase


class CommitError(GotemplateError):
    """Raised when a version-control command fails."""

    def __init__(
        self,
        message: str,
        *,
        command: Sequence[str] = (),
        returncode: int | None = None,
        kind: ErrorKind = ErrorKind.SUBPROCESS_FAILURE,
    ) -> None:
        super().__init__(message, kind=kind)
        self.command = tuple(command)
        self.returncode = returncode


__all__ = [
    "BundleError",
    "CommitError",
    "ErrorKind",
    "GotemplateError",
    "MaterializeError",
    "kind_for",
]
