"""Error types raised by the directory lister and the batch renamer."""

from enum import Enum


class ErrorKind(str, Enum):
    """Enum for the closed set of failure kinds."""

    IO = "io"
    VALIDATION = "validation"
    MISSING_PROPOSAL = "missing_proposal"


class RenamerError(Exception):
    """Base error. ``str(error)`` is the message shown to the user."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FileSystemError(RenamerError):
    """An OS-level failure while listing or renaming."""

    kind = ErrorKind.IO


class NameValidationError(RenamerError):
    """A proposed new name is unusable (empty, whitespace-only, not a bare name)."""

    kind = ErrorKind.VALIDATION


class DuplicateTargetError(NameValidationError):
    """Two requests in one batch resolve to the same destination."""


class MissingProposalError(RenamerError):
    """An entry reached the rename stage without a proposed name."""

    kind = ErrorKind.MISSING_PROPOSAL
