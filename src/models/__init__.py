"""Models for the application."""

from .errors import (
    DuplicateTargetError,
    ErrorKind,
    FileSystemError,
    MissingProposalError,
    NameValidationError,
    RenamerError,
)
from .file_entry import FileEntry, RenameFileEntry

__all__ = [
    "DuplicateTargetError",
    "ErrorKind",
    "FileEntry",
    "FileSystemError",
    "MissingProposalError",
    "NameValidationError",
    "RenameFileEntry",
    "RenamerError",
]
