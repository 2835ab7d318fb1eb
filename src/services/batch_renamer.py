"""Applies an ordered batch of renames, stopping on the first failure."""

import os
from pathlib import Path
from typing import Dict, Optional, Sequence

from src.models import (
    DuplicateTargetError,
    FileSystemError,
    NameValidationError,
    RenameFileEntry,
)

_RESERVED_NAMES = {".", ".."}


def _is_bare_name(new_name: str) -> bool:
    """True if ``new_name`` names a file in the same directory, not a path."""
    separators = [os.sep] + ([os.altsep] if os.altsep else [])
    if any(sep in new_name for sep in separators):
        return False
    return new_name not in _RESERVED_NAMES


def destination_for(request: RenameFileEntry) -> Optional[Path]:
    """Destination path for a request, or None if it cannot be computed."""
    if not request.path.name:
        return None
    if not request.new_name.strip() or not _is_bare_name(request.new_name):
        return None
    return request.path.with_name(request.new_name)


class BatchRenamer:
    """
    Renames files in sequence.

    Each request is validated and applied before the next one is looked at.
    The first failure stops the batch; renames already performed are kept.
    """

    def __init__(self, reject_duplicate_targets: bool = True, trace: bool = True):
        self.reject_duplicate_targets = reject_duplicate_targets
        self.trace = trace

    def _log(self, message: str) -> None:
        if self.trace:
            print(message)

    def check_duplicate_targets(self, requests: Sequence[RenameFileEntry]) -> None:
        """Raise DuplicateTargetError if two requests share a destination."""
        seen: Dict[Path, RenameFileEntry] = {}
        for request in requests:
            destination = destination_for(request)
            if destination is None:
                # Reported at its turn in the batch
                continue
            previous = seen.get(destination)
            if previous is not None:
                raise DuplicateTargetError(
                    f"Files '{previous.name}' and '{request.name}' "
                    f"would both be renamed to '{request.new_name}'"
                )
            seen[destination] = request

    def rename_one(self, request: RenameFileEntry) -> Path:
        """Validate and apply a single rename. Returns the new path."""
        if not request.new_name.strip():
            raise NameValidationError(f"New name is empty for file: {request.name}")
        if not _is_bare_name(request.new_name):
            raise NameValidationError(
                f"New name '{request.new_name}' for file {request.name} "
                "must be a plain file name"
            )
        if not request.path.name:
            raise FileSystemError(
                f"Cannot rename '{request.path}': path has no file name"
            )

        new_path = request.path.with_name(request.new_name)
        self._log(f"Renaming '{request.path}' to '{new_path}'")

        try:
            request.path.rename(new_path)
        except (OSError, ValueError) as e:  # ValueError: embedded null byte
            raise FileSystemError(
                f"Failed to rename '{request.name}' to '{request.new_name}': {e}"
            ) from e

        self._log(f"Successfully renamed '{request.name}' to '{request.new_name}'")
        return new_path

    def rename_all(self, requests: Sequence[RenameFileEntry]) -> int:
        """
        Apply every request in order.

        Args:
            requests: Confirmed rename requests; order is significant.

        Returns:
            Number of files renamed (always ``len(requests)`` on return).

        Raises:
            DuplicateTargetError: Two requests resolve to the same destination.
                Raised before anything is renamed.
            NameValidationError: A new name is empty or not a plain file name.
            FileSystemError: The OS refused a rename.
        """
        self._log(f"rename_files called with {len(requests)} files")

        if self.reject_duplicate_targets:
            self.check_duplicate_targets(requests)

        for index, request in enumerate(requests):
            self._log(
                f"Processing file {index}: name='{request.name}', "
                f"new_name='{request.new_name}'"
            )
            try:
                self.rename_one(request)
            except (NameValidationError, FileSystemError) as e:
                self._log(f"Error: {e}")
                raise

        self._log("All files renamed successfully")
        return len(requests)
