"""Coordinates directory listing and batch renaming for the API layer."""

from pathlib import Path
from typing import List, Sequence, Union

from src.models import FileEntry, RenameFileEntry

from .batch_renamer import BatchRenamer
from .directory_lister import DirectoryLister


class RenameCoordinator:
    """Entry point for the two front-end operations."""

    def __init__(self, lister: DirectoryLister, renamer: BatchRenamer):
        self.lister = lister
        self.renamer = renamer

    def read_files_in_directory(self, path: Union[str, Path]) -> List[FileEntry]:
        """List the regular files in ``path`` with no proposed names set."""
        return self.lister.list(path)

    @staticmethod
    def confirm_entries(entries: Sequence[FileEntry]) -> List[RenameFileEntry]:
        """
        Narrow draft entries to rename requests.

        Fails with MissingProposalError on the first entry without a proposed
        name, before any file is touched.
        """
        return [entry.confirm() for entry in entries]

    def rename_files(self, entries: Sequence[FileEntry]) -> int:
        """Confirm ``entries`` and rename them in order. Returns the count renamed."""
        requests = self.confirm_entries(entries)
        return self.renamer.rename_all(requests)
