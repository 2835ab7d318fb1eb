"""Lists the regular files directly inside a directory."""

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Union

from src.models import FileEntry, FileSystemError


class DirectoryLister:
    """Enumerates immediate children of a directory, keeping regular files only."""

    def list(self, directory: Union[str, Path]) -> List[FileEntry]:
        """
        Return one FileEntry per regular file in ``directory``.

        ``directory`` must be a non-empty absolute path. Subdirectories,
        symlinks and special files are skipped. The order is whatever the
        filesystem yields. Any OS failure aborts the whole listing with a
        FileSystemError; no partial result is returned.
        """
        if not str(directory) or not Path(directory).is_absolute():
            raise FileSystemError(f"Directory path must be absolute: '{directory}'")

        entries: List[FileEntry] = []
        try:
            with os.scandir(directory) as it:
                for entry in it:
                    if not entry.is_file(follow_symlinks=False):
                        continue
                    stat = entry.stat(follow_symlinks=False)
                    entries.append(
                        FileEntry(
                            name=entry.name,
                            path=Path(entry.path),
                            modified=datetime.fromtimestamp(
                                stat.st_mtime, tz=timezone.utc
                            ),
                        )
                    )
        except (OSError, ValueError) as e:  # ValueError: embedded null byte
            raise FileSystemError(str(e)) from e
        return entries
