"""Unit tests for RenameCoordinator class."""

from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import Mock

import pytest

from src.models import FileEntry, MissingProposalError, RenameFileEntry
from src.services import BatchRenamer, DirectoryLister, RenameCoordinator

MODIFIED = datetime(2024, 5, 1, tzinfo=timezone.utc)


def make_entry(name: str, new_name=None) -> FileEntry:
    return FileEntry(
        name=name, path=Path("/data") / name, modified=MODIFIED, new_name=new_name
    )


class TestRenameCoordinator:
    """Test cases for RenameCoordinator class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.lister = Mock(spec=DirectoryLister)
        self.renamer = Mock(spec=BatchRenamer)
        self.coordinator = RenameCoordinator(lister=self.lister, renamer=self.renamer)

    def test_read_files_delegates_to_lister(self):
        """Test that listing is passed straight through."""
        entries = [make_entry("a.txt")]
        self.lister.list.return_value = entries

        result = self.coordinator.read_files_in_directory("/data")

        assert result == entries
        self.lister.list.assert_called_once_with("/data")

    def test_rename_files_confirms_then_renames(self):
        """Test that drafts are narrowed before reaching the renamer."""
        self.renamer.rename_all.return_value = 2

        renamed = self.coordinator.rename_files(
            [make_entry("a.txt", "x.txt"), make_entry("b.txt", "y.txt")]
        )

        assert renamed == 2
        [requests] = self.renamer.rename_all.call_args.args
        assert all(isinstance(r, RenameFileEntry) for r in requests)
        assert [r.new_name for r in requests] == ["x.txt", "y.txt"]

    def test_missing_proposal_stops_before_renaming(self):
        """Test that one missing proposal prevents the whole batch."""
        with pytest.raises(MissingProposalError, match="b.txt"):
            self.coordinator.rename_files(
                [make_entry("a.txt", "x.txt"), make_entry("b.txt")]
            )

        self.renamer.rename_all.assert_not_called()

    def test_end_to_end_on_disk(self, tmp_path):
        """Test listing and renaming a real directory."""
        (tmp_path / "a.txt").write_text("a")
        coordinator = RenameCoordinator(
            lister=DirectoryLister(), renamer=BatchRenamer(trace=False)
        )

        [entry] = coordinator.read_files_in_directory(tmp_path)
        entry.new_name = "b.txt"
        coordinator.rename_files([entry])

        assert [e.name for e in coordinator.read_files_in_directory(tmp_path)] == [
            "b.txt"
        ]
