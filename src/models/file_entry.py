"""File entry models shared by the lister, the renamer and the API."""

from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .errors import MissingProposalError


class CamelModel(BaseModel):
    """Base model using camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FileEntry(CamelModel):
    """A regular file discovered in a directory, with an optional proposed name."""

    name: str
    path: Path
    modified: datetime  # UTC, captured at listing time
    new_name: Optional[str] = None

    def confirm(self) -> "RenameFileEntry":
        """Narrow this draft to a rename request. Fails if no name was proposed."""
        if self.new_name is None:
            raise MissingProposalError(f"No new name proposed for file: {self.name}")
        return RenameFileEntry(
            name=self.name,
            path=self.path,
            modified=self.modified,
            new_name=self.new_name,
        )


class RenameFileEntry(CamelModel):
    """A confirmed rename instruction; the new name is required."""

    name: str
    path: Path
    new_name: str
    modified: Optional[datetime] = None
