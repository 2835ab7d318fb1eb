from typing import List

from src.models.file_entry import CamelModel, FileEntry


class ReadDirectoryRequest(CamelModel):
    path: str  # Kept as given; DirectoryLister rejects empty and relative paths


class RenameFilesRequest(CamelModel):
    files: List[FileEntry]


class RenameFilesResult(CamelModel):
    status: str = "ok"
    renamed: int
