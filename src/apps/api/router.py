import asyncio
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from src.dependencies import get_rename_coordinator
from src.models import ErrorKind, FileEntry, RenamerError
from src.schemas import ReadDirectoryRequest, RenameFilesRequest, RenameFilesResult
from src.services import RenameCoordinator

router = APIRouter(prefix="/batch-rename", tags=["batch-rename"])

_STATUS_BY_KIND = {
    ErrorKind.IO: 500,
    ErrorKind.VALIDATION: 400,
    ErrorKind.MISSING_PROPOSAL: 400,
}


def to_http_exception(error: RenamerError) -> HTTPException:
    """Turn a core error into an HTTP error carrying its message."""
    return HTTPException(status_code=_STATUS_BY_KIND[error.kind], detail=str(error))


@router.get("/health")
async def batch_rename_health_check():
    """Simple health check for batch rename endpoints."""
    return {"status": "batch-rename endpoints available"}


@router.post("/read-files-in-directory", response_model=List[FileEntry])
async def read_files_in_directory(
    request: ReadDirectoryRequest,
    coordinator: RenameCoordinator = Depends(get_rename_coordinator),
):
    """List the regular files directly inside a directory."""
    try:
        return await asyncio.to_thread(
            coordinator.read_files_in_directory, request.path
        )
    except RenamerError as e:
        raise to_http_exception(e)


@router.post("/rename-files", response_model=RenameFilesResult)
async def rename_files(
    request: RenameFilesRequest,
    coordinator: RenameCoordinator = Depends(get_rename_coordinator),
):
    """Rename files in order, stopping at the first failure."""
    try:
        renamed = await asyncio.to_thread(coordinator.rename_files, request.files)
        return RenameFilesResult(renamed=renamed)
    except RenamerError as e:
        raise to_http_exception(e)
