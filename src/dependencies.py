from fastapi import Depends

from src.config.settings import Settings, get_settings
from src.services import BatchRenamer, DirectoryLister, RenameCoordinator


def get_directory_lister() -> DirectoryLister:
    return DirectoryLister()


def get_batch_renamer(settings: Settings = Depends(get_settings)) -> BatchRenamer:
    return BatchRenamer(
        reject_duplicate_targets=settings.REJECT_DUPLICATE_TARGETS,
        trace=settings.TRACE_RENAMES,
    )


# The coordinator depends on the component getters above
def get_rename_coordinator(
    lister: DirectoryLister = Depends(get_directory_lister),
    renamer: BatchRenamer = Depends(get_batch_renamer),
) -> RenameCoordinator:
    return RenameCoordinator(lister=lister, renamer=renamer)
