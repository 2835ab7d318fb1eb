"""Services for the application."""

from .batch_renamer import BatchRenamer
from .directory_lister import DirectoryLister
from .rename_coordinator import RenameCoordinator

__all__ = ["BatchRenamer", "DirectoryLister", "RenameCoordinator"]
