"""Schemas for the application."""

from .rename import ReadDirectoryRequest, RenameFilesRequest, RenameFilesResult

__all__ = ["ReadDirectoryRequest", "RenameFilesRequest", "RenameFilesResult"]
