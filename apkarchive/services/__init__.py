"""Services package for apkarchive."""

from .archive import ArchiveService, create_archived_manifest

__all__ = [
    "ArchiveService",
    "create_archived_manifest",
]
