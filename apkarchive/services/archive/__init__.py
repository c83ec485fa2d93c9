"""Archived manifest generation."""

from .allowlists import (
    APPLICATION_ATTRIBUTES_TO_KEEP,
    CHILDREN_ELEMENTS_TO_KEEP,
    MANIFEST_ATTRIBUTES_TO_KEEP,
)
from .service import (
    HOLO_LIGHT_NO_ACTION_BAR_THEME,
    META_DATA_KEY_ARCHIVED,
    MY_PACKAGE_REPLACED_ACTION_NAME,
    REACTIVATE_ACTIVITY_NAME,
    UPDATE_BROADCAST_RECEIVER_NAME,
    ArchiveService,
    ArchiveSummary,
    add_tv_support_if_required,
    create_archived_manifest,
    create_reactivate_activity,
    create_update_broadcast_receiver,
    resolve_archived_allow_backup,
)

__all__ = [
    "APPLICATION_ATTRIBUTES_TO_KEEP",
    "CHILDREN_ELEMENTS_TO_KEEP",
    "MANIFEST_ATTRIBUTES_TO_KEEP",
    "HOLO_LIGHT_NO_ACTION_BAR_THEME",
    "META_DATA_KEY_ARCHIVED",
    "MY_PACKAGE_REPLACED_ACTION_NAME",
    "REACTIVATE_ACTIVITY_NAME",
    "UPDATE_BROADCAST_RECEIVER_NAME",
    "ArchiveService",
    "ArchiveSummary",
    "add_tv_support_if_required",
    "create_archived_manifest",
    "create_reactivate_activity",
    "create_update_broadcast_receiver",
    "resolve_archived_allow_backup",
]
