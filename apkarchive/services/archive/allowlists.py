"""Attributes and elements that survive into an archived manifest.

Anything not listed here is dropped from the archived manifest.
"""

from __future__ import annotations

from ...models.manifest import (
    BANNER_RESOURCE_ID,
    DATA_EXTRACTION_RULES_RESOURCE_ID,
    DESCRIPTION_RESOURCE_ID,
    FULL_BACKUP_CONTENT_RESOURCE_ID,
    FULL_BACKUP_ONLY_RESOURCE_ID,
    HAS_FRAGILE_USER_DATA_RESOURCE_ID,
    ICON_RESOURCE_ID,
    IS_GAME_RESOURCE_ID,
    LABEL_RESOURCE_ID,
    LARGE_HEAP_RESOURCE_ID,
    PERMISSION_ELEMENT_NAME,
    PERMISSION_GROUP_ELEMENT_NAME,
    PERMISSION_TREE_ELEMENT_NAME,
    REQUIRED_ACCOUNT_TYPE_RESOURCE_ID,
    RESTRICTED_ACCOUNT_TYPE_RESOURCE_ID,
    SHARED_USER_ID_RESOURCE_ID,
    SHARED_USER_LABEL_RESOURCE_ID,
    TARGET_SANDBOX_VERSION_RESOURCE_ID,
    USES_SDK_ELEMENT_NAME,
    VERSION_CODE_RESOURCE_ID,
    VERSION_NAME_RESOURCE_ID,
)

# Resource IDs
MANIFEST_ATTRIBUTES_TO_KEEP: tuple[int, ...] = (
    VERSION_CODE_RESOURCE_ID,
    VERSION_NAME_RESOURCE_ID,
    SHARED_USER_ID_RESOURCE_ID,
    SHARED_USER_LABEL_RESOURCE_ID,
    TARGET_SANDBOX_VERSION_RESOURCE_ID,
)

# Resource IDs
APPLICATION_ATTRIBUTES_TO_KEEP: tuple[int, ...] = (
    DESCRIPTION_RESOURCE_ID,
    HAS_FRAGILE_USER_DATA_RESOURCE_ID,
    IS_GAME_RESOURCE_ID,
    ICON_RESOURCE_ID,
    BANNER_RESOURCE_ID,
    LABEL_RESOURCE_ID,
    FULL_BACKUP_ONLY_RESOURCE_ID,
    FULL_BACKUP_CONTENT_RESOURCE_ID,
    DATA_EXTRACTION_RULES_RESOURCE_ID,
    RESTRICTED_ACCOUNT_TYPE_RESOURCE_ID,
    REQUIRED_ACCOUNT_TYPE_RESOURCE_ID,
    LARGE_HEAP_RESOURCE_ID,
)

# Element names
CHILDREN_ELEMENTS_TO_KEEP: tuple[str, ...] = (
    USES_SDK_ELEMENT_NAME,
    PERMISSION_ELEMENT_NAME,
    PERMISSION_GROUP_ELEMENT_NAME,
    PERMISSION_TREE_ELEMENT_NAME,
)
