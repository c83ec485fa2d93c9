"""
AndroidManifest data model.

A read-only view over a parsed ``AndroidManifest.xml`` tree. Attributes in the
Android namespace are addressed by their framework resource ID, mirroring how
compiled manifests identify them, and resolved to attribute names through
``ATTRIBUTE_NAMES``.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterator

from ..core.exceptions import ManifestError

ANDROID_NAMESPACE_URI = "http://schemas.android.com/apk/res/android"

# Element names
MANIFEST_ELEMENT_NAME = "manifest"
APPLICATION_ELEMENT_NAME = "application"
ACTIVITY_ELEMENT_NAME = "activity"
ACTIVITY_ALIAS_ELEMENT_NAME = "activity-alias"
RECEIVER_ELEMENT_NAME = "receiver"
INTENT_FILTER_ELEMENT_NAME = "intent-filter"
ACTION_ELEMENT_NAME = "action"
CATEGORY_ELEMENT_NAME = "category"
META_DATA_ELEMENT_NAME = "meta-data"
USES_FEATURE_ELEMENT_NAME = "uses-feature"
USES_SDK_ELEMENT_NAME = "uses-sdk"
PERMISSION_ELEMENT_NAME = "permission"
PERMISSION_GROUP_ELEMENT_NAME = "permission-group"
PERMISSION_TREE_ELEMENT_NAME = "permission-tree"

# Intent and feature names
MAIN_ACTION_NAME = "android.intent.action.MAIN"
LAUNCHER_CATEGORY_NAME = "android.intent.category.LAUNCHER"
LEANBACK_LAUNCHER_CATEGORY_NAME = "android.intent.category.LEANBACK_LAUNCHER"
LEANBACK_FEATURE_NAME = "android.software.leanback"
TOUCHSCREEN_FEATURE_NAME = "android.hardware.touchscreen"

META_DATA_GMS_VERSION = "com.google.android.gms.version"

# Framework attribute resource IDs (android.R.attr)
THEME_RESOURCE_ID = 0x01010000
LABEL_RESOURCE_ID = 0x01010001
ICON_RESOURCE_ID = 0x01010002
NAME_RESOURCE_ID = 0x01010003
SHARED_USER_ID_RESOURCE_ID = 0x0101000B
EXPORTED_RESOURCE_ID = 0x01010010
STATE_NOT_NEEDED_RESOURCE_ID = 0x01010016
EXCLUDE_FROM_RECENTS_RESOURCE_ID = 0x01010017
DESCRIPTION_RESOURCE_ID = 0x01010020
VALUE_RESOURCE_ID = 0x01010024
VERSION_CODE_RESOURCE_ID = 0x0101021B
VERSION_NAME_RESOURCE_ID = 0x0101021C
SHARED_USER_LABEL_RESOURCE_ID = 0x01010261
BACKUP_AGENT_RESOURCE_ID = 0x0101027F
ALLOW_BACKUP_RESOURCE_ID = 0x01010280
REQUIRED_RESOURCE_ID = 0x0101028E
LARGE_HEAP_RESOURCE_ID = 0x0101035A
RESTRICTED_ACCOUNT_TYPE_RESOURCE_ID = 0x010103D5
REQUIRED_ACCOUNT_TYPE_RESOURCE_ID = 0x010103D6
BANNER_RESOURCE_ID = 0x010103F2
IS_GAME_RESOURCE_ID = 0x010103F4
FULL_BACKUP_ONLY_RESOURCE_ID = 0x01010473
FULL_BACKUP_CONTENT_RESOURCE_ID = 0x010104EB
TARGET_SANDBOX_VERSION_RESOURCE_ID = 0x0101054C
HAS_FRAGILE_USER_DATA_RESOURCE_ID = 0x0101059A
DATA_EXTRACTION_RULES_RESOURCE_ID = 0x0101063E

ATTRIBUTE_NAMES: dict[int, str] = {
    THEME_RESOURCE_ID: "theme",
    LABEL_RESOURCE_ID: "label",
    ICON_RESOURCE_ID: "icon",
    NAME_RESOURCE_ID: "name",
    SHARED_USER_ID_RESOURCE_ID: "sharedUserId",
    EXPORTED_RESOURCE_ID: "exported",
    STATE_NOT_NEEDED_RESOURCE_ID: "stateNotNeeded",
    EXCLUDE_FROM_RECENTS_RESOURCE_ID: "excludeFromRecents",
    DESCRIPTION_RESOURCE_ID: "description",
    VALUE_RESOURCE_ID: "value",
    VERSION_CODE_RESOURCE_ID: "versionCode",
    VERSION_NAME_RESOURCE_ID: "versionName",
    SHARED_USER_LABEL_RESOURCE_ID: "sharedUserLabel",
    BACKUP_AGENT_RESOURCE_ID: "backupAgent",
    ALLOW_BACKUP_RESOURCE_ID: "allowBackup",
    REQUIRED_RESOURCE_ID: "required",
    LARGE_HEAP_RESOURCE_ID: "largeHeap",
    RESTRICTED_ACCOUNT_TYPE_RESOURCE_ID: "restrictedAccountType",
    REQUIRED_ACCOUNT_TYPE_RESOURCE_ID: "requiredAccountType",
    BANNER_RESOURCE_ID: "banner",
    IS_GAME_RESOURCE_ID: "isGame",
    FULL_BACKUP_ONLY_RESOURCE_ID: "fullBackupOnly",
    FULL_BACKUP_CONTENT_RESOURCE_ID: "fullBackupContent",
    TARGET_SANDBOX_VERSION_RESOURCE_ID: "targetSandboxVersion",
    HAS_FRAGILE_USER_DATA_RESOURCE_ID: "hasFragileUserData",
    DATA_EXTRACTION_RULES_RESOURCE_ID: "dataExtractionRules",
}


def android_attr(name: str) -> str:
    """Return the ElementTree key of an attribute in the Android namespace."""
    return f"{{{ANDROID_NAMESPACE_URI}}}{name}"


def android_attr_for_id(resource_id: int) -> str:
    """Return the ElementTree key of the attribute with the given resource ID.

    Raises:
        ManifestError: If the resource ID is not a known framework attribute.
    """
    try:
        return android_attr(ATTRIBUTE_NAMES[resource_id])
    except KeyError:
        raise ManifestError(
            message=f"Unknown attribute resource ID 0x{resource_id:08x}",
            context={"resource_id": resource_id},
        ) from None


def parse_bool(value: str | None, element: str = "", attribute: str = "") -> bool | None:
    """Parse an XML boolean literal, returning None when the value is absent."""
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    raise ManifestError(
        message=f"Expected a boolean literal, got {value!r}",
        element=element,
        attribute=attribute,
    )


class AndroidManifest:
    """Read-only view of an ``AndroidManifest.xml`` element tree."""

    def __init__(self, root: ET.Element) -> None:
        if root.tag != MANIFEST_ELEMENT_NAME:
            raise ManifestError(
                message=f"Root element must be <{MANIFEST_ELEMENT_NAME}>, got <{root.tag}>",
                element=str(root.tag),
            )
        self._root = root

    @property
    def root(self) -> ET.Element:
        """The underlying ``<manifest>`` element."""
        return self._root

    @property
    def package_name(self) -> str | None:
        return self._root.get("package")

    @property
    def application(self) -> ET.Element | None:
        return self._root.find(APPLICATION_ELEMENT_NAME)

    def has_application_element(self) -> bool:
        return self.application is not None

    def get_manifest_attribute(self, resource_id: int) -> str | None:
        """Get a ``<manifest>`` attribute value by resource ID."""
        return self._root.get(android_attr_for_id(resource_id))

    def get_application_attribute(self, resource_id: int) -> str | None:
        """Get an ``<application>`` attribute value by resource ID."""
        application = self.application
        if application is None:
            return None
        return application.get(android_attr_for_id(resource_id))

    def get_children(self, element_name: str) -> list[ET.Element]:
        """Get all direct ``<manifest>`` children with the given name, in order."""
        return self._root.findall(element_name)

    def get_metadata_element(self, name: str) -> ET.Element | None:
        """Get the first application ``<meta-data>`` entry with the given name."""
        application = self.application
        if application is None:
            return None
        for meta_data in application.findall(META_DATA_ELEMENT_NAME):
            if meta_data.get(android_attr("name")) == name:
                return meta_data
        return None

    def get_allow_backup(self) -> bool | None:
        """Declared ``android:allowBackup`` value, or None when unset."""
        return parse_bool(
            self.get_application_attribute(ALLOW_BACKUP_RESOURCE_ID),
            element=APPLICATION_ELEMENT_NAME,
            attribute="allowBackup",
        )

    def get_full_backup_only(self) -> bool | None:
        """Declared ``android:fullBackupOnly`` value, or None when unset."""
        return parse_bool(
            self.get_application_attribute(FULL_BACKUP_ONLY_RESOURCE_ID),
            element=APPLICATION_ELEMENT_NAME,
            attribute="fullBackupOnly",
        )

    def has_backup_agent(self) -> bool:
        return self.get_application_attribute(BACKUP_AGENT_RESOURCE_ID) is not None

    def has_main_activity(self) -> bool:
        """Whether any activity handles MAIN with the LAUNCHER category."""
        return self._has_main_activity_with_category(LAUNCHER_CATEGORY_NAME)

    def has_main_tv_activity(self) -> bool:
        """Whether any activity handles MAIN with the LEANBACK_LAUNCHER category."""
        return self._has_main_activity_with_category(LEANBACK_LAUNCHER_CATEGORY_NAME)

    def _has_main_activity_with_category(self, category: str) -> bool:
        name_attr = android_attr("name")
        for intent_filter in self._activity_intent_filters():
            actions = {a.get(name_attr) for a in intent_filter.findall(ACTION_ELEMENT_NAME)}
            categories = {c.get(name_attr) for c in intent_filter.findall(CATEGORY_ELEMENT_NAME)}
            if MAIN_ACTION_NAME in actions and category in categories:
                return True
        return False

    def _activity_intent_filters(self) -> Iterator[ET.Element]:
        application = self.application
        if application is None:
            return
        for activity in application:
            if activity.tag in (ACTIVITY_ELEMENT_NAME, ACTIVITY_ALIAS_ELEMENT_NAME):
                yield from activity.findall(INTENT_FILTER_ELEMENT_NAME)

    def __repr__(self) -> str:
        return f"AndroidManifest(package={self.package_name!r})"
