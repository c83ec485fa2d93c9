"""
Manifest editor.

Accumulates changes on a manifest element tree. An editor is created per
transformation and is not shared; ``save`` hands back an independent copy.
Anything copied from a source manifest is deep-copied so the result never
aliases the source tree.
"""

from __future__ import annotations

import copy
import xml.etree.ElementTree as ET

from ..models.components import Activity, IntentFilter, Receiver
from ..models.manifest import (
    ACTION_ELEMENT_NAME,
    ACTIVITY_ELEMENT_NAME,
    ALLOW_BACKUP_RESOURCE_ID,
    APPLICATION_ELEMENT_NAME,
    CATEGORY_ELEMENT_NAME,
    EXCLUDE_FROM_RECENTS_RESOURCE_ID,
    EXPORTED_RESOURCE_ID,
    INTENT_FILTER_ELEMENT_NAME,
    META_DATA_ELEMENT_NAME,
    NAME_RESOURCE_ID,
    RECEIVER_ELEMENT_NAME,
    REQUIRED_RESOURCE_ID,
    STATE_NOT_NEEDED_RESOURCE_ID,
    THEME_RESOURCE_ID,
    USES_FEATURE_ELEMENT_NAME,
    VALUE_RESOURCE_ID,
    AndroidManifest,
    android_attr_for_id,
)


def _bool_literal(value: bool) -> str:
    return "true" if value else "false"


class ManifestEditor:
    """Mutable builder over a ``<manifest>`` element."""

    def __init__(self, root: ET.Element) -> None:
        self._root = root

    def set_package(self, package_name: str | None) -> ManifestEditor:
        if package_name is not None:
            self._root.set("package", package_name)
        return self

    def add_meta_data_boolean(self, key: str, value: bool) -> ManifestEditor:
        meta_data = ET.SubElement(self._application(), META_DATA_ELEMENT_NAME)
        meta_data.set(android_attr_for_id(NAME_RESOURCE_ID), key)
        meta_data.set(android_attr_for_id(VALUE_RESOURCE_ID), _bool_literal(value))
        return self

    def copy_manifest_element_android_attribute(
        self, source: AndroidManifest, resource_id: int
    ) -> ManifestEditor:
        """Copy a ``<manifest>`` attribute verbatim if the source declares it."""
        value = source.get_manifest_attribute(resource_id)
        if value is not None:
            self._root.set(android_attr_for_id(resource_id), value)
        return self

    def copy_application_element_android_attribute(
        self, source: AndroidManifest, resource_id: int
    ) -> ManifestEditor:
        """Copy an ``<application>`` attribute verbatim if the source declares it."""
        value = source.get_application_attribute(resource_id)
        if value is not None:
            self._application().set(android_attr_for_id(resource_id), value)
        return self

    def set_allow_backup(self, allow_backup: bool) -> ManifestEditor:
        self._application().set(
            android_attr_for_id(ALLOW_BACKUP_RESOURCE_ID), _bool_literal(allow_backup)
        )
        return self

    def add_application_child_element(self, element: ET.Element) -> ManifestEditor:
        self._application().append(copy.deepcopy(element))
        return self

    def copy_children_elements(self, source: AndroidManifest, element_name: str) -> ManifestEditor:
        """Copy every ``<manifest>`` child named ``element_name``, keeping order."""
        for child in source.get_children(element_name):
            self._root.append(copy.deepcopy(child))
        return self

    def add_activity(self, activity: Activity) -> ManifestEditor:
        element = ET.SubElement(self._application(), ACTIVITY_ELEMENT_NAME)
        element.set(android_attr_for_id(NAME_RESOURCE_ID), activity.name)
        if activity.theme is not None:
            element.set(android_attr_for_id(THEME_RESOURCE_ID), activity.theme)
        self._set_optional_bool(element, EXPORTED_RESOURCE_ID, activity.exported)
        self._set_optional_bool(
            element, EXCLUDE_FROM_RECENTS_RESOURCE_ID, activity.exclude_from_recents
        )
        self._set_optional_bool(element, STATE_NOT_NEEDED_RESOURCE_ID, activity.state_not_needed)
        if activity.intent_filter is not None:
            self._append_intent_filter(element, activity.intent_filter)
        return self

    def add_receiver(self, receiver: Receiver) -> ManifestEditor:
        element = ET.SubElement(self._application(), RECEIVER_ELEMENT_NAME)
        element.set(android_attr_for_id(NAME_RESOURCE_ID), receiver.name)
        self._set_optional_bool(element, EXPORTED_RESOURCE_ID, receiver.exported)
        if receiver.intent_filter is not None:
            self._append_intent_filter(element, receiver.intent_filter)
        return self

    def add_uses_feature_element(self, feature_name: str, is_required: bool) -> ManifestEditor:
        element = ET.SubElement(self._root, USES_FEATURE_ELEMENT_NAME)
        element.set(android_attr_for_id(NAME_RESOURCE_ID), feature_name)
        element.set(android_attr_for_id(REQUIRED_RESOURCE_ID), _bool_literal(is_required))
        return self

    def save(self) -> AndroidManifest:
        """Materialize the edits as a new, independent manifest."""
        return AndroidManifest(copy.deepcopy(self._root))

    def _application(self) -> ET.Element:
        application = self._root.find(APPLICATION_ELEMENT_NAME)
        if application is None:
            application = ET.SubElement(self._root, APPLICATION_ELEMENT_NAME)
        return application

    @staticmethod
    def _set_optional_bool(element: ET.Element, resource_id: int, value: bool | None) -> None:
        if value is not None:
            element.set(android_attr_for_id(resource_id), _bool_literal(value))

    @staticmethod
    def _append_intent_filter(parent: ET.Element, intent_filter: IntentFilter) -> None:
        filter_element = ET.SubElement(parent, INTENT_FILTER_ELEMENT_NAME)
        name_attr = android_attr_for_id(NAME_RESOURCE_ID)
        for action in intent_filter.actions:
            ET.SubElement(filter_element, ACTION_ELEMENT_NAME).set(name_attr, action)
        for category in intent_filter.categories:
            ET.SubElement(filter_element, CATEGORY_ELEMENT_NAME).set(name_attr, category)
