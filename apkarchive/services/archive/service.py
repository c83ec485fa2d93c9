"""
Archive Service.

Builds the manifest of an archived app: a minimal copy of the original manifest
plus a reactivation activity and an update receiver, so that the archived app
can be relaunched (triggering a reinstall) and restore itself after an update.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from ...core.config import Config, get_config
from ...core.exceptions import HeadlessApplicationError, ValidationError
from ...core.logging import bind_context, clear_context, get_logger
from ...manifest.editor import ManifestEditor
from ...manifest.xml_io import create_minimal_manifest_element, load_manifest, write_manifest
from ...models.components import Activity, IntentFilter, Receiver
from ...models.manifest import (
    ATTRIBUTE_NAMES,
    LAUNCHER_CATEGORY_NAME,
    LEANBACK_FEATURE_NAME,
    LEANBACK_LAUNCHER_CATEGORY_NAME,
    MAIN_ACTION_NAME,
    META_DATA_GMS_VERSION,
    TOUCHSCREEN_FEATURE_NAME,
    AndroidManifest,
)
from .allowlists import (
    APPLICATION_ATTRIBUTES_TO_KEEP,
    CHILDREN_ELEMENTS_TO_KEEP,
    MANIFEST_ATTRIBUTES_TO_KEEP,
)

logger = get_logger(__name__)

META_DATA_KEY_ARCHIVED = "com.android.vending.archive"

REACTIVATE_ACTIVITY_NAME = "com.google.android.archive.ReactivateActivity"
HOLO_LIGHT_NO_ACTION_BAR_THEME = "@android:style/Theme.Holo.Light.NoActionBar"

UPDATE_BROADCAST_RECEIVER_NAME = "com.google.android.archive.UpdateBroadcastReceiver"
MY_PACKAGE_REPLACED_ACTION_NAME = "android.intent.action.MY_PACKAGE_REPLACED"


def create_archived_manifest(
    manifest: AndroidManifest | None, config: Config | None = None
) -> AndroidManifest:
    """Create the archived variant of ``manifest``.

    Args:
        manifest: Manifest of the full application.
        config: Optional configuration; defaults to ``get_config()``.

    Returns:
        A new manifest sharing no elements with ``manifest``.

    Raises:
        ValidationError: If ``manifest`` is None.
        HeadlessApplicationError: If the app has no launcher activity and
            ``reject_headless_apps`` is enabled.
    """
    if manifest is None:
        raise ValidationError(
            message="Source manifest is required",
            field_name="manifest",
            expected_type="AndroidManifest",
        )
    config = config or get_config()
    log = logger.bind(package=manifest.package_name)

    editor = (
        ManifestEditor(create_minimal_manifest_element())
        .set_package(manifest.package_name)
        .add_meta_data_boolean(META_DATA_KEY_ARCHIVED, True)
    )

    for resource_id in MANIFEST_ATTRIBUTES_TO_KEEP:
        editor.copy_manifest_element_android_attribute(manifest, resource_id)

    allow_backup = None
    if manifest.has_application_element():
        for resource_id in APPLICATION_ATTRIBUTES_TO_KEEP:
            editor.copy_application_element_android_attribute(manifest, resource_id)
        allow_backup = resolve_archived_allow_backup(manifest)
        if allow_backup is not None:
            editor.set_allow_backup(allow_backup)
    log.debug("Copied manifest attributes", allow_backup=allow_backup)

    # Play services version is kept outside the allow-lists
    gms_version = manifest.get_metadata_element(META_DATA_GMS_VERSION)
    if gms_version is not None:
        editor.add_application_child_element(gms_version)

    for element_name in CHILDREN_ELEMENTS_TO_KEEP:
        editor.copy_children_elements(manifest, element_name)

    activity = create_reactivate_activity(manifest, config)
    editor.add_activity(activity)
    editor.add_receiver(create_update_broadcast_receiver())
    tv_support = add_tv_support_if_required(editor, manifest)

    archived = editor.save()
    log.info(
        "Archived manifest created",
        categories=list(activity.intent_filter.categories) if activity.intent_filter else [],
        allow_backup=allow_backup,
        tv_support=tv_support,
    )
    return archived


def resolve_archived_allow_backup(manifest: AndroidManifest) -> bool | None:
    """Decide ``android:allowBackup`` for the archived manifest.

    Returns None when the flag should be left unset. Backup is disabled when a
    backup agent is declared and full-backup-only is not enabled, since the
    agent's code is not part of the archived app.
    """
    allow_backup = manifest.get_allow_backup()
    effective_allow_backup = True if allow_backup is None else allow_backup
    full_backup_only = manifest.get_full_backup_only() is True
    if effective_allow_backup and (not manifest.has_backup_agent() or full_backup_only):
        return allow_backup
    return False


def create_reactivate_activity(
    manifest: AndroidManifest, config: Config | None = None
) -> Activity:
    """Build the activity that reactivates (reinstalls) the archived app."""
    has_main_activity = manifest.has_main_activity()
    has_main_tv_activity = manifest.has_main_tv_activity()

    if not (has_main_activity or has_main_tv_activity):
        if config is not None and config.archive.reject_headless_apps:
            raise HeadlessApplicationError(
                message="Headless apps cannot be archived: no main or main TV activity",
                package_name=manifest.package_name or "",
            )
        logger.warning(
            "Manifest has no launcher activity, reactivation activity gets no category",
            package=manifest.package_name,
        )

    categories: list[str] = []
    if has_main_activity:
        categories.append(LAUNCHER_CATEGORY_NAME)
    if has_main_tv_activity:
        categories.append(LEANBACK_LAUNCHER_CATEGORY_NAME)

    return Activity(
        name=REACTIVATE_ACTIVITY_NAME,
        theme=HOLO_LIGHT_NO_ACTION_BAR_THEME,
        exported=True,
        exclude_from_recents=True,
        state_not_needed=True,
        intent_filter=IntentFilter(actions=(MAIN_ACTION_NAME,), categories=tuple(categories)),
    )


def create_update_broadcast_receiver() -> Receiver:
    return Receiver(
        name=UPDATE_BROADCAST_RECEIVER_NAME,
        exported=True,
        intent_filter=IntentFilter(actions=(MY_PACKAGE_REPLACED_ACTION_NAME,)),
    )


def add_tv_support_if_required(editor: ManifestEditor, manifest: AndroidManifest) -> bool:
    """Declare leanback and touchscreen as optional features for TV apps.

    Returns:
        Whether the features were added.
    """
    if not manifest.has_main_tv_activity():
        return False

    editor.add_uses_feature_element(LEANBACK_FEATURE_NAME, is_required=False)
    editor.add_uses_feature_element(TOUCHSCREEN_FEATURE_NAME, is_required=False)
    return True


class ArchiveSummary(BaseModel):
    """What an archived manifest kept from its source."""

    package_name: str | None = Field(default=None)
    manifest_attributes: list[str] = Field(default_factory=list)
    application_attributes: list[str] = Field(default_factory=list)
    kept_elements: dict[str, int] = Field(default_factory=dict)
    allow_backup: bool | None = Field(default=None, description="None when left unset")
    launcher_categories: list[str] = Field(default_factory=list)
    tv_support: bool = Field(default=False)

    @classmethod
    def from_manifests(cls, source: AndroidManifest, archived: AndroidManifest) -> ArchiveSummary:
        return cls(
            package_name=archived.package_name,
            manifest_attributes=[
                ATTRIBUTE_NAMES[rid]
                for rid in MANIFEST_ATTRIBUTES_TO_KEEP
                if archived.get_manifest_attribute(rid) is not None
            ],
            application_attributes=[
                ATTRIBUTE_NAMES[rid]
                for rid in APPLICATION_ATTRIBUTES_TO_KEEP
                if archived.get_application_attribute(rid) is not None
            ],
            kept_elements={
                name: len(archived.get_children(name))
                for name in CHILDREN_ELEMENTS_TO_KEEP
                if archived.get_children(name)
            },
            allow_backup=archived.get_allow_backup(),
            launcher_categories=[
                category
                for category, present in (
                    (LAUNCHER_CATEGORY_NAME, source.has_main_activity()),
                    (LEANBACK_LAUNCHER_CATEGORY_NAME, source.has_main_tv_activity()),
                )
                if present
            ],
            tv_support=source.has_main_tv_activity(),
        )


class ArchiveService:
    """Service wrapper for archived manifest generation."""

    def __init__(self, config: Config | None = None) -> None:
        """Initialize the archive service."""
        self.config = config or get_config()

    def archive(self, manifest: AndroidManifest | None) -> AndroidManifest:
        return create_archived_manifest(manifest, self.config)

    def archive_file(
        self, source_path: Path, output_path: Path | None = None
    ) -> tuple[AndroidManifest, ArchiveSummary]:
        """Archive a text manifest file.

        Args:
            source_path: Path of the full ``AndroidManifest.xml``.
            output_path: Where to write the archived manifest; skipped if None.

        Returns:
            The archived manifest and a summary of what it kept.
        """
        bind_context(source=str(source_path))
        try:
            logger.info("Archiving manifest")
            source = load_manifest(source_path)
            archived = self.archive(source)
            if output_path is not None:
                write_manifest(archived, output_path)
                logger.info("Archived manifest written", output=str(output_path))
            return archived, ArchiveSummary.from_manifests(source, archived)
        finally:
            clear_context()
