"""Unit tests for the manifest editor and XML I/O."""

import pytest

from apkarchive.core.exceptions import ManifestError
from apkarchive.manifest.editor import ManifestEditor
from apkarchive.manifest.xml_io import (
    create_minimal_manifest_element,
    load_manifest,
    parse_manifest,
    to_xml,
    write_manifest,
)
from apkarchive.models.components import Activity, IntentFilter, Receiver
from apkarchive.models.manifest import (
    ICON_RESOURCE_ID,
    LABEL_RESOURCE_ID,
    VERSION_NAME_RESOURCE_ID,
    android_attr,
)


@pytest.fixture
def editor():
    return ManifestEditor(create_minimal_manifest_element())


class TestManifestEditor:
    """Tests for ManifestEditor operations."""

    def test_set_package_and_meta_data(self, editor):
        """Test setting the package and adding a boolean meta-data entry."""
        manifest = editor.set_package("com.example.app").add_meta_data_boolean("key", True).save()
        assert manifest.package_name == "com.example.app"
        meta_data = manifest.get_metadata_element("key")
        assert meta_data is not None
        assert meta_data.get(android_attr("value")) == "true"

    def test_copy_attributes_only_when_present(self, editor, make_manifest):
        """Test that attribute copies are no-ops for absent attributes."""
        source = make_manifest(
            manifest_attrs='android:versionName="1.2"',
            application_attrs='android:icon="@mipmap/icon"',
        )
        manifest = (
            editor.copy_manifest_element_android_attribute(source, VERSION_NAME_RESOURCE_ID)
            .copy_application_element_android_attribute(source, ICON_RESOURCE_ID)
            .copy_application_element_android_attribute(source, LABEL_RESOURCE_ID)
            .save()
        )
        assert manifest.get_manifest_attribute(VERSION_NAME_RESOURCE_ID) == "1.2"
        assert manifest.get_application_attribute(ICON_RESOURCE_ID) == "@mipmap/icon"
        assert manifest.get_application_attribute(LABEL_RESOURCE_ID) is None

    def test_set_allow_backup(self, editor):
        """Test writing the allowBackup flag."""
        assert editor.set_allow_backup(False).save().get_allow_backup() is False

    def test_copy_children_keeps_multiplicity(self, editor, make_manifest):
        """Test that every matching child is copied in order."""
        source = make_manifest(
            children='<permission android:name="p.A"/><permission android:name="p.B"/>'
        )
        manifest = editor.copy_children_elements(source, "permission").save()
        names = [p.get(android_attr("name")) for p in manifest.get_children("permission")]
        assert names == ["p.A", "p.B"]

    def test_copies_do_not_alias_source(self, editor, make_manifest):
        """Test that copied elements are independent of the source tree."""
        source = make_manifest(children='<uses-sdk android:minSdkVersion="21"/>')
        manifest = editor.copy_children_elements(source, "uses-sdk").save()
        manifest.get_children("uses-sdk")[0].set(android_attr("minSdkVersion"), "30")
        assert source.get_children("uses-sdk")[0].get(android_attr("minSdkVersion")) == "21"

    def test_add_activity(self, editor):
        """Test the element produced for an activity with every field set."""
        activity = Activity(
            name="com.example.Reactivate",
            theme="@style/T",
            exported=True,
            exclude_from_recents=True,
            state_not_needed=False,
            intent_filter=IntentFilter(actions=("A",), categories=("C1", "C2")),
        )
        application = editor.add_activity(activity).save().application
        element = application.find("activity")
        assert element.get(android_attr("name")) == "com.example.Reactivate"
        assert element.get(android_attr("theme")) == "@style/T"
        assert element.get(android_attr("exported")) == "true"
        assert element.get(android_attr("excludeFromRecents")) == "true"
        assert element.get(android_attr("stateNotNeeded")) == "false"
        intent_filter = element.find("intent-filter")
        assert [a.get(android_attr("name")) for a in intent_filter.findall("action")] == ["A"]
        assert [c.get(android_attr("name")) for c in intent_filter.findall("category")] == [
            "C1",
            "C2",
        ]

    def test_add_receiver_without_optional_fields(self, editor):
        """Test that unset receiver fields produce no attributes."""
        element = editor.add_receiver(Receiver(name="r")).save().application.find("receiver")
        assert element.get(android_attr("name")) == "r"
        assert element.get(android_attr("exported")) is None
        assert element.find("intent-filter") is None

    def test_add_uses_feature(self, editor):
        """Test adding an optional feature declaration."""
        manifest = editor.add_uses_feature_element("android.hardware.camera", is_required=False).save()
        feature = manifest.get_children("uses-feature")[0]
        assert feature.get(android_attr("name")) == "android.hardware.camera"
        assert feature.get(android_attr("required")) == "false"

    def test_save_returns_independent_copies(self, editor):
        """Test that later edits do not affect a saved manifest."""
        first = editor.set_package("a").save()
        editor.set_package("b")
        assert first.package_name == "a"
        assert editor.save().package_name == "b"


class TestXmlIO:
    """Tests for manifest parsing and serialization."""

    def test_malformed_xml(self):
        """Test that parse errors become ManifestError with the cause attached."""
        with pytest.raises(ManifestError) as exc_info:
            parse_manifest("<manifest>")
        assert exc_info.value.cause is not None

    def test_minimal_manifest_declares_android_namespace(self):
        """Test that an empty manifest still declares the android prefix."""
        text = to_xml(ManifestEditor(create_minimal_manifest_element()).save())
        assert 'xmlns:android="http://schemas.android.com/apk/res/android"' in text

    def test_serialization_does_not_mutate_manifest(self, make_manifest):
        """Test that indenting for output leaves the manifest untouched."""
        manifest = make_manifest()
        before = len(list(manifest.root.iter()))
        to_xml(manifest)
        assert manifest.root.text is None
        assert len(list(manifest.root.iter())) == before

    def test_write_and_load(self, temp_dir, make_manifest):
        """Test writing a manifest to a new directory and reading it back."""
        path = temp_dir / "out" / "AndroidManifest.xml"
        write_manifest(make_manifest(manifest_attrs='android:versionCode="7"'), path)
        text = path.read_text(encoding="utf-8")
        assert "android:versionCode" in text
        assert load_manifest(path).package_name == "com.example.app"

    def test_load_missing_file(self, temp_dir):
        """Test that a missing file raises ManifestError."""
        with pytest.raises(ManifestError):
            load_manifest(temp_dir / "missing.xml")
