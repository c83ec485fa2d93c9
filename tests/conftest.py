"""Test configuration for apkarchive."""

import tempfile
from pathlib import Path

import pytest

from apkarchive.core.config import ArchiveConfig, Config
from apkarchive.manifest.xml_io import parse_manifest

ANDROID_NS = 'xmlns:android="http://schemas.android.com/apk/res/android"'

MAIN_ACTIVITY = """
    <activity android:name=".MainActivity" android:exported="true">
      <intent-filter>
        <action android:name="android.intent.action.MAIN"/>
        <category android:name="android.intent.category.LAUNCHER"/>
      </intent-filter>
    </activity>"""

TV_ACTIVITY = """
    <activity android:name=".TvActivity" android:exported="true">
      <intent-filter>
        <action android:name="android.intent.action.MAIN"/>
        <category android:name="android.intent.category.LEANBACK_LAUNCHER"/>
      </intent-filter>
    </activity>"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests.

    Yields:
        Path: A Path object pointing to the temporary directory.
            The directory is automatically cleaned up after the test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config():
    """Default configuration, independent of the environment."""
    return Config()


@pytest.fixture
def strict_config():
    """Configuration that rejects headless apps."""
    return Config(archive=ArchiveConfig(reject_headless_apps=True))


@pytest.fixture
def manifest_xml():
    """Build manifest XML text from fragments.

    Returns:
        Callable taking the ``<manifest>`` attributes, the ``<application>``
        attributes (None for no application element), the application body and
        any extra manifest-level children.
    """

    def build(
        manifest_attrs: str = "",
        application_attrs: str | None = "",
        application_body: str = MAIN_ACTIVITY,
        children: str = "",
        package: str = "com.example.app",
    ) -> str:
        application = ""
        if application_attrs is not None:
            application = f"<application {application_attrs}>{application_body}\n  </application>"
        return (
            f'<manifest {ANDROID_NS} package="{package}" {manifest_attrs}>'
            f"{children}{application}</manifest>"
        )

    return build


@pytest.fixture
def make_manifest(manifest_xml):
    """Build a parsed AndroidManifest from fragments (see ``manifest_xml``)."""

    def build(**kwargs):
        return parse_manifest(manifest_xml(**kwargs))

    return build


@pytest.fixture
def main_activity_xml():
    """An activity handling MAIN/LAUNCHER."""
    return MAIN_ACTIVITY


@pytest.fixture
def tv_activity_xml():
    """An activity handling MAIN/LEANBACK_LAUNCHER."""
    return TV_ACTIVITY
