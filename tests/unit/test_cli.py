"""Unit tests for the command line interface."""

import pytest
from typer.testing import CliRunner

from apkarchive import __version__
from apkarchive.cli import app
from apkarchive.manifest.xml_io import load_manifest, parse_manifest
from apkarchive.services.archive import META_DATA_KEY_ARCHIVED, REACTIVATE_ACTIVITY_NAME

runner = CliRunner()


@pytest.fixture
def source_path(temp_dir, manifest_xml):
    path = temp_dir / "AndroidManifest.xml"
    path.write_text(
        manifest_xml(application_attrs='android:label="Example"'), encoding="utf-8"
    )
    return path


class TestCli:
    """Tests for the apkarchive command."""

    def test_version(self):
        """Test that --version prints the package version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_archive_to_file(self, temp_dir, source_path):
        """Test that the archived manifest is written to the output path."""
        output = temp_dir / "archived.xml"
        result = runner.invoke(app, ["archive", str(source_path), "-o", str(output)])

        assert result.exit_code == 0, result.output
        archived = load_manifest(output)
        assert archived.package_name == "com.example.app"
        assert archived.get_metadata_element(META_DATA_KEY_ARCHIVED) is not None

    def test_archive_to_stdout(self, source_path):
        """Test that the XML goes to stdout and the summary table still appears."""
        result = runner.invoke(app, ["archive", str(source_path)])

        assert result.exit_code == 0
        assert REACTIVATE_ACTIVITY_NAME in result.stdout
        xml_start = result.stdout.index("<?xml")
        xml_end = result.stdout.index("</manifest>") + len("</manifest>")
        archived = parse_manifest(result.stdout[xml_start:xml_end])
        assert archived.package_name == "com.example.app"
        assert "Archived Manifest" in result.output

    def test_reject_headless(self, temp_dir, manifest_xml):
        """Test that --reject-headless fails on a headless app and writes nothing."""
        path = temp_dir / "AndroidManifest.xml"
        path.write_text(
            manifest_xml(application_body='<service android:name=".Sync"/>'), encoding="utf-8"
        )
        output = temp_dir / "archived.xml"

        result = runner.invoke(
            app, ["archive", str(path), "--reject-headless", "-o", str(output)]
        )

        assert result.exit_code == 1
        assert not output.exists()

    def test_malformed_manifest(self, temp_dir):
        """Test that unparseable XML exits with an error code."""
        path = temp_dir / "AndroidManifest.xml"
        path.write_text("<manifest", encoding="utf-8")

        result = runner.invoke(app, ["archive", str(path)])

        assert result.exit_code == 1
