"""
Text AndroidManifest.xml reading and writing.

Plain ElementTree round-tripping; binary and proto XML manifests are not
handled here.
"""

from __future__ import annotations

import copy
import xml.etree.ElementTree as ET
from pathlib import Path

from ..core.exceptions import ManifestError
from ..core.logging import get_logger
from ..models.manifest import ANDROID_NAMESPACE_URI, MANIFEST_ELEMENT_NAME, AndroidManifest

logger = get_logger(__name__)

ET.register_namespace("android", ANDROID_NAMESPACE_URI)


def create_minimal_manifest_element() -> ET.Element:
    """Create an empty ``<manifest>`` root.

    ElementTree does not store namespace declarations on elements; the
    ``xmlns:android`` declaration is emitted by ``to_xml`` from the registered
    prefix.
    """
    return ET.Element(MANIFEST_ELEMENT_NAME)


def parse_manifest(text: str | bytes) -> AndroidManifest:
    """Parse manifest XML text."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise ManifestError(message="Malformed manifest XML", cause=e) from e
    return AndroidManifest(root)


def load_manifest(path: Path) -> AndroidManifest:
    """Load a text ``AndroidManifest.xml`` from disk."""
    logger.debug("Loading manifest", path=str(path))
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ManifestError(
            message=f"Cannot read manifest: {path}", context={"path": str(path)}, cause=e
        ) from e
    return parse_manifest(data)


def to_xml(manifest: AndroidManifest) -> str:
    """Serialize a manifest to indented XML text."""
    root = copy.deepcopy(manifest.root)
    namespace_prefix = f"{{{ANDROID_NAMESPACE_URI}}}"
    # ElementTree only declares prefixes that are used
    if not any(key.startswith(namespace_prefix) for el in root.iter() for key in el.attrib):
        root.set("xmlns:android", ANDROID_NAMESPACE_URI)
    ET.indent(root)
    return ET.tostring(root, encoding="unicode", xml_declaration=True)


def write_manifest(manifest: AndroidManifest, path: Path) -> None:
    """Write a manifest as UTF-8 XML."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(to_xml(manifest) + "\n", encoding="utf-8")
    except OSError as e:
        raise ManifestError(
            message=f"Cannot write manifest: {path}", context={"path": str(path)}, cause=e
        ) from e
    logger.debug("Wrote manifest", path=str(path))
