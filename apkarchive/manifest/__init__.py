"""Manifest editing and XML I/O for apkarchive."""

from .editor import ManifestEditor
from .xml_io import (
    create_minimal_manifest_element,
    load_manifest,
    parse_manifest,
    to_xml,
    write_manifest,
)

__all__ = [
    "ManifestEditor",
    "create_minimal_manifest_element",
    "load_manifest",
    "parse_manifest",
    "to_xml",
    "write_manifest",
]
