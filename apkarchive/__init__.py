"""
apkarchive: Archived AndroidManifest generation.

Derives the minimal manifest of an archived Android application from its full
manifest. The archived manifest keeps a curated subset of metadata and adds a
reactivation entry point so the app can be relaunched and restored after an
update.
"""

__version__ = "1.0.0"
__author__ = "apkarchive Team"
