"""Manifest data models for apkarchive."""

from .components import Activity, IntentFilter, Receiver
from .manifest import ANDROID_NAMESPACE_URI, AndroidManifest, android_attr

__all__ = [
    "Activity",
    "IntentFilter",
    "Receiver",
    "ANDROID_NAMESPACE_URI",
    "AndroidManifest",
    "android_attr",
]
