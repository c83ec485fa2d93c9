"""
Custom exception hierarchy for apkarchive.

All exceptions inherit from ArchiveError to enable consistent error handling
by callers. Each exception type includes context for debugging and logging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ArchiveError(Exception):
    """Base exception for all apkarchive errors."""

    message: str
    context: dict[str, Any] = field(default_factory=dict)
    cause: Exception | None = None

    def __str__(self) -> str:
        ctx = f" | context: {self.context}" if self.context else ""
        cause = f" | caused by: {self.cause}" if self.cause else ""
        return f"{self.message}{ctx}{cause}"


@dataclass
class ValidationError(ArchiveError):
    """Raised when an input to the archiving transformation is invalid."""

    field_name: str | None = None
    expected_type: str | None = None
    actual_value: Any = None

    def __str__(self) -> str:
        base = super().__str__()
        if self.field_name:
            return f"Validation failed for '{self.field_name}': {base}"
        return f"Validation failed: {base}"


@dataclass
class HeadlessApplicationError(ValidationError):
    """Raised when a manifest without any launcher activity is archived.

    Only raised when ``reject_headless_apps`` is enabled; otherwise a headless
    manifest yields a reactivation activity with no launcher category.
    """

    package_name: str = ""


@dataclass
class ManifestError(ArchiveError):
    """Raised when the manifest tree itself is structurally unusable."""

    element: str = ""
    attribute: str = ""

    def __str__(self) -> str:
        base = super().__str__()
        location = self.element
        if self.attribute:
            location = f"{location}@{self.attribute}" if location else self.attribute
        return f"Manifest error at '{location}': {base}" if location else f"Manifest error: {base}"
