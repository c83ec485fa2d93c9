"""Core infrastructure components for apkarchive."""

from .config import ArchiveConfig, Config, get_config
from .exceptions import (
    ArchiveError,
    HeadlessApplicationError,
    ManifestError,
    ValidationError,
)
from .logging import bind_context, clear_context, get_logger, setup_logging

__all__ = [
    "ArchiveConfig",
    "Config",
    "get_config",
    "ArchiveError",
    "HeadlessApplicationError",
    "ManifestError",
    "ValidationError",
    "bind_context",
    "clear_context",
    "get_logger",
    "setup_logging",
]
