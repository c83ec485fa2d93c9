"""
Configuration management for apkarchive.

Provides centralized, type-safe configuration with environment variable overrides
and defaults that reproduce the reference archiving behavior.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load .env file if it exists (looks in cwd and parent directories)
load_dotenv()


class ArchiveConfig(BaseModel):
    """Archived manifest generation settings."""

    reject_headless_apps: bool = Field(
        default=False,
        description=(
            "Fail when the source manifest has neither a main launcher nor a main "
            "TV launcher activity, instead of emitting a category-less activity"
        ),
    )


class Config(BaseModel):
    """Root configuration for apkarchive."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    archive: ArchiveConfig = Field(default_factory=ArchiveConfig)

    model_config = {"extra": "ignore"}

    @classmethod
    def from_env(cls) -> Config:
        """Create configuration from environment variables."""
        return cls(
            log_level=os.environ.get("APKARCHIVE_LOG_LEVEL", "INFO"),  # type: ignore
            archive=ArchiveConfig(
                reject_headless_apps=os.environ.get("APKARCHIVE_REJECT_HEADLESS", "false").lower()
                == "true",
            ),
        )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config.from_env()
