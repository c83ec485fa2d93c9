"""
Manifest component models.

Immutable descriptions of the components injected into a manifest. They carry
only the attributes the archiving pipeline sets.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class IntentFilter(BaseModel):
    """An ``<intent-filter>`` with ordered actions and categories."""

    model_config = ConfigDict(frozen=True)

    actions: tuple[str, ...] = Field(default=(), description="Action names, in order")
    categories: tuple[str, ...] = Field(default=(), description="Category names, in order")


class Activity(BaseModel):
    """An ``<activity>`` declaration."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Fully qualified class name")
    theme: str | None = Field(default=None, description="Theme resource reference")
    exported: bool | None = Field(default=None)
    exclude_from_recents: bool | None = Field(default=None)
    state_not_needed: bool | None = Field(default=None)
    intent_filter: IntentFilter | None = Field(default=None)


class Receiver(BaseModel):
    """A ``<receiver>`` declaration."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Fully qualified class name")
    exported: bool | None = Field(default=None)
    intent_filter: IntentFilter | None = Field(default=None)
