"""Builder data models."""

import copy
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Component(BaseModel):
    """
    One node of the page.

    Instances are immutable and shared between history snapshots, so the
    ``data`` mapping must never be mutated in place; edits always build a new
    component.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str = Field(..., min_length=1, description="Unique id, '{type}-{timestamp}'")
    type: str = Field(..., min_length=1, description="Component type name")
    data: dict[str, Any] = Field(default_factory=dict, description="Type-specific payload")

    @field_validator("data", mode="after")
    @classmethod
    def _own_data(cls, value: dict[str, Any]) -> dict[str, Any]:
        # Never alias caller-owned containers
        return copy.deepcopy(value)

    def merged(self, updates: dict[str, Any]) -> "Component":
        """New component with ``updates`` shallow-merged over this one."""
        return Component.model_validate({**self.model_dump(exclude_unset=True), **updates})


class PreviewMode(str, Enum):
    """Canvas preview widths"""
    DESKTOP = "desktop"
    TABLET = "tablet"
    MOBILE = "mobile"

    @property
    def max_width(self) -> int | None:
        """Max canvas width in pixels, None for full width."""
        return _PREVIEW_WIDTHS[self]


_PREVIEW_WIDTHS = {
    PreviewMode.DESKTOP: None,
    PreviewMode.TABLET: 768,
    PreviewMode.MOBILE: 375,
}


class ProjectContent(BaseModel):
    """Persisted page content"""
    components: list[Component] = Field(default_factory=list)
