"""
Component registry package - the closed catalog of page components.
"""

from .types import (
    PALETTE_DRAG_PREFIX,
    ComponentCategory,
    ComponentDescriptor,
    ComponentType,
    FieldKind,
    FieldSpec,
    PaletteEntry,
)
from .catalog import CATALOG
from .registry import ComponentRegistry, create_default, get_registry

__all__ = [
    "PALETTE_DRAG_PREFIX",
    "ComponentCategory",
    "ComponentDescriptor",
    "ComponentType",
    "FieldKind",
    "FieldSpec",
    "PaletteEntry",
    "CATALOG",
    "ComponentRegistry",
    "create_default",
    "get_registry",
]
