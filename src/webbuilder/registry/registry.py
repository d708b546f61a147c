"""
Component Registry
Static lookup from component type to defaults factory and field schema.
"""

from typing import Any

from ..core import ValidationError, get_logger, new_component_id
from .catalog import CATALOG
from .types import ComponentCategory, ComponentDescriptor, ComponentType, FieldSpec, PaletteEntry

logger = get_logger(__name__)


class ComponentRegistry:
    """
    Catalog of component types.

    Holds no mutable state after construction; every lookup is side-effect
    free, and defaults are produced fresh on each call.
    """

    def __init__(self, descriptors: tuple[ComponentDescriptor, ...] = CATALOG) -> None:
        self._index: dict[ComponentType, ComponentDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.type in self._index:
                raise ValueError(f"Duplicate component type: {descriptor.type.value}")
            self._index[descriptor.type] = descriptor

    def get(self, component_type: str | ComponentType) -> ComponentDescriptor | None:
        """Get descriptor by type name."""
        parsed = ComponentType.parse(component_type)
        return self._index.get(parsed) if parsed else None

    def is_known(self, component_type: str | ComponentType) -> bool:
        return self.get(component_type) is not None

    def create_default(self, component_type: str | ComponentType) -> dict[str, Any]:
        """
        Default data for a component type.

        Unknown types get an empty mapping; the canvas shows a placeholder
        for them.
        """
        descriptor = self.get(component_type)
        if descriptor is None:
            return {}
        return descriptor.create_default()

    def fields_for(self, component_type: str | ComponentType) -> tuple[FieldSpec, ...]:
        """Field schema for a type, empty for unknown types."""
        descriptor = self.get(component_type)
        return descriptor.fields if descriptor else ()

    def new_component(self, component_type: str | ComponentType) -> dict[str, Any]:
        """
        Mint a component payload with a fresh id and default data.

        Raises:
            ValidationError: If the type is not in the catalog
        """
        descriptor = self.get(component_type)
        if descriptor is None:
            logger.warning("unknown_component_type", type=str(component_type))
            raise ValidationError(f"Unknown component type: {component_type}")

        type_name = descriptor.type.value
        return {
            "id": new_component_id(type_name),
            "type": type_name,
            "data": descriptor.create_default(),
        }

    def list_all(self, category: ComponentCategory | None = None) -> list[ComponentDescriptor]:
        """
        List descriptors in catalog order.

        Args:
            category: Optional category filter
        """
        descriptors = list(self._index.values())
        if category:
            descriptors = [d for d in descriptors if d.category == category]
        return descriptors

    def palette(self) -> dict[ComponentCategory, list[PaletteEntry]]:
        """Palette entries grouped by category, in catalog order."""
        groups: dict[ComponentCategory, list[PaletteEntry]] = {c: [] for c in ComponentCategory}
        for descriptor in self._index.values():
            if not descriptor.in_palette:
                continue
            groups[descriptor.category].append(
                PaletteEntry(type=descriptor.type, label=descriptor.label, category=descriptor.category)
            )
        return groups

    def get_stats(self) -> dict[str, Any]:
        """Get registry statistics"""
        categories: dict[str, int] = {}
        for descriptor in self._index.values():
            cat = descriptor.category.value
            categories[cat] = categories.get(cat, 0) + 1

        return {
            "total_types": len(self._index),
            "total_fields": sum(len(d.fields) for d in self._index.values()),
            "categories": categories,
        }

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, component_type: object) -> bool:
        return isinstance(component_type, str) and self.is_known(component_type)


_default_registry: ComponentRegistry | None = None


def get_registry() -> ComponentRegistry:
    """Shared read-only registry built from the built-in catalog."""
    global _default_registry
    if _default_registry is None:
        _default_registry = ComponentRegistry()
    return _default_registry


def create_default(component_type: str) -> dict[str, Any]:
    """Default data for ``component_type`` from the built-in catalog."""
    return get_registry().create_default(component_type)
