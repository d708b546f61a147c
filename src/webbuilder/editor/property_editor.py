"""
Property Editor
Field-level edits on one component's data payload.
"""

import copy
from typing import Any

from returns.result import Failure, Result, Success

from ..core import MutationError, get_logger
from ..registry import ComponentRegistry, FieldSpec
from ..state import BuilderStore, Component

logger = get_logger(__name__)

_MISSING = object()


class PropertyEditor:
    """
    Editor bound to a single component id.

    Nothing is cached: the component is looked up in the store on every
    access and each edit builds a new data mapping that goes through
    ``BuilderStore.update_component``, so the panel always matches the
    canvas. After each edit the component is re-selected.

    Operations on a component that no longer exists, or on list indices out
    of range, return ``Failure`` and change nothing.
    """

    def __init__(self, store: BuilderStore, registry: ComponentRegistry, component_id: str) -> None:
        self.store = store
        self.registry = registry
        self.component_id = component_id

    # ========================================================================
    # Read
    # ========================================================================

    @property
    def component(self) -> Component | None:
        return self.store.find(self.component_id)

    @property
    def fields(self) -> tuple[FieldSpec, ...]:
        component = self.component
        return self.registry.fields_for(component.type) if component else ()

    @property
    def is_placeholder(self) -> bool:
        """True for types the registry does not know; the panel shows no fields."""
        component = self.component
        return component is None or not self.registry.is_known(component.type)

    def field_spec(self, name: str) -> FieldSpec | None:
        component = self.component
        descriptor = self.registry.get(component.type) if component else None
        return descriptor.field(name) if descriptor else None

    def read_field(self, name: str) -> Any:
        """
        Current value, else the schema default, else None.

        Always a copy: the stored value is shared with history snapshots.
        """
        component = self.component
        if component is not None and name in component.data:
            return copy.deepcopy(component.data[name])
        spec = self.field_spec(name)
        return spec.fallback() if spec else None

    # ========================================================================
    # Write
    # ========================================================================

    def update_field(self, name: str, value: Any) -> Result[Component, MutationError]:
        """Replace ``data[name]`` and re-select the component."""
        component = self.component
        if component is None:
            logger.debug("edit_missing_component", component_id=self.component_id, field=name)
            return Failure(MutationError("Component not found", component_id=self.component_id))

        result = self.store.update_component(self.component_id, {"data": {**component.data, name: value}})
        if isinstance(result, Success):
            self.store.select_component(self.component_id)
        return result

    def set_field_from_input(self, name: str, raw: Any) -> Result[Component, MutationError]:
        """
        Coerce raw panel input through the field schema, then store it.

        Fields outside the schema are stored as given.
        """
        spec = self.field_spec(name)
        if spec is None:
            return self.update_field(name, raw)
        try:
            value = spec.coerce(raw)
        except ValueError as e:
            logger.debug("field_input_rejected", component_id=self.component_id, field=name, error=str(e))
            return Failure(MutationError(str(e), component_id=self.component_id))
        return self.update_field(name, value)

    # ========================================================================
    # List fields
    # ========================================================================

    def _items(self, name: str) -> list[Any]:
        current = self.read_field(name)
        return list(current) if isinstance(current, list) else []

    def _index_error(self, index: int) -> Failure:
        logger.debug("array_index_out_of_range", component_id=self.component_id, index=index)
        return Failure(MutationError("Index out of range", component_id=self.component_id, index=index))

    def add_array_item(self, name: str, value: Any = _MISSING) -> Result[Component, MutationError]:
        """
        Append to a list field.

        Without ``value`` the schema's item default is used, else ``""``.
        """
        if value is _MISSING:
            spec = self.field_spec(name)
            value = spec.new_item() if spec else ""
        return self.update_field(name, [*self._items(name), value])

    def update_array_item(self, name: str, index: int, value: Any) -> Result[Component, MutationError]:
        items = self._items(name)
        if not 0 <= index < len(items):
            return self._index_error(index)
        items[index] = value
        return self.update_field(name, items)

    def update_array_item_field(
        self, name: str, index: int, key: str, value: Any
    ) -> Result[Component, MutationError]:
        """Set one key of an object-list item."""
        items = self._items(name)
        if not 0 <= index < len(items):
            return self._index_error(index)
        item = items[index]
        if not isinstance(item, dict):
            return Failure(MutationError(f"Item {index} of '{name}' is not an object", component_id=self.component_id))
        items[index] = {**item, key: value}
        return self.update_field(name, items)

    def remove_array_item(self, name: str, index: int) -> Result[Component, MutationError]:
        items = self._items(name)
        if not 0 <= index < len(items):
            return self._index_error(index)
        del items[index]
        return self.update_field(name, items)

    def delete(self) -> Result[Component, MutationError]:
        return self.store.delete_component(self.component_id)
