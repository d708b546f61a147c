"""
Builder State Store
System of record for one project-editing session: the ordered component
list, its undo history, the selection, and the UI/save flags.
"""

from typing import Any, Callable, Iterable, Mapping

from pydantic import ValidationError as PydanticValidationError
from returns.result import Failure, Result, Success

from ..core import (
    HydrationError,
    JSONParseError,
    MutationError,
    ValidationError,
    decode_mapping,
    get_logger,
    new_component_id,
    validate_content_depth,
    validate_content_size,
)
from .history import History, Snapshot
from .models import Component, PreviewMode, ProjectContent

logger = get_logger(__name__)

Listener = Callable[["BuilderStore"], None]
ComponentLike = Component | Mapping[str, Any]

_IMMUTABLE_KEYS = ("id", "type")


def _as_component(value: ComponentLike) -> Component:
    if isinstance(value, Component):
        return value
    return Component.model_validate(dict(value))


class BuilderStore:
    """
    Per-session builder state.

    Every change to the component list goes through ``set_components``,
    which records a history snapshot and marks the session dirty. Selection
    is kept as an id and resolved against the live list on read, so the
    property panel can never show stale data.

    Structural operations on unknown ids or out-of-range indices return
    ``Failure`` and leave state and history untouched.
    """

    def __init__(self, history_limit: int | None = None) -> None:
        self._history = History(history_limit)
        self._components: Snapshot = ()
        self._selected_id: str | None = None
        self._listeners: list[Listener] = []

        self.preview_mode = PreviewMode.DESKTOP
        self.show_component_panel = True
        self.show_property_panel = True
        self.is_saving = False
        self.is_exporting = False
        self.has_unsaved_changes = False
        self.revision = 0

    @classmethod
    def create(cls, history_limit: int | None = None) -> "BuilderStore":
        """Fresh store for one editing session; pair with ``dispose``."""
        store = cls(history_limit)
        logger.debug("store_created", history_limit=history_limit)
        return store

    # ========================================================================
    # Read access
    # ========================================================================

    @property
    def components(self) -> Snapshot:
        return self._components

    @property
    def component_ids(self) -> list[str]:
        return [c.id for c in self._components]

    @property
    def history(self) -> tuple[Snapshot, ...]:
        return self._history.entries

    @property
    def history_index(self) -> int:
        return self._history.index

    @property
    def selected_id(self) -> str | None:
        return self._selected_id

    @property
    def selected_component(self) -> Component | None:
        """Selected component as it currently exists in the list."""
        if self._selected_id is None:
            return None
        return self.find(self._selected_id)

    def find(self, component_id: str) -> Component | None:
        for component in self._components:
            if component.id == component_id:
                return component
        return None

    def index_of(self, component_id: str) -> int:
        """Position of ``component_id``, -1 if absent."""
        for i, component in enumerate(self._components):
            if component.id == component_id:
                return i
        return -1

    def can_undo(self) -> bool:
        return self._history.can_undo()

    def can_redo(self) -> bool:
        return self._history.can_redo()

    def __len__(self) -> int:
        return len(self._components)

    # ========================================================================
    # Mutation choke point
    # ========================================================================

    def set_components(self, components: Iterable[ComponentLike]) -> None:
        """
        Replace the component list and record it in history.

        Truncates any redo branch, appends the new snapshot, moves the cursor
        to it and marks the session dirty. Content is not validated beyond
        being component-shaped.
        """
        snapshot = tuple(_as_component(c) for c in components)
        self._history.push(snapshot)
        self._components = snapshot
        self.has_unsaved_changes = True
        self._changed()
        logger.debug("components_set", count=len(snapshot), history_index=self._history.index)

    # ========================================================================
    # Structural operations
    # ========================================================================

    def add_component(self, component: ComponentLike, index: int | None = None) -> Component:
        """
        Insert a component, appending when ``index`` is None.

        The index is clamped to ``[0, len]``. Ids are not deduplicated here;
        callers mint them through ``new_component_id``.
        """
        new_component = _as_component(component)
        items = list(self._components)
        position = len(items) if index is None else max(0, min(index, len(items)))
        items.insert(position, new_component)
        self.set_components(items)
        logger.info("component_added", component_id=new_component.id, type=new_component.type, index=position)
        return new_component

    def update_component(self, component_id: str, updates: Mapping[str, Any]) -> Result[Component, MutationError]:
        """Shallow-merge ``updates`` into the component with ``component_id``."""
        position = self.index_of(component_id)
        if position == -1:
            logger.debug("update_missing_component", component_id=component_id)
            return Failure(MutationError("Component not found", component_id=component_id))

        current = self._components[position]
        for key in _IMMUTABLE_KEYS:
            if key in updates and updates[key] != getattr(current, key):
                logger.warning("immutable_field_update", component_id=component_id, field=key)
                return Failure(MutationError(f"Component '{key}' cannot change", component_id=component_id))

        updated = current.merged(dict(updates))
        items = list(self._components)
        items[position] = updated
        self.set_components(items)
        return Success(updated)

    def delete_component(self, component_id: str) -> Result[Component, MutationError]:
        """Remove a component, clearing the selection if it pointed at it."""
        position = self.index_of(component_id)
        if position == -1:
            logger.debug("delete_missing_component", component_id=component_id)
            return Failure(MutationError("Component not found", component_id=component_id))

        removed = self._components[position]
        if self._selected_id == component_id:
            self._selected_id = None
        self.set_components(c for c in self._components if c.id != component_id)
        logger.info("component_deleted", component_id=component_id, index=position)
        return Success(removed)

    def move_component(self, from_index: int, to_index: int) -> Result[Component, MutationError]:
        """
        Move the component at ``from_index`` so it ends up at ``to_index``.

        Both indices must address existing positions; anything else is
        rejected without touching state. Moving onto itself succeeds without
        recording history.
        """
        size = len(self._components)
        for index in (from_index, to_index):
            if not 0 <= index < size:
                logger.warning("move_out_of_range", from_index=from_index, to_index=to_index, size=size)
                return Failure(MutationError("Index out of range", index=index))

        moved = self._components[from_index]
        if from_index == to_index:
            return Success(moved)

        items = list(self._components)
        items.pop(from_index)
        items.insert(to_index, moved)
        self.set_components(items)
        logger.info("component_moved", component_id=moved.id, from_index=from_index, to_index=to_index)
        return Success(moved)

    def duplicate_component(self, component_id: str) -> Result[Component, MutationError]:
        """Copy a component under a fresh id, directly after the original."""
        position = self.index_of(component_id)
        if position == -1:
            logger.debug("duplicate_missing_component", component_id=component_id)
            return Failure(MutationError("Component not found", component_id=component_id))

        source = self._components[position]
        duplicate = Component.model_validate({**source.model_dump(), "id": new_component_id(source.type)})
        self.add_component(duplicate, position + 1)
        return Success(duplicate)

    # ========================================================================
    # Selection
    # ========================================================================

    def select_component(self, component: Component | str | None) -> None:
        """Select by component or id; None clears. Does not touch history."""
        self._selected_id = component.id if isinstance(component, Component) else component
        self._changed(revision=False)

    def clear_selection(self) -> None:
        self.select_component(None)

    # ========================================================================
    # History
    # ========================================================================

    def undo(self) -> bool:
        """Step back one snapshot; False at the boundary."""
        snapshot = self._history.undo()
        if snapshot is None:
            return False
        self._restore(snapshot)
        logger.debug("undo", history_index=self._history.index)
        return True

    def redo(self) -> bool:
        """Step forward one snapshot; False at the boundary."""
        snapshot = self._history.redo()
        if snapshot is None:
            return False
        self._restore(snapshot)
        logger.debug("redo", history_index=self._history.index)
        return True

    def _restore(self, snapshot: Snapshot) -> None:
        self._components = snapshot
        self.has_unsaved_changes = True
        self._changed()

    # ========================================================================
    # UI and save flags
    # ========================================================================

    def set_preview_mode(self, mode: PreviewMode | str) -> None:
        self.preview_mode = PreviewMode(mode)
        self._changed(revision=False)

    def toggle_component_panel(self) -> None:
        self.show_component_panel = not self.show_component_panel
        self._changed(revision=False)

    def toggle_property_panel(self) -> None:
        self.show_property_panel = not self.show_property_panel
        self._changed(revision=False)

    def set_saving(self, is_saving: bool) -> None:
        self.is_saving = is_saving
        self._changed(revision=False)

    def set_exporting(self, is_exporting: bool) -> None:
        self.is_exporting = is_exporting
        self._changed(revision=False)

    def mark_as_saved(self) -> None:
        self.has_unsaved_changes = False
        self._changed(revision=False)

    # ========================================================================
    # Persistence boundary
    # ========================================================================

    def initialize_from_project(self, project: Any) -> None:
        """
        Hydrate from a project payload.

        ``project`` is a mapping or object with a ``content`` entry holding
        ``{"components": [...]}``, either decoded or as a JSON string. Seeds
        history with exactly one snapshot and marks the session clean.

        Raises:
            HydrationError: If the content is malformed
        """
        raw = project.get("content") if isinstance(project, Mapping) else getattr(project, "content", None)
        snapshot = _parse_content(raw)

        self._history.seed(snapshot)
        self._components = snapshot
        self._selected_id = None
        self.has_unsaved_changes = False
        self._changed()
        logger.info("project_hydrated", count=len(snapshot))

    def serialize(self) -> dict[str, Any]:
        """Content payload for persistence; keys a component never had stay absent."""
        return ProjectContent(components=list(self._components)).model_dump(exclude_unset=True)

    def reset(self) -> None:
        """Return to a blank state."""
        self._history = History(self._history.limit)
        self._components = ()
        self._selected_id = None
        self.preview_mode = PreviewMode.DESKTOP
        self.show_component_panel = True
        self.show_property_panel = True
        self.is_saving = False
        self.is_exporting = False
        self.has_unsaved_changes = False
        self.revision = 0
        self._changed(revision=False)

    # ========================================================================
    # Subscriptions
    # ========================================================================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every state change; returns an unsubscribe."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispose(self) -> None:
        """Reset and drop all listeners."""
        self.reset()
        self._listeners.clear()

    def _changed(self, revision: bool = True) -> None:
        if revision:
            self.revision += 1
        for listener in list(self._listeners):
            listener(self)


def _parse_content(raw: Any) -> Snapshot:
    if isinstance(raw, (str, bytes)):
        try:
            validate_content_size(raw)
            content = decode_mapping(raw)
        except (JSONParseError, ValidationError) as e:
            raise HydrationError(f"Invalid project content: {e}") from e
    elif isinstance(raw, Mapping):
        content = dict(raw)
    else:
        raise HydrationError(f"Project content must be an object, got {type(raw).__name__}")

    items = content.get("components")
    if items is None:
        items = []
    if not isinstance(items, list):
        raise HydrationError("Project content 'components' must be a list")

    try:
        validate_content_depth(items)
    except ValidationError as e:
        raise HydrationError(str(e)) from e

    components = []
    for position, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise HydrationError(f"Component at index {position} is not an object")
        try:
            components.append(Component.model_validate(dict(item)))
        except PydanticValidationError as e:
            raise HydrationError(f"Component at index {position} is invalid: {e}") from e

    ids = [c.id for c in components]
    if len(set(ids)) != len(ids):
        logger.warning("duplicate_component_ids", count=len(ids) - len(set(ids)))

    return tuple(components)
