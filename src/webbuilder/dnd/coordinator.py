"""
Drag/Reorder Coordinator
Turns drag gestures into store operations: palette drops append a new
component, canvas drops reorder existing ones.
"""

from enum import Enum

from returns.result import Failure, Result, Success

from ..core import MutationError, ValidationError, get_logger
from ..registry import PALETTE_DRAG_PREFIX, ComponentRegistry
from ..state import BuilderStore, Component

logger = get_logger(__name__)

CANVAS_DROP_ID = "canvas"


class DropOutcome(str, Enum):
    """What a completed drag did to the store"""
    INSERTED = "inserted"
    MOVED = "moved"
    IGNORED = "ignored"


class DragCoordinator:
    """
    Maps drag events onto ``BuilderStore`` mutations.

    Indices are resolved from the store at drop time, never at drag start,
    so a list that changed mid-drag is handled against its latest state.
    """

    def __init__(self, store: BuilderStore, registry: ComponentRegistry) -> None:
        self.store = store
        self.registry = registry
        self.active_id: str | None = None

    def handle_drag_start(self, active_id: str) -> None:
        self.active_id = active_id
        logger.debug("drag_start", active_id=active_id)

    def handle_drag_cancel(self) -> None:
        logger.debug("drag_cancel", active_id=self.active_id)
        self.active_id = None

    def handle_drag_end(self, active_id: str, over_id: str | None) -> DropOutcome:
        """
        Complete a drag.

        Args:
            active_id: Dragged item, ``panel-{type}`` for palette entries or
                a component id
            over_id: Droppable under the pointer; None when dropped outside

        Returns:
            The outcome; ``IGNORED`` leaves the store untouched
        """
        self.active_id = None
        if over_id is None:
            logger.debug("drop_without_target", active_id=active_id)
            return DropOutcome.IGNORED

        if active_id.startswith(PALETTE_DRAG_PREFIX):
            return self._drop_from_palette(active_id[len(PALETTE_DRAG_PREFIX):])
        return self._drop_existing(active_id, over_id)

    def _drop_from_palette(self, component_type: str) -> DropOutcome:
        if not self.registry.is_known(component_type):
            logger.warning("drop_unknown_type", type=component_type)
            return DropOutcome.IGNORED

        # Palette drops always append, whatever they land on
        self.store.add_component(self.registry.new_component(component_type))
        return DropOutcome.INSERTED

    def _drop_existing(self, active_id: str, over_id: str) -> DropOutcome:
        if active_id == over_id:
            return DropOutcome.IGNORED

        old_index = self.store.index_of(active_id)
        new_index = self.store.index_of(over_id)
        if old_index == -1 or new_index == -1:
            logger.debug("drop_stale_reference", active_id=active_id, over_id=over_id)
            return DropOutcome.IGNORED

        result = self.store.move_component(old_index, new_index)
        return DropOutcome.MOVED if isinstance(result, Success) else DropOutcome.IGNORED

    def add_from_palette(self, component_type: str) -> Result[Component, MutationError]:
        """Append a fresh component of ``component_type`` (palette click)."""
        try:
            payload = self.registry.new_component(component_type)
        except ValidationError as e:
            return Failure(MutationError(str(e)))
        return Success(self.store.add_component(payload))

    def nudge(self, component_id: str, offset: int) -> Result[Component, MutationError]:
        """Move a component ``offset`` positions (keyboard reorder)."""
        index = self.store.index_of(component_id)
        if index == -1:
            return Failure(MutationError("Component not found", component_id=component_id))
        return self.store.move_component(index, index + offset)
