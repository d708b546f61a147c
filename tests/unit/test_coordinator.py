"""Tests for drag and drop coordination."""

import pytest
from returns.result import Failure, Success

from webbuilder.core import extract_type
from webbuilder.dnd import CANVAS_DROP_ID, DragCoordinator, DropOutcome


@pytest.fixture
def coordinator(loaded_store, registry):
    return DragCoordinator(loaded_store, registry)


class TestPaletteDrop:
    """Test dropping palette entries."""

    def test_drop_on_canvas_appends(self, coordinator, loaded_store):
        outcome = coordinator.handle_drag_end("panel-pricing", CANVAS_DROP_ID)

        assert outcome is DropOutcome.INSERTED
        added = loaded_store.components[-1]
        assert added.type == "pricing"
        assert extract_type(added.id) == "pricing"
        assert added.data == coordinator.registry.create_default("pricing")

    def test_drop_on_component_appends(self, coordinator, loaded_store):
        """Landing on an existing component still appends."""
        outcome = coordinator.handle_drag_end("panel-spacer", "header-1")

        assert outcome is DropOutcome.INSERTED
        assert loaded_store.component_ids[:3] == ["header-1", "hero-2", "faq-3"]
        assert loaded_store.components[-1].type == "spacer"

    def test_drop_on_unknown_target_appends(self, coordinator, loaded_store):
        coordinator.handle_drag_end("panel-divider", "sidebar")

        assert loaded_store.components[-1].type == "divider"

    def test_unknown_type_ignored(self, coordinator, loaded_store):
        history_len = len(loaded_store.history)

        outcome = coordinator.handle_drag_end("panel-bogus", CANVAS_DROP_ID)

        assert outcome is DropOutcome.IGNORED
        assert len(loaded_store.history) == history_len

    def test_no_target_ignored(self, coordinator, loaded_store):
        assert coordinator.handle_drag_end("panel-hero", None) is DropOutcome.IGNORED
        assert len(loaded_store) == 3


class TestReorderDrop:
    """Test dragging existing components."""

    def test_move_onto_other(self, coordinator, loaded_store):
        outcome = coordinator.handle_drag_end("header-1", "faq-3")

        assert outcome is DropOutcome.MOVED
        assert loaded_store.component_ids == ["hero-2", "faq-3", "header-1"]

    def test_same_target_ignored(self, coordinator, loaded_store):
        history_len = len(loaded_store.history)

        assert coordinator.handle_drag_end("hero-2", "hero-2") is DropOutcome.IGNORED
        assert len(loaded_store.history) == history_len

    @pytest.mark.parametrize("active_id,over_id", [("gone-1", "hero-2"), ("hero-2", CANVAS_DROP_ID)])
    def test_stale_ids_ignored(self, coordinator, loaded_store, active_id, over_id):
        before = loaded_store.components

        assert coordinator.handle_drag_end(active_id, over_id) is DropOutcome.IGNORED
        assert loaded_store.components == before

    def test_uses_indices_at_drop_time(self, coordinator, loaded_store):
        """The list changing mid-drag is resolved against the latest state."""
        coordinator.handle_drag_start("header-1")
        loaded_store.delete_component("hero-2")

        coordinator.handle_drag_end("header-1", "faq-3")

        assert loaded_store.component_ids == ["faq-3", "header-1"]


class TestDragState:
    """Test active drag tracking."""

    def test_start_and_cancel(self, coordinator):
        coordinator.handle_drag_start("panel-hero")
        assert coordinator.active_id == "panel-hero"

        coordinator.handle_drag_cancel()
        assert coordinator.active_id is None

    def test_end_clears_active(self, coordinator):
        coordinator.handle_drag_start("hero-2")
        coordinator.handle_drag_end("hero-2", "faq-3")

        assert coordinator.active_id is None


class TestPaletteClickAndNudge:
    """Test non-drag entry points."""

    def test_add_from_palette(self, coordinator, loaded_store):
        result = coordinator.add_from_palette("countdown")

        assert isinstance(result, Success)
        assert loaded_store.components[-1].id == result.unwrap().id

    def test_add_unknown(self, coordinator):
        assert isinstance(coordinator.add_from_palette("bogus"), Failure)

    def test_nudge(self, coordinator, loaded_store):
        coordinator.nudge("faq-3", -1)

        assert loaded_store.component_ids == ["header-1", "faq-3", "hero-2"]

    @pytest.mark.parametrize("component_id,offset", [("header-1", -1), ("faq-3", 1), ("gone-1", 1)])
    def test_nudge_rejected(self, coordinator, loaded_store, component_id, offset):
        before = loaded_store.component_ids

        assert isinstance(coordinator.nudge(component_id, offset), Failure)
        assert loaded_store.component_ids == before
