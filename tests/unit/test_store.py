"""Tests for the builder state store."""

import pytest
from hypothesis import given, settings, strategies as st
from returns.result import Failure, Success

from webbuilder.core import HydrationError, extract_type
from webbuilder.registry import get_registry
from webbuilder.state import BuilderStore, Component, PreviewMode


def ids(store):
    return store.component_ids


# ============================================================================
# History choke point
# ============================================================================

class TestSetComponents:
    """Test the single history-append path."""

    def test_records_history(self, store, make_component):
        store.set_components([make_component("a")])
        store.set_components([make_component("a"), make_component("b")])

        assert store.history_index == len(store.history) - 1 == 1
        assert not store.can_redo()
        assert store.has_unsaved_changes

    def test_accepts_plain_mappings(self, store):
        store.set_components([{"id": "x-1", "type": "text", "data": {"content": "hi"}}])

        assert isinstance(store.components[0], Component)
        assert store.components[0].data == {"content": "hi"}

    def test_revision_and_listeners(self, store, make_component):
        seen = []
        unsubscribe = store.subscribe(lambda s: seen.append(s.revision))

        store.set_components([make_component("a")])
        unsubscribe()
        store.set_components([])

        assert seen == [1]
        assert store.revision == 2


class TestUndoRedo:
    """Test linear undo/redo."""

    def test_edit_then_undo_redo(self, store):
        """Undo restores the previous title, redo the edited one."""
        store.add_component({"id": "hero-1", "type": "hero", "data": {"title": "A"}})
        store.update_component("hero-1", {"data": {"title": "B"}})

        assert store.undo() is True
        assert store.components[0].data["title"] == "A"
        assert store.redo() is True
        assert store.components[0].data["title"] == "B"

    def test_boundaries(self, store, make_component):
        assert store.undo() is False
        store.add_component(make_component("a"))

        assert store.undo() is False
        assert store.redo() is False

    def test_new_edit_discards_redo(self, store, make_component):
        store.add_component(make_component("a"))
        store.add_component(make_component("b"))
        store.undo()

        store.add_component(make_component("c"))

        assert ids(store) == ["a", "c"]
        assert not store.can_redo()

    def test_history_limit(self, make_component):
        store = BuilderStore(history_limit=5)
        for i in range(20):
            store.add_component(make_component(f"c{i}"))

        assert len(store.history) == 5
        assert store.history_index == 4

    def test_structural_sharing(self, loaded_store):
        """Unchanged components are shared between snapshots."""
        before = loaded_store.components
        loaded_store.update_component("hero-2", {"data": {"title": "Changed"}})
        after = loaded_store.components

        assert after[0] is before[0]
        assert after[2] is before[2]
        assert after[1] is not before[1]


# ============================================================================
# Structural operations
# ============================================================================

class TestAdd:
    """Test insertion."""

    def test_append_and_insert(self, store, make_component):
        store.add_component(make_component("a"))
        store.add_component(make_component("c"))
        store.add_component(make_component("b"), 1)

        assert ids(store) == ["a", "b", "c"]

    @pytest.mark.parametrize("index,expected", [(99, ["a", "b", "x"]), (-5, ["x", "a", "b"])])
    def test_index_clamped(self, store, make_component, index, expected):
        store.set_components([make_component("a"), make_component("b")])

        store.add_component(make_component("x"), index)

        assert ids(store) == expected

    def test_caller_payload_not_aliased(self, store):
        payload = {"id": "h-1", "type": "header", "data": {"links": ["Home"]}}

        store.add_component(payload)
        payload["data"]["links"].append("Later")

        assert store.components[0].data["links"] == ["Home"]
        assert store.history[-1][0].data["links"] == ["Home"]


class TestUpdate:
    """Test shallow-merge updates."""

    def test_shallow_merge(self, loaded_store):
        """Top-level keys are replaced, not deep-merged."""
        result = loaded_store.update_component("hero-2", {"data": {"title": "New"}})

        assert isinstance(result, Success)
        assert loaded_store.find("hero-2").data == {"title": "New"}

    def test_missing_id_rejected(self, loaded_store):
        """A stale id is rejected without touching history."""
        history_len = len(loaded_store.history)

        result = loaded_store.update_component("gone-1", {"data": {}})

        assert isinstance(result, Failure)
        assert result.failure().component_id == "gone-1"
        assert len(loaded_store.history) == history_len
        assert not loaded_store.has_unsaved_changes

    @pytest.mark.parametrize("updates", [{"id": "other-1"}, {"type": "footer"}])
    def test_identity_is_immutable(self, loaded_store, updates):
        result = loaded_store.update_component("hero-2", updates)

        assert isinstance(result, Failure)
        assert loaded_store.find("hero-2").type == "hero"

    def test_same_id_in_updates_allowed(self, loaded_store):
        result = loaded_store.update_component("hero-2", {"id": "hero-2", "data": {}})

        assert isinstance(result, Success)


class TestDelete:
    """Test removal."""

    def test_delete(self, loaded_store):
        result = loaded_store.delete_component("hero-2")

        assert result.unwrap().id == "hero-2"
        assert ids(loaded_store) == ["header-1", "faq-3"]

    def test_delete_clears_selection(self, loaded_store):
        loaded_store.select_component("hero-2")

        loaded_store.delete_component("hero-2")

        assert loaded_store.selected_component is None
        assert loaded_store.selected_id is None

    def test_delete_keeps_other_selection(self, loaded_store):
        loaded_store.select_component("faq-3")

        loaded_store.delete_component("hero-2")

        assert loaded_store.selected_component.id == "faq-3"

    def test_missing_id_pushes_no_history(self, loaded_store):
        history_len = len(loaded_store.history)

        result = loaded_store.delete_component("gone-1")

        assert isinstance(result, Failure)
        assert len(loaded_store.history) == history_len
        assert not loaded_store.has_unsaved_changes


class TestMove:
    """Test reordering."""

    def test_move_forward(self, loaded_store):
        """[A,B,C] moving 0 to 2 yields [B,C,A]."""
        loaded_store.move_component(0, 2)

        assert ids(loaded_store) == ["hero-2", "faq-3", "header-1"]

    def test_move_backward(self, loaded_store):
        loaded_store.move_component(2, 0)

        assert ids(loaded_store) == ["faq-3", "header-1", "hero-2"]

    @pytest.mark.parametrize("from_index,to_index", [(-1, 0), (0, 3), (5, 1), (0, -1)])
    def test_out_of_range_rejected(self, loaded_store, from_index, to_index):
        before = loaded_store.components
        history_len = len(loaded_store.history)

        result = loaded_store.move_component(from_index, to_index)

        assert isinstance(result, Failure)
        assert loaded_store.components == before
        assert len(loaded_store.history) == history_len

    def test_same_index_is_noop(self, loaded_store):
        history_len = len(loaded_store.history)

        result = loaded_store.move_component(1, 1)

        assert result.unwrap().id == "hero-2"
        assert len(loaded_store.history) == history_len


class TestDuplicate:
    """Test duplication."""

    def test_duplicate(self, loaded_store):
        source = loaded_store.find("faq-3")

        copy = loaded_store.duplicate_component("faq-3").unwrap()

        assert loaded_store.index_of(copy.id) == loaded_store.index_of("faq-3") + 1
        assert copy.id != source.id
        assert extract_type(copy.id) == "faq"
        assert copy.type == source.type
        assert copy.data == source.data
        assert copy.data is not source.data
        assert copy.data["items"] is not source.data["items"]

    def test_duplicate_middle(self, loaded_store):
        copy = loaded_store.duplicate_component("header-1").unwrap()

        assert ids(loaded_store) == ["header-1", copy.id, "hero-2", "faq-3"]

    def test_missing(self, loaded_store):
        assert isinstance(loaded_store.duplicate_component("gone-1"), Failure)


# ============================================================================
# Selection and flags
# ============================================================================

class TestSelection:
    """Test derived selection."""

    def test_select_by_component_or_id(self, loaded_store):
        loaded_store.select_component(loaded_store.components[0])
        assert loaded_store.selected_id == "header-1"

        loaded_store.select_component("faq-3")
        assert loaded_store.selected_component.id == "faq-3"

        loaded_store.clear_selection()
        assert loaded_store.selected_component is None

    def test_selection_tracks_updates(self, loaded_store):
        """The selected component always reflects the live list."""
        loaded_store.select_component("hero-2")

        loaded_store.update_component("hero-2", {"data": {"title": "Fresh"}})

        assert loaded_store.selected_component.data["title"] == "Fresh"

    def test_selection_follows_undo(self, store, make_component):
        store.add_component(make_component("a"))
        store.add_component(make_component("b"))
        store.select_component("b")

        store.undo()

        assert store.selected_id == "b"
        assert store.selected_component is None

    def test_selection_not_in_history(self, loaded_store):
        history_len = len(loaded_store.history)

        loaded_store.select_component("hero-2")

        assert len(loaded_store.history) == history_len


class TestFlags:
    """Test UI and save flags."""

    def test_preview_mode(self, store):
        store.set_preview_mode("mobile")

        assert store.preview_mode is PreviewMode.MOBILE
        assert store.preview_mode.max_width == 375
        with pytest.raises(ValueError):
            store.set_preview_mode("watch")

    def test_panels(self, store):
        store.toggle_component_panel()
        store.toggle_property_panel()

        assert not store.show_component_panel
        assert not store.show_property_panel

    def test_mark_as_saved(self, store, make_component):
        store.add_component(make_component("a"))
        store.mark_as_saved()

        assert not store.has_unsaved_changes

    def test_reset(self, loaded_store):
        loaded_store.select_component("hero-2")
        loaded_store.set_saving(True)

        loaded_store.reset()

        assert loaded_store.components == ()
        assert loaded_store.history == ()
        assert loaded_store.selected_id is None
        assert not loaded_store.is_saving

    def test_create(self):
        store = BuilderStore.create(history_limit=3)

        assert store.components == ()
        assert store.history_index == -1
        assert store._history.limit == 3

    def test_dispose_drops_listeners(self, store, make_component):
        calls = []
        store.subscribe(lambda s: calls.append(1))

        store.dispose()
        calls.clear()
        store.add_component(make_component("a"))

        assert calls == []


# ============================================================================
# Hydration
# ============================================================================

class TestHydration:
    """Test loading persisted content."""

    def test_round_trip(self, store, sample_components):
        store.initialize_from_project({"content": {"components": sample_components}})

        assert store.serialize() == {"components": sample_components}
        assert store.history_index == 0
        assert len(store.history) == 1
        assert not store.has_unsaved_changes

    def test_json_string_content(self, store):
        store.initialize_from_project({"content": '{"components": [{"id": "t-1", "type": "text", "data": {}}]}'})

        assert ids(store) == ["t-1"]

    def test_object_with_content_attribute(self, store):
        class Project:
            content = {"components": []}

        store.initialize_from_project(Project())

        assert store.components == ()

    def test_missing_components_key(self, store):
        store.initialize_from_project({"content": {}})

        assert store.components == ()

    def test_extra_keys_preserved(self, store):
        item = {"id": "t-1", "type": "text", "data": {}, "locked": True}

        store.initialize_from_project({"content": {"components": [item]}})

        assert store.serialize()["components"] == [item]

    def test_absent_data_stays_absent(self, store):
        items = [{"id": "spacer-1", "type": "spacer"}, {"id": "t-2", "type": "text", "data": {}}]

        store.initialize_from_project({"content": {"components": items}})

        assert store.serialize() == {"components": items}
        assert store.components[0].data == {}

    def test_unknown_type_tolerated(self, store):
        store.initialize_from_project({"content": {"components": [{"id": "x-1", "type": "legacy", "data": {}}]}})

        assert store.components[0].type == "legacy"

    def test_clears_selection_and_history(self, loaded_store, sample_components):
        loaded_store.select_component("hero-2")
        loaded_store.delete_component("faq-3")

        loaded_store.initialize_from_project({"content": {"components": sample_components}})

        assert loaded_store.selected_id is None
        assert len(loaded_store.history) == 1

    @pytest.mark.parametrize(
        "content",
        [
            "{broken",
            "[1, 2]",
            None,
            {"components": "nope"},
            {"components": [42]},
            {"components": [{"type": "text", "data": {}}]},
            {"components": [{"id": "", "type": "text"}]},
        ],
    )
    def test_malformed_content(self, store, content):
        with pytest.raises(HydrationError):
            store.initialize_from_project({"content": content})

    def test_failed_hydration_leaves_state(self, loaded_store):
        before = loaded_store.components

        with pytest.raises(HydrationError):
            loaded_store.initialize_from_project({"content": "{broken"})

        assert loaded_store.components == before


# ============================================================================
# Properties
# ============================================================================

operations = st.lists(
    st.tuples(st.sampled_from(["add", "delete", "move", "duplicate"]), st.integers(0, 8), st.integers(0, 8)),
    max_size=25,
)


@given(operations)
@settings(max_examples=50, deadline=None)
def test_ids_stay_unique(ops):
    """Property: registry-minted ids never collide under any edit sequence."""
    store = BuilderStore()
    registry = get_registry()

    for op, a, b in ops:
        current = store.component_ids
        if op == "add":
            store.add_component(registry.new_component("text"), a)
        elif op == "delete" and current:
            store.delete_component(current[a % len(current)])
        elif op == "move":
            store.move_component(a, b)
        elif op == "duplicate" and current:
            store.duplicate_component(current[a % len(current)])

        assert len(set(store.component_ids)) == len(store.component_ids)
        if store.history:
            assert store.history_index == len(store.history) - 1


@given(st.integers(1, 6), st.integers(0, 5))
@settings(max_examples=30, deadline=None)
def test_undo_redo_inverse(count, undo_steps):
    """Property: redo after undo restores the visible list."""
    store = BuilderStore()
    for i in range(count):
        store.add_component({"id": f"c-{i}", "type": "text", "data": {"n": i}})

    for _ in range(undo_steps):
        store.undo()

    if store.can_undo():
        before = store.components
        store.undo()
        store.redo()
        assert store.components == before
