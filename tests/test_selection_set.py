"""Tests for SelectionSet state and change notifications."""
from artic_core.ui_logic import SelectionEvent, SelectionSet


class TestSelectionSetState:

    def test_starts_empty(self, selection):
        assert len(selection) == 0
        assert not selection.has_selection()
        assert selection.get_selected_ids() == []

    def test_seeded_ids(self):
        selection = SelectionSet([3, 1, 2])
        assert selection.get_selected_ids() == [1, 2, 3]
        assert list(selection) == [1, 2, 3]
        assert 2 in selection
        assert selection.is_selected(3)

    def test_add_and_discard(self, selection):
        assert selection.add_many([1, 2])
        assert not selection.add_many([1])
        assert selection.discard_many([2, 99])
        assert selection.snapshot() == frozenset({1})

    def test_discard_unknown_is_no_change(self, selection):
        selection.add_many([1])
        assert not selection.discard_many([5])

    def test_replace(self):
        selection = SelectionSet([1, 2, 3])
        assert selection.replace([3, 4])
        assert selection.get_selected_ids() == [3, 4]
        assert not selection.replace([3, 4])

    def test_clear(self):
        selection = SelectionSet([1, 2])
        assert selection.clear()
        assert not selection.clear()
        assert len(selection) == 0

    def test_apply_removes_before_adding(self):
        selection = SelectionSet([1, 2, 3])
        assert selection.apply({2}, {1, 2, 3})
        assert selection.get_selected_ids() == [2]

    def test_state_summary(self):
        selection = SelectionSet([4, 2])
        summary = selection.get_state_summary()
        assert summary["total_selected"] == 2
        assert summary["selected_ids"] == [2, 4]
        assert summary["callback_count"] == 0


class TestSelectionSetCallbacks:

    def test_event_describes_change(self):
        selection = SelectionSet([1, 2])
        events = []
        selection.register_callback(events.append)

        selection.apply({3}, {1}, "toggle")

        assert len(events) == 1
        event = events[0]
        assert isinstance(event, SelectionEvent)
        assert event.added == frozenset({3})
        assert event.removed == frozenset({1})
        assert event.selection_type == "toggle"
        assert event.total_selected == 2

    def test_no_event_without_change(self, selection):
        events = []
        selection.register_callback(events.append)
        selection.discard_many([1])
        assert events == []

    def test_register_twice_notifies_once(self, selection):
        events = []
        selection.register_callback(events.append)
        selection.register_callback(events.append)
        selection.add_many([1])
        assert len(events) == 1

    def test_unregister(self, selection):
        events = []
        selection.register_callback(events.append)
        selection.unregister_callback(events.append)
        selection.add_many([1])
        assert events == []

    def test_failing_callback_does_not_block_change(self, selection):
        def broken(event):
            raise RuntimeError("boom")

        events = []
        selection.register_callback(broken)
        selection.register_callback(events.append)

        assert selection.add_many([7])
        assert 7 in selection
        assert len(events) == 1
