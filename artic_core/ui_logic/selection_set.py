"""
Selection state for the paginated artwork table.

Holds the set of selected record ids across all pages and notifies
registered callbacks when membership changes. Membership never depends on
which page is loaded. No UI framework dependencies.
"""
import logging
from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, Iterator, List, Optional, Set

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionEvent:
    """Represents a change of the selection set."""
    added: FrozenSet[int]
    removed: FrozenSet[int]
    selection_type: str = "update"  # "toggle", "select_all_on_page", "deselect_all_on_page", "select_first_n", "clear"
    total_selected: int = 0

    def __str__(self) -> str:
        return (f"SelectionEvent(type={self.selection_type}, +{len(self.added)}, "
                f"-{len(self.removed)}, total={self.total_selected})")


# Type alias for selection event callbacks
SelectionCallback = Callable[[SelectionEvent], None]


class SelectionSet:
    """
    Authoritative set of selected record ids, valid across every page.

    Created empty for a session and changed only through the mutation
    methods below, which the selection mutator drives. Page navigation
    never touches it.
    """

    def __init__(self, initial_ids: Optional[Iterable[int]] = None) -> None:
        """
        Initialize the selection set.

        Args:
            initial_ids: Optional ids to seed the selection with
        """
        self._selected_ids: Set[int] = set(initial_ids or ())
        self._callbacks: List[SelectionCallback] = []

    def register_callback(self, callback: SelectionCallback) -> None:
        """
        Register callback for selection change events.

        Args:
            callback: Function to call when selection changes
        """
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def unregister_callback(self, callback: SelectionCallback) -> None:
        """Unregister selection change callback."""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    # ------------------------------------------------------------------
    def is_selected(self, record_id: int) -> bool:
        return record_id in self._selected_ids

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._selected_ids

    def __len__(self) -> int:
        return len(self._selected_ids)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._selected_ids))

    def has_selection(self) -> bool:
        return bool(self._selected_ids)

    def get_selected_ids(self) -> List[int]:
        """
        Get all selected ids.

        Returns:
            Sorted list of selected ids (empty if no selection)
        """
        return sorted(self._selected_ids)

    def snapshot(self) -> FrozenSet[int]:
        return frozenset(self._selected_ids)

    # ------------------------------------------------------------------
    def add_many(self, record_ids: Iterable[int], selection_type: str = "update") -> bool:
        """
        Add ids to the selection.

        Args:
            record_ids: Ids to add
            selection_type: Label carried by the emitted event

        Returns:
            True if the selection changed
        """
        return self.apply(set(record_ids), set(), selection_type)

    def discard_many(self, record_ids: Iterable[int], selection_type: str = "update") -> bool:
        """
        Remove ids from the selection. Ids not selected are ignored.

        Returns:
            True if the selection changed
        """
        return self.apply(set(), set(record_ids), selection_type)

    def replace(self, record_ids: Iterable[int], selection_type: str = "update") -> bool:
        """
        Replace the whole selection with ``record_ids``.

        Returns:
            True if the selection changed
        """
        new_ids = set(record_ids)
        return self.apply(new_ids, self._selected_ids - new_ids, selection_type)

    def clear(self, selection_type: str = "clear") -> bool:
        """Clear all selections."""
        return self.apply(set(), set(self._selected_ids), selection_type)

    def apply(self, add: Set[int], remove: Set[int], selection_type: str = "update") -> bool:
        """
        Remove then add ids as one change, emitting a single event.

        Args:
            add: Ids that must be selected afterwards
            remove: Ids to deselect first; ids also in ``add`` stay selected
            selection_type: Label carried by the emitted event

        Returns:
            True if the selection changed
        """
        before = frozenset(self._selected_ids)
        self._selected_ids.difference_update(remove)
        self._selected_ids.update(add)
        after = frozenset(self._selected_ids)

        if before == after:
            return False

        self._notify_selection_change(SelectionEvent(
            added=after - before,
            removed=before - after,
            selection_type=selection_type,
            total_selected=len(after),
        ))
        return True

    def _notify_selection_change(self, event: SelectionEvent) -> None:
        logger.debug("Selection changed: %s", event)
        for callback in list(self._callbacks):
            try:
                callback(event)
            except Exception as e:
                # Callback failures never undo a selection change
                logger.error("Selection callback error: %s", e)

    def get_state_summary(self) -> dict[str, int | list[int]]:
        """
        Get summary of current selection state for debugging.

        Returns:
            Dictionary with selection state information
        """
        return {
            'total_selected': len(self._selected_ids),
            'selected_ids': self.get_selected_ids(),
            'callback_count': len(self._callbacks)
        }

    def __repr__(self) -> str:
        return f"SelectionSet(selected={len(self._selected_ids)})"
