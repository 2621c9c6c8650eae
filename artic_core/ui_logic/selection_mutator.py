"""
User-driven changes to the selection set.

Every operation takes the currently loaded page and changes only the
selection set. The table reports the complete new selection for a page,
not a delta, so page-level updates always remove the page's ids before
adding the reported ones.
"""
import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ..data_models import Artwork, Page
from .selection_set import SelectionSet

logger = logging.getLogger(__name__)

# Leading integer of a free-text count, e.g. " 12 rows" -> 12, "0x10" -> 16.
# ASCII digits only.
_LEADING_INT = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")


def parse_count(value: Any) -> Optional[int]:
    """
    Parse a requested row count from user input.

    Strings are read up to the first non-digit after an optional sign,
    so ``"5abc"`` gives 5 and ``"abc"`` is rejected. A ``0x`` prefix reads
    hexadecimal digits. Finite floats are truncated toward zero.

    Args:
        value: Raw count (int, float or str)

    Returns:
        The parsed integer, or None if the input is not numeric
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if not match:
            return None
        sign, hex_digits, digits = match.groups()
        if hex_digits is not None:
            if not hex_digits:
                return None
            number = int(hex_digits, 16)
        else:
            number = int(digits)
        return -number if sign == "-" else number
    return None


@dataclass(frozen=True)
class BulkSelectResult:
    """Outcome of a select-first-N request."""
    accepted: bool
    requested: Optional[int] = None
    selected: int = 0
    reason: Optional[str] = None

    @property
    def truncated(self) -> bool:
        """True when the page held fewer rows than were requested."""
        return self.accepted and self.requested is not None and self.selected < self.requested

    def __bool__(self) -> bool:
        return self.accepted


class SelectionMutator:
    """
    Applies row, page and bulk selection actions to a SelectionSet.

    All three operations are total: invalid input is reported through the
    return value and never raises.
    """

    def __init__(self, selection: SelectionSet) -> None:
        self.selection = selection

    def toggle_selection(self, new_page_selection: Iterable[Artwork], current_page: Page) -> bool:
        """
        Replace the page's share of the selection with ``new_page_selection``.

        Ids selected on other pages are left untouched. Records that do
        not belong to ``current_page`` are ignored.

        Args:
            new_page_selection: Complete new selection state for the page
            current_page: The page the table is showing

        Returns:
            True if the selection changed
        """
        page_ids = set(current_page.ids)
        requested_ids = {record.id for record in new_page_selection}

        foreign_ids = requested_ids - page_ids
        if foreign_ids:
            logger.warning("Ignoring %d id(s) not on page %d: %s",
                           len(foreign_ids), current_page.page_index, sorted(foreign_ids))

        return self.selection.apply(requested_ids & page_ids, page_ids, "toggle")

    def toggle_select_all_on_page(self, current_page: Page) -> bool:
        """
        Select every row on the page, or deselect them all if all are selected.

        Args:
            current_page: The page the table is showing

        Returns:
            True if the selection changed (False for an empty page)
        """
        if current_page.is_empty:
            return False

        page_ids = current_page.ids
        if all(record_id in self.selection for record_id in page_ids):
            return self.selection.discard_many(page_ids, "deselect_all_on_page")
        return self.selection.add_many(page_ids, "select_all_on_page")

    def select_first_n(self, n: Any, current_page: Page) -> BulkSelectResult:
        """
        Reset the selection to the first ``n`` rows of the current page.

        Only the loaded page is considered; no further pages are fetched
        when ``n`` exceeds its length. Selections on other pages are
        discarded.

        Args:
            n: Requested row count, parsed with ``parse_count``
            current_page: The page the table is showing

        Returns:
            BulkSelectResult, with ``accepted=False`` for invalid counts
        """
        count = parse_count(n)
        if count is None:
            logger.info("Bulk select declined: %r is not a number", n)
            return BulkSelectResult(accepted=False, reason=f"not a number: {n!r}")
        if count <= 0:
            logger.info("Bulk select declined: %d is not positive", count)
            return BulkSelectResult(accepted=False, requested=count, reason="count must be positive")

        chosen = current_page.records[:min(count, len(current_page.records))]
        self.selection.replace((record.id for record in chosen), "select_first_n")

        if len(chosen) < count:
            logger.info("Requested %d rows but page %d holds %d; selected %d",
                        count, current_page.page_index, len(current_page.records), len(chosen))

        return BulkSelectResult(accepted=True, requested=count, selected=len(chosen))
