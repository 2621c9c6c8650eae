import asyncio
import logging
from typing import Any, Callable, Iterable, List, Optional, Protocol

from .data_models import Artwork, Page, PageSelectionView
from .ui_logic import (
    BulkSelectResult,
    SelectionMutator,
    SelectionSet,
    SelectionSummary,
    reconcile,
    summarize,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 12


class PageFetcher(Protocol):
    """Anything that can fetch one page by 1-based index."""

    def fetch_page(self, page_index: int) -> Page:
        ...


class PageCoordinator:
    """Async coordinator tying the page fetcher to the selection set.

    Mutations and reconciliation run on the event loop; only the fetch is
    pushed to a worker thread. A fetch that completes after a newer
    navigation request is dropped.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        selection: Optional[SelectionSet] = None,
        *,
        page_size: Optional[int] = None,
    ) -> None:
        self.fetcher = fetcher
        self.selection = selection if selection is not None else SelectionSet()
        self.mutator = SelectionMutator(self.selection)
        self.page_size = page_size or getattr(fetcher, "page_size", DEFAULT_PAGE_SIZE)

        self.page: Page = Page.empty(1, self.page_size)
        self.view: PageSelectionView = ()
        self.summary: SelectionSummary = SelectionSummary()
        self.loading: bool = False
        self.requested_page_index: int = 1

        self._request_seq = 0
        self._callbacks: List[Callable[[], None]] = []

    @property
    def current_page_index(self) -> int:
        return self.page.page_index

    async def start(self, page_index: int = 1) -> bool:
        """Load the first page."""
        return await self.load_page(page_index)

    def stop(self) -> None:
        """Release the fetcher if it holds resources."""
        close = getattr(self.fetcher, "close", None)
        if callable(close):
            close()

    # ------------------------------------------------------------------
    def add_listener(self, callback: Callable[[], None]) -> None:
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def remove_listener(self, callback: Callable[[], None]) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def _notify_listeners(self) -> None:
        for callback in list(self._callbacks):
            try:
                callback()
            except Exception as exc:
                logger.error("Listener error: %s", exc)

    # ------------------------------------------------------------------
    async def load_page(self, page_index: int) -> bool:
        """Fetch ``page_index`` and make it the current page.

        Returns False when the response was superseded by a newer request
        and therefore discarded. The selection set is never changed here.
        """
        if isinstance(page_index, bool) or not isinstance(page_index, int) or page_index < 1:
            raise ValueError(f"page_index must be a positive integer, got {page_index!r}")

        self._request_seq += 1
        request_id = self._request_seq
        self.requested_page_index = page_index
        self.loading = True
        self._notify_listeners()

        try:
            page = await asyncio.to_thread(self.fetcher.fetch_page, page_index)
        except asyncio.CancelledError:
            # A cancelled latest request must not leave the page stuck loading
            if request_id == self._request_seq:
                self.loading = False
                self._notify_listeners()
            raise
        except Exception as exc:
            logger.error("Fetch for page %d failed: %s", page_index, exc)
            page = Page.empty(page_index, self.page_size)

        if request_id != self._request_seq:
            logger.info(
                "Discarding stale response for page %d (latest request is page %d)",
                page_index,
                self.requested_page_index,
            )
            return False

        self.loading = False
        self.page = page
        self.recompute()
        self._notify_listeners()
        return True

    async def next_page(self) -> bool:
        if not self.page.has_next:
            return False
        return await self.load_page(self.page.page_index + 1)

    async def previous_page(self) -> bool:
        if not self.page.has_previous:
            return False
        return await self.load_page(self.page.page_index - 1)

    async def refresh(self) -> bool:
        return await self.load_page(self.page.page_index)

    # ------------------------------------------------------------------
    def toggle_selection(self, new_page_selection: Iterable[Artwork]) -> bool:
        changed = self.mutator.toggle_selection(new_page_selection, self.page)
        self._after_mutation()
        return changed

    def toggle_select_all_on_page(self) -> bool:
        changed = self.mutator.toggle_select_all_on_page(self.page)
        self._after_mutation()
        return changed

    def select_first_n(self, n: Any) -> BulkSelectResult:
        result = self.mutator.select_first_n(n, self.page)
        if result.accepted:
            self._after_mutation()
        return result

    def _after_mutation(self) -> None:
        self.recompute()
        self._notify_listeners()

    def recompute(self) -> None:
        """Re-derive the page selection view and summary."""
        self.view = reconcile(self.page, self.selection)
        self.summary = summarize(self.page, self.view, self.selection)
