"""Read-only selection summary consumed by the display layer."""
from dataclasses import dataclass
from typing import Sized

from ..data_models import Page, PageSelectionView


@dataclass(frozen=True)
class SelectionSummary:
    """Counts and header-checkbox flags for the current page."""
    all_selected_on_page: bool = False
    partial_selected_on_page: bool = False
    global_selected_count: int = 0
    page_selected_count: int = 0
    page_record_count: int = 0

    @property
    def status_text(self) -> str:
        return f"{self.global_selected_count} row(s) selected across all pages"


def summarize(page: Page, view: PageSelectionView, selection: Sized) -> SelectionSummary:
    """
    Derive the summary from the page, its selection view and the full set.

    ``partial_selected_on_page`` drives the indeterminate header checkbox.
    """
    page_count = len(page.records)
    selected_on_page = len(view)

    return SelectionSummary(
        all_selected_on_page=page_count > 0 and selected_on_page == page_count,
        partial_selected_on_page=0 < selected_on_page < page_count,
        global_selected_count=len(selection),
        page_selected_count=selected_on_page,
        page_record_count=page_count,
    )
