"""
Projection of the selection set onto the loaded page.

The page selection view is derived data: it is recomputed from the page and
the selection set after every fetch and every mutation, never stored as
truth of its own.
"""
from typing import Container

from ..data_models import Page, PageSelectionView


def reconcile(page: Page, selection: Container[int]) -> PageSelectionView:
    """
    Compute which records of ``page`` are selected.

    Args:
        page: The currently loaded page
        selection: Selected ids, a SelectionSet or any id container

    Returns:
        Ordered subsequence of ``page.records`` whose id is selected
    """
    return tuple(record for record in page.records if record.id in selection)
