"""Shared test fixtures for the artwork selection tracker."""
import sys
from pathlib import Path

import pytest

# Make the repo root importable when running without an install
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

from artic_core.data_models import Artwork, Page  # noqa: E402
from artic_core.ui_logic import SelectionMutator, SelectionSet  # noqa: E402

PAGE_SIZE = 12


def make_page(page_index: int, page_size: int = PAGE_SIZE, total_count: int = 120) -> Page:
    """Page whose ids run consecutively, e.g. page 2 of size 12 holds 13..24."""
    first = (page_index - 1) * page_size + 1
    records = tuple(
        Artwork(id=record_id, title=f"Artwork {record_id}")
        for record_id in range(first, first + page_size)
    )
    return Page(records=records, total_count=total_count,
                page_size=page_size, page_index=page_index)


class FakeFetcher:
    """In-memory page fetcher serving consecutive-id pages."""

    def __init__(self, page_size: int = PAGE_SIZE, total_count: int = 120):
        self.page_size = page_size
        self.total_count = total_count
        self.calls = []
        self.fail_pages = set()
        self.closed = False

    def fetch_page(self, page_index: int) -> Page:
        self.calls.append(page_index)
        if page_index in self.fail_pages:
            return Page.empty(page_index, self.page_size)
        return make_page(page_index, self.page_size, self.total_count)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def page1():
    return make_page(1)


@pytest.fixture
def page2():
    return make_page(2)


@pytest.fixture
def empty_page():
    return Page.empty(3, PAGE_SIZE)


@pytest.fixture
def selection():
    return SelectionSet()


@pytest.fixture
def mutator(selection):
    return SelectionMutator(selection)


@pytest.fixture
def fetcher():
    return FakeFetcher()
