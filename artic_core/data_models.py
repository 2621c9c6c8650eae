"""Core data structures for the artwork browser.

Contains the record and page models shared by the fetcher, the selection
logic and the terminal session.
"""
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Artwork:
    """A single artwork row. Only ``id`` matters to the selection logic."""
    id: int
    title: Optional[str] = None
    place_of_origin: Optional[str] = None
    artist_display: Optional[str] = None
    inscriptions: Optional[str] = None
    date_start: Optional[int] = None
    date_end: Optional[int] = None

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "Artwork":
        """Build an artwork from one item of the API ``data`` list."""
        record_id = item.get("id")
        if isinstance(record_id, bool) or not isinstance(record_id, int):
            raise ValueError(f"Artwork item has no integer id: {record_id!r}")

        return cls(
            id=record_id,
            title=item.get("title"),
            place_of_origin=item.get("place_of_origin"),
            artist_display=item.get("artist_display"),
            inscriptions=item.get("inscriptions"),
            date_start=item.get("date_start"),
            date_end=item.get("date_end"),
        )


# Display columns in table order
ARTWORK_FIELDS: Tuple[str, ...] = (
    "title",
    "place_of_origin",
    "artist_display",
    "inscriptions",
    "date_start",
    "date_end",
)


@dataclass(frozen=True)
class Page:
    """One fetched batch of artworks plus pagination metadata.

    ``page_index`` is 1-based. Pages are replaced on navigation, never edited.
    """
    records: Tuple[Artwork, ...] = ()
    total_count: int = 0
    page_size: int = 12
    page_index: int = 1

    def __post_init__(self) -> None:
        # Accept any sequence but always store a tuple
        if not isinstance(self.records, tuple):
            object.__setattr__(self, "records", tuple(self.records))

    @classmethod
    def empty(cls, page_index: int = 1, page_size: int = 12) -> "Page":
        """Degenerate page used when a fetch fails."""
        return cls(records=(), total_count=0, page_size=page_size, page_index=page_index)

    @property
    def ids(self) -> Tuple[int, ...]:
        return tuple(record.id for record in self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def total_pages(self) -> int:
        if self.total_count <= 0 or self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_next(self) -> bool:
        return self.page_index < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page_index > 1

    @property
    def first_offset(self) -> int:
        """Zero-based offset of the first row of this page in the full set."""
        return (self.page_index - 1) * self.page_size

    def contains(self, record_id: int) -> bool:
        return record_id in self.ids

    def __len__(self) -> int:
        return len(self.records)


# Ordered subsequence of a page's records that are currently selected
PageSelectionView = Tuple[Artwork, ...]
