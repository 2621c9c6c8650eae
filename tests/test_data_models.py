"""Tests for Artwork and Page models."""
import pytest

from artic_core.data_models import Artwork, Page


class TestArtworkFromApi:

    def test_reads_display_fields(self):
        artwork = Artwork.from_api({
            "id": 27992,
            "title": "A Sunday on La Grande Jatte",
            "place_of_origin": "France",
            "artist_display": "Georges Seurat",
            "inscriptions": None,
            "date_start": 1884,
            "date_end": 1886,
            "thumbnail": {"width": 100},
        })
        assert artwork.id == 27992
        assert artwork.title == "A Sunday on La Grande Jatte"
        assert artwork.inscriptions is None
        assert artwork.date_end == 1886

    def test_missing_fields_become_none(self):
        artwork = Artwork.from_api({"id": 5})
        assert artwork == Artwork(id=5)

    @pytest.mark.parametrize("bad_id", [None, "12", 1.5, True])
    def test_rejects_non_integer_id(self, bad_id):
        with pytest.raises(ValueError):
            Artwork.from_api({"id": bad_id, "title": "x"})


class TestPage:

    def test_ids_keep_page_order(self):
        page = Page(records=[Artwork(id=3), Artwork(id=1), Artwork(id=2)], total_count=3)
        assert page.ids == (3, 1, 2)
        assert isinstance(page.records, tuple)

    def test_empty_page(self):
        page = Page.empty(4, 12)
        assert page.is_empty
        assert page.total_count == 0
        assert page.page_index == 4
        assert page.total_pages == 0
        assert len(page) == 0

    def test_pagination_helpers(self):
        page = Page(records=(Artwork(id=1),), total_count=25, page_size=12, page_index=2)
        assert page.total_pages == 3
        assert page.has_next
        assert page.has_previous
        assert page.first_offset == 12

    def test_last_page_has_no_next(self):
        page = Page(records=(Artwork(id=1),), total_count=25, page_size=12, page_index=3)
        assert not page.has_next

    def test_contains(self, page1):
        assert page1.contains(1)
        assert not page1.contains(13)

    def test_page_is_immutable(self, page1):
        with pytest.raises(AttributeError):
            page1.page_index = 5
