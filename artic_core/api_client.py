import logging
from typing import Any, Dict, List, Optional

import requests

from artic_config import BaseConfiguration
from artic_core.data_models import Artwork, Page

logger = logging.getLogger(__name__)


class ArticAPIError(Exception):
    """Base error for artworks API access."""


class APIRequestError(ArticAPIError):
    """Raised when a request fails or returns an unusable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ArticAPIClient:
    """Blocking page fetcher for the paged artworks endpoint."""

    def __init__(self, config: Optional[BaseConfiguration] = None,
                 session: Optional[requests.Session] = None):
        self.config = config or BaseConfiguration()
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    @property
    def page_size(self) -> int:
        return self.config.page_size

    def fetch_page(self, page_index: int) -> Page:
        """Fetch one page of artworks.

        Any failure is logged and turned into an empty page with a zero
        total, so callers never see an exception from the network.
        """
        if isinstance(page_index, bool) or not isinstance(page_index, int) or page_index < 1:
            raise ValueError(f"page_index must be a positive integer, got {page_index!r}")

        try:
            payload = self._get_json(self.config.artworks_url, {
                "page": page_index,
                "limit": self.page_size,
                "fields": ",".join(self.config.fields),
            })
            page = self._parse_page(payload, page_index)
            logger.info(f"Loaded page {page_index}: {len(page.records)} records of {page.total_count}")
            return page

        except ArticAPIError as e:
            logger.error(f"Fetch page {page_index} failed: {e}")
        except requests.RequestException as e:
            logger.error(f"Fetch page {page_index} error: {e}")

        return Page.empty(page_index, self.page_size)

    def _get_json(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        response = self.session.get(url, params=params, timeout=self.config.request_timeout)

        if response.status_code != 200:
            raise APIRequestError(
                f"{response.status_code} - {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise APIRequestError(f"Invalid JSON body: {e}", status_code=response.status_code) from e

        if not isinstance(data, dict):
            raise APIRequestError(f"Unexpected body type: {type(data).__name__}")
        return data

    def _parse_page(self, payload: Dict[str, Any], page_index: int) -> Page:
        items = payload.get("data") or []
        if not isinstance(items, list):
            raise APIRequestError(f"Unexpected 'data' type: {type(items).__name__}")

        records: List[Artwork] = []
        for item in items:
            if not isinstance(item, dict):
                logger.warning(f"Skipping non-object item on page {page_index}")
                continue
            try:
                records.append(Artwork.from_api(item))
            except ValueError as e:
                logger.warning(f"Skipping artwork on page {page_index}: {e}")

        pagination = payload.get("pagination") or {}
        total = pagination.get("total", 0) if isinstance(pagination, dict) else 0
        if isinstance(total, bool) or not isinstance(total, int) or total < 0:
            total = 0

        return Page(
            records=tuple(records),
            total_count=total,
            page_size=self.page_size,
            page_index=page_index,
        )

    def close(self) -> None:
        """Close the HTTP session"""
        self.session.close()
        logger.info("ArticAPIClient closed")

    def __enter__(self) -> "ArticAPIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
