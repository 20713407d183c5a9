"""
Google Custom Search JSON API client with pagination.
"""

import httpx
import time
from datetime import datetime
from typing import Any, Dict, List, Optional
import logging

from ..models import SearchResult
from ..utils import ProviderError, handle_http_error
from .base import SearchClient

logger = logging.getLogger(__name__)

# Metatag keys tried, in order, for the indexed timestamp
DATE_METATAGS = ("article:published_time", "og:updated_time", "date")


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp carrying a UTC offset.

    Best-effort: returns None for non-strings, unparsable values and
    timestamps without a timezone.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.utcoffset() is None:
        return None
    return parsed


def _text_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


class GoogleSearchClient(SearchClient):
    """
    Google Custom Search client.

    Pages through results 10 at a time until the requested count is
    reached or the provider returns an empty page. There is no caching
    and no retry: any failure aborts the whole search.
    """

    BASE_URL = "https://www.googleapis.com/customsearch/v1"
    MAX_PAGE_SIZE = 10

    def __init__(
        self,
        api_key: str,
        search_engine_id: str,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None
    ):
        """
        Initialize the Google search client.

        Args:
            api_key: Google API key
            search_engine_id: Custom Search Engine id (cx)
            timeout: Request timeout in seconds
            client: Optional preconfigured httpx client
        """
        self.api_key = api_key
        self.search_engine_id = search_engine_id
        self.client = client or httpx.Client(timeout=timeout)

    @classmethod
    def from_settings(cls, settings) -> "GoogleSearchClient":
        """Build a client from application settings."""
        return cls(
            api_key=settings.google_api_key,
            search_engine_id=settings.google_search_engine_id,
            timeout=settings.request_timeout
        )

    def search(self, query: str, max_results: int) -> List[SearchResult]:
        """
        Execute a paginated search.

        Args:
            query: Search query string
            max_results: Exact number of results wanted

        Returns:
            At most max_results results, in provider order
        """
        self.validate_request(query, max_results)

        page_size = min(max_results, self.MAX_PAGE_SIZE)
        start = 1
        results: List[SearchResult] = []
        start_time = time.time()

        while len(results) < max_results:
            remaining = max_results - len(results)
            page = self._fetch_page(query, start, min(page_size, remaining))
            if not page:
                break
            results.extend(page)
            # Offsets march by the fixed page size, even after a short page
            start += page_size

        results = results[:max_results]
        duration_ms = int((time.time() - start_time) * 1000)
        logger.info(f"Search completed: {len(results)} results in {duration_ms}ms")
        return results

    def _fetch_page(self, query: str, start: int, num: int) -> List[SearchResult]:
        """
        Request a single page of results.

        Args:
            query: Search query string
            start: 1-based offset of the first result
            num: Number of results to request (<= 10)

        Returns:
            Parsed results of the page (empty at end of results)
        """
        params = {
            "key": self.api_key,
            "cx": self.search_engine_id,
            "q": query,
            "start": start,
            "num": num,
        }

        logger.debug(f"Requesting page start={start} num={num} for query: {query[:50]}")

        try:
            response = self.client.get(self.BASE_URL, params=params)
        except httpx.HTTPError as e:
            raise ProviderError(f"Search request failed: {e}") from e

        if not response.is_success:
            handle_http_error(response)

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError("Search provider returned invalid JSON") from e

        return self._parse_results(data)

    def _parse_results(self, data: Dict[str, Any]) -> List[SearchResult]:
        """
        Parse a Custom Search response into SearchResult objects.

        Args:
            data: Raw API response

        Returns:
            List of SearchResult objects
        """
        results = []

        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list):
            return results

        for item in items:
            if not isinstance(item, dict):
                logger.warning("Skipping malformed search item")
                continue

            indexed_time = None
            language_code = None

            meta = self._first_metatags(item)
            if meta:
                for key in DATE_METATAGS:
                    indexed_time = parse_timestamp(meta.get(key))
                    if indexed_time is not None:
                        break
                language_code = _text_or_none(meta.get("og:locale"))

            results.append(SearchResult(
                title=_text_or_none(item.get("title")),
                link=_text_or_none(item.get("link")),
                display_link=_text_or_none(item.get("displayLink")),
                snippet=_text_or_none(item.get("snippet")),
                mime_type=_text_or_none(item.get("mime")),
                file_format=_text_or_none(item.get("fileFormat")),
                indexed_time=indexed_time,
                language_code=language_code,
                # Safe search is configured on the engine itself
                safe=True
            ))

        return results

    @staticmethod
    def _first_metatags(item: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        pagemap = item.get("pagemap")
        if not isinstance(pagemap, dict):
            return None
        metatags = pagemap.get("metatags")
        if isinstance(metatags, list) and metatags and isinstance(metatags[0], dict):
            return metatags[0]
        return None

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()
