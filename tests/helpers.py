"""Shared test doubles and builders.

Imported directly by test modules; fixtures live in conftest.py.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import json
from typing import Any, Callable

import httpx

from search_filter.models import SearchResult
from search_filter.search import GoogleSearchClient, SearchClient


def make_result(n: int, **overrides: Any) -> SearchResult:
    """Build a distinct result; fields can be overridden per test."""
    fields: dict[str, Any] = {
        "title": f"Result {n}",
        "link": f"https://example.com/page/{n}",
        "display_link": "example.com",
        "snippet": f"Snippet {n}",
        "mime_type": "text/html",
        "language_code": "en-US",
        "safe": True,
    }
    fields.update(overrides)
    return SearchResult(**fields)


def make_item(n: int, **overrides: Any) -> dict[str, Any]:
    """Build a raw Custom Search API item."""
    item: dict[str, Any] = {
        "title": f"Result {n}",
        "link": f"https://example.com/page/{n}",
        "displayLink": "example.com",
        "snippet": f"Snippet {n}",
    }
    item.update(overrides)
    return item


@dataclass
class FakeSearchClient(SearchClient):
    """Search client double returning canned results and recording calls."""

    results: list[SearchResult] = field(default_factory=list)
    error: Exception | None = None
    calls: list[tuple[str, int]] = field(default_factory=list)
    closed: bool = False

    def search(self, query: str, max_results: int) -> list[SearchResult]:
        self.validate_request(query, max_results)
        self.calls.append((query, max_results))
        if self.error is not None:
            raise self.error
        return self.results[:max_results]

    def close(self) -> None:
        self.closed = True


@dataclass
class PagedProvider:
    """Serves Custom Search pages from a fixed pool of items.

    Records the query parameters of every request so tests can assert on
    offsets and page sizes. With ``short_pages`` each page holds two fewer
    items than requested.
    """

    total: int
    short_pages: bool = False
    requests: list[dict[str, str]] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        params = dict(request.url.params)
        self.requests.append(params)
        start = int(params["start"])
        num = int(params["num"])
        if self.short_pages:
            num = max(num - 2, 1)
        first = start - 1
        last = min(first + num, self.total)
        items = [make_item(i) for i in range(first, last)]
        body: dict[str, Any] = {"items": items} if items else {}
        return httpx.Response(200, json=body)

    @property
    def offsets(self) -> list[int]:
        return [int(r["start"]) for r in self.requests]

    @property
    def page_sizes(self) -> list[int]:
        return [int(r["num"]) for r in self.requests]


def google_client(handler: Callable[[httpx.Request], httpx.Response]) -> GoogleSearchClient:
    """GoogleSearchClient wired to an in-process transport."""
    return GoogleSearchClient(
        api_key="test-key",
        search_engine_id="test-cx",
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


def static_response(
    status: int, body: Any = None, content: bytes | None = None
) -> Callable[[httpx.Request], httpx.Response]:
    """Handler answering every request with the same response."""

    def handler(request: httpx.Request) -> httpx.Response:
        if content is not None:
            return httpx.Response(status, content=content)
        return httpx.Response(status, content=json.dumps(body).encode())

    return handler
