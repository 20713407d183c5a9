"""
Abstract search client interface.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models import SearchResult
from ..utils import InvalidArgumentError


class SearchClient(ABC):
    """
    Abstraction over any search provider (Google, Bing, offline index, ...).
    """

    @abstractmethod
    def search(self, query: str, max_results: int) -> List[SearchResult]:
        """
        Send the query to the underlying search provider.

        Args:
            query: Free-text search query
            max_results: Maximum number of results desired

        Returns:
            List of search results (possibly empty, never None)

        Raises:
            InvalidArgumentError: If query is blank or max_results <= 0
            ProviderError: If the provider fails
        """
        pass

    @staticmethod
    def validate_request(query: str, max_results: int) -> None:
        """Check search arguments before any network call."""
        if query is None or not query.strip():
            raise InvalidArgumentError("query must not be empty or blank")
        if max_results <= 0:
            raise InvalidArgumentError("max_results must be positive")

    def close(self) -> None:
        """Release provider resources. No-op by default."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
