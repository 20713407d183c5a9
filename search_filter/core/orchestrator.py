"""
Filtered search pipeline: fetch raw results, then filter them.
"""

import time
from typing import List, Optional
import logging

from ..config import Settings, get_settings
from ..filters import ResultFilter
from ..models import FilterCriteria, SearchResult
from ..search import GoogleSearchClient, SearchClient
from ..utils import ProgressLogger, SearchFilterError

logger = logging.getLogger(__name__)


class FilteredSearch:
    """
    Wires a search client and the result filter together.

    Each run is independent: no state is kept between queries.
    """

    def __init__(
        self,
        client: SearchClient,
        result_filter: Optional[ResultFilter] = None,
        progress: Optional[ProgressLogger] = None
    ):
        """
        Initialize the pipeline.

        Args:
            client: Search provider client
            result_filter: Filter to apply (default ResultFilter)
            progress: Optional progress logger
        """
        self.client = client
        self.result_filter = result_filter or ResultFilter()
        self.progress = progress or ProgressLogger()

    def run(self, query: str, criteria: FilterCriteria) -> List[SearchResult]:
        """
        Fetch up to criteria.max_results results and filter them.

        Args:
            query: Search query string
            criteria: Filter criteria (also sets the fetch count)

        Returns:
            Filtered results in provider order
        """
        self.progress.search_started(query, criteria.max_results)
        start_time = time.time()

        try:
            raw = self.client.search(query, criteria.max_results)
        except SearchFilterError as e:
            self.progress.search_failed(query, str(e))
            raise

        self.progress.search_completed(len(raw), time.time() - start_time)

        filtered = self.result_filter.apply(raw, criteria)
        self.progress.filter_applied(len(raw), len(filtered))
        return filtered


def execute_filtered_search(
    query: str,
    criteria: FilterCriteria,
    settings: Optional[Settings] = None
) -> List[SearchResult]:
    """
    One-shot convenience: build a Google client, search, filter, close.

    Args:
        query: Search query string
        criteria: Filter criteria
        settings: Application settings (loaded from the environment if None)

    Returns:
        Filtered results
    """
    settings = settings or get_settings()
    with GoogleSearchClient.from_settings(settings) as client:
        return FilteredSearch(client).run(query, criteria)
