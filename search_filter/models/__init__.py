"""
Data models for search filtering.
"""

from .search_result import SearchResult
from .filter_criteria import FilterCriteria, DEFAULT_MAX_RESULTS

__all__ = [
    "SearchResult",
    "FilterCriteria",
    "DEFAULT_MAX_RESULTS",
]
