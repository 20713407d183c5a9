"""
Search Filter

Queries a web search API, paginates results up to a requested count, and
applies declarative filters (date window, domain allow/deny lists, MIME
type, language, safety) before printing them.
"""

__version__ = "1.0.0"

from .config import Settings, get_settings
from .core import FilteredSearch, execute_filtered_search
from .filters import ResultFilter, apply_filters
from .models import FilterCriteria, SearchResult
from .search import GoogleSearchClient, SearchClient
from .utils import (
    ConfigurationError,
    InvalidArgumentError,
    ProviderError,
    SearchFilterError,
)

__all__ = [
    "Settings",
    "get_settings",
    "FilteredSearch",
    "execute_filtered_search",
    "ResultFilter",
    "apply_filters",
    "FilterCriteria",
    "SearchResult",
    "GoogleSearchClient",
    "SearchClient",
    "ConfigurationError",
    "InvalidArgumentError",
    "ProviderError",
    "SearchFilterError",
    "__version__",
]
