"""
Search provider clients.
"""

from .base import SearchClient
from .google_search import GoogleSearchClient, parse_timestamp

__all__ = [
    "SearchClient",
    "GoogleSearchClient",
    "parse_timestamp",
]
