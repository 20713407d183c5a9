"""
Core pipeline.
"""

from .orchestrator import FilteredSearch, execute_filtered_search

__all__ = [
    "FilteredSearch",
    "execute_filtered_search",
]
