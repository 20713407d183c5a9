"""
Result filtering.
"""

from .result_filter import (
    ResultFilter,
    apply_filters,
    matches,
    matches_date_window,
    matches_domain,
    matches_language,
    matches_mime_type,
)

__all__ = [
    "ResultFilter",
    "apply_filters",
    "matches",
    "matches_date_window",
    "matches_domain",
    "matches_language",
    "matches_mime_type",
]
