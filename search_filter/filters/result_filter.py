"""
In-memory filtering of search results.

The filter is a pure, single pass over the input: it never mutates its
arguments, keeps input order, and stops as soon as the criteria's
result cap is reached.
"""

from typing import Iterable, List, Optional
import logging

from ..models import FilterCriteria, SearchResult

logger = logging.getLogger(__name__)


def _host_matches(host: str, domains: Iterable[str]) -> bool:
    """True if host equals a domain or is a subdomain of one (case-insensitive)."""
    host = host.lower()
    for domain in domains:
        domain = domain.lower()
        if host == domain or host.endswith("." + domain):
            return True
    return False


def matches_date_window(result: SearchResult, criteria: FilterCriteria) -> bool:
    """Results without an indexed time cannot be excluded by date."""
    indexed = result.indexed_time
    if indexed is None:
        return True
    if criteria.from_date is not None and indexed < criteria.from_date:
        return False
    if criteria.to_date is not None and indexed > criteria.to_date:
        return False
    return True


def matches_domain(result: SearchResult, criteria: FilterCriteria) -> bool:
    """Apply the whitelist, then the blacklist. Results without a host pass."""
    host = result.display_link
    if not host:
        return True
    if criteria.domain_whitelist and not _host_matches(host, criteria.domain_whitelist):
        return False
    if criteria.domain_blacklist and _host_matches(host, criteria.domain_blacklist):
        return False
    return True


def matches_mime_type(result: SearchResult, criteria: FilterCriteria) -> bool:
    if not criteria.mime_types:
        return True
    if result.mime_type is None:
        return False
    mime = result.mime_type.lower()
    return any(mime == m.lower() for m in criteria.mime_types)


def matches_language(result: SearchResult, criteria: FilterCriteria) -> bool:
    """Prefix match, so 'en' accepts 'en-US'."""
    if not criteria.language_codes:
        return True
    if result.language_code is None:
        return False
    lang = result.language_code.lower()
    return any(lang.startswith(code.lower()) for code in criteria.language_codes)


def matches(result: Optional[SearchResult], criteria: FilterCriteria) -> bool:
    """
    Check a single result against every active predicate.

    Args:
        result: Result to check (None never matches)
        criteria: Active filter criteria

    Returns:
        True if the result passes all checks
    """
    if result is None:
        return False
    return (
        matches_date_window(result, criteria)
        and matches_domain(result, criteria)
        and matches_mime_type(result, criteria)
        and matches_language(result, criteria)
        and (not criteria.safe_only or result.safe)
    )


class ResultFilter:
    """
    Pure in-memory filtering layer.

    Usage:
        filtered = ResultFilter().apply(results, criteria)
    """

    def apply(
        self,
        results: Optional[List[SearchResult]],
        criteria: Optional[FilterCriteria]
    ) -> List[SearchResult]:
        """
        Return the results matching all criteria, in input order.

        Args:
            results: Raw results (may be empty or None)
            criteria: Filter criteria; None returns a copy of the input

        Returns:
            New list of at most criteria.max_results results
        """
        if not results:
            return []
        if criteria is None:
            return list(results)

        filtered: List[SearchResult] = []
        for result in results:
            if not matches(result, criteria):
                continue
            filtered.append(result)
            if len(filtered) >= criteria.max_results:
                break

        logger.debug(f"Filter kept {len(filtered)} of {len(results)} results")
        return filtered


def apply_filters(
    results: Optional[List[SearchResult]],
    criteria: Optional[FilterCriteria]
) -> List[SearchResult]:
    """Functional shortcut for ResultFilter().apply()."""
    return ResultFilter().apply(results, criteria)
