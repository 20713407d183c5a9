"""
Error types for search and filtering failures.

No retry is performed anywhere: every failure surfaces to the caller.
"""

from typing import Optional
import logging

import httpx

logger = logging.getLogger(__name__)


class SearchFilterError(Exception):
    """Base class for all search-filter errors."""
    pass


class InvalidArgumentError(SearchFilterError, ValueError):
    """Bad query or result count, detected before any network call."""
    pass


class ProviderError(SearchFilterError):
    """The search provider failed or answered with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class ConfigurationError(SearchFilterError):
    """Required settings are missing or invalid."""
    pass


def handle_http_error(response: httpx.Response) -> None:
    """
    Convert a non-success HTTP response into a ProviderError.

    Args:
        response: The HTTP response to check

    Raises:
        ProviderError: For any non-2xx response
    """
    if response.is_success:
        return

    message = ""
    try:
        body = response.json()
    except ValueError:
        body = None

    # Google surfaces errors in an 'error' object
    if isinstance(body, dict):
        error_obj = body.get("error")
        if isinstance(error_obj, dict):
            message = error_obj.get("message", "")
        elif error_obj:
            message = str(error_obj)

    if not message:
        message = response.text[:200]

    logger.debug(f"Provider error response {response.status_code}: {message}")
    raise ProviderError(
        f"Non-success response from search provider: {response.status_code} - {message}",
        status_code=response.status_code
    )
