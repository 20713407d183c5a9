"""
Utility modules for search-filter.
"""

from .errors import (
    SearchFilterError,
    InvalidArgumentError,
    ProviderError,
    ConfigurationError,
    handle_http_error,
)
from .logging_config import (
    configure_logging,
    ProgressLogger,
)

__all__ = [
    # Errors
    "SearchFilterError",
    "InvalidArgumentError",
    "ProviderError",
    "ConfigurationError",
    "handle_http_error",
    # Logging
    "configure_logging",
    "ProgressLogger",
]
