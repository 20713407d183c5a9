"""
Structured logging configuration for search-filter.
"""

import structlog
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(
    log_level: str = "WARNING",
    log_file: Optional[str] = None,
    json_logs: bool = False
) -> None:
    """
    Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path to log file
        json_logs: If True, output JSON formatted logs
    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    handlers = []

    # Logs go to stderr so stdout stays clean for results
    if json_logs:
        console_handler = logging.StreamHandler(sys.stderr)
    else:
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,  # structlog handles this
            show_path=False,
            rich_tracebacks=True
        )

    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    root_logger.handlers = handlers
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Silence noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


class ProgressLogger:
    """
    Structured progress events for a search run.
    """

    def __init__(self):
        self.logger = structlog.get_logger()

    def search_started(self, query: str, max_results: int) -> None:
        """Log start of a search."""
        self.logger.info(
            "search_started",
            query=query[:50],
            max_results=max_results
        )

    def search_completed(self, raw_count: int, duration_seconds: float) -> None:
        """Log completion of the fetch phase."""
        self.logger.info(
            "search_completed",
            raw_count=raw_count,
            duration_seconds=round(duration_seconds, 2)
        )

    def filter_applied(self, raw_count: int, filtered_count: int) -> None:
        """Log the outcome of the filter pass."""
        self.logger.info(
            "filter_applied",
            raw_count=raw_count,
            filtered_count=filtered_count,
            dropped=raw_count - filtered_count
        )

    def search_failed(self, query: str, error: str) -> None:
        """Log a failed search."""
        self.logger.error(
            "search_failed",
            query=query[:50],
            error=error
        )
