"""structlog configuration for the command-line entry point.

Log output always goes to stderr; stdout carries only the head commit id.
"""

import logging
import sys

import structlog


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog for console output.

    Args:
        verbose: Emit debug events instead of warnings and above only
    """
    level = logging.DEBUG if verbose else logging.WARNING

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S", utc=False),
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.RichTracebackFormatter(),
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
