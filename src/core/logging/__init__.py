"""
Logging configuration module for structured logging.

This module configures the application's logging system using structlog.
It provides structured logging capabilities with JSON formatting for production
and human-readable console output for development.

The logging configuration includes:
- Timestamp formatting
- Log level inclusion
- Request-scoped context (correlation ids) merged from contextvars
- JSON/Console output based on environment
- Logger caching
"""

import logging
import sys

import structlog


def configure_logging(
    log_level: str = "INFO", json_logs: bool = False, cache_loggers: bool = True
) -> None:
    """
    Configures the application's logging system.

    This function sets up structlog with:
    1. Context variables bound per request (e.g. correlation_id)
    2. ISO format timestamps
    3. Log level inclusion
    4. JSON formatting for production, console formatting for development
    5. Standard library logger factory and bound logger

    Loggers are cached on first use unless ``cache_loggers`` is false, which
    tests need so that ``structlog.testing.capture_logs`` can intercept them.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=cache_loggers,
    )


logger = structlog.get_logger()
