"""
Structured logging configuration for the Lambda function.

Centralized logging setup with:
- Structured JSON output (one object per line for CloudWatch)
- Correlation ID tracking per invocation
- Timing helper
- Security-aware logging (no full identifiers)
"""

import logging
import sys
import time

import structlog


def configure_logging(service_name: str, log_level: str = "INFO") -> None:
    """
    Configure structured logging for the function.

    Args:
        service_name: Name of the service for log context
        log_level: Standard library level name (DEBUG, INFO, ...)
    """
    # The Lambda runtime installs its own root handler, replace it
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_service_name(service_name),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def _add_service_name(service_name: str):
    """Processor to add service name to all logs."""

    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict

    return processor


def set_correlation_id(cid: str) -> None:
    """Bind the correlation ID to every log line of the current invocation."""
    structlog.contextvars.bind_contextvars(correlation_id=cid)


def get_correlation_id() -> str:
    return structlog.contextvars.get_contextvars().get("correlation_id", "")


class Timer:
    """Wall-clock duration of a block."""

    def __init__(self):
        self._start: float = 0
        self._end: float = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self._end = time.perf_counter()

    @property
    def duration_ms(self) -> float:
        """Duration in milliseconds, rounded to 2 decimal places."""
        return round((self._end - self._start) * 1000, 2)


def sanitize_for_logging(value: str, visible_chars: int = 8) -> str:
    """Truncate a user identifier before it reaches the logs."""
    return value if len(value) <= visible_chars else f"{value[:visible_chars]}..."
