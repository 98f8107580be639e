"""
Logging configuration for slackhook.

Structured logging via structlog with:
- JSON or console output
- Service name on every event
- Timing helper for webhook calls
- Masking of webhook tokens
"""

import logging
import sys
import time
from urllib.parse import urlsplit

import structlog


def configure_logging(
    service_name: str,
    level: str = "INFO",
    json_output: bool = True,
) -> None:
    """
    Configure structured logging.

    Args:
        service_name: Name added to every log event
        level: Standard logging level name
        json_output: Render JSON lines instead of console output
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_service_name(service_name),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def _add_service_name(service_name: str):
    """Processor to add service name to all logs."""

    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict

    return processor


class Timer:
    """
    Measures how long a webhook round trip takes.

    Usage:
        with Timer() as t:
            response = client.post(webhook_url, json=payload)
        logger.info("Slack message sent", duration_ms=t.duration_ms)
    """

    def __init__(self) -> None:
        self._started: float | None = None
        self._elapsed: float = 0.0

    def __enter__(self) -> "Timer":
        self._started = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        if self._started is not None:
            self._elapsed = time.perf_counter() - self._started

    @property
    def duration_ms(self) -> float:
        """Elapsed milliseconds, rounded to 2 decimal places."""
        return round(self._elapsed * 1000, 2)


def mask_secret(value: str, visible_chars: int = 8) -> str:
    """Keep the first ``visible_chars`` characters of a secret and elide the rest."""
    if not value:
        return ""
    if len(value) <= visible_chars:
        return value
    return value[:visible_chars] + "..."


def mask_webhook_url(url: str) -> str:
    """
    Hide the token part of a webhook URL.

    Only scheme, host and the first path segment survive, so
    ``https://hooks.slack.com/services/T000/B000/XXXX`` logs as
    ``https://hooks.slack.com/services/***``.
    """
    if not url:
        return ""
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        return mask_secret(url)
    segments = [s for s in parts.path.split("/") if s]
    if not segments:
        return f"{parts.scheme}://{parts.netloc}"
    if len(segments) == 1:
        return f"{parts.scheme}://{parts.netloc}/***"
    return f"{parts.scheme}://{parts.netloc}/{segments[0]}/***"
