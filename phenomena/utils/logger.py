"""Structured logging setup built on structlog."""

import logging
import sys
from typing import Optional

import structlog


def configure_logging(log_level: str = "INFO", debug: bool = False) -> None:
    """Configure stdlib logging and structlog for the whole process.

    Debug mode renders colourless key=value lines for the console; otherwise
    every event is emitted as one JSON object per line.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)

    renderer = (
        structlog.dev.ConsoleRenderer(colors=False)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, usually called with ``__name__``."""
    return structlog.get_logger(name)


def bind_request_id(request_id: str) -> None:
    """Attach a request id to every log event emitted by the current request."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()


def get_request_id() -> Optional[str]:
    """Request id bound for the current context, if any."""
    return structlog.contextvars.get_contextvars().get("request_id")
