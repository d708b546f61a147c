"""
Structured Logging Configuration
Builder-wide logging with structlog.
"""

import logging
import sys
from typing import Any

import structlog
from pythonjsonlogger import jsonlogger


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configure structured logging for the builder.

    Args:
        level: Log level name; unknown names fall back to INFO
        json_logs: Emit JSON lines instead of console output
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    if json_logs:
        handler.setFormatter(jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logging.basicConfig(level=log_level, handlers=[handler], format="%(message)s")

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(log_level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


class LogContext:
    """
    Keys bound onto every log line while active.

    ``bind`` and ``unbind`` are idempotent so a scope can be left from an
    error path and again from a normal close.
    """

    def __init__(self, **context: Any) -> None:
        self.context = context
        self.active = False

    def bind(self) -> None:
        if not self.active:
            structlog.contextvars.bind_contextvars(**self.context)
            self.active = True

    def unbind(self) -> None:
        if self.active:
            structlog.contextvars.unbind_contextvars(*self.context)
            self.active = False

    def __enter__(self) -> "LogContext":
        self.bind()
        return self

    def __exit__(self, *args: Any) -> None:
        self.unbind()
