"""User-visible notifications for save/export outcomes."""

from typing import Protocol

from ..core import get_logger

logger = get_logger(__name__)


class Notifier(Protocol):
    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class LoggingNotifier:
    """Notifier that writes to the structured log"""

    def success(self, message: str) -> None:
        logger.info("notify_success", message=message)

    def error(self, message: str) -> None:
        logger.warning("notify_error", message=message)
