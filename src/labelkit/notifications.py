"""User-facing notification channel.

Notifications are non-blocking: sending one never raises and never stops
the caller. The CLI plugs in a console notifier; everything else defaults
to logging.
"""

from typing import Protocol

from labelkit.logging_config import get_logger

logger = get_logger(__name__)


class Notifier(Protocol):
    def info(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class LogNotifier:
    """Notifier that writes notifications to the structured log."""

    def info(self, message: str) -> None:
        logger.info("user_notification", level="info", message=message)

    def error(self, message: str) -> None:
        logger.error("user_notification", level="error", message=message)
