"""Structured logging for labelkit.

Log lines go to stderr, rendered for a terminal or as JSON lines, and never
carry credential values: keys such as ``api_key`` or ``sas_url`` are masked
before rendering.

Usage:
    from labelkit.config import Settings
    from labelkit.logging_config import get_logger, setup_logging

    setup_logging(Settings())
    logger = get_logger(__name__)
    logger.info("project_opened", project_id=project.id)
"""

from collections.abc import Iterator, MutableMapping
from contextlib import contextmanager
import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from labelkit.config import Settings

REDACTED = "***"

SECRET_KEYS = frozenset(
    {"api_key", "apiKey", "key", "provider_options", "providerOptions", "sas_url", "sasUrl"}
)


def redact_secrets(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Mask credential values passed as log fields."""
    for name in SECRET_KEYS.intersection(event_dict):
        if event_dict[name] is not None:
            event_dict[name] = REDACTED
    return event_dict


def _renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=sys.stderr.isatty(),
        exception_formatter=structlog.dev.plain_traceback,
    )


def setup_logging(settings: Settings | None = None) -> None:
    """Route structlog through stdlib logging on stderr.

    Stdout is left alone so commands can print machine-readable output.
    """
    settings = settings or Settings()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(settings.log_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            redact_secrets,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(settings.log_format),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    structlog.contextvars.bind_contextvars(service=settings.service_name)

    get_logger(__name__).debug(
        "logging_initialized", log_format=settings.log_format, log_level=settings.log_level
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


@contextmanager
def bound_context(**values: Any) -> Iterator[None]:
    """Bind values into the structlog context for the duration of a block."""
    tokens = structlog.contextvars.bind_contextvars(**values)
    try:
        yield
    finally:
        structlog.contextvars.reset_contextvars(**tokens)
