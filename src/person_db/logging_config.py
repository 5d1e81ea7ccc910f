"""
Logging configuration.

Single entry point for structured logging. Level and format come from the
arguments or, when omitted, from Settings (PERSON_DB_LOG_LEVEL,
PERSON_DB_LOG_FORMAT).

Usage:
    from person_db.logging_config import configure_logging, get_logger

    configure_logging()
    log = get_logger(__name__)
    log.info("person_inserted", id=10004)
"""

import logging
import sys
from typing import Literal

import structlog
from structlog.types import Processor

from person_db.config import get_settings

# Track if logging has been configured
_configured = False


def configure_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None,
    format: Literal["json", "console"] | None = None,
    force: bool = False,
) -> None:
    """
    Configure structured logging for the application.

    Should be called once at start-up. Subsequent calls are no-ops unless
    force=True.

    Args:
        level: Log level (overrides PERSON_DB_LOG_LEVEL)
        format: Output format (overrides PERSON_DB_LOG_FORMAT)
        force: Reconfigure even if already configured
    """
    global _configured

    if _configured and not force:
        return

    settings = get_settings()
    log_level = (level or settings.log_level).upper()
    log_format = (format or settings.log_format).lower()

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
        structlog.processors.StackInfoRenderer(),
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer(default=str))
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure stdlib logging to match
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level),
        force=True,
    )
    logging.getLogger("person_db").setLevel(getattr(logging, log_level))

    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, optionally named."""
    return structlog.get_logger(name)


def is_configured() -> bool:
    """Check if logging has been configured."""
    return _configured
