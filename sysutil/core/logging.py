"""
sysutil - Structured Logging Module

Log level and renderer come from Settings (SYSUTIL_LOG_LEVEL, SYSUTIL_LOG_JSON).
Host bootstrap code calls configure_logging() once; every module obtains its
logger through get_logger().

Patterns Applied:
- One-time configure_logging() at startup
- structlog BoundLogger filtered at the configured level

Anti-Patterns Avoided:
- structlog.configure() called per get_logger() - PREVENTED via _configured flag
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, Processor

from sysutil.core.config import Settings, get_settings

_configured: bool = False


def level_from_name(name: str) -> int:
    """Map a level name such as 'debug' to its logging constant, INFO if unknown."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def tag_library(
    logger: logging.Logger,  # noqa: ARG001 - Required by structlog interface
    method_name: str,  # noqa: ARG001 - Required by structlog interface
    event_dict: EventDict,
) -> EventDict:
    """Mark the entry as emitted by sysutil so host logs can be filtered."""
    event_dict.setdefault("library", "sysutil")
    return event_dict


def build_processors(json_output: bool) -> list[Processor]:
    """Processor chain ending in a JSON or console renderer."""
    renderer: Processor = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        tag_library,
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog from settings.

    Later calls are no-ops until reset_logging().

    Args:
        settings: Source of log_level and log_json; the cached settings when None.
    """
    global _configured

    if _configured:
        return

    settings = settings or get_settings()
    level = level_from_name(settings.log_level)

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)

    structlog.configure(
        processors=build_processors(settings.log_json),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    _configured = True


def get_logger(name: str) -> Any:
    """Get a structured logger; structlog defaults apply until configured."""
    return structlog.get_logger(name)


def reset_logging() -> None:
    """Reset logging configuration for testing."""
    global _configured
    _configured = False
    structlog.reset_defaults()
