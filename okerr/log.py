"""Logging setup for okerr, built on loguru.

The ``okerr`` logger namespace is disabled on import so the library stays
silent unless an application opts in with ``configure_logging``.
"""

from __future__ import annotations
import sys
from typing import Any, Optional

from loguru import logger

from .config import OkerrSettings, get_settings

LOGGER_NAME = "okerr"
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} | {message}"

_sink_id: Optional[int] = None


def configure_logging(settings: Optional[OkerrSettings] = None) -> Optional[int]:
    """Attach (or replace) the okerr stderr sink according to ``settings``.

    Only the okerr sink is touched; handlers owned by the application are left
    alone. loguru's default handler also writes to stderr, so an application
    that keeps it will see okerr records twice: call ``logger.remove()`` (or
    ``logger.configure(handlers=[...])``) before enabling okerr logging.

    Returns the loguru sink id, or ``None`` when logging is disabled.
    """
    global _sink_id
    settings = settings or get_settings()

    if _sink_id is not None:
        logger.remove(_sink_id)
        _sink_id = None

    if not settings.log_enabled:
        logger.disable(LOGGER_NAME)
        return None

    logger.enable(LOGGER_NAME)
    _sink_id = logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=settings.log_level.value,
        serialize=settings.log_serialize,
        filter=LOGGER_NAME,
    )
    return _sink_id


def log_event(level: str, message: str, **kwargs: Any) -> None:
    """Log a structured event with ``kwargs`` bound as extra fields.

    The record is attributed to the caller of ``log_event``.
    """
    logger.opt(depth=1).bind(**kwargs).log(level.upper(), message)
