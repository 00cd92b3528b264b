"""Adapter from exception-raising code to ``Result``.

Kept apart from the core modules, which never catch exceptions.
"""

from __future__ import annotations
import warnings
from typing import Callable, TypeVar

from .config import get_settings
from .log import log_event
from .result import Result, Ok, Err

T = TypeVar("T")


def run_catching(fn: Callable[[], T]) -> Result[T, Exception]:
    """Call ``fn``; wrap its return value in ``Ok`` or a raised exception in ``Err``.

    Only ``Exception`` subclasses are captured. ``KeyboardInterrupt``,
    ``SystemExit`` and other ``BaseException``s propagate.
    """
    try:
        return Ok(fn())
    except Exception as ex:
        log_event(
            "DEBUG",
            "Captured exception as Err",
            function=getattr(fn, "__qualname__", repr(fn)),
            error_type=type(ex).__name__,
            error=str(ex),
        )
        return Err(ex)


def of(fn: Callable[[], T]) -> Result[T, Exception]:
    """Deprecated: use ``run_catching``."""
    if get_settings().deprecation_warnings:
        warnings.warn("okerr.of() is deprecated, use run_catching()", DeprecationWarning, stacklevel=2)
        log_event("WARNING", "Deprecated okerr.of() called", replacement="run_catching")
    return run_catching(fn)
