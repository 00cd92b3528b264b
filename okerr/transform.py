"""Mapping combinators over ``Result``.

Each function dispatches on the active variant and calls exactly one of the
supplied functions, exactly once. Exceptions raised by those functions are not
caught. The untouched branch is returned as the same (immutable) instance.
"""

from __future__ import annotations
from typing import Callable, TypeVar

from .errors import NotAResultError
from .result import Result, Ok, Err

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


def map(result: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:
    """Apply ``f`` to an ``Ok`` value, leaving an ``Err`` untouched."""
    if isinstance(result, Ok):
        return Ok(f(result.value))
    if isinstance(result, Err):
        return result
    raise NotAResultError(result, "map")


def map_error(result: Result[T, E], f: Callable[[E], F]) -> Result[T, F]:
    """Apply ``f`` to an ``Err`` error, leaving an ``Ok`` untouched."""
    if isinstance(result, Err):
        return Err(f(result.error))
    if isinstance(result, Ok):
        return result
    raise NotAResultError(result, "map_error")


def map_both(result: Result[T, E], success: Callable[[T], U], failure: Callable[[E], U]) -> U:
    """Collapse both branches into one plain value.

    ``success`` runs on ``Ok``, ``failure`` on ``Err``; both must return the
    same type. Handy when a value is needed regardless of outcome, e.g. a
    message to render.
    """
    if isinstance(result, Ok):
        return success(result.value)
    if isinstance(result, Err):
        return failure(result.error)
    raise NotAResultError(result, "map_both")


def map_either(result: Result[T, E], success: Callable[[T], U], failure: Callable[[E], F]) -> Result[U, F]:
    """Retype both sides independently, producing a new ``Result``."""
    if isinstance(result, Ok):
        return Ok(success(result.value))
    if isinstance(result, Err):
        return Err(failure(result.error))
    raise NotAResultError(result, "map_either")


__all__ = ["map", "map_error", "map_both", "map_either"]
