"""Side-effect combinators: fire a callback for one branch of a ``Result``.

``on_success``/``on_failure`` return ``None``, not the Result they were given.
Use ``tee``/``tee_error`` to tap a Result mid-pipeline and keep chaining.
"""

from __future__ import annotations
from typing import Any, Callable, TypeVar

from .errors import NotAResultError
from .result import Result, Ok, Err
from .transform import map_both

T = TypeVar("T")
E = TypeVar("E")


def _noop(_: Any) -> None:
    return None


def on_success(result: Result[T, E], callback: Callable[[T], Any]) -> None:
    """Call ``callback`` with the value if ``result`` is ``Ok``."""
    if not isinstance(result, (Ok, Err)):
        raise NotAResultError(result, "on_success")
    map_both(result, callback, _noop)


def on_failure(result: Result[T, E], callback: Callable[[E], Any]) -> None:
    """Call ``callback`` with the error if ``result`` is ``Err``."""
    if not isinstance(result, (Ok, Err)):
        raise NotAResultError(result, "on_failure")
    map_both(result, _noop, callback)


def tee(result: Result[T, E], callback: Callable[[T], Any]) -> Result[T, E]:
    """Call ``callback`` with the value if ``Ok``; return the original Result."""
    if isinstance(result, Ok):
        callback(result.value)
    elif not isinstance(result, Err):
        raise NotAResultError(result, "tee")
    return result


def tee_error(result: Result[T, E], callback: Callable[[E], Any]) -> Result[T, E]:
    """Call ``callback`` with the error if ``Err``; return the original Result."""
    if isinstance(result, Err):
        callback(result.error)
    elif not isinstance(result, Ok):
        raise NotAResultError(result, "tee_error")
    return result
