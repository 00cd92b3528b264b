from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Iterator, Optional, Tuple, TypeGuard, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T

    def __iter__(self) -> Iterator[Optional[T]]:
        # (value, error) view; the error slot is always absent
        return iter((self.value, None))

    def __str__(self) -> str:
        return f"Ok({self.value})"


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying ``error``."""

    error: E

    def __iter__(self) -> Iterator[Optional[E]]:
        return iter((None, self.error))

    def __str__(self) -> str:
        return f"Err({self.error})"


Result = Union[Ok[T], Err[E]]


def ok(value: T) -> Ok[T]:
    return Ok(value)


def err(error: E) -> Err[E]:
    return Err(error)


def is_ok(result: Result[T, E]) -> TypeGuard[Ok[T]]:
    return isinstance(result, Ok)


def is_err(result: Result[T, E]) -> TypeGuard[Err[E]]:
    return isinstance(result, Err)


def destructure(result: Result[T, E]) -> Tuple[Optional[T], Optional[E]]:
    """Return the positional ``(value, error)`` pair; exactly one slot is set.

    A ``None`` payload is indistinguishable from an absent slot here, so
    branch on the variant when ``None`` is a legitimate value or error.
    """
    value, error = result
    return value, error
