"""
Result type for fracture parsers.

A Result is either a Success wrapping the validated output or a Failure
carrying the offending input and a human-readable reason.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, TypeGuard, TypeVar, Union

from .errors import ParseError

T = TypeVar("T")
E = TypeVar("E")
B = TypeVar("B")
C = TypeVar("C")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Successful parse containing the validated value."""

    value: T

    kind: ClassVar[str] = "success"

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    """Failed parse containing the rejected input and the reason."""

    value: E
    reason: str

    kind: ClassVar[str] = "failure"

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True


Result = Union[Success[T], Failure[E]]
Parser = Callable[[Any], Result[T, E]]


def success(value: T) -> Success[T]:
    """Wrap a value in a Success."""
    return Success(value)


def failure(value: E, reason: str) -> Failure[E]:
    """Build a Failure from the rejected value and a reason."""
    return Failure(value, reason)


def is_success(result: Result[T, E]) -> TypeGuard[Success[T]]:
    return isinstance(result, Success)


def is_failure(result: Result[T, E]) -> TypeGuard[Failure[E]]:
    return isinstance(result, Failure)


def map_success(result: Result[T, E], fn: Callable[[T], B]) -> B | Failure[E]:
    """
    Apply `fn` to the value of a Success.

    A Failure is returned as is; its reason and value are never touched.
    """
    if isinstance(result, Success):
        return fn(result.value)
    return result


def map_failure(
    result: Result[T, E], fn: Callable[[Failure[E]], B]
) -> B | Success[T]:
    """Apply `fn` to a Failure. A Success is returned as is."""
    if isinstance(result, Failure):
        return fn(result)
    return result


def map_result(
    result: Result[T, E],
    on_success: Callable[[T], B],
    on_failure: Callable[[Failure[E]], C],
) -> B | C:
    """
    Fold a Result into a single value.

    Exactly one of the two functions is called.

    Usage:
        message = map_result(
            is_string(value),
            lambda s: f"got {s}",
            lambda f: f.reason,
        )
    """
    if isinstance(result, Success):
        return on_success(result.value)
    return on_failure(result)


def unwrap(result: Result[T, E]) -> T:
    """
    Return the value of a Success or raise ParseError for a Failure.

    Raises:
        ParseError: carrying the failure's reason and value
    """
    if isinstance(result, Success):
        return result.value
    raise ParseError(result.reason, result.value)
