"""
Combinators wrapping a single parser: optional, voidable and map_parser.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, TypeVar

from .lib.failures import raw_parser, snapshotting
from .result import Failure, Parser, Result, Success, map_failure, map_success
from .undefined import UNDEFINED, Undefined

A = TypeVar("A")
B = TypeVar("B")


def ensure_parser(parser: Any, name: str) -> None:
    """Raise TypeError when a combinator is given something it cannot call."""
    if not callable(parser):
        raise TypeError(f"{name} expects a parser, got {type(parser).__name__}")


def optional(parser: Parser[A, Any]) -> Parser[A | None, Any]:
    """
    Accept None, otherwise delegate to `parser`.

    Only None is accepted: UNDEFINED still goes through `parser`. Use
    voidable() for keys that may be missing.
    """
    ensure_parser(parser, "optional()")
    inner = raw_parser(parser)

    @snapshotting
    def parse(value: Any) -> Result[A | None, Any]:
        return Success(None) if value is None else inner(value)

    return parse


def voidable(parser: Parser[A, Any]) -> Parser[A | Undefined, Any]:
    """Accept UNDEFINED, otherwise delegate to `parser`."""
    ensure_parser(parser, "voidable()")
    inner = raw_parser(parser)

    @snapshotting
    def parse(value: Any) -> Result[A | Undefined, Any]:
        return Success(UNDEFINED) if value is UNDEFINED else inner(value)

    return parse


def map_parser(
    parser: Parser[A, Any], fn: Callable[[A], Result[B, Any]]
) -> Parser[B, Any]:
    """
    Run `parser`, then feed its validated value to `fn`.

    `fn` returns a Result of its own, so it can reject values that passed
    `parser` (range checks, cross-field rules, conversions). Whichever step
    fails, the Failure carries the original input given to the composed
    parser, never the intermediate value.

    Usage:
        positive = map_parser(
            is_number,
            lambda n: success(n) if n > 0 else failure(n, "is not positive"),
        )
        positive(-1)  # Failure(-1, "is not positive")
    """
    ensure_parser(parser, "map_parser()")
    ensure_parser(fn, "map_parser()")
    first = raw_parser(parser)
    then = raw_parser(fn)

    @snapshotting
    def parse(value: Any) -> Result[B, Any]:
        def with_input(failed: Failure[Any]) -> Failure[Any]:
            return replace(failed, value=value)

        return map_failure(map_success(first(value), then), with_input)

    return parse
