"""
Primitive parsers: leaf checks on the runtime kind of a value.

Each parser takes any value and returns Success(value) when the value is of
the expected kind, or a Failure naming the kind it actually has. Failure
values are copied by the snapshotting decorator, not by the checks.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .lib.failures import fail_type_of, snapshotting, stringify, type_of
from .result import Failure, Parser, Result, Success
from .undefined import UNDEFINED, Undefined


@snapshotting
def is_string(value: Any) -> Result[str, Any]:
    return Success(value) if isinstance(value, str) else fail_type_of(value)


@snapshotting
def is_number(value: Any) -> Result[int | float, Any]:
    """Accept ints and floats. Booleans are rejected."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Success(value)
    return fail_type_of(value)


@snapshotting
def is_boolean(value: Any) -> Result[bool, Any]:
    return Success(value) if isinstance(value, bool) else fail_type_of(value)


@snapshotting
def is_undefined(value: Any) -> Result[Undefined, Any]:
    return Success(UNDEFINED) if value is UNDEFINED else fail_type_of(value)


def is_any_value(value: Any) -> Success[Any]:
    """Accept anything. For fields whose contents are opaque to the caller."""
    return Success(value)


@snapshotting
def is_object(value: Any) -> Result[Mapping[str, Any], Any]:
    """Accept mappings. None and sequences are rejected."""
    return Success(value) if isinstance(value, Mapping) else fail_type_of(value)


@snapshotting
def is_array(value: Any) -> Result[list[Any] | tuple[Any, ...], Any]:
    if isinstance(value, (list, tuple)):
        return Success(value)
    return Failure(value, "value is not Array.isArray")


def is_exactly(literal: str | int | float | bool) -> Parser[Any, Any]:
    """
    Accept only values equal to `literal` and of the same kind.

    `True` does not match `1` and `"1"` does not match `1`, but `1` matches
    `1.0` since both are numbers.

    Usage:
        status = one_of(is_exactly("active"), is_exactly("inactive"))
    """
    if not isinstance(literal, (str, int, float, bool)):
        raise TypeError(
            f"is_exactly() expects a str, int, float or bool, got {type(literal).__name__}"
        )

    kind = type_of(literal)
    reason = f"is not {stringify(literal)}"

    @snapshotting
    def parse(value: Any) -> Result[Any, Any]:
        if type_of(value) == kind and value == literal:
            return Success(literal)
        return Failure(value, reason)

    return parse
