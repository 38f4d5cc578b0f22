"""
Structural combinators: parsers for dicts, lists and alternatives.

Each combinator validates the children of a value with inner parsers and
stops at the first child that fails. The failure reason is prefixed with
the key or index of that child, and the failure value is the whole input.
Inner parsers are called in their raw form, so only the outermost parser
copies the value of a Failure.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from .combinators import ensure_parser
from .lib.failures import (
    fail_type_of,
    keyed_failure,
    raw_parser,
    snapshotting,
    stringify,
)
from .parsers import is_array
from .result import Failure, Parser, Result, Success
from .undefined import UNDEFINED, Undefined

T = TypeVar("T")


def object_of(fields: Mapping[str, Parser[Any, Any]]) -> Parser[dict[str, Any], Any]:
    """
    Parser for a dict with a fixed set of fields.

    Fields are checked in the order they are declared. A missing key is
    passed to its parser as UNDEFINED, so a field that may be absent should
    use voidable(). A field whose parser yields UNDEFINED is left out of
    the output, as are keys in the input that are not declared.

    Usage:
        album = object_of({
            "artist": is_string,
            "year_released": is_number,
            "label": voidable(is_string),
        })
        album({"artist": "The Beatles", "year_released": 1966})
        # Success({"artist": "The Beatles", "year_released": 1966})
        album({"artist": "The Beatles", "year_released": "1966"})
        # Failure(..., "Failed at 'year_released': typeof value is string")
    """
    if not isinstance(fields, Mapping):
        raise TypeError(
            f"object_of() expects a mapping of field parsers, got {type(fields).__name__}"
        )
    for key, parser in fields.items():
        ensure_parser(parser, f"object_of() field '{key}'")

    # frozen copy: later edits to `fields` do not change the parser
    declared = tuple((key, raw_parser(parser)) for key, parser in fields.items())

    @snapshotting
    def parse(value: Any) -> Result[dict[str, Any], Any]:
        if not isinstance(value, Mapping):
            return Failure(value, "Not an object")

        result: dict[str, Any] = {}
        for key, parser in declared:
            validated = parser(value.get(key, UNDEFINED))
            if isinstance(validated, Failure):
                return keyed_failure(value, key, validated)
            if validated.value is not UNDEFINED:
                result[key] = validated.value
        return Success(result)

    return parse


def indexed_object_of(parser: Parser[T, Any]) -> Parser[dict[str, T], Any]:
    """
    Parser for a dict with arbitrary keys whose values all satisfy `parser`.

    Usage:
        scores = indexed_object_of(is_number)
        scores({"alice": 3, "bob": 5})   # Success({"alice": 3, "bob": 5})
        scores({"alice": 3, "bob": "5"})
        # Failure(..., "Failed at 'bob': typeof value is string")
    """
    ensure_parser(parser, "indexed_object_of()")
    inner = raw_parser(parser)

    @snapshotting
    def parse(value: Any) -> Result[dict[str, T], Any]:
        if value is None or isinstance(value, Undefined):
            return Failure(value, "value is null or undefined")
        if not isinstance(value, Mapping):
            return fail_type_of(value)

        result: dict[str, T] = {}
        for key, member in value.items():
            validated = inner(member)
            if isinstance(validated, Failure):
                return keyed_failure(value, key, validated)
            result[key] = validated.value
        return Success(result)

    return parse


def array_of(parser: Parser[T, Any]) -> Parser[list[T], Any]:
    """
    Parser for a list (or tuple) whose items all satisfy `parser`.

    Items are checked left to right and the output is always a new list.

    Usage:
        array_of(is_number)([1, 2, 3])     # Success([1, 2, 3])
        array_of(is_number)([1, "2", 3])
        # Failure([1, "2", 3], "Failed at '1': typeof value is string")
    """
    ensure_parser(parser, "array_of()")
    inner = raw_parser(parser)
    check_array = raw_parser(is_array)

    @snapshotting
    def parse(value: Any) -> Result[list[T], Any]:
        checked = check_array(value)
        if isinstance(checked, Failure):
            return checked

        result: list[T] = []
        for index, member in enumerate(value):
            validated = inner(member)
            if isinstance(validated, Failure):
                return keyed_failure(value, index, validated)
            result.append(validated.value)
        return Success(result)

    return parse


def one_of(parser: Parser[Any, Any], *parsers: Parser[Any, Any]) -> Parser[Any, Any]:
    """
    Try each parser in order and return the first Success.

    This is first-match-wins, so put the most specific parser first when
    alternatives overlap. When every parser fails their reasons are dropped
    in favour of a single summary.

    Usage:
        year = one_of(is_number, is_string)
        year(2015)    # Success(2015)
        year("2015")  # Success("2015")
        year(None)    # Failure(None, "'null' did not match any of 2 validators")
    """
    ensure_parser(parser, "one_of()")
    for other in parsers:
        ensure_parser(other, "one_of()")

    if not parsers:
        return parser

    alternatives = tuple(raw_parser(p) for p in (parser, *parsers))
    reason_suffix = f"did not match any of {len(alternatives)} validators"

    @snapshotting
    def parse(value: Any) -> Result[Any, Any]:
        for alternative in alternatives:
            result = alternative(value)
            if isinstance(result, Success):
                return result
        return Failure(value, f"'{stringify(value)}' {reason_suffix}")

    return parse
