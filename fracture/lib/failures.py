"""
Helper functions for building Failure results.
"""

import json
import math
from collections.abc import Mapping
from copy import Error as CopyError
from copy import deepcopy
from functools import wraps
from typing import Any, Callable

from ..result import Failure
from ..undefined import Undefined

_RAW_ATTR = "__fracture_raw__"
_CONTAINERS = (dict, list, tuple)


def type_of(value: Any) -> str:
    """
    Classify a value by its runtime kind, as used in failure reasons.

    Returns one of "null", "undefined", "boolean", "number", "string",
    "function" or "object".
    """
    if value is None:
        return "null"
    if isinstance(value, Undefined):
        return "undefined"
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value) and not isinstance(value, type):
        return "function"
    return "object"


def stringify(value: Any) -> str:
    """Render a value for display inside a failure reason."""
    if value is None:
        return "null"
    if isinstance(value, Undefined):
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _stringify_float(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (Mapping, list, tuple)):
        try:
            return json.dumps(value, separators=(",", ":"), default=str)
        except (TypeError, ValueError, RecursionError):
            # non-string keys, circular references or very deep nesting
            if isinstance(value, (list, tuple)):
                return "[object Array]"
            return "[object Object]"
    return str(value)


def _stringify_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def snapshot(value: Any) -> Any:
    """
    Copy a value so a Failure stays valid after the input is mutated.

    dicts, lists and tuples are copied without recursion, so arbitrarily deep
    decoded JSON never hits the recursion limit. Shared and circular
    references are preserved. Other values go through deepcopy, and values
    that cannot be copied are kept by reference.
    """
    if type(value) in _CONTAINERS:
        return _copy_containers(value)
    return _copy_leaf(value)


def _copy_leaf(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, Undefined)):
        return value
    try:
        return deepcopy(value)
    except (TypeError, CopyError, RecursionError):
        return value


class _Frame:
    """A container being copied, with its position among the children."""

    __slots__ = ("source", "target", "items", "key")

    def __init__(self, source: Any):
        self.source = source
        self.target: Any
        if isinstance(source, dict):
            self.target = {}
            self.items = iter(source.items())
        else:
            self.target = []
            self.items = iter(enumerate(source))
        self.key: Any = None

    def put(self, key: Any, value: Any) -> None:
        if isinstance(self.target, dict):
            self.target[key] = value
        else:
            self.target.append(value)

    def close(self) -> Any:
        return tuple(self.target) if isinstance(self.source, tuple) else self.target


def _copy_containers(root: Any) -> Any:
    memo: dict[int, Any] = {}
    open_tuples: set[int] = set()

    def start(source: Any) -> _Frame:
        frame = _Frame(source)
        # tuples are only built once their items are copied
        if isinstance(source, tuple):
            open_tuples.add(id(source))
        else:
            memo[id(source)] = frame.target
        return frame

    stack = [start(root)]
    while True:
        frame = stack[-1]
        for key, child in frame.items:
            if type(child) not in _CONTAINERS:
                frame.put(key, _copy_leaf(child))
            elif id(child) in memo:
                frame.put(key, memo[id(child)])
            elif id(child) in open_tuples:
                frame.put(key, child)
            else:
                frame.key = key
                stack.append(start(child))
                break
        else:
            stack.pop()
            copied = frame.close()
            if isinstance(frame.source, tuple):
                open_tuples.discard(id(frame.source))
                memo[id(frame.source)] = copied
            if not stack:
                return copied
            parent = stack[-1]
            parent.put(parent.key, copied)


def snapshotting(raw: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """
    Decorator turning a raw parser into a public one.

    The raw parser returns failures that reference its input. The public
    parser copies the failure value once, on the way out. Combinators call
    each other's raw parsers (see raw_parser()), so a failure that is
    rewrapped or discarded by an enclosing combinator is never copied.
    """

    @wraps(raw)
    def parser(value: Any) -> Any:
        result = raw(value)
        if isinstance(result, Failure):
            return Failure(snapshot(result.value), result.reason)
        return result

    setattr(parser, _RAW_ATTR, raw)
    return parser


def raw_parser(parser: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """The non-copying form of a fracture parser. Other callables pass through."""
    return getattr(parser, _RAW_ATTR, parser)


def fail_type_of(value: Any) -> Failure[Any]:
    """Failure reporting the kind of the rejected value."""
    return Failure(value, f"typeof value is {type_of(value)}")


def keyed_failure(value: Any, key: str | int, failure: Failure[Any]) -> Failure[Any]:
    """
    Re-wrap a child failure with the key or index it occurred at.

    The returned Failure carries the whole enclosing `value`, not the child's.
    Nesting composes: "Failed at 'a': Failed at 'b': typeof value is number".
    """
    return Failure(value, f"Failed at '{key}': {failure.reason}")
