"""
Pydantic interop: run existing pydantic models as fracture parsers.

Models are only executed, never generated. A pydantic ValidationError is
turned into a Failure whose reason follows the same "Failed at '<key>'"
convention as the structural combinators.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .lib.failures import snapshotting
from .result import Failure, Parser, Result, Success

logger = logging.getLogger(__name__)

_Model = TypeVar("_Model", bound=BaseModel)


def reason_from_error(error: ValidationError) -> str:
    """
    Build a failure reason from the first error pydantic reports.

    The error location becomes nested "Failed at" prefixes:
        ("child", "id") -> "Failed at 'child': Failed at 'id': <msg>"
    """
    errors = error.errors()
    if not errors:
        return str(error)
    first = errors[0]
    prefix = "".join(f"Failed at '{loc}': " for loc in first.get("loc", ()))
    return f"{prefix}{first['msg']}"


def to_model(
    model: Type[_Model], *, caller: str = "to_model()"
) -> Callable[[Any], Result[_Model, Any]]:
    """
    Value-level step validating data with a pydantic model.

    Suitable as the second argument of map_parser(), e.g. to apply a model
    after a structural check:
        map_parser(is_object, to_model(User))

    Raises:
        TypeError: if `model` is not a pydantic model class
    """
    if not (isinstance(model, type) and issubclass(model, BaseModel)):
        raise TypeError(f"{caller} expects a pydantic model, got {model!r}")

    @snapshotting
    def step(value: Any) -> Result[_Model, Any]:
        try:
            return Success(model.model_validate(value))
        except ValidationError as e:
            logger.debug(
                "%s rejected input with %d error(s)", model.__name__, e.error_count()
            )
            return Failure(value, reason_from_error(e))

    return step


def model_of(model: Type[_Model]) -> Parser[_Model, Any]:
    """
    Parser producing an instance of a pydantic model.

    Usage:
        class User(BaseModel):
            name: str
            age: int

        parse_user = model_of(User)
        parse_user({"name": "Alice", "age": 30})   # Success(User(...))
        parse_user({"name": "Alice", "age": "x"})
        # Failure(..., "Failed at 'age': Input should be a valid integer, ...")
    """
    return to_model(model, caller="model_of()")


def dump_model(instance: BaseModel) -> Success[dict[str, Any]]:
    """Value-level step turning a model instance back into plain data."""
    return Success(instance.model_dump())
