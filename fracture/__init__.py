import logging

from .combinators import map_parser, optional, voidable
from .errors import FractureError, ParseError
from .interop import dump_model, model_of, to_model
from .parsers import (
    is_any_value,
    is_array,
    is_boolean,
    is_exactly,
    is_number,
    is_object,
    is_string,
    is_undefined,
)
from .result import (
    Failure,
    Parser,
    Result,
    Success,
    failure,
    is_failure,
    is_success,
    map_failure,
    map_result,
    map_success,
    success,
    unwrap,
)
from .structural import array_of, indexed_object_of, object_of, one_of
from .undefined import UNDEFINED, Undefined

logging.getLogger("fracture").addHandler(logging.NullHandler())

__all__ = [
    # Result
    "Success",
    "Failure",
    "Result",
    "Parser",
    "success",
    "failure",
    "is_success",
    "is_failure",
    "map_success",
    "map_failure",
    "map_result",
    "unwrap",
    # Primitives
    "is_string",
    "is_number",
    "is_boolean",
    "is_undefined",
    "is_any_value",
    "is_object",
    "is_array",
    "is_exactly",
    "UNDEFINED",
    "Undefined",
    # Combinators
    "optional",
    "voidable",
    "map_parser",
    "object_of",
    "indexed_object_of",
    "array_of",
    "one_of",
    # Pydantic interop
    "model_of",
    "to_model",
    "dump_model",
    # Errors
    "FractureError",
    "ParseError",
]
