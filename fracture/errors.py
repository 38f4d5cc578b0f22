"""
Exceptions raised by fracture.

Parsers never raise for invalid input; they return a Failure. Exceptions are
reserved for mistakes made while composing parsers and for unwrap().
"""

from typing import Any


class FractureError(Exception):
    """Base exception for all fracture errors."""


class ParseError(FractureError, ValueError):
    """Raised by unwrap() when a Result is a Failure."""

    def __init__(self, reason: str, value: Any = None):
        super().__init__(reason)
        self.reason = reason
        self.value = value

    def __repr__(self) -> str:
        return f"ParseError({self.reason!r}, value={self.value!r})"
