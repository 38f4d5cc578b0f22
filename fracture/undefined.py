"""
UNDEFINED sentinel marking an absent value (e.g. a key missing from a dict).
"""

from enum import Enum


class Undefined(Enum):
    """
    Sentinel for "no value was given", distinct from an explicit None.

    Decoded JSON only ever contains None for absent data, so a key that is
    missing from a dict needs its own marker. object_of() passes UNDEFINED to a
    field parser when the key is not present, and voidable()/is_undefined()
    recognise it.

    Examples:
        {"name": None}   # "name" is null
        {}               # "name" is UNDEFINED
    """

    UNDEFINED = "undefined"

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = Undefined.UNDEFINED
