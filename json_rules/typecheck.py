"""
typecheck.py - the closed set of type tags understood by ``is_type``.

Adding a tag is a one-line change to ``_CHECKS`` (plus an enum member).
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Callable, Dict, Mapping, Optional, Union

from . import utils

__all__ = ["TypeTag", "TypeSpec", "matches_type", "type_name"]

log = logging.getLogger(__name__)


class TypeTag(str, enum.Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    NULL = "null"

    @classmethod
    def parse(cls, name: str) -> Optional["TypeTag"]:
        """Return the tag for *name* (aliases allowed) or ``None``."""
        key = name.strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return None


_ALIASES: Dict[str, str] = {
    "str": "string",
    "int": "integer",
    "double": "float",
    "bool": "boolean",
    "list": "array",
    "dict": "object",
    "none": "null",
}

_CHECKS: Dict[TypeTag, Callable[[Any], bool]] = {
    TypeTag.STRING:  lambda v: isinstance(v, str),
    TypeTag.INTEGER: lambda v: isinstance(v, int) and not isinstance(v, bool),
    TypeTag.FLOAT:   lambda v: isinstance(v, float),
    TypeTag.NUMBER:  utils._is_number,
    TypeTag.BOOLEAN: lambda v: isinstance(v, bool),
    TypeTag.ARRAY:   utils._is_array,
    TypeTag.OBJECT:  lambda v: isinstance(v, Mapping),
    TypeTag.NULL:    lambda v: v is None,
}

# A type is a tag, its name, or a class used as a named structural type.
TypeSpec = Union[TypeTag, str, type]


def matches_type(value: Any, expected: TypeSpec) -> bool:
    """Total predicate: does *value* belong to *expected*?"""
    if isinstance(expected, TypeTag):
        return _CHECKS[expected](value)

    if isinstance(expected, str):
        tag = TypeTag.parse(expected)
        if tag is None:
            log.warning("Unknown type name %r never matches", expected)
            return False
        return _CHECKS[tag](value)

    if isinstance(expected, type):
        return isinstance(value, expected)

    raise TypeError(f"Unsupported type specification: {expected!r}")


def type_name(expected: TypeSpec) -> str:
    if isinstance(expected, TypeTag):
        return expected.value
    if isinstance(expected, type):
        return expected.__name__
    return str(expected)
