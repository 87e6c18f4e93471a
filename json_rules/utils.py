"""
utils.py - shared, low-level value helpers for the json-rules package.

This module consolidates common helpers for:
- Shape checks on decoded JSON values (numbers, arrays)
- Equality flavours (loose ``equals`` and strict ``is_in`` membership)
- Rendering values inside error messages
"""

from __future__ import annotations

import math
from typing import Any, Optional, Sequence, Union

Number = Union[int, float]

# --------------------------------------------------------------------------- #
# Shape checks                                                                #
# --------------------------------------------------------------------------- #

def _is_number(value: Any) -> bool:
    """Return True for ints and floats; ``bool`` is not a number here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_array(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _to_number(value: Any) -> Optional[Number]:
    """Return *value* as a number if it is one or is a numeric string."""
    if _is_number(value):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text or text != value or "_" in text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        # "nan" / "inf" are not numeric strings in JSON documents
        return number if math.isfinite(number) else None
    return None


# --------------------------------------------------------------------------- #
# Equality                                                                    #
# --------------------------------------------------------------------------- #

def _loosely_equal(actual: Any, expected: Any) -> bool:
    """Plain ``==`` with one exception: numeric string vs. number.

    ``"42" == 42`` holds, ``True == 1`` does not, and containers are compared
    structurally without any coercion of their members.
    """
    if isinstance(actual, bool) or isinstance(expected, bool):
        return type(actual) is type(expected) and actual == expected

    if _is_number(actual) and isinstance(expected, str):
        return _to_number(expected) == actual
    if isinstance(actual, str) and _is_number(expected):
        return _to_number(actual) == expected

    return actual == expected


def _strictly_equal(actual: Any, expected: Any) -> bool:
    return type(actual) is type(expected) and actual == expected


# --------------------------------------------------------------------------- #
# Message rendering                                                           #
# --------------------------------------------------------------------------- #

def _value_to_string(value: Any) -> str:
    """Render *value* the way it reads in a JSON document."""
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if _is_array(value):
        return "[array]"
    if isinstance(value, dict):
        return "[object]"
    return str(value)


def _kind(value: Any) -> str:
    """Word used for *value* in length and emptiness messages."""
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    return "array"


def _unit(value: Any) -> str:
    return "characters" if isinstance(value, str) else "items"
