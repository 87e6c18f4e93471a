"""
errors.py - error accumulation and the package exceptions
=========================================================

Two disjoint error families exist:

* *soft* errors - rule failures recorded in an :class:`ErrorBag`, keyed by
  path, never raised by the checks themselves;
* *fatal* errors - exceptions such as :class:`InvalidJSONError` that prevent a
  validator from being built at all.
"""

from __future__ import annotations

import copy
import json
from typing import Dict, Iterator, List, Mapping, Optional

__all__ = [
    "ErrorBag",
    "JsonRulesError",
    "InvalidJSONError",
    "ValidationError",
    "UnknownEnumError",
    "SchemaDefinitionError",
]

# --------------------------------------------------------------------------- #
# Exceptions                                                                  #
# --------------------------------------------------------------------------- #

class JsonRulesError(Exception):
    """Base class for every exception raised by this package."""


class InvalidJSONError(JsonRulesError, ValueError):
    """Raised when raw input text cannot be decoded into a document."""

    def __init__(self, msg: str, *, lineno: Optional[int] = None, colno: Optional[int] = None):
        super().__init__(f"Invalid JSON string: {msg}")
        self.msg = msg
        self.lineno = lineno
        self.colno = colno


class ValidationError(JsonRulesError, ValueError):
    """Raised by :meth:`Validator.validate` when any rule failed."""

    def __init__(self, errors: Mapping[str, List[str]]):
        self.errors: Dict[str, List[str]] = copy.deepcopy(dict(errors))
        super().__init__("Validation failed: " + json.dumps(self.errors))


class UnknownEnumError(JsonRulesError, LookupError):
    """Raised when an allow-list is given by a name nobody registered."""


class SchemaDefinitionError(JsonRulesError, TypeError):
    """Raised when a schema rule tree contains an unsupported rule."""


# --------------------------------------------------------------------------- #
# Accumulator                                                                 #
# --------------------------------------------------------------------------- #

class ErrorBag:
    """Ordered mapping of path -> list of messages.

    Paths keep first-insertion order and messages keep append order.
    Duplicate messages are kept.  The bag only grows.
    """

    def __init__(self) -> None:
        self._errors: Dict[str, List[str]] = {}

    def add(self, path: str, message: str) -> None:
        self._errors.setdefault(path, []).append(message)

    def merge(self, other: "ErrorBag | Mapping[str, List[str]]") -> None:
        items = other.as_dict() if isinstance(other, ErrorBag) else other
        for path, messages in items.items():
            for message in messages:
                self.add(path, message)

    def messages(self, path: str) -> List[str]:
        return list(self._errors.get(path, []))

    def paths(self) -> List[str]:
        return list(self._errors)

    def as_dict(self) -> Dict[str, List[str]]:
        """Return a copy that callers may mutate freely."""
        return {path: list(messages) for path, messages in self._errors.items()}

    def __contains__(self, path: object) -> bool:
        return path in self._errors

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._errors))

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __repr__(self) -> str:
        return f"ErrorBag({self._errors!r})"
