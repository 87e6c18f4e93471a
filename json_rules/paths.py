"""
paths.py - dot-path resolution into decoded JSON
================================================

A *path* is a string of dot-separated segments.  Each segment is either an
object key or, when the current node is a list, the decimal form of an index::

    "user.addresses.0.city"

There is no escaping: a key that itself contains a dot cannot be addressed.

Public API
----------
Found
    Result wrapper for a resolved value (which may legitimately be ``None``).
NOT_FOUND
    Singleton returned when any segment is absent.
resolve(document, path)
    Walk *document* and return ``Found(value)`` or ``NOT_FOUND``.
exists(document, path)
    ``True`` iff *path* resolves.
join(prefix, segment)
    Build a child path.
"""

from __future__ import annotations

from typing import Any, Mapping, NamedTuple, Sequence, Union

__all__ = ["Found", "NOT_FOUND", "resolve", "exists", "join"]


class Found(NamedTuple):
    """A successfully resolved value; ``Found(None)`` means a JSON ``null``."""

    value: Any


class _NotFound:
    __slots__ = ()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = _NotFound()

Resolution = Union[Found, _NotFound]


# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #

def _is_sequence(node: Any) -> bool:
    return isinstance(node, Sequence) and not isinstance(node, (str, bytes, bytearray))


def _step(node: Any, segment: str) -> Resolution:
    """Descend one level; never raises."""
    if isinstance(node, Mapping):
        if segment in node:
            return Found(node[segment])
        return NOT_FOUND

    if _is_sequence(node):
        # only plain non-negative decimal indices address list elements
        if not segment.isascii() or not segment.isdigit():
            return NOT_FOUND
        idx = int(segment)
        if segment != str(idx):
            return NOT_FOUND
        if idx < len(node):
            return Found(node[idx])
        return NOT_FOUND

    return NOT_FOUND


# --------------------------------------------------------------------------- #
# Public utilities                                                            #
# --------------------------------------------------------------------------- #

def resolve(document: Any, path: str) -> Resolution:
    """Resolve *path* against *document*.

    A path without a dot is a single top-level lookup.  Otherwise every
    segment is followed in turn and the walk stops at the first segment that
    cannot be followed; no partial result is returned.
    """
    if "." not in path:
        return _step(document, path)

    current = document
    for segment in path.split("."):
        found = _step(current, segment)
        if not found:
            return NOT_FOUND
        current = found.value
    return Found(current)


def exists(document: Any, path: str) -> bool:
    return bool(resolve(document, path))


def join(prefix: str, segment: Any) -> str:
    """Return ``prefix.segment``, or just ``segment`` at the root."""
    return f"{prefix}.{segment}" if prefix else str(segment)
